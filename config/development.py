import os

DATA_FILE = os.getenv("ATTENDANCE_FILE", "attendance.json")

DEBUG = bool(int(os.getenv("DEBUG", "0")))

# Explicit level name (DEBUG, INFO, WARNING, ...); empty means derive from DEBUG
LOG_LEVEL = os.getenv("LOG_LEVEL", "")
