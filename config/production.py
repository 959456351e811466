import os

DATA_FILE = os.getenv("ATTENDANCE_FILE", "attendance.json")

DEBUG = False

LOG_LEVEL = os.getenv("LOG_LEVEL", "WARNING")
