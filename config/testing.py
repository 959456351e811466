import os

DATA_FILE = os.getenv("ATTENDANCE_FILE", "attendance.test.json")

DEBUG = False
TESTING = True

LOG_LEVEL = os.getenv("LOG_LEVEL", "")
