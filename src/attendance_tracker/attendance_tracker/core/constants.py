"""Constants and defaults.

Note: Keep constants here to avoid magic numbers spread across code.
"""

DEFAULT_DATA_FILE = "attendance.json"
MAX_STUDENT_ID = 2**32 - 1
LOG_PREFIX = "[attendance-tracker]"
