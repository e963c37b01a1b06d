"""Constants and defaults.

Note: Keep constants here to avoid magic numbers spread across code.
"""

DEFAULT_LAB_TIMEZONE = "Asia/Kolkata"
DEFAULT_WEEKLY_WINDOW_DAYS = 7
DEFAULT_STORE_TIMEOUT_SECONDS = 10
DEFAULT_CHECKOUT_MAX_WORKERS = 8
DEFAULT_CHECKOUT_WRITE_TIMEOUT_SECONDS = 5
ATTENDANCE_TABLE = "attendance"
ATTENDANCE_SELECT = "*,users(name)"
