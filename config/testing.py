STORE_CONFIG = {
    "url": "http://store.test",
    "key": "test-key",
    "table": "attendance",
    "timeout_seconds": 2,
}

CRON_SECRET = "test-cron-secret"

LAB_TIMEZONE = "Asia/Kolkata"

CHECKOUT_MAX_WORKERS = 4
CHECKOUT_WRITE_TIMEOUT_SECONDS = 1
WEEKLY_WINDOW_DAYS = 7

DEBUG = False
TESTING = True
LOG_LEVEL = "WARNING"
