import os

STORE_CONFIG = {
    "url": os.getenv("SUPABASE_URL", ""),
    "key": os.getenv("SUPABASE_KEY", ""),
    "table": os.getenv("ATTENDANCE_TABLE", "attendance"),
    "timeout_seconds": float(os.getenv("STORE_TIMEOUT_SECONDS", "10")),
}

CRON_SECRET = os.getenv("CRON_SECRET")

LAB_TIMEZONE = os.getenv("LAB_TIMEZONE", "Asia/Kolkata")

CHECKOUT_MAX_WORKERS = int(os.getenv("CHECKOUT_MAX_WORKERS", "8"))
CHECKOUT_WRITE_TIMEOUT_SECONDS = float(os.getenv("CHECKOUT_WRITE_TIMEOUT_SECONDS", "5"))
WEEKLY_WINDOW_DAYS = int(os.getenv("WEEKLY_WINDOW_DAYS", "7"))

DEBUG = False
LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO")
