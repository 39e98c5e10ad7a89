import os

DB_CONFIG = {
    "host": os.getenv("DB_HOST", "localhost"),
    "port": int(os.getenv("DB_PORT", "3306")),
    "user": os.getenv("DB_USER", "root"),
    "password": os.getenv("DB_PASSWORD", ""),
    "database": os.getenv("DB_NAME", "attendance_payroll_test"),
}

TIMEZONE = os.getenv("TIMEZONE", "Africa/Cairo")

LOG_LEVEL = os.getenv("LOG_LEVEL", "WARNING")
JSON_LOGS = False

STRICT_DAY_COUNTS = True
TESTING = True

AUTO_INIT_DB = bool(int(os.getenv("AUTO_INIT_DB", "0")))
