import os

DB_CONFIG = {
    "host": os.getenv("DB_HOST", "localhost"),
    "port": int(os.getenv("DB_PORT", "3306")),
    "user": os.getenv("DB_USER", "root"),
    "password": os.getenv("DB_PASSWORD", ""),
    "database": os.getenv("DB_NAME", "attendance_payroll"),
}

# All calendar reasoning (weekly off, late/early thresholds, month resets) uses this zone
TIMEZONE = os.getenv("TIMEZONE", "Africa/Cairo")

LOG_LEVEL = os.getenv("LOG_LEVEL", "DEBUG")
JSON_LOGS = bool(int(os.getenv("JSON_LOGS", "0")))

# Raise instead of adjusting the weekly-off count when day categories don't add up
STRICT_DAY_COUNTS = bool(int(os.getenv("STRICT_DAY_COUNTS", "0")))

# Apply database/schema.sql on startup (idempotent: CREATE IF NOT EXISTS)
AUTO_INIT_DB = bool(int(os.getenv("AUTO_INIT_DB", "1")))
