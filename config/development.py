import os

SECRET_KEY = os.getenv("SECRET_KEY", "dev-secret-key")

DEBUG = True
LOG_LEVEL = os.getenv("LOG_LEVEL", "DEBUG")

# Timecard policy (single global overtime rule)
OVERTIME_THRESHOLD_HOURS = float(os.getenv("OVERTIME_THRESHOLD_HOURS", "8"))
OVERTIME_MULTIPLIER = float(os.getenv("OVERTIME_MULTIPLIER", "1.5"))
ANNUAL_WORK_HOURS = float(os.getenv("ANNUAL_WORK_HOURS", "2080"))

EXPORT_RECORD_LIMIT = int(os.getenv("EXPORT_RECORD_LIMIT", "365"))
DEFAULT_STATS_DAYS = int(os.getenv("DEFAULT_STATS_DAYS", "30"))
