SECRET_KEY = "test-secret"

DEBUG = False
TESTING = True
LOG_LEVEL = "WARNING"

OVERTIME_THRESHOLD_HOURS = 8.0
OVERTIME_MULTIPLIER = 1.5
ANNUAL_WORK_HOURS = 2080.0

EXPORT_RECORD_LIMIT = 365
DEFAULT_STATS_DAYS = 30
