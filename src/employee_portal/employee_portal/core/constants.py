"""Constants and defaults.

Note: Keep constants here to avoid magic numbers spread across code.
"""

DEFAULT_OVERTIME_THRESHOLD_HOURS = 8.0
DEFAULT_OVERTIME_MULTIPLIER = 1.5

STANDARD_WEEKLY_HOURS = 40
WEEKS_PER_YEAR = 52
DEFAULT_ANNUAL_WORK_HOURS = STANDARD_WEEKLY_HOURS * WEEKS_PER_YEAR

DEFAULT_STATS_DAYS = 30
DEFAULT_HISTORY_LIMIT = 30
DEFAULT_EXPORT_RECORD_LIMIT = 365
DEFAULT_ANNIVERSARY_WINDOW_DAYS = 30
PRINT_RECENT_RECORDS = 30
RECENT_TREND_RECORDS = 7

MILESTONE_YEARS = (1, 3, 5, 10, 15, 20, 25, 30, 35, 40, 45, 50)

DEFAULT_CURRENCY = "USD"
