"""Constants and defaults.

Note: Keep constants here to avoid magic numbers spread across code.
"""

LUNCH_DEDUCTION_THRESHOLD_MINUTES = 360
DEFAULT_TIMEZONE = "America/Maceio"
DEFAULT_DAILY_CLOSE_CRON = "30 18 * * 1-5"
JUSTIFICATION_MAX_LENGTH = 2000
MIN_PUNCHES_PER_DAY = 4
