"""Constants and defaults.

Note: Keep constants here to avoid magic numbers spread across code.
"""

MIN_RATING = 1
MAX_RATING = 10

# Day-of-week numbering used by schedule rows: 0 = Sunday .. 6 = Saturday.
SUNDAY = 0
SATURDAY = 6

# Rating season starts on 15 July.
SEASON_START_MONTH = 7
SEASON_START_DAY = 15

TIME_FORMAT = "%H:%M"
