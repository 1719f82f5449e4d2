"""Constants and defaults.

Note: Keep constants here to avoid magic numbers spread across code.
"""

DATE_FORMAT = "%Y-%m-%d"
PERIOD_SEPARATOR = " ~ "

DEFAULT_MAX_CONSECUTIVE_DAYS = 20
DEFAULT_BLACKOUT_PERIODS = (
    ("2024-03-01", "2024-03-31"),
    ("2024-09-01", "2024-09-01"),
)
