"""Constants and defaults.

Note: Keep constants here to avoid magic numbers spread across code.
"""

DEFAULT_BUFFER_PERCENT = 20.0
DEFAULT_CANADA_WEEKLY_HOURS = 37.5
DEFAULT_BRAZIL_WEEKLY_HOURS = 44.0

# Monthly capacity = weekly hours x WEEKS_PER_MONTH. Overridable from config.
WEEKS_PER_MONTH = 4
WORKING_DAYS_PER_WEEK = 5

DEFAULT_HOURS_PER_DAY = 8.0
MAX_HOURS_PER_DAY = 24.0
MAX_WEEKLY_HOURS = 168.0

DEFAULT_PROJECT_COLOR = "#3b82f6"

EXPORT_VERSION = "1.0.0"
EXPORT_SOURCE = "resourceflow"

MAX_NAME_LENGTH = 100
MAX_TEXT_LENGTH = 1000
