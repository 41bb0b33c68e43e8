"""Constants and defaults.

Note: Keep constants here to avoid magic strings spread across code.
"""

DATE_FORMAT = "%Y-%m-%d"

ABSENCE_SUBJECT = "Absentee Notification"
DEFAULT_MAIL_FROM = "attendance@example.com"

DEFAULT_DB_POOL_SIZE = 5
DB_POOL_NAME = "school_attendance"
