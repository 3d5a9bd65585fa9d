"""Event kind constants used by drives and folders."""

# Addressable (parameterized replaceable) range, NIP-01
ADDRESSABLE_MIN_KIND = 30000
ADDRESSABLE_MAX_KIND = 39999

DRIVE_KIND = 30042
FOLDER_KIND = 30045

INDEX_KIND = 30040
INDEX_CONTENT_KIND = 30041
LONG_FORM_KIND = 30023
LONG_FORM_DRAFT_KIND = 30024
CALENDAR_KIND = 31924
TIME_CALENDAR_EVENT_KIND = 31923
DATE_CALENDAR_EVENT_KIND = 31922

# Kinds a folder may hold, before folder nesting is considered
MEMBER_KINDS: tuple[int, ...] = (
    INDEX_KIND,
    INDEX_CONTENT_KIND,
    LONG_FORM_DRAFT_KIND,
    LONG_FORM_KIND,
    CALENDAR_KIND,
    TIME_CALENDAR_EVENT_KIND,
    DATE_CALENDAR_EVENT_KIND,
)

ARCHIVED_STATUS = "archived"
