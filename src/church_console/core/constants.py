"""Constants and defaults.

Note: Keep constants here to avoid magic numbers spread across code.
"""

DEFAULT_DEBOUNCE_MS = 500
DEFAULT_API_TIMEOUT_SECONDS = 15
DEFAULT_SESSION_DAYS = 7

AUTH_EXPIRED_STATUSES = frozenset({401, 403})

GENERIC_ERROR_MESSAGE = "Could not reach the church service. Please try again."

MEMBER_FILTER_FIELDS = ("search", "ministry", "membershipStatus", "yearGroup")
ATTENDANCE_FILTER_FIELDS = ("startDate", "endDate", "serviceType")

# Only ELDER administrators may change these.
ELDER_ONLY_MEMBER_FIELDS = frozenset({"membershipStatus", "isLeader"})

YEAR_GROUPS = (
    "Year 1",
    "Year 2",
    "Year 3",
    "Year 4",
    "Year 5",
    "Graduate",
    "Postgraduate",
)
