from __future__ import annotations

from enum import Enum


class AdminRole(str, Enum):
    """Administrator role used for permission checks."""

    ELDER = "ELDER"
    CLERK = "CLERK"


class MembershipStatus(str, Enum):
    ACTIVE = "ACTIVE"
    INACTIVE = "INACTIVE"
    VISITOR = "VISITOR"


class Ministry(str, Enum):
    FOJ = "FOJ"
    ARK = "ARK"
    VINEYARD = "VINEYARD"
    PILGRIMS = "PILGRIMS"


class ServiceType(str, Enum):
    """Church services an attendance can be marked for."""

    SABBATH_MORNING = "SABBATH_MORNING"
    WEDNESDAY_VESPERS = "WEDNESDAY_VESPERS"
    FRIDAY_VESPERS = "FRIDAY_VESPERS"


class ViewMode(str, Enum):
    TABLE = "table"
    GRID = "grid"


class NoticeLevel(str, Enum):
    """Matches the flash categories used by the templates."""

    SUCCESS = "success"
    INFO = "info"
    WARNING = "warning"
    DANGER = "danger"
