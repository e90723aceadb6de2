"""Display helpers for member screens (registered as Jinja filters)."""
from __future__ import annotations

from typing import Optional

_STATUS_CLASSES = {
    "ACTIVE": "bg-success",
    "INACTIVE": "bg-danger",
    "VISITOR": "bg-info text-dark",
}

_MINISTRY_CLASSES = {
    "FOJ": "bg-teal",
    "ARK": "bg-primary",
    "VINEYARD": "bg-purple",
    "PILGRIMS": "bg-warning text-dark",
}

MINISTRY_LABELS = {
    "FOJ": "Friends of Jesus (FOJ)",
    "ARK": "Ark",
    "VINEYARD": "Vineyard",
    "PILGRIMS": "Pilgrims",
}


def status_badge(status: Optional[str]) -> str:
    return _STATUS_CLASSES.get(status or "", "bg-secondary")


def ministry_badge(ministry: Optional[str]) -> str:
    return _MINISTRY_CLASSES.get(ministry or "", "bg-secondary")


def ministry_label(ministry: Optional[str]) -> str:
    if not ministry:
        return "N/A"
    return MINISTRY_LABELS.get(ministry, ministry)
