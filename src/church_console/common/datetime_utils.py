from __future__ import annotations

from datetime import date, datetime
from typing import Optional


def parse_iso_datetime(value: Optional[str]) -> Optional[datetime]:
    """Parse an ISO-8601 timestamp as sent by the church API.

    Returns None for missing or unparseable values.
    """
    if not value:
        return None
    try:
        return datetime.fromisoformat(value.replace("Z", "+00:00"))
    except ValueError:
        return None


def parse_iso_date(value: str) -> date:
    """Parse YYYY-MM-DD string into date."""
    return datetime.strptime(value, "%Y-%m-%d").date()


def format_date(value: Optional[str]) -> str:
    """Render an API timestamp as e.g. ``Mar 5, 2024``; ``N/A`` when missing."""
    parsed = parse_iso_datetime(value)
    if parsed is None:
        return "N/A"
    return f"{parsed.strftime('%b')} {parsed.day}, {parsed.year}"


def format_datetime(value: Optional[str]) -> str:
    parsed = parse_iso_datetime(value)
    if parsed is None:
        return "N/A"
    return f"{parsed.strftime('%b')} {parsed.day}, {parsed.year}, {parsed.strftime('%I:%M %p')}"


def date_input_value(value: Optional[str]) -> str:
    """Value for an ``<input type="date">``: the date part of an ISO timestamp."""
    if not value:
        return ""
    return value.split("T")[0]
