from __future__ import annotations

from datetime import date
from typing import Any, Dict, List, Mapping, Optional

from ..api.client import ApiClient
from ..common.datetime_utils import parse_iso_date
from ..core.exceptions import ValidationError
from ..listing.view import ListResult
from .model import AttendanceRecord, service_label

ATTENDANCE_PATH = "/api/attendance"


class AttendanceService:
    """Use case: browse attendance records (read-only)."""

    def __init__(self, api: ApiClient):
        self._api = api

    def list_records(self, params: Mapping[str, str]) -> ListResult[AttendanceRecord]:
        start = _optional_date(params.get("startDate"), "Start date")
        end = _optional_date(params.get("endDate"), "End date")
        if start and end and start > end:
            raise ValidationError("Start date must be before end date")

        body = self._api.get(ATTENDANCE_PATH, params=dict(params))
        data = body.get("data") or {}
        records = [AttendanceRecord.from_api(item) for item in data.get("attendances") or []]
        return ListResult(
            items=records,
            extras={
                "total": int(data.get("total", len(records)) or 0),
                "by_service": _by_service(data.get("byService") or []),
            },
        )


def _optional_date(value: Optional[str], field_name: str) -> Optional[date]:
    if not value:
        return None
    try:
        return parse_iso_date(value)
    except ValueError:
        raise ValidationError(f"{field_name} must be YYYY-MM-DD")


def _by_service(rows: List[Dict[str, Any]]) -> List[Dict[str, Any]]:
    out = []
    for row in rows:
        count = row.get("_count", 0)
        if isinstance(count, dict):
            count = count.get("_all", 0)
        out.append(
            {
                "service_type": row.get("serviceType"),
                "service_name": service_label(row.get("serviceType")),
                "count": int(count or 0),
            }
        )
    out.sort(key=lambda r: r["count"], reverse=True)
    return out
