from __future__ import annotations

from typing import Any, Dict, Mapping, Optional

from ..core.constants import ATTENDANCE_FILTER_FIELDS, DEFAULT_DEBOUNCE_MS
from ..core.exceptions import AuthorizationError
from ..listing.debounce import Scheduler
from ..listing.view import ListManagementView, ListResult
from .model import AttendanceRecord
from .service import AttendanceService


class AttendanceRecords:
    """Read-only source: attendance is marked by members, not edited here."""

    def __init__(self, service: AttendanceService):
        self._service = service

    def list_records(self, params: Mapping[str, str]) -> ListResult[AttendanceRecord]:
        return self._service.list_records(params)

    def get_record(self, record_id: str) -> AttendanceRecord:
        raise AuthorizationError("Attendance records have no detail view")

    def update_record(self, record_id: str, changes: Dict[str, Any]) -> None:
        raise AuthorizationError("Attendance records are read-only")

    def delete_record(self, record_id: str) -> None:
        raise AuthorizationError("Attendance records are read-only")


def build_attendance_view(
    service: AttendanceService,
    *,
    debounce_ms: int = DEFAULT_DEBOUNCE_MS,
    scheduler: Optional[Scheduler] = None,
) -> ListManagementView[AttendanceRecord]:
    return ListManagementView(
        AttendanceRecords(service),
        filter_fields=ATTENDANCE_FILTER_FIELDS,
        debounce_ms=debounce_ms,
        scheduler=scheduler,
        record_label="Attendance",
    )
