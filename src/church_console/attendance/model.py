from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Dict, Mapping, Optional

SERVICE_LABELS = {
    "SABBATH_MORNING": "Sabbath Service",
    "WEDNESDAY_VESPERS": "Wednesday Vespers",
    "FRIDAY_VESPERS": "Friday Vespers",
}


def service_label(service_type: Optional[str]) -> str:
    if not service_type:
        return "N/A"
    return SERVICE_LABELS.get(service_type, service_type.replace("_", " ").title())


@dataclass(frozen=True)
class AttendanceRecord:
    """One member marked present at one service."""

    id: str
    attended_at: str
    service_type: str
    location_name: str
    member_id: str
    member_name: str
    member_email: str
    member_ministry: Optional[str] = None

    @property
    def service_name(self) -> str:
        return service_label(self.service_type)

    @classmethod
    def from_api(cls, data: Mapping[str, Any]) -> "AttendanceRecord":
        member = data.get("member") or {}
        first = member.get("firstName") or ""
        last = member.get("lastName") or ""
        return cls(
            id=str(data["id"]),
            attended_at=data.get("attendedAt") or "",
            service_type=data.get("serviceType") or "",
            location_name=data.get("locationName") or "",
            member_id=str(member.get("id") or ""),
            member_name=f"{first} {last}".strip(),
            member_email=member.get("email") or "",
            member_ministry=member.get("ministry"),
        )

    def to_api(self) -> Dict[str, Any]:
        return {
            "attendedAt": self.attended_at,
            "serviceType": self.service_type,
            "locationName": self.location_name,
        }
