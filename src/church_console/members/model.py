from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Dict, Mapping, Optional

from ..common.datetime_utils import date_input_value


@dataclass(frozen=True)
class Member:
    """Domain entity: Member, as returned by ``/api/members``.

    Note: attribute names are snake_case; the church API speaks camelCase,
    see ``from_api`` / ``to_api``.
    """

    id: str
    first_name: str
    last_name: str
    email: str
    membership_status: str = "ACTIVE"
    is_leader: bool = False
    phone: Optional[str] = None
    date_of_birth: Optional[str] = None
    date_baptised: Optional[str] = None
    gender: Optional[str] = None
    address: Optional[str] = None
    city: Optional[str] = None
    ministry: Optional[str] = None
    course: Optional[str] = None
    faculty: Optional[str] = None
    year_group: Optional[str] = None
    date_joined: Optional[str] = None
    created_at: Optional[str] = None
    updated_at: Optional[str] = None
    attendance_count: int = 0
    stats: Dict[str, Any] = field(default_factory=dict, compare=False)

    @property
    def full_name(self) -> str:
        return f"{self.first_name} {self.last_name}".strip()

    @property
    def initials(self) -> str:
        return f"{self.first_name[:1]}{self.last_name[:1]}".upper()

    @classmethod
    def from_api(cls, data: Mapping[str, Any]) -> "Member":
        counts = data.get("_count") or {}
        return cls(
            id=str(data["id"]),
            first_name=data.get("firstName") or "",
            last_name=data.get("lastName") or "",
            email=data.get("email") or "",
            membership_status=data.get("membershipStatus") or "ACTIVE",
            is_leader=bool(data.get("isLeader", False)),
            phone=data.get("phone"),
            date_of_birth=data.get("dateOfBirth"),
            date_baptised=data.get("dateBaptised"),
            gender=data.get("gender"),
            address=data.get("address"),
            city=data.get("city"),
            ministry=data.get("ministry"),
            course=data.get("course"),
            faculty=data.get("faculty"),
            year_group=data.get("yearGroup"),
            date_joined=data.get("dateJoined"),
            created_at=data.get("createdAt"),
            updated_at=data.get("updatedAt"),
            attendance_count=int(counts.get("attendances", 0) or 0),
            stats=dict(data.get("stats") or {}),
        )

    def to_api(self) -> Dict[str, Any]:
        """Editable fields in the shape the edit form and ``PUT`` use."""
        return {
            "firstName": self.first_name,
            "lastName": self.last_name,
            "email": self.email,
            "phone": self.phone or "",
            "dateOfBirth": date_input_value(self.date_of_birth),
            "dateBaptised": date_input_value(self.date_baptised),
            "gender": self.gender or "",
            "address": self.address or "",
            "city": self.city or "",
            "membershipStatus": self.membership_status,
            "isLeader": self.is_leader,
            "ministry": self.ministry or "",
            "course": self.course or "",
            "faculty": self.faculty or "",
            "yearGroup": self.year_group or "",
        }
