from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Dict, Mapping

from ..core.enums import AdminRole


@dataclass(frozen=True)
class SessionAdmin:
    """What we store into Flask session after login."""

    id: str
    first_name: str
    last_name: str
    email: str
    role: AdminRole

    @property
    def full_name(self) -> str:
        return f"{self.first_name} {self.last_name}".strip()

    @property
    def initials(self) -> str:
        return f"{self.first_name[:1]}{self.last_name[:1]}".upper()

    @property
    def is_elder(self) -> bool:
        return self.role == AdminRole.ELDER

    @classmethod
    def from_api(cls, data: Mapping[str, Any]) -> "SessionAdmin":
        return cls(
            id=str(data.get("id") or ""),
            first_name=data.get("firstName") or "",
            last_name=data.get("lastName") or "",
            email=data.get("email") or "",
            role=AdminRole(data.get("role") or AdminRole.CLERK.value),
        )

    def to_session(self) -> Dict[str, str]:
        return {
            "id": self.id,
            "firstName": self.first_name,
            "lastName": self.last_name,
            "email": self.email,
            "role": self.role.value,
        }
