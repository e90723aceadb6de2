from __future__ import annotations

from typing import Any, Callable, Dict, Mapping, Optional

from ..core.constants import DEFAULT_DEBOUNCE_MS, ELDER_ONLY_MEMBER_FIELDS, MEMBER_FILTER_FIELDS
from ..core.enums import AdminRole
from ..listing.debounce import Scheduler
from ..listing.view import ListManagementView, ListResult
from .model import Member
from .service import MemberService

EDITABLE_FIELDS = (
    "firstName",
    "lastName",
    "email",
    "phone",
    "gender",
    "dateOfBirth",
    "city",
    "dateBaptised",
    "address",
    "faculty",
    "course",
    "yearGroup",
    "ministry",
    "membershipStatus",
)


class MemberRecords:
    """Adapts ``MemberService`` to the list screen for one administrator."""

    def __init__(self, service: MemberService, role: AdminRole):
        self._service = service
        self._role = role

    def list_records(self, params: Mapping[str, str]) -> ListResult[Member]:
        return self._service.list_members(params)

    def get_record(self, record_id: str) -> Member:
        return self._service.get_member(record_id)

    def update_record(self, record_id: str, changes: Dict[str, Any]) -> None:
        self._service.update_member(record_id, changes, role=self._role)

    def delete_record(self, record_id: str) -> None:
        self._service.delete_member(record_id, role=self._role)


def build_member_view(
    service: MemberService,
    role: AdminRole,
    *,
    debounce_ms: int = DEFAULT_DEBOUNCE_MS,
    scheduler: Optional[Scheduler] = None,
    on_auth_expired: Optional[Callable[[], None]] = None,
    auto_reload: bool = True,
) -> ListManagementView[Member]:
    return ListManagementView(
        MemberRecords(service, role),
        filter_fields=MEMBER_FILTER_FIELDS,
        debounce_ms=debounce_ms,
        scheduler=scheduler,
        on_auth_expired=on_auth_expired,
        auto_reload=auto_reload,
        record_label="Member",
    )


def patch_from_form(form: Mapping[str, str], role: AdminRole) -> Dict[str, Any]:
    """Turn a submitted edit form into a member patch.

    The leader checkbox and the status select are only rendered for elders,
    so for clerks their absence means "not shown", not "unset".
    """
    patch: Dict[str, Any] = {name: (form.get(name) or "").strip() for name in EDITABLE_FIELDS}
    if role == AdminRole.ELDER:
        patch["isLeader"] = form.get("isLeader") in {"on", "true", "1"}
    else:
        for name in ELDER_ONLY_MEMBER_FIELDS:
            patch.pop(name, None)
    return patch
