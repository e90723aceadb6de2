from __future__ import annotations

import logging
from typing import Any, Dict, Mapping, Optional

from ..api.client import ApiClient
from ..common.validators import require_email, require_non_empty
from ..core.constants import ELDER_ONLY_MEMBER_FIELDS
from ..core.enums import AdminRole
from ..core.exceptions import AuthorizationError, ServiceError, ValidationError
from ..listing.view import ListResult
from .model import Member

logger = logging.getLogger(__name__)

MEMBERS_PATH = "/api/members"


class MemberService:
    """Use case: manage the member directory through the church API."""

    def __init__(self, api: ApiClient):
        self._api = api

    def list_members(self, params: Optional[Mapping[str, str]] = None) -> ListResult[Member]:
        body = self._api.get(MEMBERS_PATH, params=dict(params or {}))
        data = body.get("data") or {}
        members = [Member.from_api(item) for item in data.get("members") or []]
        return ListResult(
            items=members,
            extras={"total": int(data.get("total", len(members)) or 0)},
        )

    def get_member(self, member_id: str) -> Member:
        body = self._api.get(f"{MEMBERS_PATH}/{member_id}")
        data = body.get("data")
        if not isinstance(data, dict) or "id" not in data:
            raise ServiceError("Member not found", status_code=404)
        return Member.from_api(data)

    def update_member(self, member_id: str, changes: Mapping[str, Any], *, role: AdminRole) -> Dict[str, Any]:
        """Send ``changes`` to the service; returns what was actually sent.

        Clerks can only edit basic information, so elder-only fields are
        dropped from their patches before anything leaves the console.
        """
        payload = dict(changes)
        if role != AdminRole.ELDER:
            for name in ELDER_ONLY_MEMBER_FIELDS & payload.keys():
                logger.info("Dropping elder-only field %s from clerk update of %s", name, member_id)
                payload.pop(name)

        if "firstName" in payload:
            payload["firstName"] = require_non_empty(payload["firstName"], "First name")
        if "lastName" in payload:
            payload["lastName"] = require_non_empty(payload["lastName"], "Last name")
        if "email" in payload:
            payload["email"] = require_email(payload["email"])

        if not payload:
            raise ValidationError("Nothing to update")

        self._api.put(f"{MEMBERS_PATH}/{member_id}", payload)
        return payload

    def delete_member(self, member_id: str, *, role: AdminRole) -> None:
        if role != AdminRole.ELDER:
            raise AuthorizationError("Only elders can delete members")
        self._api.delete(f"{MEMBERS_PATH}/{member_id}")
