from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

import requests

from .api.client import ApiClient, TokenProvider
from .attendance.service import AttendanceService
from .auth.service import AuthService
from .core.constants import DEFAULT_API_TIMEOUT_SECONDS, DEFAULT_DEBOUNCE_MS
from .members.service import MemberService
from .reports.service import ExportService


@dataclass(frozen=True)
class Container:
    api: ApiClient

    auth_service: AuthService
    member_service: MemberService
    attendance_service: AttendanceService
    export_service: ExportService

    debounce_ms: int = DEFAULT_DEBOUNCE_MS
    church_url: str = ""


def build_container(
    *,
    api_base_url: str,
    token_provider: Optional[TokenProvider] = None,
    timeout: float = DEFAULT_API_TIMEOUT_SECONDS,
    debounce_ms: int = DEFAULT_DEBOUNCE_MS,
    church_url: str = "",
    http_session: Optional[requests.Session] = None,
) -> Container:
    api = ApiClient(api_base_url, token_provider=token_provider, timeout=timeout, session=http_session)

    return Container(
        api=api,
        auth_service=AuthService(api),
        member_service=MemberService(api),
        attendance_service=AttendanceService(api),
        export_service=ExportService(),
        debounce_ms=debounce_ms,
        church_url=church_url,
    )
