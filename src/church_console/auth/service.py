from __future__ import annotations

import logging
from dataclasses import dataclass

from ..api.client import ApiClient
from ..common.validators import require_email, require_non_empty
from ..core.exceptions import AuthenticationError, ServiceError, SessionExpiredError
from .model import SessionAdmin

logger = logging.getLogger(__name__)

LOGIN_PATH = "/api/auth/login"


@dataclass(frozen=True)
class LoginResult:
    token: str
    admin: SessionAdmin


class AuthService:
    """Use case: authenticate an administrator (login)."""

    def __init__(self, api: ApiClient):
        self._api = api

    def login(self, email: str, password: str) -> LoginResult:
        email = require_email(email)
        password = require_non_empty(password, "Password")

        try:
            body = self._api.post(LOGIN_PATH, {"email": email, "password": password})
        except (SessionExpiredError, ServiceError) as e:
            logger.info("Login rejected for %s: %s", email, e)
            raise AuthenticationError(str(e) or "Invalid email or password") from e

        data = body.get("data") or {}
        token = data.get("token")
        if not token or not isinstance(data.get("admin"), dict):
            raise AuthenticationError("Invalid email or password")

        try:
            admin = SessionAdmin.from_api(data["admin"])
        except ValueError as e:
            raise AuthenticationError("Unsupported administrator role") from e

        logger.info("Administrator %s logged in as %s", admin.email, admin.role.value)
        return LoginResult(token=token, admin=admin)
