from __future__ import annotations

from typing import Optional


class ConsoleError(Exception):
    """Base exception for everything the console reports to an administrator."""


class ValidationError(ConsoleError):
    """Raised when input data is invalid before it reaches the church API."""


class AuthenticationError(ConsoleError):
    """Raised when login credentials are rejected."""


class AuthorizationError(ConsoleError):
    """Raised when an administrator lacks permission for an action."""


class SessionExpiredError(AuthorizationError):
    """Raised when the church API answers 401/403: the token is missing or stale."""


class ServiceError(ConsoleError):
    """Raised when the church API answers but rejects the request.

    The message is the one the service sent, so it can be shown as-is.
    """

    def __init__(self, message: str, *, status_code: Optional[int] = None):
        super().__init__(message)
        self.status_code = status_code


class NetworkError(ConsoleError):
    """Raised when the church API cannot be reached or answers garbage."""
