"""HTTP client for the church API.

Every endpoint answers with the same envelope::

    {"success": bool, "message": str, "data": {...}}

``ApiClient`` adds the bearer token, decodes that envelope and turns every
failure into one of the console exceptions so callers never see ``requests``
errors directly.
"""
from __future__ import annotations

import logging
from typing import Any, Callable, Dict, Optional

import requests

from ..core.constants import AUTH_EXPIRED_STATUSES, DEFAULT_API_TIMEOUT_SECONDS, GENERIC_ERROR_MESSAGE
from ..core.exceptions import NetworkError, ServiceError, SessionExpiredError

logger = logging.getLogger(__name__)

TokenProvider = Callable[[], Optional[str]]


class ApiClient:
    def __init__(
        self,
        base_url: str,
        *,
        token_provider: Optional[TokenProvider] = None,
        timeout: float = DEFAULT_API_TIMEOUT_SECONDS,
        session: Optional[requests.Session] = None,
    ):
        self._base_url = base_url.rstrip("/")
        self._token_provider = token_provider
        self._timeout = timeout
        self._session = session or requests.Session()

    def with_token(self, token_provider: TokenProvider) -> "ApiClient":
        """Same client, but requests carry the token returned by ``token_provider``."""
        return ApiClient(
            self._base_url,
            token_provider=token_provider,
            timeout=self._timeout,
            session=self._session,
        )

    def _get_headers(self) -> Dict[str, str]:
        headers = {"Accept": "application/json"}
        token = self._token_provider() if self._token_provider else None
        if token:
            headers["Authorization"] = f"Bearer {token}"
        return headers

    def request(self, method: str, path: str, **kwargs: Any) -> Dict[str, Any]:
        url = f"{self._base_url}{path}"
        try:
            response = self._session.request(
                method,
                url,
                headers=self._get_headers(),
                timeout=self._timeout,
                **kwargs,
            )
        except requests.RequestException as exc:
            logger.warning("%s %s failed: %s", method, path, exc)
            raise NetworkError(GENERIC_ERROR_MESSAGE) from exc

        try:
            body = response.json()
        except ValueError:
            body = None
        if not isinstance(body, dict):
            body = {}

        message = body.get("message")

        if response.status_code in AUTH_EXPIRED_STATUSES:
            logger.info("%s %s rejected with %s", method, path, response.status_code)
            raise SessionExpiredError(message or "Your session has expired. Please log in again.")

        if not body:
            # Proxies and crashed upstreams answer with HTML or nothing at all.
            logger.warning("%s %s returned status %s without an envelope", method, path, response.status_code)
            raise NetworkError(GENERIC_ERROR_MESSAGE)

        if response.status_code >= 400 or not body.get("success", False):
            logger.warning("%s %s rejected (%s): %s", method, path, response.status_code, message)
            raise ServiceError(message or GENERIC_ERROR_MESSAGE, status_code=response.status_code)

        return body

    def get(self, path: str, *, params: Optional[Dict[str, str]] = None) -> Dict[str, Any]:
        return self.request("GET", path, params=params)

    def post(self, path: str, payload: Dict[str, Any]) -> Dict[str, Any]:
        return self.request("POST", path, json=payload)

    def put(self, path: str, payload: Dict[str, Any]) -> Dict[str, Any]:
        return self.request("PUT", path, json=payload)

    def delete(self, path: str) -> Dict[str, Any]:
        return self.request("DELETE", path)
