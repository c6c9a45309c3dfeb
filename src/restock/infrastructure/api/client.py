"""Authenticated HTTP client shared by every remote collaborator.

- injects the stored credential as ``Authorization: Basic <token>``
- turns a 401 into a session teardown (credential cleared, expiry hook
  fired) followed by AuthenticationError
- maps every other failure onto the SubmissionError taxonomy
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Any, Callable

import requests

from restock.domain.exceptions import (
    AuthenticationError,
    NetworkError,
    ServerRejectionError,
)
from restock.infrastructure.api.credentials import CredentialStore

logger = logging.getLogger(__name__)

NETWORK_FAILED = "Network error. Please check your connection and try again."

_STATUS_MESSAGES = {
    400: "Invalid data format. Please check all fields.",
    403: "Access denied. Please check your permissions.",
    409: "Resource already exists",
}
_DEFAULT_ERROR = "An error occurred"


@dataclass(frozen=True)
class ApiResponse:
    status: int
    data: Any = None


class ApiClient:

    def __init__(
        self,
        base_url: str,
        credentials: CredentialStore,
        timeout: float = 10,
        on_session_expired: Callable[[], None] | None = None,
        session: requests.Session | None = None,
    ) -> None:
        self._base_url = base_url.rstrip("/")
        self._credentials = credentials
        self._timeout = timeout
        self._on_session_expired = on_session_expired
        self._session = session or requests.Session()
        self._session.headers.update({"Content-Type": "application/json"})

    def get(self, path: str) -> ApiResponse:
        return self.request("GET", path)

    def post(self, path: str, payload: Any = None) -> ApiResponse:
        return self.request("POST", path, payload)

    def request(self, method: str, path: str, payload: Any = None) -> ApiResponse:
        url = f"{self._base_url}/{path.lstrip('/')}"
        try:
            response = self._session.request(
                method,
                url,
                json=payload,
                headers=self._auth_headers(),
                timeout=self._timeout,
            )
        except requests.RequestException as exc:
            logger.warning("%s %s failed: %s", method, url, exc)
            raise NetworkError(NETWORK_FAILED) from exc

        data = self._decode(response)
        logger.debug("%s %s -> %d", method, url, response.status_code)

        if response.status_code == 401:
            self._expire_session()
            raise AuthenticationError()
        if not response.ok:
            message = self.describe_error(response.status_code, data)
            logger.warning("%s %s -> %d: %s", method, url, response.status_code, message)
            raise ServerRejectionError(message, status=response.status_code)

        return ApiResponse(status=response.status_code, data=data)

    # --- Internal helpers -----------------------------------------------------

    def _auth_headers(self) -> dict[str, str]:
        credential = self._credentials.get()
        if credential is None:
            logger.warning("No stored credential; sending request unauthenticated")
            return {}
        return {"Authorization": f"Basic {credential.token}"}

    def _expire_session(self) -> None:
        logger.warning("Server answered 401; clearing stored credential")
        self._credentials.clear()
        if self._on_session_expired is not None:
            self._on_session_expired()

    @staticmethod
    def _decode(response: requests.Response) -> Any:
        if not response.content:
            return None
        try:
            return response.json()
        except ValueError:
            return response.text

    @staticmethod
    def describe_error(status: int, data: Any) -> str:
        """Pick the message to show for a failed response."""
        if isinstance(data, dict) and data.get("message"):
            return str(data["message"])
        if isinstance(data, str) and data.strip():
            return data.strip()
        return _STATUS_MESSAGES.get(status, _DEFAULT_ERROR)
