"""
Result of a single API call.
"""

from dataclasses import dataclass
from enum import IntEnum
from typing import Any

import httpx

from mediafire_client.exceptions import (
    APIError,
    HashNotFoundError,
    InvalidResponseError,
    NetworkError,
    ServerError,
    SessionExpiredError,
)


class MediaFireAPICode(IntEnum):
    """MediaFire API error codes handled by the client."""

    SESSION_TOKEN_INVALID = 105
    SESSION_TOKEN_EXPIRED = 110
    HASH_NOT_FOUND = 129


_SESSION_CODES = frozenset({MediaFireAPICode.SESSION_TOKEN_INVALID, MediaFireAPICode.SESSION_TOKEN_EXPIRED})


@dataclass(frozen=True, kw_only=True)
class ApiResponse:
    """
    Outcome of one dispatched request, successful or not.

    Attributes:
        endpoint: API path that was called (e.g. ``file/get_info``).
        status_code: HTTP status, 0 when no response was received.
        body: Parsed JSON body, or the raw text if it was not JSON.
        transport_error: Description of a network failure, if any.
    """

    endpoint: str
    status_code: int
    body: dict[str, Any] | str | None = None
    transport_error: str | None = None

    @property
    def response(self) -> dict[str, Any]:
        """Inner ``response`` object of the envelope, empty if absent."""
        if isinstance(self.body, dict):
            inner = self.body.get("response")
            if isinstance(inner, dict):
                return inner
        return {}

    @property
    def error_code(self) -> int | None:
        code = self.response.get("error")
        if code is None:
            return None
        try:
            return int(code)
        except (TypeError, ValueError):
            return None

    @property
    def message(self) -> str:
        """Human-readable error message, best effort."""
        if self.transport_error:
            return self.transport_error
        message = self.response.get("message")
        if message:
            return str(message)
        if isinstance(self.body, str) and self.body:
            return self.body
        return f"HTTP {self.status_code}"

    @property
    def ok(self) -> bool:
        return (
            self.status_code == httpx.codes.OK
            and bool(self.response)
            and self.error_code is None
            and self.response.get("result") != "Error"
        )

    def unwrap(self) -> dict[str, Any]:
        """
        Return the inner response object or raise.

        Raises:
            NetworkError: If no response was received.
            InvalidResponseError: If the body is not a JSON envelope.
            HashNotFoundError: If the server reports an unknown hash.
            SessionExpiredError: If the session token was rejected.
            ServerError: On HTTP 5xx.
            APIError: On any other API error.
        """
        if self.ok:
            return self.response

        if self.transport_error is not None:
            raise NetworkError(self.transport_error, endpoint=self.endpoint)

        code = self.error_code
        if code == MediaFireAPICode.HASH_NOT_FOUND:
            raise HashNotFoundError(self.message, endpoint=self.endpoint)
        if code in _SESSION_CODES:
            raise SessionExpiredError(self.message, code=code, endpoint=self.endpoint)
        if code is not None:
            raise APIError(self.message, code=code, endpoint=self.endpoint)

        if self.status_code >= httpx.codes.INTERNAL_SERVER_ERROR:
            raise ServerError(self.message, code=self.status_code, endpoint=self.endpoint)
        if not self.response:
            msg = "Invalid JSON response from API"
            raise InvalidResponseError(msg, endpoint=self.endpoint)
        raise APIError(self.message, code=self.status_code, endpoint=self.endpoint)
