"""
MediaFire client exception hierarchy.

All exceptions inherit from MediaFireError for easy catching.
"""

from typing import Any


class MediaFireError(Exception):
    """Base exception for all mediafire_client errors."""

    def __init__(self, message: str, **context: Any) -> None:
        super().__init__(message)
        self.message = message
        self.context = context

    def __str__(self) -> str:
        if self.context:
            ctx = ", ".join(f"{k}={v!r}" for k, v in self.context.items())
            return f"{self.message} ({ctx})"
        return self.message


class AuthenticationError(MediaFireError):
    """Authentication failed."""


class InvalidCredentialsError(AuthenticationError):
    """Credentials are missing, malformed or rejected by the server."""


class SessionExpiredError(AuthenticationError):
    """Session token is no longer accepted and renewal failed."""


class APIError(MediaFireError):
    """API request failed."""

    def __init__(self, message: str, *, code: int, endpoint: str | None = None) -> None:
        super().__init__(message, code=code, endpoint=endpoint)
        self.code = code
        self.endpoint = endpoint


class HashNotFoundError(APIError):
    """No file with the requested hash is stored on the server."""

    def __init__(self, message: str = "Unknown file hash", *, endpoint: str | None = None) -> None:
        super().__init__(message, code=129, endpoint=endpoint)


class ServerError(APIError):
    """Server-side error (5xx)."""

    def __init__(self, message: str, *, code: int = 500, endpoint: str | None = None) -> None:
        super().__init__(message, code=code, endpoint=endpoint)


class InvalidResponseError(MediaFireError):
    """Response body is not the expected JSON envelope."""

    def __init__(self, message: str, *, endpoint: str | None = None) -> None:
        super().__init__(message, endpoint=endpoint)
        self.endpoint = endpoint


class NetworkError(MediaFireError):
    """Network-level error (connection failed, timeout)."""
