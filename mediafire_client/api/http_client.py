"""
Async HTTP client for the MediaFire API.

Every logical API call is one GET with all parameters in the query string.
Authentication is either a static v1 session token or a v2 token borrowed
from the session token pool and used to sign the request. When every v2
token is lent out, callers wait in a FIFO queue; each finished call wakes
exactly one waiter.
"""

import asyncio
from collections import deque
from dataclasses import dataclass, field
from typing import Any

import httpx
import structlog

from mediafire_client.config import MediaFireConfig
from mediafire_client.core.token_pool import SessionTokenPool
from mediafire_client.crypto.signature import authenticate_params, encode_query
from mediafire_client.exceptions import NetworkError
from mediafire_client.models.api import ApiResponse
from mediafire_client.models.session import SessionToken

logger = structlog.get_logger(__name__)

SENSITIVE_KEYS = frozenset(
    {
        "password",
        "session_token",
        "signature",
        "secret_key",
        "tw_oauth_token",
        "tw_oauth_token_secret",
        "fb_access_token",
        "action_token",
    }
)


def sanitize_for_log(data: dict[str, Any]) -> dict[str, Any]:
    """
    Remove sensitive fields from a dict before logging.

    Recursively sanitizes nested dictionaries and lists.

    Args:
        data: Dictionary that may contain sensitive values.

    Returns:
        Copy with sensitive values replaced by "***".
    """
    result = {}
    for key, value in data.items():
        if key in SENSITIVE_KEYS:
            result[key] = "***"
        elif isinstance(value, dict):
            result[key] = sanitize_for_log(value)
        elif isinstance(value, list):
            result[key] = [
                sanitize_for_log(item) if isinstance(item, dict) else item for item in value
            ]
        else:
            result[key] = value
    return result


@dataclass(eq=False)
class PendingRequest:
    """A call parked until a session token frees up."""

    endpoint: str
    params: dict[str, Any]
    future: asyncio.Future[None] = field(repr=False)


class AsyncHttpClient:
    """Async HTTP client and request dispatcher for the MediaFire API."""

    def __init__(
        self,
        config: MediaFireConfig,
        *,
        transport: httpx.AsyncBaseTransport | None = None,
        pool: SessionTokenPool | None = None,
    ) -> None:
        """
        Args:
            config: Client configuration.
            transport: Optional transport for testing (mock transport).
            pool: Token pool to draw v2 tokens from; one sized from
                ``config.tokens_stored`` is created if omitted.
        """
        self._config = config
        self._transport = transport

        self._client: httpx.AsyncClient | None = None
        self._client_lock = asyncio.Lock()

        self._session_token: str | None = None
        self._pool = pool if pool is not None else SessionTokenPool(config.tokens_stored)
        self._pending: deque[PendingRequest] = deque()

    async def __aenter__(self) -> "AsyncHttpClient":
        await self._ensure_client()
        return self

    async def __aexit__(self, *args: Any) -> None:
        await self.close()

    async def _ensure_client(self) -> httpx.AsyncClient:
        async with self._client_lock:
            if self._client is None:
                self._client = httpx.AsyncClient(
                    timeout=self._config.timeout,
                    transport=self._transport,
                    headers={
                        "Accept": "application/json",
                        "User-Agent": self._config.user_agent,
                    },
                )
        return self._client

    async def close(self) -> None:
        """Close the HTTP client and fail every queued request."""
        async with self._client_lock:
            while self._pending:
                pending = self._pending.popleft()
                if not pending.future.done():
                    pending.future.set_exception(
                        NetworkError("Client closed", endpoint=pending.endpoint)
                    )
            if self._client is None:
                logger.debug("Client not open.")
                return
            await self._client.aclose()
            self._client = None

    @property
    def config(self) -> MediaFireConfig:
        return self._config

    @property
    def pool(self) -> SessionTokenPool:
        return self._pool

    @property
    def session_token(self) -> str | None:
        """Current v1 session token."""
        return self._session_token

    @property
    def pending_count(self) -> int:
        return sum(1 for pending in self._pending if not pending.future.done())

    @property
    def is_authenticated(self) -> bool:
        """Check if we have a session token."""
        return self._session_token is not None

    def set_session_token(self, token: str) -> None:
        """
        Store the v1 session token.

        Note:
            Internal use only. Called by AuthService after login and on renewal.
        """
        self._session_token = token

    def clear_session(self) -> None:
        """
        Forget the v1 token and every pooled v2 token.

        Note:
            Internal use only. Called by AuthService on login and logout.
        """
        self._session_token = None
        self._pool.reset()

    async def call(
        self,
        path: str,
        params: dict[str, Any] | None = None,
        *,
        authenticated: bool = True,
        api_version: str | None = None,
    ) -> ApiResponse:
        """
        Make one API call.

        Args:
            path: API path without version or extension (e.g. "file/get_info").
            params: Query parameters.
            authenticated: Whether to attach session authentication.
            api_version: Override of the configured API version.

        Returns:
            ApiResponse holding the parsed body, successful or not.

        Raises:
            NetworkError: If the client closed while the call was queued.
            RuntimeError: If the client was not opened with ``async with``.
        """
        url = self._config.api_path(path, api_version)
        query = dict(params or {})
        query["response_format"] = "json"

        token: SessionToken | None = None
        if authenticated:
            token, query = await self._authenticate(path, url, query)
        try:
            return await self._send(path, url, query, token)
        finally:
            if token is not None:
                self._pool.release(token)
            self._wake_next()

    async def request(
        self,
        path: str,
        params: dict[str, Any] | None = None,
        *,
        authenticated: bool = True,
        api_version: str | None = None,
    ) -> dict[str, Any]:
        """
        Make an API call and return the inner ``response`` object.

        Raises:
            APIError: If the API returns an error.
            NetworkError: If no response was received.
            InvalidResponseError: If the body is not a JSON envelope.
        """
        result = await self.call(
            path, params, authenticated=authenticated, api_version=api_version
        )
        return result.unwrap()

    async def _authenticate(
        self, path: str, url: str, query: dict[str, Any]
    ) -> tuple[SessionToken | None, dict[str, Any]]:
        if self._config.token_version == 1:
            return None, self._with_static_token(query)

        requeued = False
        while True:
            # Fresh callers line up behind anyone already waiting.
            token = None if (self._pending and not requeued) else self._pool.checkout()
            if token is not None:
                try:
                    signed = authenticate_params(
                        token, url, query, service_host=self._config.service_host
                    )
                except Exception:
                    self._pool.release(token)
                    self._wake_next()
                    raise
                return token, signed

            if not self._pool.has_received:
                return None, self._with_static_token(query)

            await self._wait_turn(path, query, front=requeued)
            requeued = True

    def _with_static_token(self, query: dict[str, Any]) -> dict[str, Any]:
        if self._session_token:
            query["session_token"] = self._session_token
        return query

    async def _wait_turn(self, path: str, query: dict[str, Any], *, front: bool) -> None:
        future: asyncio.Future[None] = asyncio.get_running_loop().create_future()
        pending = PendingRequest(endpoint=path, params=query, future=future)
        if front:
            self._pending.appendleft(pending)
        else:
            self._pending.append(pending)
        logger.debug("Request queued", path=path, pending=len(self._pending))

        try:
            await future
        except asyncio.CancelledError:
            if future.done() and not future.cancelled():
                # Woken, then abandoned: pass the turn on.
                self._wake_next()
            else:
                try:
                    self._pending.remove(pending)
                except ValueError:
                    pass
            raise

    def _wake_next(self) -> None:
        while self._pending:
            pending = self._pending.popleft()
            if not pending.future.done():
                pending.future.set_result(None)
                logger.debug("Request dequeued", path=pending.endpoint, pending=len(self._pending))
                return

    async def _send(
        self,
        path: str,
        url: str,
        query: dict[str, Any],
        token: SessionToken | None,
    ) -> ApiResponse:
        if self._client is None:
            msg = "HTTP client not initialized. Use 'async with' first."
            raise RuntimeError(msg)

        logger.debug("API request", path=path, params=sanitize_for_log(query))
        try:
            response = await self._client.get(f"{url}?{encode_query(query)}")
        except httpx.HTTPError as e:
            logger.warning("API request failed", path=path, error_type=type(e).__name__)
            return ApiResponse(
                endpoint=path,
                status_code=0,
                transport_error=str(e) or type(e).__name__,
            )

        try:
            body: dict[str, Any] | str = response.json()
        except ValueError:
            logger.warning("Non-JSON response", path=path, status_code=response.status_code)
            body = response.text

        result = ApiResponse(endpoint=path, status_code=response.status_code, body=body)
        if response.status_code == httpx.codes.OK and self._config.token_version == 2:
            self._track_tokens(result.response, token)

        if not result.ok:
            logger.debug(
                "API error response",
                path=path,
                status_code=result.status_code,
                code=result.error_code,
            )
        return result

    def _track_tokens(self, data: dict[str, Any], token: SessionToken | None) -> None:
        if data.get("new_key") == "yes" and token is not None:
            self._pool.rotate_secret(token)
        elif data.get("secret_key"):
            try:
                issued = SessionToken.from_response(data)
            except (KeyError, TypeError, ValueError) as e:
                logger.warning("Malformed session token payload", error_type=type(e).__name__)
                return
            self._pool.admit(issued)
