"""
MediaFire client facade.

This is the main entry point for users of the library. It owns the HTTP
dispatcher, the session token pool and the request queue, and exposes
login, generic API calls and bulk import.
"""

import asyncio
from collections.abc import AsyncGenerator, Iterable
from typing import Any, Self

import httpx
import structlog

from mediafire_client.api.endpoints.user import get_action_token
from mediafire_client.api.http_client import AsyncHttpClient
from mediafire_client.config import MediaFireConfig
from mediafire_client.exceptions import AuthenticationError
from mediafire_client.models.api import ApiResponse
from mediafire_client.models.imports import ImportOutcome, ImportReport
from mediafire_client.models.session import Credentials
from mediafire_client.services.auth_service import AuthService
from mediafire_client.services.import_service import ImportService

logger = structlog.get_logger(__name__)


class MediaFireClient:
    """
    Async client for MediaFire.

    Example:
        ```python
        config = MediaFireConfig(app_id=42511, app_key="secret")

        async with MediaFireClient(config) as client:
            await client.login(EmailCredentials(email="me@example.com", password="pw"))

            report = await client.run_import(
                [
                    "photo.png;1024;" + "a" * 64,
                    "https://www.mediafire.com/file/abc123/archive.zip",
                ],
                make_private=True,
            )
            for outcome in report.outcomes:
                print(outcome)
        ```

    Args:
        config: Client configuration.
        transport: Optional httpx transport for testing (mock transport).
    """

    def __init__(
        self,
        config: MediaFireConfig,
        *,
        transport: httpx.AsyncBaseTransport | None = None,
    ) -> None:
        """
        Initialize the MediaFire client.

        Args:
            config: Client configuration.
            transport: Optional httpx transport for testing.
        """
        self._config = config
        self._transport = transport

        self._http: AsyncHttpClient | None = None
        self._auth_service: AuthService | None = None
        self._import_service: ImportService | None = None

        self._action_token: str | None = None
        self._action_token_lock = asyncio.Lock()

        self._initialized = False
        self._init_lock = asyncio.Lock()

    async def __aenter__(self) -> Self:
        """Enter async context."""
        await self._ensure_initialized()
        return self

    async def __aexit__(
        self, exc_type: type | None, exc_val: BaseException | None, exc_tb: object
    ) -> None:
        """Exit async context."""
        await self.close()

    async def _ensure_initialized(self) -> None:
        """Ensure all components are initialized."""
        async with self._init_lock:
            if self._initialized:
                return

            self._http = AsyncHttpClient(self._config, transport=self._transport)
            await self._http.__aenter__()

            self._auth_service = AuthService(self._http, self._config)
            self._import_service = ImportService(self._http, self._config)

            self._initialized = True
            logger.debug("Client initialized", token_version=self._config.token_version)

    async def close(self) -> None:
        """Close the client and release resources."""
        async with self._init_lock:
            if self._auth_service:
                self._auth_service.cleanup()
                self._auth_service = None

            if self._http:
                await self._http.__aexit__(None, None, None)
                self._http = None

            self._import_service = None
            self._action_token = None
            self._initialized = False
            logger.debug("Client closed")

    @property
    def config(self) -> MediaFireConfig:
        return self._config

    @property
    def is_authenticated(self) -> bool:
        """Check if logged in."""
        return self._auth_service is not None and self._auth_service.is_authenticated

    async def login(self, credentials: Credentials) -> str:
        """
        Log in and prepare session tokens.

        Args:
            credentials: EmailCredentials, OAuthCredentials or AccessTokenCredentials.

        Returns:
            The primary session token.

        Raises:
            InvalidCredentialsError: If credentials are incomplete or rejected.
            AuthenticationError: If login fails.
        """
        await self._ensure_initialized()
        if self._auth_service is None:
            msg = "Client not initialized"
            raise RuntimeError(msg)
        self._action_token = None
        return await self._auth_service.login(credentials)

    async def logout(self) -> None:
        """Forget the session."""
        if self._auth_service:
            await self._auth_service.logout()
        self._action_token = None

    async def api(
        self,
        path: str,
        params: dict[str, Any] | None = None,
        *,
        api_version: str | None = None,
    ) -> ApiResponse:
        """
        Call any API path with the current session.

        Args:
            path: API path such as "folder/get_content".
            params: Query parameters.
            api_version: Override of the configured API version.

        Returns:
            ApiResponse; call ``unwrap()`` to raise on errors.
        """
        await self._ensure_initialized()
        if self._http is None:
            msg = "Client not initialized"
            raise RuntimeError(msg)
        return await self._http.call(path, params, api_version=api_version)

    async def get_upload_action_token(self) -> str:
        """
        Get the action token scoping the uploader.

        Fetched once per session; concurrent callers wait on a lock, so only
        the first of them sends a request.

        Raises:
            AuthenticationError: If not logged in.
        """
        self._require_login()
        async with self._action_token_lock:
            if self._action_token is None:
                if self._http is None:
                    msg = "Client not initialized"
                    raise RuntimeError(msg)
                self._action_token = await get_action_token(
                    self._http,
                    token_type="upload",
                    lifespan=self._config.action_token_lifespan,
                )
                logger.debug("Upload action token obtained")
            return self._action_token

    async def run_import(
        self,
        lines: Iterable[str],
        *,
        make_private: bool = False,
        folder_key: str | None = None,
        abort_on_error: bool = True,
    ) -> ImportReport:
        """
        Add files described by ``lines`` to the account.

        Each line is either ``filename;size;sha256`` or a share link.

        Returns:
            ImportReport with one or more outcomes per recognized line.

        Raises:
            AuthenticationError: If not logged in.
        """
        self._require_login()
        if self._import_service is None:
            msg = "Client not initialized"
            raise RuntimeError(msg)
        return await self._import_service.run(
            lines,
            make_private=make_private,
            folder_key=folder_key,
            abort_on_error=abort_on_error,
        )

    async def import_lines(
        self,
        lines: Iterable[str],
        *,
        make_private: bool = False,
        folder_key: str | None = None,
        abort_on_error: bool = True,
    ) -> AsyncGenerator[ImportOutcome, None]:
        """
        Streaming variant of ``run_import``.

        Example:
            ```python
            async for outcome in client.import_lines(text.splitlines()):
                print(outcome)
            ```
        """
        self._require_login()
        if self._import_service is None:
            msg = "Client not initialized"
            raise RuntimeError(msg)
        async for outcome in self._import_service.import_lines(
            lines,
            make_private=make_private,
            folder_key=folder_key,
            abort_on_error=abort_on_error,
        ):
            yield outcome

    def _require_login(self) -> None:
        if not self.is_authenticated:
            msg = "Not authenticated. Call login() first."
            raise AuthenticationError(msg)
