"""
Authentication service for MediaFire.

Handles login signatures, v2 token pool replenishment and v1 token renewal.
"""

import asyncio

import structlog

from mediafire_client.api.endpoints.user import (
    get_session_token,
    renew_session_token,
    upgrade_session_token,
)
from mediafire_client.api.http_client import AsyncHttpClient
from mediafire_client.config import MediaFireConfig
from mediafire_client.crypto.signature import login_signature
from mediafire_client.exceptions import (
    APIError,
    AuthenticationError,
    InvalidCredentialsError,
    MediaFireError,
)
from mediafire_client.models.session import Credentials

logger = structlog.get_logger(__name__)


class AuthService:
    """
    Handles MediaFire authentication.

    Tokens live exclusively in AsyncHttpClient (the v1 token) and its
    SessionTokenPool (v2 tokens); this service only drives their lifecycle.
    Credentials are used to compute the login signature and then dropped.

    Concurrency:
    - login() and logout() are serialized by an internal lock
    - In v1 mode a background task renews the session token every
      ``config.renew_interval`` seconds until logout or cleanup
    """

    def __init__(self, http_client: AsyncHttpClient, config: MediaFireConfig) -> None:
        """
        Args:
            http_client: HTTP client for API requests.
            config: Client configuration (application id and key, token scheme).
        """
        self._http = http_client
        self._config = config

        self._lock = asyncio.Lock()
        self._renew_task: asyncio.Task[None] | None = None

    @property
    def is_authenticated(self) -> bool:
        """Check if a session token is held."""
        return self._http.is_authenticated

    async def login(self, credentials: Credentials) -> str:
        """
        Open a session.

        In v2 mode the token pool is filled right after the primary token is
        obtained; in v1 mode periodic renewal starts.

        Args:
            credentials: Email/password, OAuth pair or access token.

        Returns:
            The v1 session token.

        Raises:
            InvalidCredentialsError: If credentials are incomplete or rejected.
            AuthenticationError: If login fails for another reason.
        """
        logger.info("Starting login", credentials=credentials)

        if not credentials.is_complete():
            msg = "Incomplete credentials"
            raise InvalidCredentialsError(msg)

        async with self._lock:
            self._stop_renewal()
            self._http.clear_session()

            signature = login_signature(
                credentials.partial, self._config.app_id, self._config.app_key
            )
            try:
                token = await get_session_token(
                    self._http,
                    credentials.to_params(),
                    application_id=self._config.app_id,
                    signature=signature,
                )
            except APIError as e:
                logger.error("Login rejected", code=e.code)
                msg = f"Login rejected: {e.message}"
                raise InvalidCredentialsError(msg) from e
            except MediaFireError as e:
                logger.error("Login failed", error_type=type(e).__name__)
                msg = "Login failed"
                raise AuthenticationError(msg) from e

            self._http.set_session_token(token)
            logger.info("Login successful", token_version=self._config.token_version)

            if self._config.token_version == 2:
                if self._http.pool.needs_replenish:
                    await self.replenish(self._http.pool.capacity)
            else:
                self._start_renewal()

            return token

    async def replenish(self, count: int) -> int:
        """
        Request ``count`` v2 tokens concurrently.

        Each successful upgrade response is admitted to the pool by the
        dispatcher. Failures are logged, not raised.

        Returns:
            Number of upgrade calls that succeeded.
        """
        logger.debug("Replenishing token pool", count=count)
        results = await asyncio.gather(
            *(upgrade_session_token(self._http) for _ in range(count)),
            return_exceptions=True,
        )

        succeeded = 0
        for result in results:
            if isinstance(result, MediaFireError):
                logger.warning("Session token upgrade failed", error=str(result))
            elif isinstance(result, BaseException):
                raise result
            else:
                succeeded += 1

        logger.debug("Token pool replenished", size=len(self._http.pool), succeeded=succeeded)
        return succeeded

    async def renew(self) -> None:
        """Renew the v1 session token once."""
        token = await renew_session_token(self._http)
        self._http.set_session_token(token)
        logger.debug("Session token renewed")

    async def logout(self) -> None:
        """Forget every token and stop renewal."""
        logger.info("Logging out")
        async with self._lock:
            self._stop_renewal()
            self._http.clear_session()

    def cleanup(self) -> None:
        """
        Stop background renewal.

        Should be called when the service is no longer needed.
        """
        self._stop_renewal()

    def _start_renewal(self) -> None:
        self._renew_task = asyncio.create_task(self._renew_loop())

    def _stop_renewal(self) -> None:
        if self._renew_task is not None:
            self._renew_task.cancel()
            self._renew_task = None

    async def _renew_loop(self) -> None:
        while True:
            await asyncio.sleep(self._config.renew_interval)
            try:
                await self.renew()
            except MediaFireError as e:
                logger.warning("Session token renewal failed", error=str(e))
