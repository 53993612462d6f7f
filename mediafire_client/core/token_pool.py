"""Pool of v2 session tokens, each lent to one request at a time."""

import structlog

from mediafire_client.models.session import SessionToken

logger = structlog.get_logger(__name__)

DEFAULT_POOL_SIZE = 3
MAX_POOL_SIZE = 6


def clamp_capacity(requested: int | None) -> int:
    """Clamp a requested pool size to ``[1, MAX_POOL_SIZE]``."""
    if requested is None:
        return DEFAULT_POOL_SIZE
    return max(1, min(MAX_POOL_SIZE, requested))


class SessionTokenPool:
    """
    Bounded, insertion-ordered collection of signed session tokens.

    Single event loop only: ``checkout`` never awaits, so two coroutines
    cannot be handed the same token.

    Example:
        ```python
        pool = SessionTokenPool(capacity=1)
        pool.admit(SessionToken(token="t", secret=7, issued_at="1.5"))

        token = pool.checkout()
        assert pool.checkout() is None

        pool.release(token)
        assert pool.checkout() is token
        ```
    """

    def __init__(self, capacity: int = DEFAULT_POOL_SIZE) -> None:
        """
        Args:
            capacity: Requested pool size, clamped to 1-6.
        """
        self._capacity = clamp_capacity(capacity)
        self._tokens: list[SessionToken] = []
        self._has_received = False

    @property
    def capacity(self) -> int:
        return self._capacity

    @property
    def has_received(self) -> bool:
        """Whether a token was admitted since the last reset."""
        return self._has_received

    @property
    def needs_replenish(self) -> bool:
        return len(self._tokens) == 0

    @property
    def available_count(self) -> int:
        return sum(1 for token in self._tokens if token.available)

    def __len__(self) -> int:
        return len(self._tokens)

    def checkout(self) -> SessionToken | None:
        """
        Lend out the first available token.

        Returns:
            The token, now marked unavailable, or None if every token is
            checked out or the pool is empty.
        """
        for token in self._tokens:
            if token.available:
                token.available = False
                return token
        return None

    def release(self, token: SessionToken) -> None:
        """Return a token after an ordinary response."""
        token.available = True

    def rotate_secret(self, token: SessionToken) -> None:
        """Return a token after the server asked for a new secret."""
        token.secret = token.next_secret()
        token.available = True
        logger.debug("Session token secret rotated")

    def admit(self, token: SessionToken) -> bool:
        """
        Add a freshly issued token.

        Args:
            token: Token built from an upgrade response.

        Returns:
            True if the token joined the pool, False if the pool was full.
        """
        self._has_received = True
        if len(self._tokens) >= self._capacity:
            logger.debug("Token pool full, dropping issued token", capacity=self._capacity)
            return False
        self._tokens.append(token)
        logger.debug("Session token admitted", size=len(self._tokens), capacity=self._capacity)
        return True

    def reset(self) -> None:
        """Forget every token, as after a new login."""
        self._tokens.clear()
        self._has_received = False
