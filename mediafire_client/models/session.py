"""
Authentication-related domain models.
"""

from dataclasses import dataclass
from typing import Any, Self

# Multiplicative LCG (MINSTD) used by the server to rotate token secrets.
SECRET_MULTIPLIER = 16807
SECRET_MODULUS = 2147483647


@dataclass(eq=False, kw_only=True)
class SessionToken:
    """
    A v2 session token and its shared signing secret.

    Instances are owned by the token pool and compared by identity.

    Attributes:
        token: Opaque session token string.
        secret: Shared secret used to sign requests.
        issued_at: Issue time exactly as returned by the server.
        available: Whether no request currently holds the token.
    """

    token: str
    secret: int
    issued_at: str
    available: bool = True

    @classmethod
    def from_response(cls, data: dict[str, Any]) -> Self:
        """Build a token from a ``session_token`` / ``secret_key`` / ``time`` payload."""
        return cls(
            token=data["session_token"],
            secret=int(data["secret_key"]),
            issued_at=str(data["time"]),
        )

    def next_secret(self) -> int:
        """Secret value after one server-requested rotation."""
        return (self.secret * SECRET_MULTIPLIER) % SECRET_MODULUS

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}(available={self.available})"


@dataclass(frozen=True, kw_only=True, repr=False)
class EmailCredentials:
    """MediaFire account email and password."""

    email: str
    password: str

    @property
    def partial(self) -> str:
        return f"{self.email}{self.password}"

    def to_params(self) -> dict[str, str]:
        return {"email": self.email, "password": self.password}

    def is_complete(self) -> bool:
        return bool(self.email and self.password)

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}(email={self.email!r})"


@dataclass(frozen=True, kw_only=True, repr=False)
class OAuthCredentials:
    """Twitter OAuth token pair."""

    oauth_token: str
    oauth_token_secret: str

    @property
    def partial(self) -> str:
        return f"{self.oauth_token}{self.oauth_token_secret}"

    def to_params(self) -> dict[str, str]:
        return {
            "tw_oauth_token": self.oauth_token,
            "tw_oauth_token_secret": self.oauth_token_secret,
        }

    def is_complete(self) -> bool:
        return bool(self.oauth_token and self.oauth_token_secret)

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}()"


@dataclass(frozen=True, kw_only=True, repr=False)
class AccessTokenCredentials:
    """Facebook access token."""

    access_token: str

    @property
    def partial(self) -> str:
        return self.access_token

    def to_params(self) -> dict[str, str]:
        return {"fb_access_token": self.access_token}

    def is_complete(self) -> bool:
        return bool(self.access_token)

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}()"


Credentials = EmailCredentials | OAuthCredentials | AccessTokenCredentials
