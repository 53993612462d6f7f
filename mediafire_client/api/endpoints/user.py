"""Session and account API endpoints."""

from typing import Any

from mediafire_client.api.http_client import AsyncHttpClient
from mediafire_client.exceptions import InvalidResponseError

SESSION_TOKEN_PATH = "user/get_session_token"
UPGRADE_TOKEN_PATH = "user/upgrade_session_token"
RENEW_TOKEN_PATH = "user/renew_session_token"
ACTION_TOKEN_PATH = "user/get_action_token"


async def get_session_token(
    http: AsyncHttpClient,
    credentials: dict[str, Any],
    *,
    application_id: int | str,
    signature: str,
) -> str:
    """
    Exchange credentials for a v1 session token.

    Args:
        http: Configured async HTTP client.
        credentials: Credential parameters (email/password, OAuth or access token).
        application_id: MediaFire application id.
        signature: Login signature of the credentials.

    Returns:
        The session token.
    """
    response = await http.request(
        SESSION_TOKEN_PATH,
        {**credentials, "application_id": application_id, "signature": signature},
        authenticated=False,
    )
    return _require(response, "session_token", SESSION_TOKEN_PATH)


async def upgrade_session_token(http: AsyncHttpClient) -> dict[str, Any]:
    """
    Request a signed v2 session token.

    The dispatcher admits the issued token into the pool on its own; the
    payload (session_token, secret_key, time) is returned for inspection.
    """
    return await http.request(UPGRADE_TOKEN_PATH)


async def renew_session_token(http: AsyncHttpClient) -> str:
    """Extend the v1 session token, returning the (possibly new) token."""
    response = await http.request(RENEW_TOKEN_PATH)
    return _require(response, "session_token", RENEW_TOKEN_PATH)


async def get_action_token(
    http: AsyncHttpClient, *, token_type: str = "upload", lifespan: int = 1440
) -> str:
    """Get an action token scoping the uploader, valid for ``lifespan`` minutes."""
    response = await http.request(
        ACTION_TOKEN_PATH,
        {"type": token_type, "lifespan": lifespan},
    )
    return _require(response, "action_token", ACTION_TOKEN_PATH)


def _require(response: dict[str, Any], key: str, endpoint: str) -> str:
    value = response.get(key)
    if not value:
        msg = f"Response is missing '{key}'"
        raise InvalidResponseError(msg, endpoint=endpoint)
    return str(value)
