"""
Login and per-request signatures.

MediaFire verifies v2 session token requests by recomputing an MD5 over the
token secret, the token issue time and the relative request URL exactly as
it was sent. All functions here are pure.
"""

import json
from typing import Any
from urllib.parse import quote

from mediafire_client.crypto.digest import Digest, md5_hex, sha1_hex
from mediafire_client.models.session import SessionToken

DEFAULT_SERVICE_HOST = "mediafire.com"

# Characters left unescaped by JavaScript's encodeURIComponent.
_URI_COMPONENT_SAFE = "-_.!~*'()"


def encode_component(value: Any) -> str:
    """Percent-encode a key or value the way the server expects."""
    return quote(stringify(value), safe=_URI_COMPONENT_SAFE)


def stringify(value: Any) -> str:
    """Render a parameter value as it appears on the wire."""
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, (dict, list)):
        return json.dumps(value, separators=(",", ":"))
    return str(value)


def encode_query(params: dict[str, Any]) -> str:
    """Encode params in their given order, skipping ``None`` values."""
    return "&".join(
        f"{encode_component(key)}={encode_component(value)}"
        for key, value in params.items()
        if value is not None
    )


def canonical_url(
    url: str,
    params: dict[str, Any] | None,
    *,
    force_relative: bool = False,
    service_host: str = DEFAULT_SERVICE_HOST,
) -> str:
    """
    Build the URL used as signature input.

    Args:
        url: Absolute or relative request URL without query string.
        params: Request parameters; sorted by key before encoding.
        force_relative: Strip everything up to and including the service host.
        service_host: Host name to strip when ``force_relative`` is set.

    Returns:
        URL with the sorted, encoded query appended.
    """
    if force_relative and service_host in url:
        url = url.split(service_host)[-1]

    if not params:
        return url

    query = encode_query({key: params[key] for key in sorted(params)})
    separator = "&" if "?" in url else "?"
    return f"{url}{separator}{query}"


def login_signature(
    partial: str,
    app_id: int | str,
    app_key: str,
    *,
    digest: Digest = sha1_hex,
) -> str:
    """
    Signature sent with ``user/get_session_token``.

    Args:
        partial: Credential-derived string (e.g. email + password).
        app_id: Application id.
        app_key: Application secret key.
        digest: Hash function, SHA-1 by default.

    Returns:
        Hex digest of ``partial + app_id + app_key``.
    """
    return digest(f"{partial}{app_id}{app_key}".encode())


def request_signature(
    secret: int,
    issued_at: str,
    url: str,
    *,
    digest: Digest = md5_hex,
) -> str:
    """
    Signature of one v2 session token request.

    Args:
        secret: Current shared secret of the token.
        issued_at: Token issue time, verbatim from the server.
        url: Canonical relative request URL.
        digest: Hash function, MD5 by default.

    Returns:
        Hex digest of ``(secret % 256) + issued_at + url``.
    """
    return digest(f"{secret % 256}{issued_at}{url}".encode())


def authenticate_params(
    token: SessionToken,
    url: str,
    params: dict[str, Any],
    *,
    service_host: str = DEFAULT_SERVICE_HOST,
) -> dict[str, Any]:
    """
    Return a copy of ``params`` carrying the session token and its signature.

    The token is added before the canonical URL is built since it takes part
    in the signed query. The returned mapping is in signed order with the
    signature last.
    """
    signed = dict(params)
    signed["session_token"] = token.token
    signing_url = canonical_url(url, signed, force_relative=True, service_host=service_host)
    signed = {key: signed[key] for key in sorted(signed)}
    signed["signature"] = request_signature(token.secret, token.issued_at, signing_url)
    return signed
