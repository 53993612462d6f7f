"""
Signature computation for MediaFire authentication.

This module provides:
- Login signatures (SHA-1 over credentials and application secret)
- Per-request v2 session token signatures (MD5 over the canonical URL)
"""

from mediafire_client.crypto.digest import Digest, md5_hex, sha1_hex
from mediafire_client.crypto.signature import (
    authenticate_params,
    canonical_url,
    login_signature,
    request_signature,
)

__all__ = [
    "Digest",
    "md5_hex",
    "sha1_hex",
    "authenticate_params",
    "canonical_url",
    "login_signature",
    "request_signature",
]
