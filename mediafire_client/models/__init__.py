"""
Domain models for the MediaFire client.
"""

from mediafire_client.models.api import ApiResponse, MediaFireAPICode
from mediafire_client.models.imports import (
    AlreadyOwned,
    Failed,
    Fatal,
    FileInfo,
    HashTriple,
    ImportLine,
    ImportOutcome,
    ImportReport,
    NotFound,
    OutcomeKind,
    ShareLink,
    Success,
)
from mediafire_client.models.session import (
    AccessTokenCredentials,
    Credentials,
    EmailCredentials,
    OAuthCredentials,
    SessionToken,
)

__all__ = [
    # API
    "ApiResponse",
    "MediaFireAPICode",
    # Session
    "SessionToken",
    "Credentials",
    "EmailCredentials",
    "OAuthCredentials",
    "AccessTokenCredentials",
    # Imports
    "FileInfo",
    "HashTriple",
    "ShareLink",
    "ImportLine",
    "OutcomeKind",
    "Success",
    "AlreadyOwned",
    "NotFound",
    "Failed",
    "Fatal",
    "ImportOutcome",
    "ImportReport",
]
