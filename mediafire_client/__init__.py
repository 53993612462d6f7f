"""
MediaFire Python Client.

An async Python client for the MediaFire API with signed session token
pooling and bulk import of already-hosted files.

Example:
    ```python
    from mediafire_client import EmailCredentials, MediaFireClient, MediaFireConfig

    async with MediaFireClient(MediaFireConfig(app_id=42511, app_key="key")) as client:
        await client.login(EmailCredentials(email="me@example.com", password="pw"))

        report = await client.run_import(open("hashes.txt").read().splitlines())
        for outcome in report.outcomes:
            print(outcome)
    ```
"""

from mediafire_client.client import MediaFireClient
from mediafire_client.config import MediaFireConfig
from mediafire_client.exceptions import (
    APIError,
    AuthenticationError,
    HashNotFoundError,
    InvalidCredentialsError,
    InvalidResponseError,
    MediaFireError,
    NetworkError,
    ServerError,
    SessionExpiredError,
)
from mediafire_client.models.api import ApiResponse
from mediafire_client.models.imports import (
    AlreadyOwned,
    Failed,
    Fatal,
    ImportOutcome,
    ImportReport,
    NotFound,
    OutcomeKind,
    Success,
)
from mediafire_client.models.session import (
    AccessTokenCredentials,
    EmailCredentials,
    OAuthCredentials,
)

__version__ = "0.1.0"

__all__ = [
    # Main client
    "MediaFireClient",
    "MediaFireConfig",
    "ApiResponse",
    # Credentials
    "EmailCredentials",
    "OAuthCredentials",
    "AccessTokenCredentials",
    # Import outcomes
    "ImportReport",
    "ImportOutcome",
    "OutcomeKind",
    "Success",
    "AlreadyOwned",
    "NotFound",
    "Failed",
    "Fatal",
    # Exceptions
    "MediaFireError",
    "AuthenticationError",
    "InvalidCredentialsError",
    "SessionExpiredError",
    "APIError",
    "HashNotFoundError",
    "ServerError",
    "InvalidResponseError",
    "NetworkError",
]
