from collections.abc import AsyncIterator, Callable

import pytest
import pytest_asyncio

from mediafire_client.api.http_client import AsyncHttpClient
from mediafire_client.config import MediaFireConfig
from mediafire_client.models.session import SessionToken
from mediafire_client.tests.utils.mock_transport import MockTransport

APP_ID = 42511
APP_KEY = "app-secret-key"
V1_TOKEN = "v1-session-token-0f3a9c"


@pytest.fixture
def config() -> MediaFireConfig:
    return MediaFireConfig(app_id=APP_ID, app_key=APP_KEY)


@pytest.fixture
def v1_config() -> MediaFireConfig:
    return MediaFireConfig(app_id=APP_ID, app_key=APP_KEY, token_version=1)


@pytest.fixture
def mock_transport() -> MockTransport:
    return MockTransport()


@pytest.fixture
def make_token() -> Callable[..., SessionToken]:
    def _make(
        token: str = "v2-token-1",
        secret: int = 1234567,
        issued_at: str = "1363289580.9537",
    ) -> SessionToken:
        return SessionToken(token=token, secret=secret, issued_at=issued_at)

    return _make


@pytest_asyncio.fixture
async def v1_http(
    v1_config: MediaFireConfig, mock_transport: MockTransport
) -> AsyncIterator[AsyncHttpClient]:
    """Logged-in v1 client: requests carry a static session token."""
    async with AsyncHttpClient(v1_config, transport=mock_transport) as client:
        client.set_session_token(V1_TOKEN)
        yield client
