import os

import pytest

from mediafire_client.config import MediaFireConfig

REQUIRED_ENV = ("MEDIAFIRE_TEST_EMAIL", "MEDIAFIRE_TEST_PASSWORD", "MEDIAFIRE_APP_ID")


def pytest_collection_modifyitems(config: pytest.Config, items: list) -> None:
    missing = not all(os.getenv(name) for name in REQUIRED_ENV)
    if not missing:
        return
    mark_expr = getattr(config.option, "markexpr", "")
    if "integration" in mark_expr:
        return
    skip = pytest.mark.skip(reason=f"{' / '.join(REQUIRED_ENV)} not set")
    for item in items:
        if item.get_closest_marker("integration"):
            item.add_marker(skip)


@pytest.fixture(scope="session")
def mediafire_credentials() -> tuple[str, str]:
    email = os.getenv("MEDIAFIRE_TEST_EMAIL")
    password = os.getenv("MEDIAFIRE_TEST_PASSWORD")
    if not email or not password:
        pytest.fail(
            "MEDIAFIRE_TEST_EMAIL and MEDIAFIRE_TEST_PASSWORD must be set to run integration tests."
        )
    return email, password


@pytest.fixture(scope="session")
def live_config() -> MediaFireConfig:
    app_id = os.getenv("MEDIAFIRE_APP_ID")
    if not app_id:
        pytest.fail("MEDIAFIRE_APP_ID must be set to run integration tests.")
    return MediaFireConfig(app_id=app_id, app_key=os.getenv("MEDIAFIRE_APP_KEY", ""))
