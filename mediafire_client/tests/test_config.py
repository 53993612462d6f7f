import pytest

from mediafire_client.config import MediaFireConfig


def test_defaults() -> None:
    config = MediaFireConfig(app_id=42511)

    assert config.api_version == "1.3"
    assert config.token_version == 2
    assert config.tokens_stored == 3
    assert config.api_root == "https://www.mediafire.com/api/1.3/"


def test_api_path() -> None:
    config = MediaFireConfig(app_id=42511)

    assert config.api_path("file/get_info") == "https://www.mediafire.com/api/1.3/file/get_info.php"
    assert config.api_path("/user/get_session_token") == (
        "https://www.mediafire.com/api/1.3/user/get_session_token.php"
    )
    assert config.api_path("upload/instant", "1.5") == (
        "https://www.mediafire.com/api/1.5/upload/instant.php"
    )


def test_api_path_without_version() -> None:
    config = MediaFireConfig(app_id=42511, api_version="")

    assert config.api_path("file/get_info") == "https://www.mediafire.com/api/file/get_info.php"


def test_file_link() -> None:
    config = MediaFireConfig(app_id=42511, api_url="https://www.mediafire.com/")

    assert config.file_link("qk1") == "https://www.mediafire.com/file/qk1/"


@pytest.mark.parametrize(
    "overrides",
    [
        {"app_id": ""},
        {"token_version": 3},
        {"timeout": 0},
        {"renew_interval": -1},
        {"action_token_lifespan": 0},
    ],
)
def test_invalid_values_are_rejected(overrides: dict) -> None:
    with pytest.raises(ValueError):
        MediaFireConfig(**{"app_id": 42511, **overrides})


def test_config_is_immutable() -> None:
    config = MediaFireConfig(app_id=42511)

    with pytest.raises(AttributeError):
        config.timeout = 5.0  # type: ignore[misc]
