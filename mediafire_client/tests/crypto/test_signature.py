import hashlib

import pytest

from mediafire_client.crypto.digest import md5_hex, sha1_hex
from mediafire_client.crypto.signature import (
    authenticate_params,
    canonical_url,
    encode_component,
    login_signature,
    request_signature,
)
from mediafire_client.models.session import SessionToken

API_URL = "https://www.mediafire.com/api/1.3/file/get_info.php"


def test_digests_match_known_vectors() -> None:
    assert sha1_hex(b"abc") == "a9993e364706816aba3e25717850c26c9cd0d89d"
    assert md5_hex(b"abc") == "900150983cd24fb0d6963f7d28e17f72"


def test_login_signature_hashes_partial_app_id_and_key() -> None:
    signature = login_signature("me@example.compassword", 42511, "key")

    expected = hashlib.sha1(b"me@example.compassword42511key").hexdigest()
    assert signature == expected
    assert len(signature) == 40


def test_login_signature_is_deterministic() -> None:
    assert login_signature("partial", 1, "key") == login_signature("partial", 1, "key")


@pytest.mark.parametrize(
    "args",
    [
        ("partiaL", 1, "key"),
        ("partial", 2, "key"),
        ("partial", 1, "kez"),
    ],
)
def test_login_signature_changes_with_any_input(args: tuple) -> None:
    assert login_signature(*args) != login_signature("partial", 1, "key")


def test_request_signature_uses_secret_modulo_256() -> None:
    url = "/api/1.3/file/get_info.php?quick_key=abc"

    signature = request_signature(256 + 7, "1363289580.9537", url)

    expected = hashlib.md5(f"71363289580.9537{url}".encode()).hexdigest()
    assert signature == expected
    assert request_signature(7, "1363289580.9537", url) == signature


def test_encode_component_matches_uri_component_rules() -> None:
    assert encode_component("a b/c") == "a%20b%2Fc"
    assert encode_component("it's(ok)!*~") == "it's(ok)!*~"
    assert encode_component("é") == "%C3%A9"
    assert encode_component(True) == "true"


def test_canonical_url_sorts_parameters() -> None:
    url = canonical_url("/api/x.php", {"b": "2", "a": "1", "c": "3"})

    assert url == "/api/x.php?a=1&b=2&c=3"


def test_canonical_url_is_independent_of_insertion_order() -> None:
    first = canonical_url(API_URL, {"quick_key": "abc", "response_format": "json", "x": 1})
    second = canonical_url(API_URL, {"x": 1, "response_format": "json", "quick_key": "abc"})

    assert first == second


def test_canonical_url_force_relative_strips_host() -> None:
    url = canonical_url(API_URL, {"a": "1"}, force_relative=True)

    assert url == "/api/1.3/file/get_info.php?a=1"


def test_canonical_url_keeps_host_without_force_relative() -> None:
    assert canonical_url(API_URL, {"a": "1"}).startswith("https://www.mediafire.com/")


def test_canonical_url_skips_none_and_encodes_objects() -> None:
    url = canonical_url("/x.php", {"skip": None, "obj": {"k": 1}})

    assert url == "/x.php?obj=%7B%22k%22%3A1%7D"


def test_canonical_url_appends_to_existing_query() -> None:
    assert canonical_url("/x.php?v=1", {"a": "b"}) == "/x.php?v=1&a=b"


def test_canonical_url_without_params_returns_url() -> None:
    assert canonical_url(API_URL, None, force_relative=True) == "/api/1.3/file/get_info.php"


def test_authenticate_params_signs_relative_url_including_token() -> None:
    token = SessionToken(token="tok", secret=1000, issued_at="1363289580.9537")
    params = {"quick_key": "abc", "response_format": "json"}

    signed = authenticate_params(token, API_URL, params)

    signed_url = (
        "/api/1.3/file/get_info.php?quick_key=abc&response_format=json&session_token=tok"
    )
    expected = hashlib.md5(f"{1000 % 256}1363289580.9537{signed_url}".encode()).hexdigest()
    assert signed["session_token"] == "tok"
    assert signed["signature"] == expected
    assert list(signed) == ["quick_key", "response_format", "session_token", "signature"]


def test_authenticate_params_does_not_mutate_input() -> None:
    token = SessionToken(token="tok", secret=1, issued_at="1")
    params = {"a": "1"}

    authenticate_params(token, API_URL, params)

    assert params == {"a": "1"}


def test_authenticate_params_is_order_independent() -> None:
    token = SessionToken(token="tok", secret=99, issued_at="12.5")

    first = authenticate_params(token, API_URL, {"a": "1", "b": "2"})
    second = authenticate_params(token, API_URL, {"b": "2", "a": "1"})

    assert first["signature"] == second["signature"]
