import base64

from restplay.auth.http import parse_basic_auth


def _basic(raw: str) -> str:
    return "Basic " + base64.b64encode(raw.encode()).decode()


def test_basic_auth_roundtrip() -> None:
    assert parse_basic_auth(_basic("robbie:password")) == ("robbie", "password")


def test_basic_auth_password_may_contain_colon() -> None:
    assert parse_basic_auth(_basic("robbie:pa:ss")) == ("robbie", "pa:ss")


def test_basic_auth_scheme_case_insensitive() -> None:
    header = "bAsIc " + base64.b64encode(b"robbie:pw").decode()
    assert parse_basic_auth(header) == ("robbie", "pw")


def test_basic_auth_empty_username() -> None:
    assert parse_basic_auth(_basic(":password")) == ("", "password")


def test_basic_auth_rejects_garbage() -> None:
    assert parse_basic_auth(None) is None
    assert parse_basic_auth("") is None
    assert parse_basic_auth("Bearer abc.def") is None
    assert parse_basic_auth("Basic !!!notbase64") is None
    assert parse_basic_auth(_basic("no-colon-here")) is None


def test_basic_auth_rejects_non_utf8_credentials() -> None:
    header = "Basic " + base64.b64encode(b"robbie\xff:password").decode()
    assert parse_basic_auth(header) is None
