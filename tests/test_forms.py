import pytest

from restplay.forms import InvalidFormError, merge_forms, parse_form, parse_media_type


class TestParseMediaType:
    """Tests for Content-Type media type extraction."""

    def test_plain(self) -> None:
        assert parse_media_type("application/x-www-form-urlencoded") == (
            "application/x-www-form-urlencoded"
        )

    def test_parameters_and_case_ignored(self) -> None:
        assert parse_media_type("Application/X-WWW-Form-Urlencoded; charset=utf-8") == (
            "application/x-www-form-urlencoded"
        )

    def test_missing(self) -> None:
        assert parse_media_type(None) == ""
        assert parse_media_type("") == ""


class TestParseForm:
    """Tests for url-encoded form parsing."""

    def test_decodes_values(self) -> None:
        form = parse_form(b"client_id=robbie+client%21&empty=")
        assert form["client_id"] == "robbie client!"
        assert form["empty"] == ""

    def test_keeps_repeated_keys_in_order(self) -> None:
        form = parse_form("client_id=first&client_id=second")
        assert form.getlist("client_id") == ["first", "second"]

    @pytest.mark.parametrize("data", ["client_id=%zz", "client_id=abc%", "a=1;b=2"])
    def test_rejects_malformed(self, data: str) -> None:
        with pytest.raises(InvalidFormError):
            parse_form(data)

    def test_rejects_invalid_utf8(self) -> None:
        with pytest.raises(InvalidFormError):
            parse_form(b"client_id=\xff\xfe")

    def test_merge_keeps_primary_first(self) -> None:
        merged = merge_forms(parse_form("client_id=body"), parse_form("client_id=url&x=1"))
        assert merged.getlist("client_id") == ["body", "url"]
        assert merged["x"] == "1"
