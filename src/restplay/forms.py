"""Parsing for application/x-www-form-urlencoded payloads and Content-Type values."""

from __future__ import annotations

import re

from starlette.datastructures import QueryParams

FORM_CONTENT_TYPE = "application/x-www-form-urlencoded"

# A '%' must introduce exactly two hex digits
_BAD_ESCAPE = re.compile(r"%(?![0-9A-Fa-f]{2})")


class InvalidFormError(ValueError):
    """Form text could not be parsed."""


def parse_media_type(content_type: str | None) -> str:
    """Return the lower-cased media type of a Content-Type header, without parameters."""
    if not content_type:
        return ""
    return content_type.split(";", 1)[0].strip().lower()


def parse_form(data: str | bytes) -> QueryParams:
    """Parse url-encoded form text into a multi-value mapping.

    Blank values are kept. Raises InvalidFormError on undecodable bytes,
    malformed percent escapes, or ``;`` separators.
    """
    if isinstance(data, bytes):
        try:
            data = data.decode("utf-8")
        except UnicodeDecodeError as e:
            raise InvalidFormError("form data is not valid UTF-8") from e
    if ";" in data:
        raise InvalidFormError("invalid semicolon separator in form data")
    match = _BAD_ESCAPE.search(data)
    if match:
        raise InvalidFormError(f"invalid URL escape {data[match.start() : match.start() + 3]!r}")
    return QueryParams(data)


def merge_forms(primary: QueryParams, secondary: QueryParams) -> QueryParams:
    """Combine two forms, keeping every value of ``primary`` ahead of ``secondary``."""
    return QueryParams(primary.multi_items() + secondary.multi_items())
