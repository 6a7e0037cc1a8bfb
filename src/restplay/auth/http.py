"""HTTP auth helpers."""

from __future__ import annotations

import base64
import binascii

from restplay.errors import InvalidBearerTokenError

BEARER_PREFIX = "Bearer "
_BASIC_PREFIX = "basic "


def parse_basic_auth(authorization: str | None) -> tuple[str, str] | None:
    """Decode an ``Authorization: Basic`` header into (username, password).

    Returns None when the header is absent, uses another scheme, or is not
    valid UTF-8 base64 of ``username:password``.
    """
    if not authorization:
        return None
    if authorization[: len(_BASIC_PREFIX)].lower() != _BASIC_PREFIX:
        return None
    try:
        decoded = base64.b64decode(authorization[len(_BASIC_PREFIX) :], validate=True)
        credentials = decoded.decode("utf-8")
    except (binascii.Error, ValueError):
        # also covers UnicodeDecodeError
        return None
    username, sep, password = credentials.partition(":")
    if not sep:
        return None
    return username, password


def extract_bearer_token(authorization: str | None) -> str | None:
    """Return the raw token after ``Bearer `` or None for any other header."""
    if not authorization or not authorization.startswith(BEARER_PREFIX):
        return None
    return authorization[len(BEARER_PREFIX) :]


def get_client_id_from_bearer_token(token: str) -> str:
    """Parse a ``<client_id>.<opaque>`` token and return its identity part.

    Raises:
        InvalidBearerTokenError: If the token does not split into exactly two
            dot-separated fields or the first field is empty.
    """
    fields = token.split(".")
    if len(fields) != 2:
        raise InvalidBearerTokenError()
    client_id = fields[0]
    if not client_id:
        raise InvalidBearerTokenError()
    return client_id
