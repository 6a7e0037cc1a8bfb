"""Credential parsing and client_id resolution."""

from restplay.auth.client_id import BODY_METHODS, get_client_id, wants_form_body
from restplay.auth.http import (
    BEARER_PREFIX,
    get_client_id_from_bearer_token,
    parse_basic_auth,
)

__all__ = [
    "BEARER_PREFIX",
    "BODY_METHODS",
    "get_client_id",
    "get_client_id_from_bearer_token",
    "parse_basic_auth",
    "wants_form_body",
]
