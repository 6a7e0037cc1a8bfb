"""Caller identity (client_id) extraction for HTTP requests.

The client_id is looked up in Basic auth, a Bearer token, a url-encoded
request body, and the query string, in that order.
"""

from restplay.asgi import client_id_from_starlette, require_client_id
from restplay.auth import get_client_id, get_client_id_from_bearer_token, parse_basic_auth
from restplay.config import Settings
from restplay.errors import (
    FormParseError,
    InvalidBearerTokenError,
    MissingClientIDError,
    NilRequestError,
    RequestBodyReadError,
    RestplayError,
)
from restplay.middleware import ClientIDMiddleware
from restplay.request import Request

__version__ = "0.1.0"
__all__ = [
    "ClientIDMiddleware",
    "FormParseError",
    "InvalidBearerTokenError",
    "MissingClientIDError",
    "NilRequestError",
    "Request",
    "RequestBodyReadError",
    "RestplayError",
    "Settings",
    "__version__",
    "client_id_from_starlette",
    "get_client_id",
    "get_client_id_from_bearer_token",
    "parse_basic_auth",
    "require_client_id",
]
