"""client_id resolution from an inbound request."""

from __future__ import annotations

import io
from typing import BinaryIO

import structlog
from starlette.datastructures import QueryParams

from restplay import config as config_module
from restplay.auth.http import (
    extract_bearer_token,
    get_client_id_from_bearer_token,
    parse_basic_auth,
)
from restplay.errors import (
    FormParseError,
    MissingClientIDError,
    NilRequestError,
    RequestBodyReadError,
)
from restplay.forms import (
    FORM_CONTENT_TYPE,
    InvalidFormError,
    merge_forms,
    parse_form,
    parse_media_type,
)
from restplay.request import Request

log = structlog.get_logger()

BODY_METHODS = frozenset({"POST", "PUT", "PATCH"})
_READ_CHUNK = 64 * 1024


def wants_form_body(method: str, content_type: str | None) -> bool:
    """True when the client_id lookup would read a url-encoded body."""
    return method.upper() in BODY_METHODS and parse_media_type(content_type) == FORM_CONTENT_TYPE


def get_client_id(request: Request | None) -> str:
    """Extract the client_id from a request.

    Sources are tried in order, first match wins:

    1. Basic auth with a non-empty username.
    2. ``Authorization: Bearer <client_id>.<opaque>``. A malformed token is an
       error even if the form also carries a client_id.
    3. The url-encoded body of POST/PUT/PATCH requests (merged with the query
       string). Other content types yield an empty form.
    4. The query string for every other method.

    The body, if read, is put back as a fresh stream holding the same bytes,
    whether or not the form parsed.

    Raises:
        NilRequestError: If request is None.
        InvalidBearerTokenError: If a Bearer token is present but malformed.
        RequestBodyReadError: If the body stream fails to read.
        FormParseError: If the body or query string is not a valid form.
        MissingClientIDError: If no source carries a client_id.
    """
    if request is None:
        raise NilRequestError()

    authorization = request.headers.get("authorization")

    credentials = parse_basic_auth(authorization)
    if credentials and credentials[0]:
        log.debug("client_id resolved", source="basic_auth")
        return credentials[0]

    token = extract_bearer_token(authorization)
    if token is not None:
        client_id = get_client_id_from_bearer_token(token)
        log.debug("client_id resolved", source="bearer_token")
        return client_id

    if request.method in BODY_METHODS:
        if wants_form_body(request.method, request.headers.get("content-type")) and (
            request.body is not None
        ):
            if request.form is None:
                request.form = _read_body_form(request)
        elif request.form is None:
            request.form = QueryParams()
    elif request.form is None:
        try:
            request.form = parse_form(request.query_string)
        except InvalidFormError as e:
            raise FormParseError("URL", str(e)) from e

    values = request.form.getlist(config_module.settings.client_id_key)
    if values and values[0]:
        log.debug("client_id resolved", source="form", method=request.method)
        return values[0]

    raise MissingClientIDError()


def _read_all(stream: BinaryIO) -> bytes:
    """Read a stream to EOF; a single read may return fewer bytes than asked for."""
    chunks = []
    try:
        while True:
            chunk = stream.read(_READ_CHUNK)
            if chunk is None:
                raise RequestBodyReadError("body stream has no data ready")
            if not chunk:
                return b"".join(chunks)
            chunks.append(chunk)
    except (OSError, ValueError) as e:
        raise RequestBodyReadError(str(e)) from e


def _read_body_form(request: Request) -> QueryParams:
    """Parse the body as a form and leave an unread copy of it on the request.

    The body and query string are parsed together, so a bad query string is
    reported as a body parse failure.
    """
    assert request.body is not None
    data = _read_all(request.body)
    limit = config_module.settings.max_form_bytes

    try:
        if len(data) > limit:
            raise FormParseError("body", f"form body exceeds {limit} bytes")
        try:
            return merge_forms(parse_form(data), parse_form(request.query_string))
        except InvalidFormError as e:
            raise FormParseError("body", str(e)) from e
    finally:
        request.body = io.BytesIO(data)
