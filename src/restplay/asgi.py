"""Starlette/FastAPI adapters for client_id extraction."""

from __future__ import annotations

import io

from fastapi import HTTPException, status
from starlette.datastructures import MutableHeaders
from starlette.requests import ClientDisconnect
from starlette.requests import Request as StarletteRequest

from restplay.auth.client_id import get_client_id, wants_form_body
from restplay.errors import (
    FormParseError,
    InvalidBearerTokenError,
    MissingClientIDError,
    RequestBodyReadError,
)
from restplay.request import Request


async def client_id_from_starlette(request: StarletteRequest) -> str:
    """Extract the client_id from a Starlette request.

    The body is only pulled when a url-encoded form has to be inspected.
    Starlette caches it on the request, so later handlers can still read it.
    """
    body = None
    if wants_form_body(request.method, request.headers.get("content-type")):
        try:
            body = io.BytesIO(await request.body())
        except (ClientDisconnect, OSError) as e:
            raise RequestBodyReadError(str(e) or "client disconnected") from e
    return get_client_id(
        Request(
            method=request.method,
            url=str(request.url),
            headers=MutableHeaders(raw=list(request.headers.raw)),
            body=body,
        )
    )


async def require_client_id(request: StarletteRequest) -> str:
    """FastAPI dependency returning the caller's client_id or failing the request."""
    try:
        return await client_id_from_starlette(request)
    except (MissingClientIDError, InvalidBearerTokenError) as e:
        raise HTTPException(status_code=status.HTTP_401_UNAUTHORIZED, detail=e.message) from e
    except (FormParseError, RequestBodyReadError) as e:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=e.message) from e
