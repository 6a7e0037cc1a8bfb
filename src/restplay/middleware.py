"""Starlette middleware attaching the client_id to request.state."""

from __future__ import annotations

import structlog
from starlette.middleware.base import BaseHTTPMiddleware
from starlette.requests import Request
from starlette.types import ASGIApp

from restplay.asgi import client_id_from_starlette
from restplay.errors import RestplayError

log = structlog.get_logger()


class ClientIDMiddleware(BaseHTTPMiddleware):
    """Resolve the client_id for every request; None when it cannot be found."""

    def __init__(self, app: ASGIApp) -> None:
        super().__init__(app)

    async def dispatch(self, request: Request, call_next):  # type: ignore[override]
        request.state.client_id = None
        try:
            request.state.client_id = await client_id_from_starlette(request)
        except RestplayError as e:
            log.debug("No client_id for request", path=request.url.path, error=e.message)

        response = await call_next(request)
        return response
