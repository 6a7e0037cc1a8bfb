"""Framework-neutral request model consumed by the client_id extractor."""

from __future__ import annotations

import base64
import io
from collections.abc import Mapping
from dataclasses import dataclass, field
from typing import BinaryIO

from starlette.datastructures import URL, MutableHeaders, QueryParams


@dataclass
class Request:
    """An inbound HTTP request as seen by the extractor.

    ``body`` is a readable stream that may only be consumable once. ``form``
    caches parsed form values; when it is already set, the extractor uses it
    as-is and never touches the body.
    """

    method: str = "GET"
    url: str = "/"
    headers: MutableHeaders = field(default_factory=MutableHeaders)
    body: BinaryIO | None = None
    form: QueryParams | None = None

    def __post_init__(self) -> None:
        self.method = self.method.upper()
        if not isinstance(self.headers, MutableHeaders):
            self.headers = MutableHeaders(headers=dict(self.headers))

    @classmethod
    def build(
        cls,
        method: str = "GET",
        url: str = "/",
        *,
        headers: Mapping[str, str] | None = None,
        content: bytes | str | None = None,
    ) -> Request:
        """Build a request with an in-memory body."""
        if isinstance(content, str):
            content = content.encode("utf-8")
        body = io.BytesIO(content) if content is not None else None
        return cls(method=method, url=url, headers=MutableHeaders(headers=headers), body=body)

    @property
    def query_string(self) -> str:
        return URL(self.url).query

    def set_basic_auth(self, username: str, password: str) -> None:
        """Set the Authorization header to Basic credentials."""
        raw = f"{username}:{password}".encode()
        self.headers["Authorization"] = "Basic " + base64.b64encode(raw).decode("ascii")
