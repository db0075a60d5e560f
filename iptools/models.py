"""Request and response values passed through the handler."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Mapping

from starlette.datastructures import URL, Headers


@dataclass
class IncomingRequest:
    url: URL
    method: str = "GET"
    headers: Headers = field(default_factory=Headers)
    geo_context: Mapping[str, Any] | None = None

    def __post_init__(self) -> None:
        if not isinstance(self.url, URL):
            self.url = URL(str(self.url))
        if not isinstance(self.headers, Headers):
            self.headers = Headers(dict(self.headers or {}))


@dataclass
class RenderedResponse:
    status_code: int
    content_type: str | None = None
    body: str = ""
    headers: dict[str, str] = field(default_factory=dict)

    def all_headers(self) -> dict[str, str]:
        """Return the extra headers plus ``Content-Type`` when one is set."""
        headers = dict(self.headers)
        if self.content_type:
            headers["Content-Type"] = self.content_type
        return headers
