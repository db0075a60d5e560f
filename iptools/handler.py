"""Request handling: classification, redirect policy, dispatch and rendering."""

from __future__ import annotations

import json
from datetime import datetime, timezone
from typing import Any, Mapping

from .client import is_command_line_client, is_loopback_host, resolve_client_ip
from .config import Settings
from .geo import extract_geo
from .logging_config import get_logger
from .models import IncomingRequest, RenderedResponse
from .page import render_page

logger = get_logger(__name__)

API_PATHS = frozenset({"/api/ip", "/ip"})

JSON_TYPE = "application/json"
TEXT_TYPE = "text/plain"
HTML_TYPE = "text/html; charset=utf-8"


def _no_cache(extra: Mapping[str, str] | None = None) -> dict[str, str]:
    return {"Cache-Control": "no-cache", **(extra or {})}


def https_redirect_target(request: IncomingRequest, command_line: bool) -> str | None:
    """URL to redirect a plain-HTTP browser request to, or ``None``."""
    url = request.url
    if url.scheme != "http" or command_line or is_loopback_host(url.hostname):
        return None
    return "https" + str(url)[len("http"):]


def format_timestamp(now: datetime) -> str:
    """UTC ISO-8601 with millisecond precision and a ``Z`` suffix."""
    if now.tzinfo is None:
        now = now.replace(tzinfo=timezone.utc)
    now = now.astimezone(timezone.utc)
    return now.isoformat(timespec="milliseconds").replace("+00:00", "Z")


def build_ip_document(
    ip: str, user_agent: str, geo: Mapping[str, Any], now: datetime
) -> str:
    document = {
        "ip": ip,
        "timestamp": format_timestamp(now),
        "userAgent": user_agent,
        **geo,
    }
    return json.dumps(document, indent=2, ensure_ascii=False) + "\n"


def page_origin(request: IncomingRequest, config: Settings) -> str:
    if config.public_origin:
        return config.public_origin
    return f"{request.url.scheme}://{request.url.netloc}"


def handle(
    request: IncomingRequest,
    config: Settings,
    now: datetime | None = None,
) -> RenderedResponse:
    """Answer ``request`` with the caller's IP as JSON, plain text or HTML."""
    headers = request.headers
    command_line = is_command_line_client(headers)

    target = https_redirect_target(request, command_line)
    if target is not None:
        logger.info("https_redirect", location=target)
        return RenderedResponse(status_code=301, headers={"Location": target})

    ip = resolve_client_ip(headers)
    path = request.url.path

    if path in API_PATHS:
        logger.debug("serve_api", path=path)
        body = build_ip_document(
            ip,
            headers.get("user-agent") or "",
            extract_geo(request.geo_context),
            now or datetime.now(timezone.utc),
        )
        return RenderedResponse(
            status_code=200,
            content_type=JSON_TYPE,
            body=body,
            headers=_no_cache({"Access-Control-Allow-Origin": "*"}),
        )

    if command_line:
        logger.debug("serve_text", path=path)
        return RenderedResponse(
            status_code=200,
            content_type=TEXT_TYPE,
            body=ip + "\n",
            headers=_no_cache(),
        )

    logger.debug("serve_page", path=path)
    body = render_page(
        ip,
        extract_geo(request.geo_context),
        origin=page_origin(request, config),
        analytics_id=config.analytics_id,
    )
    return RenderedResponse(
        status_code=200,
        content_type=HTML_TYPE,
        body=body,
        headers=_no_cache(),
    )
