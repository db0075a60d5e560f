"""HTML page rendering."""

from __future__ import annotations

from pathlib import Path
from typing import Any, Mapping

from jinja2 import Environment, FileSystemLoader, select_autoescape

from .geo import format_asn, format_location

SERVICE_NAME = "IP Tools"

TEMPLATES_DIR = Path(__file__).resolve().parent / "templates"

_env = Environment(
    loader=FileSystemLoader(str(TEMPLATES_DIR)),
    autoescape=select_autoescape(["html"]),
    keep_trailing_newline=True,
)


def _details(geo: Mapping[str, Any]) -> list[tuple[str, str]]:
    details = []
    location = format_location(geo)
    if location:
        details.append(("Location", location))
    if geo.get("timezone"):
        details.append(("Timezone", str(geo["timezone"])))
    if geo.get("asOrganization"):
        details.append(("ISP", str(geo["asOrganization"])))
    if geo.get("asn"):
        details.append(("ASN", format_asn(geo["asn"])))
    return details


def render_page(
    ip: str,
    geo: Mapping[str, Any],
    *,
    origin: str,
    analytics_id: str | None = None,
) -> str:
    """Render the landing page for ``ip``.

    Values are escaped for their context: HTML entities in markup, JSON
    string literals inside inline script and event handlers.
    """
    commands = [
        ("Command line", f"curl {origin}"),
        ("JSON API", f"curl {origin}/api/ip"),
    ]
    template = _env.get_template("index.html")
    return template.render(
        service_name=SERVICE_NAME,
        ip=ip,
        details=_details(geo),
        commands=commands,
        analytics_id=analytics_id or None,
    )
