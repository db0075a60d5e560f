"""Projection of host-supplied geolocation metadata."""

from __future__ import annotations

from typing import Any, Mapping

GEO_FIELDS = ("country", "region", "city", "timezone", "asn", "asOrganization")

# Cloudflare visitor location headers, used when the host passes no metadata.
GEO_HEADERS = {
    "country": "cf-ipcountry",
    "region": "cf-region",
    "city": "cf-ipcity",
    "timezone": "cf-timezone",
}

UNKNOWN_COUNTRY = "XX"


def extract_geo(metadata: Mapping[str, Any] | None) -> dict[str, Any]:
    """Return the known geolocation fields present in ``metadata``."""
    if not metadata:
        return {}
    return {
        name: metadata[name]
        for name in GEO_FIELDS
        if metadata.get(name) is not None
    }


def geo_from_headers(headers: Mapping[str, str]) -> dict[str, str] | None:
    """Build a metadata record from Cloudflare location headers, if any."""
    record = {}
    for name, header in GEO_HEADERS.items():
        value = (headers.get(header) or "").strip()
        if value:
            record[name] = value
    if record.get("country") == UNKNOWN_COUNTRY:
        del record["country"]
    return record or None


def format_location(geo: Mapping[str, Any]) -> str:
    """``city, region, country`` with missing parts left out."""
    parts = (geo.get("city"), geo.get("region"), geo.get("country"))
    return ", ".join(str(part) for part in parts if part)


def format_asn(asn: Any) -> str:
    value = str(asn).strip()
    if value.upper().startswith("AS"):
        return value
    return f"AS{value}"
