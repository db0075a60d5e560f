"""Caller identification: address resolution and client classification."""

from __future__ import annotations

from typing import Mapping

DEFAULT_IP = "127.0.0.1"

# Checked in order; the first non-empty value wins.
IP_HEADERS = ("cf-connecting-ip", "x-forwarded-for", "x-real-ip")

COMMAND_LINE_AGENTS = ("curl", "wget", "HTTPie")

LOOPBACK_HOSTS = frozenset({"localhost", "127.0.0.1"})


def resolve_client_ip(headers: Mapping[str, str]) -> str:
    """Return the caller's address as reported by the fronting proxy.

    ``X-Forwarded-For`` may carry a chain ``client, proxy1, proxy2``; only the
    first hop is used. Values are taken as-is otherwise, the proxy is trusted
    to have stripped forged headers.
    """
    for name in IP_HEADERS:
        value = (headers.get(name) or "").strip()
        if name == "x-forwarded-for":
            value = value.split(",")[0].strip()
        if value:
            return value
    return DEFAULT_IP


def is_command_line_client(headers: Mapping[str, str]) -> bool:
    """Heuristic: ``curl``/``wget``/``HTTPie`` user agents or a plain-text Accept."""
    user_agent = headers.get("user-agent") or ""
    if any(agent in user_agent for agent in COMMAND_LINE_AGENTS):
        return True
    return "text/plain" in (headers.get("accept") or "")


def is_loopback_host(hostname: str | None) -> bool:
    return (hostname or "").lower() in LOOPBACK_HOSTS
