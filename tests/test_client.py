"""Tests for client address resolution and classification."""

from starlette.datastructures import Headers

from iptools.client import (
    DEFAULT_IP,
    is_command_line_client,
    is_loopback_host,
    resolve_client_ip,
)


def test_cf_connecting_ip_wins() -> None:
    headers = Headers(
        {
            "CF-Connecting-IP": "1.1.1.1",
            "X-Forwarded-For": "2.2.2.2",
            "X-Real-IP": "3.3.3.3",
        }
    )
    assert resolve_client_ip(headers) == "1.1.1.1"


def test_forwarded_for_before_real_ip() -> None:
    headers = Headers({"X-Forwarded-For": "2.2.2.2", "X-Real-IP": "3.3.3.3"})
    assert resolve_client_ip(headers) == "2.2.2.2"


def test_forwarded_for_uses_first_hop() -> None:
    headers = Headers({"X-Forwarded-For": " 203.0.113.7 , 10.0.0.1, 10.0.0.2"})
    assert resolve_client_ip(headers) == "203.0.113.7"


def test_real_ip_used_last() -> None:
    assert resolve_client_ip(Headers({"X-Real-IP": "3.3.3.3"})) == "3.3.3.3"


def test_empty_headers_are_skipped() -> None:
    headers = Headers(
        {"CF-Connecting-IP": "", "X-Forwarded-For": " , ", "X-Real-IP": "9.9.9.9"}
    )
    assert resolve_client_ip(headers) == "9.9.9.9"


def test_fallback_to_loopback() -> None:
    assert resolve_client_ip(Headers()) == DEFAULT_IP == "127.0.0.1"


def test_ipv6_passes_through() -> None:
    headers = Headers({"CF-Connecting-IP": "2001:db8::1"})
    assert resolve_client_ip(headers) == "2001:db8::1"


def test_command_line_user_agents() -> None:
    for agent in ("curl/7.68.0", "Wget/1.21 wget", "HTTPie/3.2.1"):
        assert is_command_line_client(Headers({"User-Agent": agent}))


def test_user_agent_match_is_case_sensitive() -> None:
    assert not is_command_line_client(Headers({"User-Agent": "CURL/8.0"}))
    assert not is_command_line_client(Headers({"User-Agent": "httpie/3.2"}))


def test_plain_text_accept_is_command_line() -> None:
    headers = Headers({"User-Agent": "Mozilla/5.0", "Accept": "text/plain, */*"})
    assert is_command_line_client(headers)


def test_browser_and_missing_user_agent() -> None:
    assert not is_command_line_client(Headers({"User-Agent": "Mozilla/5.0"}))
    assert not is_command_line_client(Headers())
    assert not is_command_line_client(Headers({"Accept": "text/html"}))


def test_loopback_hosts() -> None:
    assert is_loopback_host("localhost")
    assert is_loopback_host("LOCALHOST")
    assert is_loopback_host("127.0.0.1")
    assert not is_loopback_host("example.com")
    assert not is_loopback_host(None)
