"""Tests for option handling in HttpTransport."""

import httpx
import pytest

from kue_client import transport


def _ok(request: httpx.Request) -> httpx.Response:
    return httpx.Response(200, json={"path": request.url.path})


def test_client_level_options_configure_httpx_client():
    """Client-only options are consumed at construction, not sent per request."""
    t = transport.HttpTransport(
        "http://kue.test",
        {"transport": httpx.MockTransport(_ok), "timeout": 5.0},
    )
    assert "transport" not in t.defaults
    assert t.defaults == {"timeout": 5.0}


def test_send_joins_path_with_base_url():
    """Relative paths resolve under the base URL, including its prefix."""
    t = transport.HttpTransport(
        "http://kue.test/kue-api",
        {"transport": httpx.MockTransport(_ok)},
    )
    response = t.send("GET", "stats")
    assert response.json() == {"path": "/kue-api/stats"}


def test_send_returns_non_200_response_untouched():
    """The transport does not classify responses."""

    def handler(request: httpx.Request) -> httpx.Response:
        return httpx.Response(418, text="teapot")

    t = transport.HttpTransport("http://kue.test", {"transport": httpx.MockTransport(handler)})
    response = t.send("GET", "stats")
    assert response.status_code == 418
    assert response.text == "teapot"


def test_send_rejects_client_level_options():
    """Per-request options cannot carry client-level httpx settings."""
    t = transport.HttpTransport("http://kue.test", {"transport": httpx.MockTransport(_ok)})
    with pytest.raises(ValueError, match="verify"):
        t.send("GET", "stats", {"verify": False})


def test_injected_http_client_gets_accept_header():
    """An injected httpx client is used and defaults to JSON responses."""
    seen = []

    def handler(request: httpx.Request) -> httpx.Response:
        seen.append(request)
        return httpx.Response(200, text="{}")

    http_client = httpx.Client(
        base_url="http://kue.test",
        transport=httpx.MockTransport(handler),
    )
    t = transport.HttpTransport("http://kue.test", http_client=http_client)

    t.send("GET", "stats")

    assert t.http_client is http_client
    assert seen[0].headers["accept"] == "application/json"


def test_injected_http_client_keeps_its_accept_header():
    """An Accept header already set on an injected client is preserved."""
    http_client = httpx.Client(
        base_url="http://kue.test",
        headers={"Accept": "application/vnd.kue+json"},
    )
    t = transport.HttpTransport("http://kue.test", http_client=http_client)
    assert t.http_client.headers["accept"] == "application/vnd.kue+json"


def test_close_is_idempotent():
    """Closing twice does not raise."""
    t = transport.HttpTransport("http://kue.test", {"transport": httpx.MockTransport(_ok)})
    t.close()
    t.close()
    assert t.http_client.is_closed


def test_init_rejects_unknown_options():
    """Misspelled or unsupported option names fail at construction."""
    with pytest.raises(ValueError, match="base_url, timout"):
        transport.HttpTransport("http://kue.test", {"timout": 5.0, "base_url": "http://x"})


def test_send_rejects_unknown_options():
    """Per-request options are limited to what httpx requests accept."""
    t = transport.HttpTransport("http://kue.test", {"transport": httpx.MockTransport(_ok)})
    with pytest.raises(ValueError, match="param"):
        t.send("GET", "stats", {"param": {"q": "x"}})


def test_injected_http_client_default_accept_is_replaced():
    """httpx's implicit "*/*" Accept header gives way to JSON."""
    http_client = httpx.Client(base_url="http://kue.test")
    assert http_client.headers["accept"] == "*/*"

    t = transport.HttpTransport("http://kue.test", http_client=http_client)

    assert t.http_client.headers["accept"] == "application/json"
