"""
Shared pytest fixtures for all test modules.

The real playground is never contacted: route tests swap the PlaygroundClient
for a stub through app.dependency_overrides, or hand a real client a mocked
aiohttp session.
"""

import asyncio

import pytest
from fastapi.testclient import TestClient

from playground_proxy.config import Settings
from playground_proxy.core.dependencies import get_playground_client
from playground_proxy.main import create_app
from tests.mocks.playground_mock import StubPlayground

SHARE_URL = "https://play.example.test/share"
BASE_URL = "https://play.example.test/p/"


# ---------------------------------------------------------------------------
# Core infrastructure fixtures
# ---------------------------------------------------------------------------


@pytest.fixture
def settings() -> Settings:
    """Settings isolated from the developer's .env file, with a 1 KB code cap."""
    return Settings(
        _env_file=None,
        playground_share_url=SHARE_URL,
        playground_base_url=BASE_URL,
        max_code_kb=1,
    )


@pytest.fixture
def playground() -> StubPlayground:
    return StubPlayground()


@pytest.fixture
def app(settings, playground):
    app = create_app(settings)
    app.dependency_overrides[get_playground_client] = lambda: playground
    return app


@pytest.fixture
def client(app):
    """TestClient that never follows the proxy's redirects."""
    with TestClient(app, raise_server_exceptions=False, follow_redirects=False) as c:
        yield c


# ---------------------------------------------------------------------------
# Raw ASGI helper
# ---------------------------------------------------------------------------


async def asgi_get(app, path: str = "/", query_string: bytes = b"", headers=None):
    """
    Issue a GET straight through the ASGI interface.

    HTTP clients re-escape stray '%' characters; this sends the query bytes
    exactly as given. Returns (status, headers, body).
    """
    scope = {
        "type": "http",
        "asgi": {"version": "3.0", "spec_version": "2.4"},
        "http_version": "1.1",
        "method": "GET",
        "scheme": "http",
        "path": path,
        "raw_path": path.encode(),
        "root_path": "",
        "query_string": query_string,
        "headers": [(k.lower().encode(), v.encode()) for k, v in (headers or {}).items()],
        "client": ("127.0.0.1", 50000),
        "server": ("testserver", 80),
    }
    messages = []
    request_sent = False
    never = asyncio.Event()

    async def receive():
        nonlocal request_sent
        if not request_sent:
            request_sent = True
            return {"type": "http.request", "body": b"", "more_body": False}
        # The client stays connected until the response is complete
        await never.wait()
        return {"type": "http.disconnect"}

    async def send(message):
        messages.append(message)

    await app(scope, receive, send)

    start = next(m for m in messages if m["type"] == "http.response.start")
    body = b"".join(m.get("body", b"") for m in messages if m["type"] == "http.response.body")
    response_headers = {k.decode().lower(): v.decode() for k, v in start["headers"]}
    return start["status"], response_headers, body
