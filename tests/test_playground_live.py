"""
PlaygroundClient against a local aiohttp server standing in for the
playground, so the real wire format is exercised.
"""

import pytest
from aiohttp import web
from aiohttp.test_utils import TestServer as LocalServer

from playground_proxy.core.errors import UpstreamRejected, UpstreamUnreachable
from playground_proxy.integrations.http_client import SharedSession
from playground_proxy.integrations.playground import PlaygroundClient


@pytest.fixture
async def fake_playground():
    received = []

    async def share(request: web.Request):
        body = await request.read()
        received.append((request.headers.get("Content-Type"), body))
        if body == b"reject me":
            return web.Response(status=400, text="bad snippet")
        return web.Response(text="  liveID42\n")

    web_app = web.Application()
    web_app.router.add_post("/share", share)

    server = LocalServer(web_app)
    await server.start_server()
    try:
        yield str(server.make_url("/share")), received
    finally:
        await server.close()


async def test_live_share_round_trip(fake_playground):
    share_url, received = fake_playground
    http = SharedSession()
    await http.initialize()
    try:
        result = await PlaygroundClient(share_url, http).share(b'fmt.Println("a=b&c")')
    finally:
        await http.close()

    assert result.share_id == "liveID42"
    assert received == [("application/x-www-form-urlencoded", b'fmt.Println("a=b&c")')]


async def test_live_rejection(fake_playground):
    share_url, _ = fake_playground

    with pytest.raises(UpstreamRejected) as exc:
        await PlaygroundClient(share_url, SharedSession()).share(b"reject me")

    assert exc.value.status == 400


async def test_live_connection_refused():
    # Port 1 on loopback has no listener
    client = PlaygroundClient("http://127.0.0.1:1/share", SharedSession())

    with pytest.raises(UpstreamUnreachable):
        await client.share(b"code")
