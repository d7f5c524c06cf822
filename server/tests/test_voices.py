"""Tests for the GET /v1/voices passthrough."""

from __future__ import annotations

import httpx
import pytest
import pytest_asyncio

from elevenlabs_proxy.main import app
from elevenlabs_proxy.upstream.client import ElevenLabsClient

VOICES_BODY = b'{"voices":[{"voice_id":"21m00Tcm4TlvDq8ikWAM","name":"Rachel"}]}'


@pytest_asyncio.fixture(autouse=True)
async def _close_upstream():
    yield
    upstream = getattr(app.state, "upstream", None)
    if upstream is not None:
        await upstream.close()


async def _attach(handler) -> None:
    upstream = ElevenLabsClient(
        api_key="test-key",
        base_url="https://api.elevenlabs.test",
        transport=httpx.MockTransport(handler),
    )
    await upstream.start()
    app.state.upstream = upstream


async def _get(path: str) -> httpx.Response:
    transport = httpx.ASGITransport(app=app)
    async with httpx.AsyncClient(transport=transport, base_url="http://test") as client:
        return await client.get(path)


@pytest.mark.asyncio
async def test_voices_body_is_relayed_verbatim():
    seen: list[httpx.Request] = []

    def handler(request: httpx.Request) -> httpx.Response:
        seen.append(request)
        return httpx.Response(200, content=VOICES_BODY)

    await _attach(handler)
    resp = await _get("/v1/voices")

    assert resp.status_code == 200
    assert resp.content == VOICES_BODY
    assert resp.headers["content-type"].startswith("application/json")
    assert seen[0].method == "GET"
    assert seen[0].url.path == "/v1/voices"
    assert seen[0].headers["xi-api-key"] == "test-key"


@pytest.mark.asyncio
@pytest.mark.parametrize("status", [401, 404, 429, 500])
async def test_voices_upstream_error_is_500(status):
    await _attach(lambda request: httpx.Response(status, json={"detail": "nope"}))

    resp = await _get("/v1/voices")

    assert resp.status_code == 500
    assert resp.json() == {"error": "Error al obtener voces"}


@pytest.mark.asyncio
async def test_voices_network_failure_is_500():
    def handler(request: httpx.Request) -> httpx.Response:
        raise httpx.ReadTimeout("timed out", request=request)

    await _attach(handler)

    resp = await _get("/v1/voices")

    assert resp.status_code == 500
    assert resp.json() == {"error": "Error al obtener voces"}
