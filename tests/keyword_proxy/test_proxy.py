"""Tests for the keyword proxy.

The upstream is replaced by ``httpx.MockTransport``; no network access.
"""

from __future__ import annotations

from collections.abc import AsyncIterator, Callable

import httpx
import pytest
from httpx import ASGITransport, AsyncClient

from agentbook.keyword_proxy.app import KEYWORD_ERROR, app
from agentbook.keyword_proxy.forwarder import KeywordForwarder

UPSTREAM = "https://upstream.test/fn/"

Handler = Callable[[httpx.Request], httpx.Response]


def _echo(request: httpx.Request) -> httpx.Response:
    keyword = request.url.params.get("keyword")
    return httpx.Response(200, text=f"Bruce Wayne says {keyword}")


def _unreachable(request: httpx.Request) -> httpx.Response:
    raise httpx.ConnectError("connection refused", request=request)


def _forwarder(handler: Handler) -> KeywordForwarder:
    return KeywordForwarder(httpx.AsyncClient(transport=httpx.MockTransport(handler)), UPSTREAM)


@pytest.fixture
def use_upstream() -> Callable[[Handler], None]:
    """Install a mock upstream on the app (lifespan does not run in tests)."""

    def _install(handler: Handler) -> None:
        app.state.forwarder = _forwarder(handler)

    return _install


@pytest.fixture
async def client() -> AsyncIterator[AsyncClient]:
    async with AsyncClient(transport=ASGITransport(app=app), base_url="http://test") as ac:
        yield ac
    await app.state.forwarder.aclose()


async def test_relays_upstream_body(client: AsyncClient, use_upstream) -> None:
    use_upstream(_echo)

    resp = await client.get("/say", params={"keyword": "X"})
    assert resp.status_code == 200
    assert resp.text == "Bruce Wayne says X"


async def test_relays_json_with_content_type(client: AsyncClient, use_upstream) -> None:
    use_upstream(lambda request: httpx.Response(200, json={"said": request.url.params["keyword"]}))

    resp = await client.get("/say", params={"keyword": "hi"})
    assert resp.status_code == 200
    assert resp.headers["content-type"].startswith("application/json")
    assert resp.json() == {"said": "hi"}


async def test_missing_keyword_is_not_forwarded(client: AsyncClient, use_upstream) -> None:
    seen: list[httpx.URL] = []

    def _record(request: httpx.Request) -> httpx.Response:
        seen.append(request.url)
        return httpx.Response(200, text="nothing")

    use_upstream(_record)

    resp = await client.get("/say")
    assert resp.status_code == 200
    assert "keyword" not in seen[0].params
    assert str(seen[0]).startswith(UPSTREAM)


async def test_unreachable_upstream(client: AsyncClient, use_upstream) -> None:
    use_upstream(_unreachable)

    resp = await client.get("/say", params={"keyword": "X"})
    assert resp.status_code == 500
    assert resp.text == KEYWORD_ERROR


@pytest.mark.parametrize("upstream_status", [404, 500, 502])
async def test_upstream_error_status(client: AsyncClient, use_upstream, upstream_status: int) -> None:
    use_upstream(lambda request: httpx.Response(upstream_status, text="upstream says no"))

    resp = await client.get("/say", params={"keyword": "X"})
    assert resp.status_code == 500
    assert resp.text == "Error: Keyword not found"


async def test_health(client: AsyncClient, use_upstream) -> None:
    use_upstream(_echo)
    resp = await client.get("/health")
    assert resp.json() == {"status": "ok"}


async def test_forwarder_sends_keyword_param() -> None:
    forwarder = _forwarder(_echo)
    try:
        reply = await forwarder.forward("batman")
    finally:
        await forwarder.aclose()
    assert reply.content == b"Bruce Wayne says batman"
    assert reply.media_type is not None


async def test_forwarder_raises_on_error_status() -> None:
    forwarder = _forwarder(lambda request: httpx.Response(503))
    try:
        with pytest.raises(httpx.HTTPStatusError):
            await forwarder.forward("batman")
    finally:
        await forwarder.aclose()


async def test_follows_upstream_redirect(client: AsyncClient, use_upstream) -> None:
    def _redirecting(request: httpx.Request) -> httpx.Response:
        if request.url.path == "/fn/":
            target = f"https://upstream.test/final?keyword={request.url.params['keyword']}"
            return httpx.Response(302, headers={"location": target})
        return httpx.Response(200, text=f"final body for {request.url.params['keyword']}")

    use_upstream(_redirecting)

    resp = await client.get("/say", params={"keyword": "X"})
    assert resp.status_code == 200
    assert resp.text == "final body for X"


async def test_redirect_to_error_status(client: AsyncClient, use_upstream) -> None:
    def _redirecting(request: httpx.Request) -> httpx.Response:
        if request.url.path == "/fn/":
            return httpx.Response(301, headers={"location": "https://upstream.test/gone"})
        return httpx.Response(404)

    use_upstream(_redirecting)

    resp = await client.get("/say", params={"keyword": "X"})
    assert resp.status_code == 500
    assert resp.text == KEYWORD_ERROR
