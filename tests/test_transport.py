"""Tests for the httpx-backed remote fetcher."""

import httpx
import pytest
from file_loader.transport import HttpxFetcher


def _client(handler) -> httpx.AsyncClient:
    return httpx.AsyncClient(transport=httpx.MockTransport(handler))


@pytest.mark.asyncio
async def test_get_text_returns_body_and_sends_content_type():
    seen: list[httpx.Request] = []

    def handler(request: httpx.Request) -> httpx.Response:
        seen.append(request)
        return httpx.Response(200, text="remote content")

    async with _client(handler) as client:
        fetcher = HttpxFetcher(client=client)
        text = await fetcher.get_text("https://example.com/a.txt")

    assert text == "remote content"
    assert len(seen) == 1
    assert seen[0].method == "GET"
    assert seen[0].headers["Content-Type"] == "text"


@pytest.mark.asyncio
async def test_error_status_raises_http_status_error():
    async with _client(lambda request: httpx.Response(404, text="nope")) as client:
        fetcher = HttpxFetcher(client=client)

        with pytest.raises(httpx.HTTPStatusError):
            await fetcher.get_text("https://example.com/missing.txt")


@pytest.mark.asyncio
async def test_aclose_leaves_injected_client_open():
    async with _client(lambda request: httpx.Response(200)) as client:
        fetcher = HttpxFetcher(client=client)
        await fetcher.aclose()

        assert not client.is_closed


@pytest.mark.asyncio
async def test_owned_client_is_created_lazily_and_closed():
    fetcher = HttpxFetcher(timeout=3.0, follow_redirects=False)
    client = fetcher._get_client()

    assert client.timeout.read == 3.0
    assert client.follow_redirects is False

    await fetcher.aclose()

    assert client.is_closed
