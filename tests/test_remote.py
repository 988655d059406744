"""Tests for the remote catalog HTTP client."""

from __future__ import annotations

import httpx
import pytest

from playgama.services.remote import RemoteCatalogClient, RemoteCatalogError


@pytest.mark.anyio("asyncio")
async def test_fetch_returns_body_and_requests_json() -> None:
    seen: list[httpx.Request] = []

    def handler(request: httpx.Request) -> httpx.Response:
        seen.append(request)
        return httpx.Response(200, content=b'{"segments": []}')

    async with httpx.AsyncClient(transport=httpx.MockTransport(handler)) as http_client:
        body = await RemoteCatalogClient(http_client).fetch(
            "https://feeds.example.com/games.json?clid=p_1"
        )

    assert body == b'{"segments": []}'
    assert seen[0].method == "GET"
    assert seen[0].headers["accept"] == "application/json"
    assert seen[0].url.params["clid"] == "p_1"


@pytest.mark.anyio("asyncio")
@pytest.mark.parametrize("status", [301, 404, 503])
async def test_fetch_rejects_non_success_status(status: int) -> None:
    def handler(_: httpx.Request) -> httpx.Response:
        return httpx.Response(status, json={"segments": []})

    async with httpx.AsyncClient(transport=httpx.MockTransport(handler)) as http_client:
        with pytest.raises(RemoteCatalogError) as excinfo:
            await RemoteCatalogClient(http_client).fetch("https://feeds.example.com/x")

    assert excinfo.value.status_code == status
    assert str(status) in str(excinfo.value)


@pytest.mark.anyio("asyncio")
async def test_fetch_wraps_unsupported_urls() -> None:
    async with httpx.AsyncClient() as http_client:
        with pytest.raises(RemoteCatalogError) as excinfo:
            await RemoteCatalogClient(http_client).fetch("ftp://feeds.example.com/x")

    assert excinfo.value.status_code is None
    assert isinstance(excinfo.value.__cause__, httpx.HTTPError)
