"""Tests for HttpFetcher against an in-process httpx transport."""

from __future__ import annotations

import asyncio
from collections.abc import Callable
from unittest.mock import AsyncMock, patch

import httpx
import pytest

from langsync.contracts.fetch import FetchFailureCode, FetchStatus, await_operation
from langsync.contracts.language import Language, LanguageBookmarks
from langsync.fetch.http import HttpFetcher
from tests.fakes.catalogue import language_payload

URL = "https://languages.example.com/LanguageBookmarks.json"

_NO_BACKOFF = "langsync.fetch._retrying_transport.RetryingTransport._sleep_backoff"


def _transport(handler: Callable[[httpx.Request], httpx.Response]) -> httpx.MockTransport:
    return httpx.MockTransport(handler)


@pytest.mark.asyncio
async def test_fetch_returns_pending_then_decoded_payload() -> None:
    transport = _transport(lambda request: httpx.Response(200, json={"languageUrls": ["https://x/de.json"]}))

    async with HttpFetcher(transport=transport) as fetcher:
        operation = fetcher.fetch(URL, LanguageBookmarks, max_attempts=3)
        assert operation.status is FetchStatus.PENDING
        status = await await_operation(operation, poll_interval=0)

    assert status is FetchStatus.SUCCESS
    assert operation.result.language_urls == ["https://x/de.json"]


@pytest.mark.asyncio
async def test_fetch_sends_json_accept_header() -> None:
    seen: list[httpx.Request] = []

    def handler(request: httpx.Request) -> httpx.Response:
        seen.append(request)
        return httpx.Response(200, json={"name": "Deutsch", "key": "de", "version": 1})

    async with HttpFetcher(transport=_transport(handler)) as fetcher:
        operation = fetcher.fetch(URL, Language, max_attempts=1)
        await await_operation(operation, poll_interval=0)

    assert seen[0].headers["Accept"] == "application/json"
    assert seen[0].url == URL


@pytest.mark.asyncio
async def test_http_error_status_fails_with_code() -> None:
    transport = _transport(lambda request: httpx.Response(404))

    async with HttpFetcher(transport=transport) as fetcher:
        operation = fetcher.fetch(URL, LanguageBookmarks, max_attempts=3)
        status = await await_operation(operation, poll_interval=0)

    assert status is FetchStatus.FAILED
    assert operation.failure_code == FetchFailureCode.HTTP_ERROR.value
    assert operation.failure_message == f"HTTP 404 Not Found for {URL}"


@pytest.mark.asyncio
async def test_invalid_json_fails() -> None:
    transport = _transport(lambda request: httpx.Response(200, text="<html>nope</html>"))

    async with HttpFetcher(transport=transport) as fetcher:
        operation = fetcher.fetch(URL, LanguageBookmarks, max_attempts=1)
        await await_operation(operation, poll_interval=0)

    assert operation.status is FetchStatus.FAILED
    assert operation.failure_code == FetchFailureCode.INVALID_JSON.value


@pytest.mark.asyncio
async def test_payload_not_matching_model_fails() -> None:
    transport = _transport(lambda request: httpx.Response(200, json={"name": "Deutsch"}))

    async with HttpFetcher(transport=transport) as fetcher:
        operation = fetcher.fetch(URL, Language, max_attempts=1)
        await await_operation(operation, poll_interval=0)

    assert operation.status is FetchStatus.FAILED
    assert operation.failure_code == FetchFailureCode.INVALID_PAYLOAD.value
    assert "version" in (operation.failure_message or "")


@pytest.mark.asyncio
@patch(_NO_BACKOFF, new_callable=AsyncMock)
async def test_timeout_after_all_attempts(mock_backoff: AsyncMock) -> None:
    calls = {"value": 0}

    def handler(request: httpx.Request) -> httpx.Response:
        calls["value"] += 1
        raise httpx.ReadTimeout("read timed out", request=request)

    async with HttpFetcher(transport=_transport(handler)) as fetcher:
        operation = fetcher.fetch(URL, LanguageBookmarks, max_attempts=3)
        await await_operation(operation, poll_interval=0)

    assert operation.status is FetchStatus.TIMEOUT
    assert operation.failure_message == "read timed out"
    assert calls["value"] == 3
    assert mock_backoff.await_count == 2


@pytest.mark.asyncio
@patch(_NO_BACKOFF, new_callable=AsyncMock)
async def test_connection_error_fails_with_network_code(mock_backoff: AsyncMock) -> None:
    def handler(request: httpx.Request) -> httpx.Response:
        raise httpx.ConnectError("connection refused", request=request)

    async with HttpFetcher(transport=_transport(handler)) as fetcher:
        operation = fetcher.fetch(URL, LanguageBookmarks, max_attempts=2)
        await await_operation(operation, poll_interval=0)

    assert operation.status is FetchStatus.FAILED
    assert operation.failure_code == FetchFailureCode.NETWORK_ERROR.value
    assert operation.failure_message == "connection refused"


@pytest.mark.asyncio
@patch(_NO_BACKOFF, new_callable=AsyncMock)
async def test_transient_failure_is_retried_inside_the_operation(mock_backoff: AsyncMock) -> None:
    responses = [httpx.Response(503), httpx.Response(200, json={"languageUrls": []})]

    async with HttpFetcher(transport=_transport(lambda request: responses.pop(0))) as fetcher:
        operation = fetcher.fetch(URL, LanguageBookmarks, max_attempts=3)
        await await_operation(operation, poll_interval=0)

    assert operation.status is FetchStatus.SUCCESS
    assert responses == []
    mock_backoff.assert_awaited_once_with(0)


@pytest.mark.asyncio
async def test_clients_are_shared_per_retry_budget() -> None:
    transport = _transport(lambda request: httpx.Response(200, json={"languageUrls": []}))

    async with HttpFetcher(transport=transport) as fetcher:
        first = fetcher.fetch(URL, LanguageBookmarks, max_attempts=3)
        second = fetcher.fetch(URL, LanguageBookmarks, max_attempts=3)
        third = fetcher.fetch(URL, LanguageBookmarks, max_attempts=1)
        for operation in (first, second, third):
            await await_operation(operation, poll_interval=0)
        assert len(fetcher._clients) == 2

    assert fetcher._clients == {}


@pytest.mark.asyncio
async def test_aclose_cancels_pending_fetches() -> None:
    async def never_finishes(request: httpx.Request) -> httpx.Response:
        import asyncio

        await asyncio.Event().wait()
        return httpx.Response(200)  # pragma: no cover

    fetcher = HttpFetcher(transport=httpx.MockTransport(never_finishes))
    operation = fetcher.fetch(URL, LanguageBookmarks, max_attempts=1)

    await fetcher.aclose()

    assert operation.status is FetchStatus.PENDING
    assert fetcher._tasks == set()


@pytest.mark.asyncio
@pytest.mark.parametrize("bad_url", ["http://xn--/de.json", "http://[::1/de.json"])
async def test_malformed_url_fails_instead_of_hanging(bad_url: str) -> None:
    sent: list[httpx.Request] = []

    def handler(request: httpx.Request) -> httpx.Response:
        sent.append(request)
        return httpx.Response(200, json=language_payload("Deutsch", 1))

    async with HttpFetcher(transport=_transport(handler)) as fetcher:
        operation = fetcher.fetch(bad_url, Language, max_attempts=1)
        status = await asyncio.wait_for(await_operation(operation, poll_interval=0), timeout=2.0)

    assert status is FetchStatus.FAILED
    assert operation.failure_code == FetchFailureCode.INVALID_URL.value
    assert bad_url in (operation.failure_message or "")
    assert sent == []
