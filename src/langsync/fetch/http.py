"""httpx-backed :class:`Fetcher` implementation."""

from __future__ import annotations

import asyncio
import json
import logging
from types import TracebackType

import httpx
from pydantic import ValidationError

from langsync.contracts.fetch import FetchFailureCode, Fetcher, FetchOperation, ModelT
from langsync.fetch._retrying_transport import RetryingTransport

_LOG = logging.getLogger(__name__)

_USER_AGENT = "langsync"


class HttpFetcher(Fetcher):
    """Fetches JSON documents over HTTP(S) in background tasks.

    Use as an async context manager so the underlying clients are closed::

        async with HttpFetcher(timeout=30.0) as fetcher:
            operation = fetcher.fetch(url, LanguageBookmarks, max_attempts=3)

    One ``httpx.AsyncClient`` is kept per retry budget, since the retry
    policy lives in the client's transport.
    """

    def __init__(
        self,
        *,
        timeout: float = 30.0,
        transport: httpx.AsyncBaseTransport | None = None,
    ) -> None:
        self._timeout = timeout
        self._transport = transport
        self._clients: dict[int, httpx.AsyncClient] = {}
        self._tasks: set[asyncio.Task[None]] = set()

    async def __aenter__(self) -> HttpFetcher:
        return self

    async def __aexit__(
        self,
        exc_type: type[BaseException] | None,
        exc_val: BaseException | None,
        exc_tb: TracebackType | None,
    ) -> None:
        await self.aclose()

    async def aclose(self) -> None:
        for task in list(self._tasks):
            task.cancel()
        if self._tasks:
            await asyncio.gather(*self._tasks, return_exceptions=True)
            self._tasks.clear()
        clients = list(self._clients.values())
        self._clients.clear()
        for client in clients:
            await client.aclose()

    def fetch(self, url: str, model: type[ModelT], max_attempts: int) -> FetchOperation[ModelT]:
        operation: FetchOperation[ModelT] = FetchOperation(url)
        client = self._client_for(max_attempts)
        task = asyncio.get_running_loop().create_task(self._run(client, operation, model))
        self._tasks.add(task)
        task.add_done_callback(self._tasks.discard)
        operation.attach(task)
        _LOG.debug("Fetching %s as %s (max %d attempts)", url, model.__name__, max_attempts)
        return operation

    def _client_for(self, max_attempts: int) -> httpx.AsyncClient:
        client = self._clients.get(max_attempts)
        if client is None:
            client = httpx.AsyncClient(
                transport=RetryingTransport(transport=self._transport, max_attempts=max_attempts),
                timeout=httpx.Timeout(self._timeout),
                headers={"Accept": "application/json", "User-Agent": _USER_AGENT},
                follow_redirects=True,
            )
            self._clients[max_attempts] = client
        return client

    async def _run(
        self,
        client: httpx.AsyncClient,
        operation: FetchOperation[ModelT],
        model: type[ModelT],
    ) -> None:
        url = operation.url
        try:
            response = await client.get(url)
        except httpx.TimeoutException as exc:
            _LOG.debug("Fetch of %s timed out: %s", url, exc)
            operation.time_out(str(exc) or "request timed out")
            return
        except httpx.HTTPError as exc:
            _LOG.debug("Fetch of %s failed: %s", url, exc)
            operation.fail(FetchFailureCode.NETWORK_ERROR.value, str(exc) or type(exc).__name__)
            return
        except (httpx.InvalidURL, ValueError) as exc:
            # Raised while building the request, e.g. a malformed IDNA or IPv6 host.
            _LOG.debug("Refusing to fetch %s: %s", url, exc)
            operation.fail(FetchFailureCode.INVALID_URL.value, f"invalid URL {url!r}: {exc}")
            return

        if not response.is_success:
            operation.fail(
                FetchFailureCode.HTTP_ERROR.value,
                f"HTTP {response.status_code} {response.reason_phrase} for {url}",
            )
            return

        try:
            payload = response.json()
        except (json.JSONDecodeError, UnicodeDecodeError) as exc:
            operation.fail(FetchFailureCode.INVALID_JSON.value, f"invalid JSON from {url}: {exc}")
            return

        try:
            decoded = model.model_validate(payload)
        except ValidationError as exc:
            operation.fail(FetchFailureCode.INVALID_PAYLOAD.value, f"unexpected document at {url}: {exc}")
            return

        _LOG.debug("Fetched %s", url)
        operation.succeed(decoded)
