"""httpx async transport wrapper that retries transient failures."""

from __future__ import annotations

import asyncio
import logging
import random

import httpx

_LOG = logging.getLogger(__name__)

# Status codes considered transient and eligible for another attempt.
_RETRYABLE_STATUS_CODES = frozenset({429, 502, 503, 504})


class RetryingTransport(httpx.AsyncBaseTransport):
    """Sends each request up to *max_attempts* times.

    Transport errors (connection resets, timeouts) and 429/502/503/504
    responses trigger another attempt after an exponential backoff with
    jitter. A ``Retry-After`` header, when present, is waited out first.
    Once attempts are exhausted the last error is raised, or the last
    response returned, unchanged.
    """

    def __init__(
        self,
        *,
        transport: httpx.AsyncBaseTransport | None = None,
        max_attempts: int = 3,
    ) -> None:
        if max_attempts < 1:
            raise ValueError("max_attempts must be at least 1")
        self._transport = transport or httpx.AsyncHTTPTransport()
        self._max_attempts = max_attempts

    @property
    def max_attempts(self) -> int:
        return self._max_attempts

    async def handle_async_request(self, request: httpx.Request) -> httpx.Response:
        last_attempt = self._max_attempts - 1
        for attempt in range(self._max_attempts):
            try:
                response = await self._transport.handle_async_request(request)
            except httpx.TransportError as exc:
                if attempt >= last_attempt:
                    raise
                _LOG.warning(
                    "Request to %s failed (%s), attempt %d of %d",
                    request.url,
                    exc,
                    attempt + 1,
                    self._max_attempts,
                )
                await self._sleep_backoff(attempt)
                continue

            if response.status_code not in _RETRYABLE_STATUS_CODES or attempt >= last_attempt:
                return response

            _LOG.warning(
                "Request to %s returned %d, attempt %d of %d",
                request.url,
                response.status_code,
                attempt + 1,
                self._max_attempts,
            )
            retry_after = self._parse_retry_after(response)
            await response.aclose()
            if retry_after > 0:
                await asyncio.sleep(retry_after)
            await self._sleep_backoff(attempt)

        raise httpx.TransportError("Request failed after retries")  # pragma: no cover

    async def aclose(self) -> None:
        await self._transport.aclose()

    @staticmethod
    def _parse_retry_after(response: httpx.Response) -> float:
        raw = response.headers.get("Retry-After")
        if raw is None:
            return 0.0
        try:
            return min(60.0, max(0.0, float(raw)))
        except ValueError:
            return 0.0

    @staticmethod
    async def _sleep_backoff(attempt: int) -> None:
        seconds = min(4.0, 0.5 * float(2**attempt)) + random.uniform(0.0, 0.25)
        await asyncio.sleep(seconds)
