"""Fetch operation contracts.

A :class:`Fetcher` starts a request and hands back a :class:`FetchOperation`
immediately. The operation is polled until it leaves ``PENDING``; retries are
the fetcher's business, callers only ever see the final outcome.
"""

from __future__ import annotations

import asyncio
from abc import ABC, abstractmethod
from enum import Enum
from typing import Generic, TypeVar

from pydantic import BaseModel

ModelT = TypeVar("ModelT", bound=BaseModel)


class FetchStatus(str, Enum):
    PENDING = "pending"
    SUCCESS = "success"
    FAILED = "failed"
    TIMEOUT = "timeout"


class FetchFailureCode(str, Enum):
    HTTP_ERROR = "HttpError"
    NETWORK_ERROR = "NetworkError"
    INVALID_JSON = "InvalidJson"
    INVALID_PAYLOAD = "InvalidPayload"
    INVALID_URL = "InvalidUrl"


class FetchOperation(Generic[ModelT]):
    """Handle for one in-flight or completed request.

    The status starts as ``PENDING`` and is resolved exactly once through
    :meth:`succeed`, :meth:`fail` or :meth:`time_out`.
    """

    def __init__(self, url: str) -> None:
        self.url = url
        self._status = FetchStatus.PENDING
        self._result: ModelT | None = None
        self._failure_code: str | None = None
        self._failure_message: str | None = None
        self._task: asyncio.Task[None] | None = None

    @property
    def status(self) -> FetchStatus:
        return self._status

    @property
    def is_done(self) -> bool:
        return self._status is not FetchStatus.PENDING

    @property
    def result(self) -> ModelT:
        if self._status is not FetchStatus.SUCCESS or self._result is None:
            raise RuntimeError(f"fetch of {self.url} has no result (status: {self._status.value})")
        return self._result

    @property
    def failure_code(self) -> str | None:
        return self._failure_code

    @property
    def failure_message(self) -> str | None:
        return self._failure_message

    def attach(self, task: asyncio.Task[None]) -> None:
        """Keep a reference to the task driving this operation."""
        self._task = task

    def succeed(self, result: ModelT) -> None:
        self._resolve(FetchStatus.SUCCESS)
        self._result = result

    def fail(self, code: str, message: str) -> None:
        self._resolve(FetchStatus.FAILED)
        self._failure_code = code
        self._failure_message = message

    def time_out(self, message: str | None = None) -> None:
        self._resolve(FetchStatus.TIMEOUT)
        self._failure_message = message

    def _resolve(self, status: FetchStatus) -> None:
        if self.is_done:
            raise RuntimeError(f"fetch of {self.url} already resolved as {self._status.value}")
        self._status = status

    def __repr__(self) -> str:
        return f"FetchOperation(url={self.url!r}, status={self._status.value!r})"


class Fetcher(ABC):
    """Starts retrying fetches of JSON documents decoded into pydantic models."""

    @abstractmethod
    def fetch(self, url: str, model: type[ModelT], max_attempts: int) -> FetchOperation[ModelT]:
        """Start fetching *url* and return a pending operation."""
        ...  # pragma: no cover


async def await_operation(operation: FetchOperation[ModelT], poll_interval: float) -> FetchStatus:
    """Yield to the event loop until *operation* reaches a terminal status."""
    while operation.status is FetchStatus.PENDING:
        await asyncio.sleep(poll_interval)
    return operation.status
