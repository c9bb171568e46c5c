"""Manifest and language fetch stages."""

from __future__ import annotations

import logging
import posixpath
from urllib.parse import unquote, urlparse

from langsync.contracts.exceptions import FetchError, FetchFailedError, FetchTimeoutError
from langsync.contracts.fetch import Fetcher, FetchOperation, FetchStatus, ModelT, await_operation
from langsync.contracts.language import Language, LanguageBookmarks
from langsync.engine.progress import NullUpdateProgress, UpdateProgress

_LOG = logging.getLogger(__name__)

PROGRESS_TITLE = "Updating Languages"


def display_name_for_url(url: str) -> str:
    """Return the last path segment of *url*, e.g. ``de.json``."""
    try:
        path = unquote(urlparse(url).path)
    except ValueError:
        return url
    name = posixpath.basename(path.rstrip("/"))
    return name or url


def error_for_operation(operation: FetchOperation[ModelT]) -> FetchError:
    """Build the exception describing a terminal, unsuccessful *operation*."""
    if operation.status is FetchStatus.TIMEOUT:
        return FetchTimeoutError(
            f"request to {operation.url} timed out",
            url=operation.url,
            status=operation.status,
            failure_message=operation.failure_message,
        )
    return FetchFailedError(
        f"request to {operation.url} failed: {operation.failure_code}: {operation.failure_message}",
        url=operation.url,
        status=operation.status,
        failure_code=operation.failure_code,
        failure_message=operation.failure_message,
    )


async def fetch_document(
    fetcher: Fetcher,
    url: str,
    model: type[ModelT],
    *,
    max_attempts: int,
    poll_interval: float,
) -> ModelT:
    """Fetch *url* as *model*, polling until done.

    Raises:
        FetchTimeoutError: The operation timed out.
        FetchFailedError: The operation failed.
    """
    operation = fetcher.fetch(url, model, max_attempts)
    status = await await_operation(operation, poll_interval)
    if status is not FetchStatus.SUCCESS:
        raise error_for_operation(operation)
    return operation.result


class ManifestFetcher:
    def __init__(self, fetcher: Fetcher, *, max_attempts: int = 3, poll_interval: float = 0.05) -> None:
        self._fetcher = fetcher
        self._max_attempts = max_attempts
        self._poll_interval = poll_interval

    async def fetch(self, url: str) -> LanguageBookmarks:
        bookmarks = await fetch_document(
            self._fetcher,
            url,
            LanguageBookmarks,
            max_attempts=self._max_attempts,
            poll_interval=self._poll_interval,
        )
        _LOG.debug("Manifest %s lists %d languages", url, len(bookmarks.language_urls))
        return bookmarks


class LanguageBatchFetcher:
    """Fetches every bookmarked language one after another.

    Progress is reported as ``(index + 1) / (total + 1)``: the manifest
    download counts as the first completed step. The first failure aborts
    the batch and no further URLs are requested.
    """

    def __init__(
        self,
        fetcher: Fetcher,
        *,
        max_attempts: int = 3,
        poll_interval: float = 0.05,
        progress: UpdateProgress | None = None,
    ) -> None:
        self._fetcher = fetcher
        self._max_attempts = max_attempts
        self._poll_interval = poll_interval
        self._progress: UpdateProgress = progress or NullUpdateProgress()

    async def fetch_all(self, bookmarks: LanguageBookmarks) -> list[Language]:
        urls = bookmarks.language_urls
        total = len(urls)
        languages: list[Language] = []
        for index, url in enumerate(urls):
            filename = display_name_for_url(url)
            self._progress.update(PROGRESS_TITLE, f"Downloading language {filename}...", (index + 1) / (total + 1))
            language = await fetch_document(
                self._fetcher,
                url,
                Language,
                max_attempts=self._max_attempts,
                poll_interval=self._poll_interval,
            )
            languages.append(language)
        return languages
