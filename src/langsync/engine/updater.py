"""Update orchestrator: manifest, languages, reconciliation, report."""

from __future__ import annotations

import asyncio
import logging
from collections.abc import Callable
from enum import Enum

from langsync.contracts.config import LangSyncConfig
from langsync.contracts.exceptions import FetchError, UpdateInProgressError
from langsync.contracts.fetch import Fetcher
from langsync.contracts.report import UpdateResult
from langsync.contracts.store import LanguageStore
from langsync.engine.fetchers import PROGRESS_TITLE, LanguageBatchFetcher, ManifestFetcher
from langsync.engine.progress import NullUpdateProgress, UpdateProgress
from langsync.engine.reconciler import LanguageReconciler
from langsync.engine.report import format_fetch_failure, format_update_report

_LOG = logging.getLogger(__name__)

SUCCESS_TITLE = "Languages Successfully Updated"
FAILURE_TITLE = "Language Update Failed"


class UpdateState(str, Enum):
    IDLE = "idle"
    FETCHING_MANIFEST = "fetching-manifest"
    FETCHING_LANGUAGES = "fetching-languages"
    RECONCILING = "reconciling"


class LanguageUpdater:
    """Runs one language update at a time.

    ``is_done_updating`` is ``False`` from the moment a run starts until its
    report or error has been delivered, and ``True`` otherwise. A second run
    requested meanwhile is rejected and leaves the running one untouched.
    """

    def __init__(
        self,
        fetcher: Fetcher,
        store: LanguageStore,
        config: LangSyncConfig,
        *,
        progress: UpdateProgress | None = None,
    ) -> None:
        self._fetcher = fetcher
        self._store = store
        self._config = config
        self._progress: UpdateProgress = progress or NullUpdateProgress()
        self._state = UpdateState.IDLE

    @property
    def state(self) -> UpdateState:
        return self._state

    @property
    def is_done_updating(self) -> bool:
        return self._state is UpdateState.IDLE

    def start(self, on_complete: Callable[[UpdateResult], None] | None = None) -> asyncio.Task[UpdateResult] | None:
        """Schedule :meth:`run` on the running event loop.

        Returns ``None`` without doing anything when an update is already
        running.
        """
        if not self.is_done_updating:
            _LOG.warning("Language update already running (%s); ignoring start request", self._state.value)
            return None
        loop = asyncio.get_running_loop()
        # Claim the flag now so a second start() before the task runs is rejected too.
        self._state = UpdateState.FETCHING_MANIFEST
        return loop.create_task(self._run_claimed(on_complete))

    async def run(self, on_complete: Callable[[UpdateResult], None] | None = None) -> UpdateResult:
        """Run a full update and return its result.

        Fetch failures are reported through the result, never raised.

        Raises:
            UpdateInProgressError: Another update is running.
            StoreError: The store could not be saved.
        """
        if not self.is_done_updating:
            raise UpdateInProgressError(f"language update already running ({self._state.value})")
        self._state = UpdateState.FETCHING_MANIFEST
        return await self._run_claimed(on_complete)

    async def _run_claimed(self, on_complete: Callable[[UpdateResult], None] | None) -> UpdateResult:
        try:
            result = await self._pipeline()
            self._progress.display(result.title, result.message)
            if on_complete is not None:
                on_complete(result)
            return result
        except BaseException:
            self._progress.clear()
            raise
        finally:
            self._state = UpdateState.IDLE

    async def _pipeline(self) -> UpdateResult:
        config = self._config
        self._progress.update(PROGRESS_TITLE, "Checking for language updates...", 0.0)
        try:
            self._state = UpdateState.FETCHING_MANIFEST
            bookmarks = await ManifestFetcher(
                self._fetcher,
                max_attempts=config.max_attempts,
                poll_interval=config.poll_interval,
            ).fetch(config.manifest_url)

            self._state = UpdateState.FETCHING_LANGUAGES
            languages = await LanguageBatchFetcher(
                self._fetcher,
                max_attempts=config.max_attempts,
                poll_interval=config.poll_interval,
                progress=self._progress,
            ).fetch_all(bookmarks)
        except FetchError as exc:
            _LOG.info("Language update aborted: %s", exc)
            self._progress.clear()
            return UpdateResult(
                succeeded=False,
                title=FAILURE_TITLE,
                message=format_fetch_failure(exc),
                failed_status=exc.status,
            )

        self._progress.update(PROGRESS_TITLE, "Saving Changes.", 1.0)
        self._progress.clear()

        self._state = UpdateState.RECONCILING
        reports = LanguageReconciler(self._store).reconcile(languages)
        message = format_update_report(reports)
        _LOG.info("Language update finished: %d languages checked", len(reports))
        return UpdateResult(succeeded=True, title=SUCCESS_TITLE, message=message, reports=reports)
