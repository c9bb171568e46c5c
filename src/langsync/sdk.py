"""SDK composition root for langsync."""

from __future__ import annotations

from langsync.contracts.config import LangSyncConfig
from langsync.contracts.fetch import Fetcher
from langsync.contracts.language import Language
from langsync.contracts.report import UpdateResult
from langsync.contracts.store import LanguageStore
from langsync.engine.progress import UpdateProgress
from langsync.engine.updater import LanguageUpdater
from langsync.fetch.http import HttpFetcher
from langsync.store.json_store import JsonLanguageStore


class LangSync:
    """langsync SDK public API."""

    def __init__(
        self,
        *,
        config: LangSyncConfig,
        store: LanguageStore,
        fetcher: Fetcher | None = None,
        progress: UpdateProgress | None = None,
    ) -> None:
        self._config = config
        self._store = store
        self._fetcher = fetcher
        self._progress = progress

    @classmethod
    def from_config(cls, config: LangSyncConfig, *, progress: UpdateProgress | None = None) -> LangSync:
        """Build an SDK instance backed by the JSON store at ``config.store_path``.

        Raises:
            StoreError: The store file exists but cannot be read.
        """
        return cls(config=config, store=JsonLanguageStore.load(config.store_path), progress=progress)

    @property
    def store(self) -> LanguageStore:
        return self._store

    def languages(self) -> list[Language]:
        return self._store.languages()

    async def update(self) -> UpdateResult:
        """Fetch the catalogue and merge it into the local store."""
        if self._fetcher is not None:
            return await self._updater(self._fetcher).run()
        async with HttpFetcher(timeout=self._config.timeout) as fetcher:
            return await self._updater(fetcher).run()

    def _updater(self, fetcher: Fetcher) -> LanguageUpdater:
        return LanguageUpdater(fetcher, self._store, self._config, progress=self._progress)
