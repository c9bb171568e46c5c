"""Shared contracts for langsync."""

from langsync.contracts.config import DEFAULT_MANIFEST_URL, LangSyncConfig
from langsync.contracts.exceptions import (
    ConfigError,
    FetchError,
    FetchFailedError,
    FetchTimeoutError,
    LangSyncError,
    StoreError,
    UpdateInProgressError,
)
from langsync.contracts.fetch import FetchFailureCode, Fetcher, FetchOperation, FetchStatus, await_operation
from langsync.contracts.language import Language, LanguageBookmarks, LocalizedString
from langsync.contracts.report import LanguageUpdateReport, UpdateOutcome, UpdateResult
from langsync.contracts.store import LanguageStore

__all__ = [
    "DEFAULT_MANIFEST_URL",
    "ConfigError",
    "FetchError",
    "FetchFailedError",
    "FetchFailureCode",
    "FetchOperation",
    "FetchStatus",
    "FetchTimeoutError",
    "Fetcher",
    "LangSyncConfig",
    "LangSyncError",
    "Language",
    "LanguageBookmarks",
    "LanguageStore",
    "LanguageUpdateReport",
    "LocalizedString",
    "StoreError",
    "UpdateInProgressError",
    "UpdateOutcome",
    "UpdateResult",
    "await_operation",
]
