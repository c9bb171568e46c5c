"""Public API surface for langsync."""

__version__ = "1.0.0"

from langsync.config import load_config
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
from langsync.contracts.fetch import Fetcher, FetchOperation, FetchStatus
from langsync.contracts.language import Language, LanguageBookmarks, LocalizedString
from langsync.contracts.report import LanguageUpdateReport, UpdateOutcome, UpdateResult
from langsync.contracts.store import LanguageStore
from langsync.engine.progress import NullUpdateProgress, UpdateProgress
from langsync.engine.report import format_update_report
from langsync.engine.updater import LanguageUpdater, UpdateState
from langsync.fetch.http import HttpFetcher
from langsync.sdk import LangSync
from langsync.store.json_store import JsonLanguageStore

__all__ = [
    "DEFAULT_MANIFEST_URL",
    "ConfigError",
    "FetchError",
    "FetchFailedError",
    "FetchOperation",
    "FetchStatus",
    "FetchTimeoutError",
    "Fetcher",
    "HttpFetcher",
    "JsonLanguageStore",
    "LangSync",
    "LangSyncConfig",
    "LangSyncError",
    "Language",
    "LanguageBookmarks",
    "LanguageStore",
    "LanguageUpdateReport",
    "LanguageUpdater",
    "LocalizedString",
    "NullUpdateProgress",
    "StoreError",
    "UpdateInProgressError",
    "UpdateOutcome",
    "UpdateProgress",
    "UpdateResult",
    "UpdateState",
    "__version__",
    "format_update_report",
    "load_config",
]
