"""Update pipeline engine."""

from langsync.engine.fetchers import LanguageBatchFetcher, ManifestFetcher, display_name_for_url
from langsync.engine.progress import NullUpdateProgress, UpdateProgress
from langsync.engine.reconciler import LanguageReconciler
from langsync.engine.report import build_report_sections, format_fetch_failure, format_update_report
from langsync.engine.updater import LanguageUpdater, UpdateState

__all__ = [
    "LanguageBatchFetcher",
    "LanguageReconciler",
    "LanguageUpdater",
    "ManifestFetcher",
    "NullUpdateProgress",
    "UpdateProgress",
    "UpdateState",
    "build_report_sections",
    "display_name_for_url",
    "format_fetch_failure",
    "format_update_report",
]
