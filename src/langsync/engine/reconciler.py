"""Merge freshly fetched languages into the local store."""

from __future__ import annotations

import logging
from collections.abc import Iterable

from langsync.contracts.language import Language
from langsync.contracts.report import LanguageUpdateReport, UpdateOutcome
from langsync.contracts.store import LanguageStore

_LOG = logging.getLogger(__name__)


def classify(language: Language, existing: Language | None) -> LanguageUpdateReport:
    """Compare *language* with the stored entry of the same name."""
    if existing is None:
        return LanguageUpdateReport(language=language, outcome=UpdateOutcome.ADDED, new_version=language.version)
    if existing.version < language.version:
        return LanguageUpdateReport(
            language=language,
            outcome=UpdateOutcome.UPDATED,
            previous_version=existing.version,
            new_version=language.version,
        )
    # Equal or older remote versions never replace the local copy, whatever
    # else differs in the payload.
    return LanguageUpdateReport(
        language=existing,
        outcome=UpdateOutcome.UNCHANGED,
        previous_version=existing.version,
        new_version=existing.version,
    )


class LanguageReconciler:
    def __init__(self, store: LanguageStore) -> None:
        self._store = store

    def reconcile(self, languages: Iterable[Language]) -> list[LanguageUpdateReport]:
        """Add or update *languages* in order, then save the store once.

        Returns one report per input language, in input order.
        """
        reports: list[LanguageUpdateReport] = []
        for language in languages:
            report = classify(language, self._store.lookup(language.name))
            if report.outcome is not UpdateOutcome.UNCHANGED:
                self._store.upsert(language)
            _LOG.debug(
                "%s: %s (version %s -> %d)",
                language.name,
                report.outcome.value,
                report.previous_version,
                report.new_version,
            )
            reports.append(report)

        self._store.save()
        return reports
