"""Local language store contract."""

from __future__ import annotations

from abc import ABC, abstractmethod

from langsync.contracts.language import Language


class LanguageStore(ABC):
    """Mapping of language name to :class:`Language` with its own persistence.

    ``save`` must persist all pending changes at once: either every upsert
    since the last save is written, or none is.
    """

    @abstractmethod
    def lookup(self, name: str) -> Language | None:
        ...  # pragma: no cover

    @abstractmethod
    def upsert(self, language: Language) -> None:
        ...  # pragma: no cover

    @abstractmethod
    def languages(self) -> list[Language]:
        """All stored languages, sorted by name."""
        ...  # pragma: no cover

    @abstractmethod
    def save(self) -> None:
        ...  # pragma: no cover
