"""JSON-file backed language store."""

from __future__ import annotations

import json
import logging
import os
import tempfile
from pathlib import Path
from typing import Any

from pydantic import ValidationError

from langsync.contracts.exceptions import StoreError
from langsync.contracts.language import Language
from langsync.contracts.store import LanguageStore

_LOG = logging.getLogger(__name__)


class JsonLanguageStore(LanguageStore):
    """Keeps languages in memory and writes them to one JSON file.

    ``save`` writes to a temporary file next to *path* and renames it over
    the existing file; readers see either the old or the new store.
    """

    def __init__(self, path: Path, languages: dict[str, Language] | None = None) -> None:
        self._path = path
        self._languages: dict[str, Language] = dict(languages or {})

    @property
    def path(self) -> Path:
        return self._path

    @classmethod
    def load(cls, path: str | Path) -> JsonLanguageStore:
        """Read the store at *path*; a missing file yields an empty store."""
        store_path = Path(path)
        if not store_path.exists():
            return cls(store_path)
        try:
            payload: Any = json.loads(store_path.read_text(encoding="utf-8"))
            raw_languages = payload.get("languages", []) if isinstance(payload, dict) else None
            if not isinstance(raw_languages, list):
                raise StoreError(f"invalid language store file: {store_path}")
            languages = [Language.model_validate(entry) for entry in raw_languages]
        except (OSError, json.JSONDecodeError, ValidationError) as exc:
            raise StoreError(f"invalid language store file: {store_path}") from exc
        return cls(store_path, {language.name: language for language in languages})

    def lookup(self, name: str) -> Language | None:
        return self._languages.get(name)

    def upsert(self, language: Language) -> None:
        self._languages[language.name] = language

    def languages(self) -> list[Language]:
        return [self._languages[name] for name in sorted(self._languages)]

    def save(self) -> None:
        payload = {"languages": [language.model_dump(mode="json") for language in self.languages()]}
        try:
            self._path.parent.mkdir(parents=True, exist_ok=True)
            fd, tmp_name = tempfile.mkstemp(prefix=f".{self._path.name}.", dir=self._path.parent)
            try:
                with os.fdopen(fd, "w", encoding="utf-8") as handle:
                    json.dump(payload, handle, indent=2, ensure_ascii=False)
                    handle.write("\n")
                os.replace(tmp_name, self._path)
            except BaseException:
                Path(tmp_name).unlink(missing_ok=True)
                raise
        except OSError as exc:
            raise StoreError(f"failed to save language store: {self._path}") from exc
        _LOG.debug("Saved %d languages to %s", len(self._languages), self._path)
