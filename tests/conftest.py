"""Shared test fixtures for langsync tests."""

from __future__ import annotations

from pathlib import Path
from typing import Any

import pytest

from langsync.contracts.config import LangSyncConfig
from tests.fakes.catalogue import MANIFEST_URL, language_payload, language_url


@pytest.fixture
def config(tmp_path: Path) -> LangSyncConfig:
    """Fast-polling config pointing at the fake catalogue."""
    return LangSyncConfig(
        manifest_url=MANIFEST_URL,
        store_path=tmp_path / "languages.json",
        poll_interval=0.001,
    )


@pytest.fixture
def catalogue() -> dict[str, Any]:
    """Manifest plus two language documents (Deutsch v2, Francais v1)."""
    return {
        MANIFEST_URL: {"languageUrls": [language_url("de"), language_url("fr")]},
        language_url("de"): language_payload("Deutsch", 2),
        language_url("fr"): language_payload("Francais", 1),
    }
