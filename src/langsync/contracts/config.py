"""Configuration contracts."""

from __future__ import annotations

from pathlib import Path

from pydantic import BaseModel, Field, field_validator

DEFAULT_MANIFEST_URL = (
    "https://raw.githubusercontent.com/redbluegames/unity-mulligan-renamer/"
    "languages-from-web-tested/LanguageBookmarks.json"
)


class LangSyncConfig(BaseModel):
    manifest_url: str = DEFAULT_MANIFEST_URL
    store_path: Path = Path("languages.json")
    max_attempts: int = Field(default=3, ge=1, le=10)
    timeout: float = Field(default=30.0, gt=0)
    poll_interval: float = Field(default=0.05, gt=0)

    model_config = {"frozen": True}

    @field_validator("manifest_url")
    @classmethod
    def validate_manifest_url(cls, value: str) -> str:
        candidate = value.strip()
        if not candidate.startswith(("http://", "https://")):
            raise ValueError("manifest_url must be an http(s) URL")
        return candidate
