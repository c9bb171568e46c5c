"""Language document contracts."""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field


class LanguageBookmarks(BaseModel):
    """Manifest listing the URLs of every downloadable language."""

    model_config = ConfigDict(frozen=True, populate_by_name=True)

    language_urls: list[str] = Field(alias="languageUrls")


class LocalizedString(BaseModel):
    model_config = ConfigDict(frozen=True)

    key: str
    value: str


class Language(BaseModel):
    """A named, versioned set of translated strings.

    Languages are identified by ``name``; a higher ``version`` is newer.
    Unknown payload fields are kept so they survive a save.
    """

    model_config = ConfigDict(frozen=True, extra="allow")

    name: str = Field(min_length=1)
    key: str = ""
    version: int
    elements: list[LocalizedString] = Field(default_factory=list)
