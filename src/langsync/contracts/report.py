"""Reconciliation report contracts."""

from __future__ import annotations

from enum import Enum

from pydantic import BaseModel, Field

from langsync.contracts.fetch import FetchStatus
from langsync.contracts.language import Language


class UpdateOutcome(str, Enum):
    ADDED = "added"
    UPDATED = "updated"
    UNCHANGED = "unchanged"


class LanguageUpdateReport(BaseModel):
    language: Language
    outcome: UpdateOutcome
    previous_version: int | None = None
    new_version: int

    @property
    def name(self) -> str:
        return self.language.name


class UpdateResult(BaseModel):
    """Value delivered at the end of an update run.

    ``message`` holds the formatted report on success and the error text
    otherwise; ``title`` is the matching dialog title.
    """

    succeeded: bool
    title: str
    message: str
    reports: list[LanguageUpdateReport] = Field(default_factory=list)
    failed_status: FetchStatus | None = None
