"""Human-readable rendering of update reports and fetch failures."""

from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass

from langsync.contracts.exceptions import FetchError, FetchTimeoutError
from langsync.contracts.report import LanguageUpdateReport, UpdateOutcome

UP_TO_DATE_MESSAGE = "All languages are up to date."

TIMEOUT_MESSAGE = (
    "Update failed due to web request timeout. If you have internet, our servers may be down. "
    "Please try again later, or report a bug (see UserManual for details) if the issue persists."
)


@dataclass(frozen=True)
class ReportSections:
    """Newline-joined lines per outcome, in report order."""

    added: str = ""
    updated: str = ""
    unchanged: str = ""


def build_report_sections(reports: Sequence[LanguageUpdateReport]) -> ReportSections:
    added: list[str] = []
    updated: list[str] = []
    unchanged: list[str] = []
    for report in reports:
        if report.outcome is UpdateOutcome.ADDED:
            added.append(f"Added {report.name}.")
        elif report.outcome is UpdateOutcome.UPDATED:
            updated.append(f"Updated {report.name} from version {report.previous_version} to {report.new_version}")
        else:
            unchanged.append(f"{report.name} is up to date.")
    return ReportSections(added="\n".join(added), updated="\n".join(updated), unchanged="\n".join(unchanged))


def format_update_report(reports: Sequence[LanguageUpdateReport]) -> str:
    """Render the message shown after a successful update.

    Added languages come first, then updated ones, separated by a blank
    line. Unchanged languages are left out of the message on purpose.
    """
    sections = build_report_sections(reports)
    blocks = [block for block in (sections.added, sections.updated) if block]
    if not blocks:
        return UP_TO_DATE_MESSAGE
    return "\n\n".join(blocks)


def format_fetch_failure(error: FetchError) -> str:
    if isinstance(error, FetchTimeoutError):
        return TIMEOUT_MESSAGE
    return (
        "Update failed. Please report a bug (see UserManual for details). "
        f"FailCode: {error.failure_code}, Message: {error.failure_message}"
    )
