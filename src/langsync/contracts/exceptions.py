"""Exception hierarchy for langsync.

All langsync exceptions inherit from :class:`LangSyncError`, so callers can
catch any library error with one ``except`` clause and still tell the failure
modes apart.
"""

from __future__ import annotations

from langsync.contracts.fetch import FetchStatus


class LangSyncError(Exception):
    """Base exception for all langsync errors."""


class ConfigError(LangSyncError):
    """Configuration loading or validation failure."""


class StoreError(LangSyncError):
    """The local language store could not be read or saved."""


class UpdateInProgressError(LangSyncError):
    """An update was requested while another one is still running."""


class FetchError(LangSyncError):
    """A fetch operation ended without a usable payload.

    Attributes:
        url: The URL that was requested.
        status: Terminal status of the operation.
        failure_code: Short machine-readable failure code, if any.
        failure_message: Human-readable failure detail, if any.
    """

    def __init__(
        self,
        message: str,
        *,
        url: str,
        status: FetchStatus,
        failure_code: str | None = None,
        failure_message: str | None = None,
    ) -> None:
        super().__init__(message)
        self.url = url
        self.status = status
        self.failure_code = failure_code
        self.failure_message = failure_message


class FetchTimeoutError(FetchError):
    """The request exceeded its time budget after exhausting retries."""


class FetchFailedError(FetchError):
    """The request completed with a failure code and message."""
