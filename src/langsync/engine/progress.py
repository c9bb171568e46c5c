"""Progress reporting protocol for the update pipeline.

The updater emits coarse progress and a final dialog; consumers (e.g. the
CLI's Rich display) implement ``UpdateProgress`` to render them.
"""

from __future__ import annotations

from abc import ABC, abstractmethod


class UpdateProgress(ABC):
    """Observer interface for update progress and the closing dialog."""

    @abstractmethod
    def update(self, title: str, detail: str, fraction: float) -> None:
        """Show *detail* under *title* at *fraction* (0.0 to 1.0) complete."""
        ...  # pragma: no cover

    @abstractmethod
    def clear(self) -> None:
        """Remove any progress display."""
        ...  # pragma: no cover

    @abstractmethod
    def display(self, title: str, message: str) -> None:
        """Present the final report or error message."""
        ...  # pragma: no cover


class NullUpdateProgress(UpdateProgress):
    """No-op implementation used when no progress display is requested."""

    def update(self, title: str, detail: str, fraction: float) -> None:
        pass

    def clear(self) -> None:
        pass

    def display(self, title: str, message: str) -> None:
        pass
