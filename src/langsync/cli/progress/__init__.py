"""CLI progress displays."""

from langsync.cli.progress.rich import RichUpdateProgress

__all__ = ["RichUpdateProgress"]
