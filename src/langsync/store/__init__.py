"""Local language stores."""

from langsync.store.json_store import JsonLanguageStore

__all__ = ["JsonLanguageStore"]
