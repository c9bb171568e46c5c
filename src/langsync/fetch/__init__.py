"""Network fetchers."""

from langsync.fetch._retrying_transport import RetryingTransport
from langsync.fetch.http import HttpFetcher

__all__ = ["HttpFetcher", "RetryingTransport"]
