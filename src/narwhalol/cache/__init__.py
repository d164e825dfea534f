"""In-memory response caching for narwhalol.

This package provides :class:`ResponseCache`, the URL-keyed store of raw
response bodies that sits in front of every outbound request. Only bodies
of non-error responses are ever inserted; see
:class:`~narwhalol.client.SyncFetcher` for the fetch-or-cache flow.
"""

from narwhalol.cache.cache import ResponseCache

__all__ = ["ResponseCache"]
