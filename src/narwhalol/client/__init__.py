"""Fetch-or-cache orchestrators for narwhalol.

Classes:
    :class:`SyncFetcher` -- blocking fetcher backed by :class:`httpx.Client`.
    :class:`AsyncFetcher` -- non-blocking fetcher backed by :class:`httpx.AsyncClient`.
    :class:`RequestDescriptor` -- the ``(url, api_key)`` pair for one GET.

Both fetchers take a :class:`~narwhalol.models.ClientConfig` and an
optional shared :class:`~narwhalol.cache.ResponseCache`, and expose the
same ``get(descriptor, result_type)`` contract.

Example::

    from narwhalol.client import SyncFetcher

    with SyncFetcher(config) as fetcher:
        score = fetcher.get(fetcher.descriptor("/champion-mastery/v4/scores/by-summoner/abc"), int)
"""

from narwhalol.client.async_client import AsyncFetcher
from narwhalol.client.request import RequestDescriptor
from narwhalol.client.sync_client import SyncFetcher

__all__ = ["SyncFetcher", "AsyncFetcher", "RequestDescriptor"]
