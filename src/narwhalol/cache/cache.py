"""In-memory response cache keyed by request URL.

Stores the raw body text of successful GET responses. Bodies are kept as
text rather than decoded objects so the same entry can be decoded into
different result types by different callers.

The cache has no eviction, expiry or capacity bound: it lives exactly as
long as the client that owns it. A single :class:`threading.Lock` guards
the underlying dict and is only held for the dict operation itself, so the
cache is safe to share between threads and between asyncio tasks.

See Also:
    :class:`~narwhalol.client.SyncFetcher` and
    :class:`~narwhalol.client.AsyncFetcher`, the only writers.
"""

from __future__ import annotations

import threading
from typing import Any, Optional


class ResponseCache:
    """Thread-safe URL -> body text store.

    Instances are shared by reference: a :class:`~narwhalol.api.LeagueClient`
    hands its cache to an embedded DDragon client rather than copying it.

    Example::

        cache = ResponseCache()
        cache.insert("https://example.com/a.json", '{"a": 1}')
        cache.lookup("https://example.com/a.json")  # '{"a": 1}'
    """

    def __init__(self) -> None:
        self._entries: dict[str, str] = {}
        self._lock = threading.Lock()

    def lookup(self, key: str) -> Optional[str]:
        """Return the stored body for *key*, or ``None`` on a miss.

        Args:
            key: The full request URL.
        """
        with self._lock:
            return self._entries.get(key)

    def insert(self, key: str, text: str) -> None:
        """Store *text* for *key*, replacing any earlier body.

        Args:
            key: The full request URL.
            text: The raw response body.
        """
        with self._lock:
            self._entries[key] = text

    def keys(self) -> list[str]:
        """Return a snapshot of the cached URLs."""
        with self._lock:
            return list(self._entries)

    def stats(self) -> dict[str, Any]:
        """Return cache statistics.

        Returns:
            A ``dict`` with ``size`` (number of entries) and ``chars``
            (total length of stored bodies).
        """
        with self._lock:
            return {
                "size": len(self._entries),
                "chars": sum(len(body) for body in self._entries.values()),
            }

    def __contains__(self, key: object) -> bool:
        with self._lock:
            return key in self._entries

    def __len__(self) -> int:
        with self._lock:
            return len(self._entries)

    def __repr__(self) -> str:
        return f"ResponseCache(size={len(self)})"
