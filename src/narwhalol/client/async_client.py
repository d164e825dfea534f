"""Asynchronous fetch-or-cache orchestrator -- mirrors :class:`~narwhalol.client.sync_client.SyncFetcher`.

:class:`AsyncFetcher` follows the same five steps as the blocking fetcher
but awaits :class:`httpx.AsyncClient`. The transport round trip is the
only suspension point; cache lookups and inserts never await, so the
shared :class:`~narwhalol.cache.ResponseCache` lock is never held across
a suspension.

A cancelled or timed-out fetch raises before the insert step and leaves
the cache untouched.
"""

from __future__ import annotations

from typing import Any, Mapping, Optional, TypeVar

import httpx

from narwhalol.cache import ResponseCache
from narwhalol.client.request import RequestDescriptor, build_url, decode_body
from narwhalol.exceptions import ClientClosedError, TransportError, check_status
from narwhalol.models import ClientConfig
from narwhalol.output import debug

T = TypeVar("T")


class AsyncFetcher:
    """Non-blocking fetcher backed by :class:`httpx.AsyncClient`.

    Args:
        config: Base URL, optional API key, region and request settings.
        cache: Cache to read from and populate; created when omitted.
        http_client: Pre-built :class:`httpx.AsyncClient`. Shared, not
            owned: :meth:`aclose` leaves it open.
        transport: Custom :class:`httpx.AsyncBaseTransport` for the client
            this fetcher builds. Ignored when *http_client* is given.

    Example::

        async with AsyncFetcher(config) as fetcher:
            rotation = await fetcher.get(
                fetcher.descriptor("/platform/v3/champion-rotations"), ChampionInfo
            )
    """

    def __init__(
        self,
        config: ClientConfig,
        cache: Optional[ResponseCache] = None,
        http_client: Optional[httpx.AsyncClient] = None,
        transport: Optional[httpx.AsyncBaseTransport] = None,
    ) -> None:
        self._config = config
        self._cache = cache if cache is not None else ResponseCache()
        self._owns_client = http_client is None
        self._client: Optional[httpx.AsyncClient] = http_client or httpx.AsyncClient(
            timeout=config.timeout,
            verify=config.verify_ssl,
            follow_redirects=True,
            transport=transport,
        )

    # ------------------------------------------------------------------ #
    # Async context manager
    # ------------------------------------------------------------------ #

    async def __aenter__(self) -> AsyncFetcher:
        return self

    async def __aexit__(self, *args: object) -> None:
        await self.aclose()

    async def aclose(self) -> None:
        """Release the HTTP client if this fetcher created it."""
        if self._client is not None and self._owns_client:
            await self._client.aclose()
        self._client = None

    # ------------------------------------------------------------------ #
    # Accessors
    # ------------------------------------------------------------------ #

    @property
    def config(self) -> ClientConfig:
        return self._config

    @property
    def cache(self) -> ResponseCache:
        return self._cache

    @property
    def http_client(self) -> httpx.AsyncClient:
        if self._client is None:
            raise ClientClosedError("Fetcher has been closed")
        return self._client

    def descriptor(
        self,
        path: str,
        params: Optional[Mapping[str, Any]] = None,
        authenticated: bool = True,
    ) -> RequestDescriptor:
        """Build a descriptor for *path* under the configured base URL."""
        return RequestDescriptor(
            url=build_url(self._config.base_url, path, params),
            api_key=self._config.api_key if authenticated else None,
        )

    # ------------------------------------------------------------------ #
    # Fetch-or-cache
    # ------------------------------------------------------------------ #

    async def get(self, descriptor: RequestDescriptor, result_type: type[T]) -> T:
        """Return *descriptor*'s payload decoded as *result_type*.

        Raises:
            HTTPStatusError: The typed subclass for an error status.
            TransportError: If no response was received.
            DeserializationError: If the body does not match *result_type*.
            ClientClosedError: If the fetcher has been closed.
        """
        key = descriptor.cache_key

        cached = self._cache.lookup(key)
        if cached is not None:
            debug(f"Cache hit: {key}")
            return decode_body(cached, result_type, key)

        debug(f"Cache miss, fetching: {key}")
        text = await self._fetch(descriptor)
        value = decode_body(text, result_type, key)
        self._cache.insert(key, text)
        debug(f"Cached {len(text)} chars for {key}")
        return value

    async def _fetch(self, descriptor: RequestDescriptor) -> str:
        client = self.http_client
        try:
            response = await client.get(descriptor.url, headers=descriptor.headers())
        except httpx.RequestError as exc:
            raise TransportError(f"Request to {descriptor.url} failed: {exc}") from exc

        debug(f"GET {descriptor.url} -> {response.status_code}")
        check_status(response.status_code, self._config.region)
        return response.text
