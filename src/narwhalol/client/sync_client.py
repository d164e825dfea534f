"""Blocking fetch-or-cache orchestrator.

:class:`SyncFetcher` is the single choke point every blocking endpoint
method goes through. For each :class:`~narwhalol.client.request.RequestDescriptor`
it:

1. looks the URL up in the shared :class:`~narwhalol.cache.ResponseCache`
   and decodes the stored body on a hit;
2. otherwise sends one GET through :class:`httpx.Client`, attaching
   ``X-Riot-Token`` only when the descriptor carries a key;
3. maps the status code to a typed error (nothing is cached on error);
4. decodes the body into the requested type;
5. inserts the raw body into the cache and returns the decoded value.

Concurrent first-time requests for the same URL are not coalesced: both
may reach the network and both insert the same body.

See Also:
    :class:`~narwhalol.client.async_client.AsyncFetcher` for the
    asyncio equivalent.
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


class SyncFetcher:
    """Blocking fetcher backed by :class:`httpx.Client`.

    Args:
        config: Base URL, optional API key, region and request settings.
        cache: Cache to read from and populate. Pass the same instance to
            several fetchers to share entries; a fresh one is created when
            omitted.
        http_client: Pre-built :class:`httpx.Client` to send requests
            with. It is shared, not owned: :meth:`close` leaves it open.
        transport: Custom :class:`httpx.BaseTransport` (for example
            :class:`httpx.MockTransport`) for the client this fetcher
            builds. Ignored when *http_client* is given.

    Example::

        with SyncFetcher(config) as fetcher:
            summoner = fetcher.get(fetcher.descriptor("/summoner/v4/..."), Summoner)
    """

    def __init__(
        self,
        config: ClientConfig,
        cache: Optional[ResponseCache] = None,
        http_client: Optional[httpx.Client] = None,
        transport: Optional[httpx.BaseTransport] = None,
    ) -> None:
        self._config = config
        self._cache = cache if cache is not None else ResponseCache()
        self._owns_client = http_client is None
        self._client: Optional[httpx.Client] = http_client or httpx.Client(
            timeout=config.timeout,
            verify=config.verify_ssl,
            follow_redirects=True,
            transport=transport,
        )

    # ------------------------------------------------------------------ #
    # Context manager
    # ------------------------------------------------------------------ #

    def __enter__(self) -> SyncFetcher:
        return self

    def __exit__(self, *args: object) -> None:
        self.close()

    def close(self) -> None:
        """Release the HTTP client if this fetcher created it."""
        if self._client is not None and self._owns_client:
            self._client.close()
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
    def http_client(self) -> httpx.Client:
        if self._client is None:
            raise ClientClosedError("Fetcher has been closed")
        return self._client

    def descriptor(
        self,
        path: str,
        params: Optional[Mapping[str, Any]] = None,
        authenticated: bool = True,
    ) -> RequestDescriptor:
        """Build a descriptor for *path* under the configured base URL.

        Args:
            path: Endpoint path, already percent-encoded.
            params: Optional query parameters.
            authenticated: Attach the configured API key (if any).
        """
        return RequestDescriptor(
            url=build_url(self._config.base_url, path, params),
            api_key=self._config.api_key if authenticated else None,
        )

    # ------------------------------------------------------------------ #
    # Fetch-or-cache
    # ------------------------------------------------------------------ #

    def get(self, descriptor: RequestDescriptor, result_type: type[T]) -> T:
        """Return *descriptor*'s payload decoded as *result_type*.

        Served from the cache when the URL has been fetched successfully
        before; otherwise fetched once and cached.

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
        text = self._fetch(descriptor)
        value = decode_body(text, result_type, key)
        self._cache.insert(key, text)
        debug(f"Cached {len(text)} chars for {key}")
        return value

    def _fetch(self, descriptor: RequestDescriptor) -> str:
        """Send the GET and return the body text of a non-error response."""
        client = self.http_client
        try:
            response = client.get(descriptor.url, headers=descriptor.headers())
        except httpx.RequestError as exc:
            raise TransportError(f"Request to {descriptor.url} failed: {exc}") from exc

        debug(f"GET {descriptor.url} -> {response.status_code}")
        check_status(response.status_code, self._config.region)
        return response.text
