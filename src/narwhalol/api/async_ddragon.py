"""Asynchronous DDragon client -- mirrors :class:`~narwhalol.api.ddragon.DDragonClient`.

The latest version has to be fetched before any data URL can be built, so
instances are created with the :meth:`AsyncDDragonClient.create` coroutine
unless the version is already known.
"""

from __future__ import annotations

from typing import Any, Optional

import httpx

from narwhalol.api import paths
from narwhalol.api.ddragon import champion_by_key, extract_champion, latest_version
from narwhalol.cache import ResponseCache
from narwhalol.client import AsyncFetcher
from narwhalol.config import build_ddragon_config
from narwhalol.constants import LanguageCode
from narwhalol.models import AllChampions, ChampionData, ChampionExtended, ChampionFullData


class AsyncDDragonClient:
    """Typed async accessors for DDragon champion data.

    Args:
        version: Game version the data URLs are pinned to.
        language: Locale of the returned texts.
        cache: Shared response cache; a fresh one when omitted.
        http_client: Shared :class:`httpx.AsyncClient` (not closed by this client).
        transport: Custom :class:`httpx.AsyncBaseTransport` for a client built here.
        **overrides: ``timeout`` / ``verify_ssl`` settings.

    Example::

        async with await AsyncDDragonClient.create(LanguageCode.RUSSIA) as ddragon:
            champions = await ddragon.get_champions()
    """

    def __init__(
        self,
        version: str,
        language: LanguageCode = LanguageCode.UNITED_STATES,
        cache: Optional[ResponseCache] = None,
        http_client: Optional[httpx.AsyncClient] = None,
        transport: Optional[httpx.AsyncBaseTransport] = None,
        **overrides: Any,
    ) -> None:
        self._fetcher = AsyncFetcher(
            build_ddragon_config(**overrides),
            cache=cache,
            http_client=http_client,
            transport=transport,
        )
        self._language = language
        self._version = version

    @classmethod
    async def create(
        cls,
        language: LanguageCode = LanguageCode.UNITED_STATES,
        version: Optional[str] = None,
        **kwargs: Any,
    ) -> AsyncDDragonClient:
        """Build a client, resolving the latest version when *version* is omitted.

        Args:
            language: Locale of the returned texts.
            version: Pin to this version instead of the latest one.
            **kwargs: Forwarded to the constructor.
        """
        client = cls(version or "", language, **kwargs)
        if not version:
            try:
                client._version = latest_version(await client.get_versions())
            except BaseException:
                await client.aclose()
                raise
        return client

    async def __aenter__(self) -> AsyncDDragonClient:
        return self

    async def __aexit__(self, *args: object) -> None:
        await self.aclose()

    async def aclose(self) -> None:
        await self._fetcher.aclose()

    @property
    def language(self) -> LanguageCode:
        return self._language

    @property
    def version(self) -> str:
        return self._version

    @property
    def cache(self) -> ResponseCache:
        return self._fetcher.cache

    async def get_versions(self) -> list[str]:
        return await self._get(paths.ddragon_versions(), list[str])

    async def get_champions(self) -> AllChampions:
        return await self._get(
            paths.ddragon_champions(self._version, self._language), AllChampions
        )

    async def get_champion_by_key(self, key: int) -> ChampionData:
        return champion_by_key(await self.get_champions(), key)

    async def get_champion_extended(self, name: str) -> ChampionExtended:
        return await self._get(
            paths.ddragon_champion(self._version, self._language, name), ChampionExtended
        )

    async def get_champion(self, name: str) -> ChampionFullData:
        """Return the full record for champion *name*.

        Raises:
            DataNotFoundError: If the document has no entry for *name*.
        """
        return extract_champion(await self.get_champion_extended(name), name)

    async def _get(self, path: str, result_type: Any) -> Any:
        descriptor = self._fetcher.descriptor(path, authenticated=False)
        return await self._fetcher.get(descriptor, result_type)

    def __repr__(self) -> str:
        return f"AsyncDDragonClient(language={self._language.value!r}, version={self._version!r})"
