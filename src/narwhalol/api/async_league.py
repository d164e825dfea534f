"""Asynchronous League API client -- mirrors :class:`~narwhalol.api.league.LeagueClient`.

Construction is synchronous (it only validates the key and builds the
:class:`httpx.AsyncClient`); every endpoint is a coroutine. Embedding a
DDragon client needs a version lookup, so :meth:`AsyncLeagueClient.with_ddragon`
is a coroutine too.
"""

from __future__ import annotations

from typing import Any, Optional

import httpx

from narwhalol.api import paths
from narwhalol.api.async_ddragon import AsyncDDragonClient
from narwhalol.cache import ResponseCache
from narwhalol.client import AsyncFetcher
from narwhalol.config import build_league_config
from narwhalol.constants import Division, LanguageCode, RankedQueue, RankedTier, Region
from narwhalol.exceptions import NarwhalError
from narwhalol.models import ChampionInfo, ChampionMastery, LeagueInfo, Summoner


class AsyncLeagueClient:
    """Typed async accessors for the League API.

    Takes the same arguments as :class:`~narwhalol.api.league.LeagueClient`,
    with *http_client* / *transport* being their async httpx counterparts.

    Raises:
        MalformedConfigError: If the API key is missing or malformed.

    Example::

        async with AsyncLeagueClient(Region.EUW) as lapi:
            summoner = await lapi.get_summoner_by_name("Rekkles")
    """

    def __init__(
        self,
        region: Region = Region.NA,
        api_key: Optional[str] = None,
        cache: Optional[ResponseCache] = None,
        http_client: Optional[httpx.AsyncClient] = None,
        transport: Optional[httpx.AsyncBaseTransport] = None,
        **overrides: Any,
    ) -> None:
        config = build_league_config(region, api_key, **overrides)
        self._fetcher = AsyncFetcher(
            config, cache=cache, http_client=http_client, transport=transport
        )
        self._ddragon: Optional[AsyncDDragonClient] = None

    async def __aenter__(self) -> AsyncLeagueClient:
        return self

    async def __aexit__(self, *args: object) -> None:
        await self.aclose()

    async def aclose(self) -> None:
        if self._ddragon is not None:
            await self._ddragon.aclose()
        await self._fetcher.aclose()

    async def with_ddragon(
        self,
        language: LanguageCode = LanguageCode.UNITED_STATES,
        version: Optional[str] = None,
    ) -> AsyncLeagueClient:
        """Embed a DDragon client sharing this client's cache and HTTP client."""
        config = self._fetcher.config
        self._ddragon = await AsyncDDragonClient.create(
            language,
            version=version,
            cache=self._fetcher.cache,
            http_client=self._fetcher.http_client,
            timeout=config.timeout,
            verify_ssl=config.verify_ssl,
        )
        return self

    @property
    def region(self) -> Region:
        region = self._fetcher.config.region
        assert region is not None
        return region

    @property
    def cache(self) -> ResponseCache:
        return self._fetcher.cache

    @property
    def ddragon(self) -> AsyncDDragonClient:
        if self._ddragon is None:
            raise NarwhalError(
                "No embedded DDragon client; await AsyncLeagueClient.with_ddragon() first"
            )
        return self._ddragon

    async def get_summoner_by_name(self, name: str) -> Summoner:
        return await self._get(paths.summoner_by_name(name), Summoner)

    async def get_champion_info(self) -> ChampionInfo:
        return await self._get(paths.champion_rotations(), ChampionInfo)

    async def get_champion_masteries(self, summoner_id: str) -> list[ChampionMastery]:
        return await self._get(paths.champion_masteries(summoner_id), list[ChampionMastery])

    async def get_champion_mastery_by_id(
        self, summoner_id: str, champion_id: int
    ) -> ChampionMastery:
        return await self._get(paths.champion_mastery(summoner_id, champion_id), ChampionMastery)

    async def get_total_mastery_score(self, summoner_id: str) -> int:
        return await self._get(paths.mastery_score(summoner_id), int)

    async def get_league_entries(self, summoner_id: str) -> list[LeagueInfo]:
        return await self._get(paths.league_entries(summoner_id), list[LeagueInfo])

    async def get_league_entries_page(
        self,
        queue: RankedQueue,
        tier: RankedTier,
        division: Division,
        page: int = 1,
    ) -> list[LeagueInfo]:
        return await self._get(
            paths.league_entries_page(queue, tier, division),
            list[LeagueInfo],
            params={"page": page},
        )

    async def _get(
        self, path: str, result_type: Any, params: Optional[dict[str, Any]] = None
    ) -> Any:
        return await self._fetcher.get(self._fetcher.descriptor(path, params), result_type)

    def __repr__(self) -> str:
        return f"AsyncLeagueClient(region={self.region.value!r})"
