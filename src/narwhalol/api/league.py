"""Blocking client for the League of Legends REST API.

:class:`LeagueClient` validates the API key at construction and builds
one :class:`~narwhalol.client.SyncFetcher` for the region's platform host.
Every accessor builds a path with :mod:`narwhalol.api.paths` and hands it
to the fetcher with a concrete result type.

A client can embed a :class:`~narwhalol.api.ddragon.DDragonClient` via
:meth:`LeagueClient.with_ddragon`; the embedded client shares the parent's
cache and HTTP connection pool.
"""

from __future__ import annotations

from typing import Any, Optional

import httpx

from narwhalol.api import paths
from narwhalol.api.ddragon import DDragonClient
from narwhalol.cache import ResponseCache
from narwhalol.client import SyncFetcher
from narwhalol.config import build_league_config
from narwhalol.constants import Division, LanguageCode, RankedQueue, RankedTier, Region
from narwhalol.exceptions import NarwhalError
from narwhalol.models import ChampionInfo, ChampionMastery, LeagueInfo, Summoner


class LeagueClient:
    """Typed accessors for the League API.

    Args:
        region: Server region; selects the platform host.
        api_key: Riot API key. Read from ``RIOT_API_KEY`` when omitted.
        cache: Shared response cache; a fresh one when omitted.
        http_client: Shared :class:`httpx.Client` (not closed by this client).
        transport: Custom :class:`httpx.BaseTransport` for a client built here.
        **overrides: ``timeout`` / ``verify_ssl`` settings.

    Raises:
        MalformedConfigError: If the API key is missing or malformed. No
            request is made in that case.

    Example::

        with LeagueClient(Region.KR) as lapi:
            faker = lapi.get_summoner_by_name("Hide on bush")
            masteries = lapi.get_champion_masteries(faker.id)
    """

    def __init__(
        self,
        region: Region = Region.NA,
        api_key: Optional[str] = None,
        cache: Optional[ResponseCache] = None,
        http_client: Optional[httpx.Client] = None,
        transport: Optional[httpx.BaseTransport] = None,
        **overrides: Any,
    ) -> None:
        config = build_league_config(region, api_key, **overrides)
        self._fetcher = SyncFetcher(
            config, cache=cache, http_client=http_client, transport=transport
        )
        self._ddragon: Optional[DDragonClient] = None

    # ------------------------------------------------------------------ #
    # Lifecycle
    # ------------------------------------------------------------------ #

    def __enter__(self) -> LeagueClient:
        return self

    def __exit__(self, *args: object) -> None:
        self.close()

    def close(self) -> None:
        if self._ddragon is not None:
            self._ddragon.close()
        self._fetcher.close()

    def with_ddragon(
        self,
        language: LanguageCode = LanguageCode.UNITED_STATES,
        version: Optional[str] = None,
    ) -> LeagueClient:
        """Embed a DDragon client sharing this client's cache and HTTP client.

        Returns:
            ``self``, so construction can be chained.
        """
        config = self._fetcher.config
        self._ddragon = DDragonClient(
            language,
            version=version,
            cache=self._fetcher.cache,
            http_client=self._fetcher.http_client,
            timeout=config.timeout,
            verify_ssl=config.verify_ssl,
        )
        return self

    # ------------------------------------------------------------------ #
    # Accessors
    # ------------------------------------------------------------------ #

    @property
    def region(self) -> Region:
        region = self._fetcher.config.region
        assert region is not None
        return region

    @property
    def cache(self) -> ResponseCache:
        return self._fetcher.cache

    @property
    def ddragon(self) -> DDragonClient:
        """The embedded DDragon client.

        Raises:
            NarwhalError: If :meth:`with_ddragon` was not called.
        """
        if self._ddragon is None:
            raise NarwhalError(
                "No embedded DDragon client; build the LeagueClient with with_ddragon()"
            )
        return self._ddragon

    # ------------------------------------------------------------------ #
    # Endpoints
    # ------------------------------------------------------------------ #

    def get_summoner_by_name(self, name: str) -> Summoner:
        """Get a summoner by display name."""
        return self._get(paths.summoner_by_name(name), Summoner)

    def get_champion_info(self) -> ChampionInfo:
        """Get the current free champion rotation."""
        return self._get(paths.champion_rotations(), ChampionInfo)

    def get_champion_masteries(self, summoner_id: str) -> list[ChampionMastery]:
        """Get every champion mastery entry for an encrypted summoner id."""
        return self._get(paths.champion_masteries(summoner_id), list[ChampionMastery])

    def get_champion_mastery_by_id(self, summoner_id: str, champion_id: int) -> ChampionMastery:
        return self._get(paths.champion_mastery(summoner_id, champion_id), ChampionMastery)

    def get_total_mastery_score(self, summoner_id: str) -> int:
        """Get the sum of champion mastery levels for a summoner."""
        return self._get(paths.mastery_score(summoner_id), int)

    def get_league_entries(self, summoner_id: str) -> list[LeagueInfo]:
        """Get the ranked entries (one per queue) of a summoner."""
        return self._get(paths.league_entries(summoner_id), list[LeagueInfo])

    def get_league_entries_page(
        self,
        queue: RankedQueue,
        tier: RankedTier,
        division: Division,
        page: int = 1,
    ) -> list[LeagueInfo]:
        """Get one page of a ranked ladder. Pages start at 1."""
        return self._get(
            paths.league_entries_page(queue, tier, division),
            list[LeagueInfo],
            params={"page": page},
        )

    def _get(self, path: str, result_type: Any, params: Optional[dict[str, Any]] = None) -> Any:
        return self._fetcher.get(self._fetcher.descriptor(path, params), result_type)

    def __repr__(self) -> str:
        return f"LeagueClient(region={self.region.value!r})"
