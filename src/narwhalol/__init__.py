"""narwhalol -- typed, cached client for the League of Legends API and DDragon.

Every request goes through a fetch-or-cache orchestrator: the response
body for a URL is fetched once, stored as raw text in an in-memory
:class:`~narwhalol.cache.ResponseCache`, and decoded into the caller's
pydantic model on every later call.

Typical use::

    from narwhalol import LeagueClient, Region, LanguageCode

    lapi = LeagueClient(Region.NA).with_ddragon(LanguageCode.UNITED_STATES)
    summoner = lapi.get_summoner_by_name("Santorin")
    lee_sin = lapi.ddragon.get_champion("LeeSin")
    mastery = lapi.get_champion_mastery_by_id(summoner.id, int(lee_sin.key))

Modules:
    api: League and DDragon endpoint clients (blocking and asyncio).
    client: The fetch-or-cache orchestrators.
    cache: The shared response cache.
    exceptions: Error taxonomy and status-code mapping.
    models: Pydantic DTOs and :class:`~narwhalol.models.ClientConfig`.
    config: API key validation and environment settings.
    constants: Regions, languages and ranked enums.
    output: stdout/stderr output and debug diagnostics.
    app: Typer CLI entry point.
"""

__version__ = "0.2.0"

from narwhalol.api import AsyncDDragonClient, AsyncLeagueClient, DDragonClient, LeagueClient
from narwhalol.cache import ResponseCache
from narwhalol.constants import Division, LanguageCode, RankedQueue, RankedTier, Region
from narwhalol.exceptions import NarwhalError
from narwhalol.models import (
    AllChampions,
    ChampionData,
    ChampionFullData,
    ChampionInfo,
    ChampionMastery,
    LeagueInfo,
    Summoner,
)

__all__ = [
    "__version__",
    "LeagueClient",
    "AsyncLeagueClient",
    "DDragonClient",
    "AsyncDDragonClient",
    "ResponseCache",
    "Region",
    "LanguageCode",
    "RankedQueue",
    "RankedTier",
    "Division",
    "NarwhalError",
    "Summoner",
    "ChampionInfo",
    "ChampionMastery",
    "LeagueInfo",
    "AllChampions",
    "ChampionData",
    "ChampionFullData",
]
