"""Typed endpoint clients for the League API and DDragon.

Classes:
    :class:`LeagueClient` / :class:`AsyncLeagueClient` -- League REST API.
    :class:`DDragonClient` / :class:`AsyncDDragonClient` -- DDragon CDN.
"""

from narwhalol.api.async_ddragon import AsyncDDragonClient
from narwhalol.api.async_league import AsyncLeagueClient
from narwhalol.api.ddragon import DDragonClient
from narwhalol.api.league import LeagueClient

__all__ = ["LeagueClient", "AsyncLeagueClient", "DDragonClient", "AsyncDDragonClient"]
