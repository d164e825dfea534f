"""Endpoint path builders, one per logical resource.

League API paths are relative to :func:`~narwhalol.config.league_base_url`;
DDragon paths are relative to :data:`~narwhalol.config.DDRAGON_ROOT`.
Caller-supplied values are percent-encoded as single path segments.
"""

from __future__ import annotations

from narwhalol.client.request import path_segment
from narwhalol.constants import Division, LanguageCode, RankedQueue, RankedTier


# --- League API ---


def summoner_by_name(name: str) -> str:
    return f"/summoner/v4/summoners/by-name/{path_segment(name)}"


def champion_rotations() -> str:
    return "/platform/v3/champion-rotations"


def champion_masteries(summoner_id: str) -> str:
    return f"/champion-mastery/v4/champion-masteries/by-summoner/{path_segment(summoner_id)}"


def champion_mastery(summoner_id: str, champion_id: int) -> str:
    return f"{champion_masteries(summoner_id)}/by-champion/{int(champion_id)}"


def mastery_score(summoner_id: str) -> str:
    return f"/champion-mastery/v4/scores/by-summoner/{path_segment(summoner_id)}"


def league_entries(summoner_id: str) -> str:
    return f"/league/v4/entries/by-summoner/{path_segment(summoner_id)}"


def league_entries_page(queue: RankedQueue, tier: RankedTier, division: Division) -> str:
    """Ladder page path; the page number goes in the ``page`` query parameter."""
    return f"/league-exp/v4/entries/{queue.value}/{tier.value}/{division.value}"


# --- DDragon ---


def ddragon_versions() -> str:
    return "/api/versions.json"


def ddragon_data(version: str, language: LanguageCode) -> str:
    """Directory of the data files for one game *version* and *language*."""
    return f"/cdn/{path_segment(version)}/data/{language.value}"


def ddragon_champions(version: str, language: LanguageCode) -> str:
    return f"{ddragon_data(version, language)}/champion.json"


def ddragon_champion(version: str, language: LanguageCode, name: str) -> str:
    return f"{ddragon_data(version, language)}/champion/{path_segment(name)}.json"
