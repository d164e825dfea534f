"""Tests for the asyncio League and DDragon clients."""

from __future__ import annotations

import asyncio

import pytest

from narwhalol import AsyncDDragonClient, AsyncLeagueClient
from narwhalol.constants import Division, LanguageCode, RankedQueue, RankedTier, Region
from narwhalol.exceptions import DataNotFoundError, MalformedConfigError, NarwhalError


NA_BASE = "https://na1.api.riotgames.com/lol"
DDRAGON = "https://ddragon.leagueoflegends.com"


class TestAsyncLeagueClient:
    def test_missing_key(self, transport) -> None:
        with pytest.raises(MalformedConfigError):
            AsyncLeagueClient(Region.NA, transport=transport)
        assert transport.requests == []

    def test_endpoints(self, league_transport, api_key) -> None:
        async def run():
            async with AsyncLeagueClient(api_key=api_key, transport=league_transport) as lapi:
                summoner = await lapi.get_summoner_by_name("Vetro")
                return (
                    summoner,
                    await lapi.get_champion_info(),
                    await lapi.get_champion_masteries(summoner.id),
                    await lapi.get_total_mastery_score(summoner.id),
                    await lapi.get_league_entries(summoner.id),
                )

        summoner, rotation, masteries, score, entries = asyncio.run(run())
        assert summoner.name == "Vetro"
        assert rotation.max_new_player_level == 10
        assert len(masteries) == 2
        assert score == 192
        assert entries[0].queue_type == "RANKED_SOLO_5x5"
        assert league_transport.requests[0].headers["X-Riot-Token"] == api_key

    def test_cache_hit(self, league_transport, api_key) -> None:
        async def run() -> None:
            async with AsyncLeagueClient(api_key=api_key, transport=league_transport) as lapi:
                await lapi.get_summoner_by_name("Vetro")
                await lapi.get_summoner_by_name("Vetro")

        asyncio.run(run())
        assert len(league_transport.requests) == 1

    def test_ladder_page(self, league_transport, load_fixture, api_key) -> None:
        url = f"{NA_BASE}/league-exp/v4/entries/RANKED_FLEX_SR/DIAMOND/IV?page=3"
        league_transport.add(url, load_fixture("league_entries.json"))

        async def run():
            async with AsyncLeagueClient(api_key=api_key, transport=league_transport) as lapi:
                return await lapi.get_league_entries_page(
                    RankedQueue.FLEX, RankedTier.DIAMOND, Division.IV, page=3
                )

        assert len(asyncio.run(run())) == 1
        assert league_transport.calls_to(url) == 1

    def test_unknown_summoner(self, league_transport, api_key) -> None:
        async def run() -> None:
            async with AsyncLeagueClient(api_key=api_key, transport=league_transport) as lapi:
                await lapi.get_summoner_by_name("Nobody")

        with pytest.raises(DataNotFoundError):
            asyncio.run(run())

    def test_ddragon_requires_with_ddragon(self, league_transport, api_key) -> None:
        async def run() -> None:
            async with AsyncLeagueClient(api_key=api_key, transport=league_transport) as lapi:
                lapi.ddragon

        with pytest.raises(NarwhalError):
            asyncio.run(run())

    def test_with_ddragon(self, league_transport, ddragon_transport, api_key) -> None:
        league_transport.routes.update(ddragon_transport.routes)

        async def run():
            lapi = AsyncLeagueClient(api_key=api_key, transport=league_transport)
            async with await lapi.with_ddragon(LanguageCode.UNITED_STATES):
                masteries = await lapi.get_champion_masteries("abc")
                champion = await lapi.ddragon.get_champion_by_key(masteries[1].champion_id)
                return champion, lapi.ddragon.cache is lapi.cache

        champion, shared = asyncio.run(run())
        assert champion.id == "Ahri"
        assert shared


class TestAsyncDDragonClient:
    def test_create_resolves_version(self, ddragon_transport) -> None:
        async def run():
            async with await AsyncDDragonClient.create(transport=ddragon_transport) as ddragon:
                return ddragon.version, await ddragon.get_champion("Xayah")

        version, xayah = asyncio.run(run())
        assert version == "9.24.2"
        assert xayah.name == "Xayah"

    def test_create_with_version_skips_lookup(self, ddragon_transport) -> None:
        async def run() -> str:
            async with await AsyncDDragonClient.create(
                version="9.23.1", transport=ddragon_transport
            ) as ddragon:
                return ddragon.version

        assert asyncio.run(run()) == "9.23.1"
        assert ddragon_transport.requests == []

    def test_create_fails_on_empty_versions(self, transport) -> None:
        transport.add(f"{DDRAGON}/api/versions.json", "[]")

        with pytest.raises(DataNotFoundError):
            asyncio.run(AsyncDDragonClient.create(transport=transport))

    def test_champions_and_keys(self, ddragon_transport) -> None:
        async def run():
            async with await AsyncDDragonClient.create(transport=ddragon_transport) as ddragon:
                return await ddragon.get_champions(), await ddragon.get_champion_by_key(64)

        champions, lee_sin = asyncio.run(run())
        assert "Ahri" in champions.data
        assert lee_sin.name == "Lee Sin"

    def test_extended_and_full_share_one_entry(self, ddragon_transport) -> None:
        async def run() -> None:
            async with await AsyncDDragonClient.create(transport=ddragon_transport) as ddragon:
                extended = await ddragon.get_champion_extended("Xayah")
                full = await ddragon.get_champion("Xayah")
                assert extended.data["Xayah"] == full

        asyncio.run(run())
        url = f"{DDRAGON}/cdn/9.24.2/data/en_US/champion/Xayah.json"
        assert ddragon_transport.calls_to(url) == 1
