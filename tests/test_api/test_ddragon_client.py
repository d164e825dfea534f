"""Tests for the blocking DDragon client."""

from __future__ import annotations

import pytest

from narwhalol import DDragonClient, ResponseCache
from narwhalol.api.ddragon import champion_by_key, latest_version
from narwhalol.constants import LanguageCode
from narwhalol.exceptions import DataNotFoundError, ServiceUnavailableError


DDRAGON = "https://ddragon.leagueoflegends.com"
DATA = f"{DDRAGON}/cdn/9.24.2/data/en_US"


@pytest.fixture
def ddragon(ddragon_transport):
    with DDragonClient(LanguageCode.UNITED_STATES, transport=ddragon_transport) as client:
        yield client


class TestVersion:
    def test_latest_version_resolved(self, ddragon, ddragon_transport) -> None:
        assert ddragon.version == "9.24.2"
        assert ddragon_transport.calls_to(f"{DDRAGON}/api/versions.json") == 1
        ddragon.get_champions()
        assert ddragon_transport.calls_to(f"{DATA}/champion.json") == 1

    def test_explicit_version_skips_lookup(self, ddragon_transport) -> None:
        with DDragonClient(version="9.23.1", transport=ddragon_transport) as client:
            assert client.version == "9.23.1"
        assert ddragon_transport.requests == []

    def test_requests_carry_no_key(self, ddragon, ddragon_transport) -> None:
        ddragon.get_champions()
        for request in ddragon_transport.requests:
            assert "X-Riot-Token" not in request.headers

    def test_version_lookup_failure(self, transport) -> None:
        transport.add(f"{DDRAGON}/api/versions.json", "", status=503)
        with pytest.raises(ServiceUnavailableError):
            DDragonClient(transport=transport)

    def test_empty_version_list(self, transport) -> None:
        transport.add(f"{DDRAGON}/api/versions.json", "[]")
        with pytest.raises(DataNotFoundError):
            DDragonClient(transport=transport)

    def test_latest_version_helper(self) -> None:
        assert latest_version(["10.1.1", "9.24.2"]) == "10.1.1"

    def test_language_in_urls(self, ddragon_transport, load_fixture) -> None:
        ddragon_transport.add(
            f"{DDRAGON}/cdn/9.24.2/data/ru_RU/champion.json", load_fixture("champions.json")
        )
        with DDragonClient(LanguageCode.RUSSIA, transport=ddragon_transport) as client:
            assert client.language is LanguageCode.RUSSIA
            assert "Ahri" in client.get_champions().data


class TestChampions:
    def test_all_champions(self, ddragon) -> None:
        champions = ddragon.get_champions()
        assert champions.data_type == "champion"
        assert champions.version == "9.24.2"
        assert set(champions.data) == {"Ahri", "LeeSin"}
        assert champions.data["Ahri"].stats.attackdamage == pytest.approx(53.04)

    def test_by_key(self, ddragon) -> None:
        assert ddragon.get_champion_by_key(103).name == "Ahri"
        assert ddragon.get_champion_by_key(64).id == "LeeSin"

    def test_unknown_key(self, ddragon) -> None:
        with pytest.raises(DataNotFoundError):
            ddragon.get_champion_by_key(9999)

    def test_by_key_helper(self, ddragon) -> None:
        assert champion_by_key(ddragon.get_champions(), 103).id == "Ahri"

    def test_champion(self, ddragon) -> None:
        xayah = ddragon.get_champion("Xayah")
        assert xayah.key == "498"
        assert xayah.title == "the Rebel"
        assert xayah.spells[0].id == "XayahQ"
        assert xayah.passive is not None
        assert xayah.passive.name == "Clean Cuts"

    def test_unknown_champion(self, ddragon) -> None:
        with pytest.raises(DataNotFoundError):
            ddragon.get_champion("Nobody")

    def test_extended_and_full_share_one_entry(self, ddragon, ddragon_transport) -> None:
        extended = ddragon.get_champion_extended("Xayah")
        full = ddragon.get_champion("Xayah")
        assert extended.data["Xayah"] == full
        assert ddragon_transport.calls_to(f"{DATA}/champion/Xayah.json") == 1

    def test_shared_cache(self, ddragon_transport) -> None:
        cache = ResponseCache()
        with DDragonClient(cache=cache, transport=ddragon_transport) as a:
            a.get_champions()
        with DDragonClient(cache=cache, transport=ddragon_transport) as b:
            b.get_champions()
            assert b.cache is cache
        assert ddragon_transport.calls_to(f"{DDRAGON}/api/versions.json") == 1
        assert ddragon_transport.calls_to(f"{DATA}/champion.json") == 1

    def test_repr(self, ddragon) -> None:
        assert repr(ddragon) == "DDragonClient(language='en_US', version='9.24.2')"
