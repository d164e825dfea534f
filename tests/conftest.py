"""Shared test fixtures for narwhalol.

Provides a recording stub transport, JSON payload fixtures, a valid API
key, and environment / output isolation. These fixtures are discovered
by pytest automatically and are available to every test module.
"""

from __future__ import annotations

from pathlib import Path
from typing import Callable, Optional

import httpx
import pytest

from narwhalol.output import OutputManager, reset_output, set_output


FIXTURES_DIR = Path(__file__).parent / "fixtures"

VALID_API_KEY = "RGAPI-12345678-1234-1234-1234-123456789abc"

NA_BASE = "https://na1.api.riotgames.com/lol"
DDRAGON = "https://ddragon.leagueoflegends.com"


class RouteTransport(httpx.MockTransport):
    """Mock transport answering from a ``url -> (status, body)`` table.

    Every request is recorded in :attr:`requests`. Unknown URLs answer 404,
    the way the real API does for unknown summoners.
    """

    def __init__(self, routes: Optional[dict[str, tuple[int, str]]] = None) -> None:
        self.routes: dict[str, tuple[int, str]] = dict(routes or {})
        self.requests: list[httpx.Request] = []
        super().__init__(self._handle)

    def add(self, url: str, body: str, status: int = 200) -> None:
        self.routes[url] = (status, body)

    def calls_to(self, url: str) -> int:
        return sum(1 for r in self.requests if str(r.url) == url)

    def _handle(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        status, body = self.routes.get(
            str(request.url),
            (404, '{"status": {"message": "Data not found", "status_code": 404}}'),
        )
        return httpx.Response(
            status, text=body, headers={"content-type": "application/json"}
        )


# ---------------------------------------------------------------------------
# Isolation
# ---------------------------------------------------------------------------


@pytest.fixture(autouse=True)
def _isolate(monkeypatch: pytest.MonkeyPatch) -> None:
    """Clear narwhalol env vars and install a quiet output manager per test."""
    for var in ["RIOT_API_KEY", "NARWHALOL_TIMEOUT", "NARWHALOL_VERIFY_SSL"]:
        monkeypatch.delenv(var, raising=False)
    set_output(OutputManager(no_color=True, quiet=True))
    yield
    reset_output()


# ---------------------------------------------------------------------------
# Keys and payloads
# ---------------------------------------------------------------------------


@pytest.fixture
def api_key() -> str:
    return VALID_API_KEY


@pytest.fixture
def api_key_env(monkeypatch: pytest.MonkeyPatch) -> str:
    """Export a valid RIOT_API_KEY for the duration of the test."""
    monkeypatch.setenv("RIOT_API_KEY", VALID_API_KEY)
    return VALID_API_KEY


@pytest.fixture
def load_fixture() -> Callable[[str], str]:
    """Return a loader reading ``tests/fixtures/<name>`` as text."""

    def _load(name: str) -> str:
        return (FIXTURES_DIR / name).read_text(encoding="utf-8")

    return _load


@pytest.fixture
def transport() -> RouteTransport:
    """An empty :class:`RouteTransport`; tests add routes as needed."""
    return RouteTransport()


@pytest.fixture
def league_transport(load_fixture: Callable[[str], str]) -> RouteTransport:
    """Stub transport preloaded with the NA League API payloads."""
    summoner_id = "abc"
    return RouteTransport(
        {
            f"{NA_BASE}/summoner/v4/summoners/by-name/Vetro": (
                200,
                load_fixture("summoner_vetro.json"),
            ),
            f"{NA_BASE}/platform/v3/champion-rotations": (
                200,
                load_fixture("champion_rotation.json"),
            ),
            f"{NA_BASE}/champion-mastery/v4/champion-masteries/by-summoner/{summoner_id}": (
                200,
                load_fixture("masteries.json"),
            ),
            f"{NA_BASE}/champion-mastery/v4/scores/by-summoner/{summoner_id}": (200, "192"),
            f"{NA_BASE}/league/v4/entries/by-summoner/{summoner_id}": (
                200,
                load_fixture("league_entries.json"),
            ),
        }
    )


@pytest.fixture
def ddragon_transport(load_fixture: Callable[[str], str]) -> RouteTransport:
    """Stub transport preloaded with DDragon 9.24.2 en_US payloads."""
    data = f"{DDRAGON}/cdn/9.24.2/data/en_US"
    return RouteTransport(
        {
            f"{DDRAGON}/api/versions.json": (200, load_fixture("versions.json")),
            f"{data}/champion.json": (200, load_fixture("champions.json")),
            f"{data}/champion/Xayah.json": (200, load_fixture("champion_xayah.json")),
        }
    )
