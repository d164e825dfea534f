"""Blocking client for the DDragon static-data CDN.

DDragon requests carry no API key. The latest game version is resolved
once at construction (``api/versions.json``, first entry) unless a version
is passed explicitly, and every data URL is pinned to that version.
"""

from __future__ import annotations

from typing import Any, Optional

import httpx

from narwhalol.api import paths
from narwhalol.cache import ResponseCache
from narwhalol.client import SyncFetcher
from narwhalol.config import build_ddragon_config
from narwhalol.constants import LanguageCode
from narwhalol.exceptions import DataNotFoundError
from narwhalol.models import AllChampions, ChampionData, ChampionExtended, ChampionFullData


class DDragonClient:
    """Typed accessors for DDragon champion data.

    Args:
        language: Locale of the returned texts.
        version: Game version such as ``"9.24.2"``; resolved from DDragon
            when omitted.
        cache: Shared response cache; a fresh one when omitted.
        http_client: Shared :class:`httpx.Client` (not closed by this client).
        transport: Custom :class:`httpx.BaseTransport` for a client built here.
        **overrides: ``timeout`` / ``verify_ssl`` settings.

    Raises:
        NarwhalError: If the version lookup fails.

    Example::

        ddragon = DDragonClient(LanguageCode.UNITED_STATES)
        xayah = ddragon.get_champion("Xayah")
    """

    def __init__(
        self,
        language: LanguageCode = LanguageCode.UNITED_STATES,
        version: Optional[str] = None,
        cache: Optional[ResponseCache] = None,
        http_client: Optional[httpx.Client] = None,
        transport: Optional[httpx.BaseTransport] = None,
        **overrides: Any,
    ) -> None:
        self._fetcher = SyncFetcher(
            build_ddragon_config(**overrides),
            cache=cache,
            http_client=http_client,
            transport=transport,
        )
        self._language = language
        if version:
            self._version = version
        else:
            try:
                self._version = latest_version(self.get_versions())
            except BaseException:
                self._fetcher.close()
                raise

    def __enter__(self) -> DDragonClient:
        return self

    def __exit__(self, *args: object) -> None:
        self.close()

    def close(self) -> None:
        self._fetcher.close()

    @property
    def language(self) -> LanguageCode:
        return self._language

    @property
    def version(self) -> str:
        return self._version

    @property
    def cache(self) -> ResponseCache:
        return self._fetcher.cache

    def get_versions(self) -> list[str]:
        """Return all published game versions, newest first."""
        return self._get(paths.ddragon_versions(), list[str])

    def get_champions(self) -> AllChampions:
        """Return the ``champion.json`` summary document."""
        return self._get(paths.ddragon_champions(self._version, self._language), AllChampions)

    def get_champion_by_key(self, key: int) -> ChampionData:
        """Look a champion up by its numeric key (the ``championId`` in mastery data).

        Raises:
            DataNotFoundError: If no champion has that key.
        """
        return champion_by_key(self.get_champions(), key)

    def get_champion_extended(self, name: str) -> ChampionExtended:
        """Return the full ``champion/<name>.json`` envelope."""
        return self._get(
            paths.ddragon_champion(self._version, self._language, name), ChampionExtended
        )

    def get_champion(self, name: str) -> ChampionFullData:
        """Return the full record for champion *name* (its id, e.g. ``"LeeSin"``).

        Raises:
            DataNotFoundError: If the document has no entry for *name*.
        """
        return extract_champion(self.get_champion_extended(name), name)

    def _get(self, path: str, result_type: Any) -> Any:
        return self._fetcher.get(self._fetcher.descriptor(path, authenticated=False), result_type)

    def __repr__(self) -> str:
        return f"DDragonClient(language={self._language.value!r}, version={self._version!r})"


# --- Helpers shared with the async client ---


def latest_version(versions: list[str]) -> str:
    """Return the newest version from a ``versions.json`` list.

    Raises:
        DataNotFoundError: If the list is empty.
    """
    if not versions:
        raise DataNotFoundError("DDragon returned no game versions")
    return versions[0]


def extract_champion(document: ChampionExtended, name: str) -> ChampionFullData:
    try:
        return document.data[name]
    except KeyError:
        raise DataNotFoundError(f"Champion {name!r} not found in DDragon data") from None


def champion_by_key(document: AllChampions, key: int) -> ChampionData:
    wanted = str(key)
    for champion in document.data.values():
        if champion.key == wanted:
            return champion
    raise DataNotFoundError(f"No champion with key {key} in DDragon data")
