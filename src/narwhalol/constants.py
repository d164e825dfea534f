"""Enumerations for regions, DDragon languages and ranked ladders.

Every enum subclasses ``str`` so members can be dropped straight into URL
templates and compared with plain strings::

    >>> Region.EUW.platform
    'EUW1'
    >>> RankedQueue.SOLO == "RANKED_SOLO_5x5"
    True
"""

from __future__ import annotations

from enum import Enum


class Region(str, Enum):
    """A League of Legends server region.

    The value is the short public name; :attr:`platform` is the platform
    routing value used as the API host prefix.
    """

    BR = "BR"
    EUNE = "EUNE"
    EUW = "EUW"
    JP = "JP"
    KR = "KR"
    LAN = "LAN"
    LAS = "LAS"
    NA = "NA"
    OCE = "OCE"
    TR = "TR"
    RU = "RU"
    PBE = "PBE"

    @property
    def platform(self) -> str:
        """Platform routing value, e.g. ``NA1`` for :attr:`NA`."""
        return _PLATFORMS[self]

    def __str__(self) -> str:
        return self.value


_PLATFORMS: dict[Region, str] = {
    Region.BR: "BR1",
    Region.EUNE: "EUN1",
    Region.EUW: "EUW1",
    Region.JP: "JP1",
    Region.KR: "KR",
    Region.LAN: "LA1",
    Region.LAS: "LA2",
    Region.NA: "NA1",
    Region.OCE: "OC1",
    Region.TR: "TR1",
    Region.RU: "RU",
    Region.PBE: "PBE1",
}


class LanguageCode(str, Enum):
    """Locale used for DDragon static data paths."""

    CZECH_REPUBLIC = "cs_CZ"
    GREECE = "el_GR"
    POLAND = "pl_PL"
    ROMANIA = "ro_RO"
    HUNGARY = "hu_HU"
    UNITED_KINGDOM = "en_GB"
    GERMANY = "de_DE"
    SPAIN = "es_ES"
    ITALY = "it_IT"
    FRANCE = "fr_FR"
    JAPAN = "ja_JP"
    KOREA = "ko_KR"
    MEXICO = "es_MX"
    ARGENTINA = "es_AR"
    BRAZIL = "pt_BR"
    UNITED_STATES = "en_US"
    AUSTRALIA = "en_AU"
    RUSSIA = "ru_RU"
    TURKEY = "tr_TR"
    MALAYSIA = "ms_MY"
    PHILIPPINES = "en_PH"
    SINGAPORE = "en_SG"
    THAILAND = "th_TH"
    VIETNAM = "vn_VN"
    INDONESIA = "id_ID"
    MALAYSIA_CHINESE = "zh_MY"
    CHINA = "zh_CN"
    TAIWAN = "zh_TW"

    def __str__(self) -> str:
        return self.value


class RankedQueue(str, Enum):
    """Ranked queue identifiers accepted by the league endpoints."""

    SOLO = "RANKED_SOLO_5x5"
    FLEX = "RANKED_FLEX_SR"
    # Twisted Treeline was removed from the game; kept for old ladder pages.
    TWISTED_TREELINE = "RANKED_FLEX_TT"

    def __str__(self) -> str:
        return self.value


class RankedTier(str, Enum):
    IRON = "IRON"
    BRONZE = "BRONZE"
    SILVER = "SILVER"
    GOLD = "GOLD"
    PLATINUM = "PLATINUM"
    DIAMOND = "DIAMOND"
    MASTER = "MASTER"
    GRANDMASTER = "GRANDMASTER"
    CHALLENGER = "CHALLENGER"

    def __str__(self) -> str:
        return self.value


class Division(str, Enum):
    I = "I"  # noqa: E741
    II = "II"
    III = "III"
    IV = "IV"

    def __str__(self) -> str:
        return self.value
