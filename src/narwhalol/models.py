"""Pydantic models shared across narwhalol.

The models fall into two groups:

**Configuration** -- :class:`ClientConfig`, the immutable settings a
fetcher is built from.

**Response DTOs** -- one model per payload shape:

* League API (camelCase on the wire): :class:`Summoner`,
  :class:`ChampionInfo`, :class:`ChampionMastery`, :class:`LeagueInfo`.
* DDragon (lowercase on the wire): :class:`AllChampions`,
  :class:`ChampionData` and its parts, :class:`ChampionExtended`,
  :class:`ChampionFullData` and its parts.

DTOs ignore unknown keys so that additive upstream changes do not break
decoding, but every field declared without a default is required: a
missing field surfaces as :class:`~narwhalol.exceptions.DeserializationError`.
"""

from __future__ import annotations

from typing import Optional

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel

from narwhalol.constants import Region


# --- Configuration ---


class ClientConfig(BaseModel):
    """Settings for one fetcher, fixed at construction.

    Build League API configs with :func:`narwhalol.config.build_league_config`,
    which validates the API key; DDragon configs carry no key.

    Example::

        ClientConfig(base_url="https://na1.api.riotgames.com/lol",
                     api_key="RGAPI-...", region=Region.NA)
    """

    model_config = ConfigDict(frozen=True)

    base_url: str = Field(description="Prefix every endpoint path is appended to")
    api_key: Optional[str] = Field(
        default=None, description="Value for the X-Riot-Token header, if any"
    )
    region: Optional[Region] = Field(
        default=None, description="Region reported by 503 errors"
    )
    timeout: float = Field(default=10.0, gt=0, description="Request timeout in seconds")
    verify_ssl: bool = Field(default=True, description="Verify TLS certificates")


# --- League API ---


class _CamelModel(BaseModel):
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


class Summoner(_CamelModel):
    """Summoner profile from ``summoner/v4``."""

    profile_icon_id: int
    name: str
    puuid: str
    summoner_level: int
    revision_date: int
    id: str
    account_id: str


class ChampionInfo(_CamelModel):
    """Free champion rotation from ``platform/v3/champion-rotations``."""

    free_champion_ids: list[int]
    free_champion_ids_for_new_players: list[int]
    max_new_player_level: int


class ChampionMastery(_CamelModel):
    chest_granted: bool
    champion_level: int
    champion_points: int
    champion_id: int
    champion_points_until_next_level: int
    last_play_time: int
    tokens_earned: int
    champion_points_since_last_level: int
    summoner_id: str


class LeagueInfo(_CamelModel):
    """One ranked entry, as returned by ``league/v4`` and ``league-exp/v4``."""

    queue_type: str
    summoner_name: str
    hot_streak: bool
    wins: int
    veteran: bool
    losses: int
    rank: str
    tier: str
    inactive: bool
    fresh_blood: bool
    league_id: str
    summoner_id: str
    league_points: int


# --- DDragon ---


class ChampionDataInfo(BaseModel):
    attack: int
    defense: int
    magic: int
    difficulty: int


class ChampionDataImage(BaseModel):
    full: str
    sprite: str
    group: str
    x: int
    y: int
    w: int
    h: int


class ChampionDataStats(BaseModel):
    hp: float
    hpperlevel: float
    mp: float
    mpperlevel: float
    movespeed: float
    armor: float
    armorperlevel: float
    spellblock: float
    spellblockperlevel: float
    attackrange: float
    hpregen: float
    hpregenperlevel: float
    mpregen: float
    mpregenperlevel: float
    crit: float
    critperlevel: float
    attackdamage: float
    attackdamageperlevel: float
    attackspeedperlevel: float
    attackspeed: float


class ChampionData(BaseModel):
    """Summary entry in ``champion.json``."""

    version: str
    id: str
    key: str
    name: str
    title: str
    blurb: str
    info: ChampionDataInfo
    image: ChampionDataImage
    tags: list[str]
    partype: str
    stats: ChampionDataStats


class AllChampions(BaseModel):
    """The ``champion.json`` document, keyed by champion id (e.g. ``"Ahri"``)."""

    model_config = ConfigDict(populate_by_name=True)

    data_type: str = Field(alias="type")
    format: str
    version: str
    data: dict[str, ChampionData]


class SkinData(BaseModel):
    id: str
    num: int
    name: str
    chromas: bool = False


class SpellData(BaseModel):
    id: str
    name: str
    description: str
    tooltip: str = ""
    maxrank: int
    cooldown: list[float] = Field(default_factory=list)
    cost: list[float] = Field(default_factory=list)
    range: list[float] = Field(default_factory=list)


class PassiveData(BaseModel):
    name: str
    description: str
    image: Optional[ChampionDataImage] = None


class ChampionFullData(BaseModel):
    """Full champion record from ``champion/<Name>.json``."""

    id: str
    key: str
    name: str
    title: str
    lore: str = ""
    blurb: str = ""
    image: Optional[ChampionDataImage] = None
    skins: list[SkinData] = Field(default_factory=list)
    allytips: list[str] = Field(default_factory=list)
    enemytips: list[str] = Field(default_factory=list)
    tags: list[str] = Field(default_factory=list)
    partype: str = ""
    info: Optional[ChampionDataInfo] = None
    stats: Optional[ChampionDataStats] = None
    spells: list[SpellData] = Field(default_factory=list)
    passive: Optional[PassiveData] = None


class ChampionExtended(BaseModel):
    """The ``champion/<Name>.json`` envelope; ``data`` holds a single entry."""

    model_config = ConfigDict(populate_by_name=True)

    data_type: str = Field(alias="type")
    format: str
    version: str
    data: dict[str, ChampionFullData]
