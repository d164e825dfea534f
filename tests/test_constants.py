"""Tests for the region, language and ranked enums."""

from __future__ import annotations

import pytest

from narwhalol.constants import Division, LanguageCode, RankedQueue, RankedTier, Region


class TestRegion:
    @pytest.mark.parametrize(
        ("region", "platform"),
        [
            (Region.BR, "BR1"),
            (Region.EUW, "EUW1"),
            (Region.JP, "JP1"),
            (Region.LAN, "LA1"),
            (Region.OCE, "OC1"),
            (Region.RU, "RU"),
            (Region.PBE, "PBE1"),
        ],
    )
    def test_platform(self, region: Region, platform: str) -> None:
        assert region.platform == platform

    def test_every_region_has_a_platform(self) -> None:
        for region in Region:
            assert region.platform

    def test_str_is_value(self) -> None:
        assert str(Region.EUNE) == "EUNE"


class TestLadderEnums:
    def test_queue_values(self) -> None:
        assert RankedQueue.SOLO == "RANKED_SOLO_5x5"
        assert str(RankedQueue.FLEX) == "RANKED_FLEX_SR"

    def test_tier_and_division(self) -> None:
        assert f"{RankedTier.GOLD}/{Division.II}" == "GOLD/II"

    def test_language(self) -> None:
        assert str(LanguageCode.UNITED_STATES) == "en_US"
        assert LanguageCode("ru_RU") is LanguageCode.RUSSIA
