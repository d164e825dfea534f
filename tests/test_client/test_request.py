"""Tests for request descriptors, URL building and body decoding."""

from __future__ import annotations

import pytest

from narwhalol.client.request import (
    AUTH_HEADER,
    RequestDescriptor,
    build_url,
    decode_body,
    path_segment,
)
from narwhalol.exceptions import DeserializationError
from narwhalol.models import ChampionMastery, Summoner


KEY = "RGAPI-12345678-1234-1234-1234-123456789abc"


class TestRequestDescriptor:
    def test_headers_without_key(self) -> None:
        headers = RequestDescriptor("https://ddragon.leagueoflegends.com/api/versions.json").headers()
        assert AUTH_HEADER not in headers
        assert headers["Accept"] == "application/json"

    def test_headers_with_key(self) -> None:
        headers = RequestDescriptor("https://example.com", api_key=KEY).headers()
        assert headers[AUTH_HEADER] == KEY

    def test_cache_key_ignores_auth(self) -> None:
        a = RequestDescriptor("https://example.com/x", api_key=KEY)
        b = RequestDescriptor("https://example.com/x")
        assert a.cache_key == b.cache_key == "https://example.com/x"

    def test_repr_hides_key(self) -> None:
        assert KEY not in repr(RequestDescriptor("https://example.com", api_key=KEY))

    def test_descriptors_are_hashable_values(self) -> None:
        assert RequestDescriptor("u", "k") == RequestDescriptor("u", "k")
        assert len({RequestDescriptor("u", "k"), RequestDescriptor("u", "k")}) == 1


class TestBuildUrl:
    def test_joins_slashes(self) -> None:
        assert build_url("https://h/lol/", "/a/b") == "https://h/lol/a/b"
        assert build_url("https://h/lol", "a/b") == "https://h/lol/a/b"

    def test_query_params(self) -> None:
        assert build_url("https://h", "/p", {"page": 2}) == "https://h/p?page=2"

    def test_same_input_same_url(self) -> None:
        assert build_url("https://h", "/p", {"a": 1, "b": 2}) == build_url(
            "https://h", "/p", {"a": 1, "b": 2}
        )

    def test_path_segment_encoding(self) -> None:
        assert path_segment("Hide on bush") == "Hide%20on%20bush"
        assert path_segment("a/b") == "a%2Fb"
        assert path_segment(64) == "64"


class TestDecodeBody:
    def test_model(self) -> None:
        body = (
            '{"id": "abc", "accountId": "acc", "puuid": "p", "name": "Vetro",'
            ' "profileIconId": 1, "revisionDate": 2, "summonerLevel": 30}'
        )
        summoner = decode_body(body, Summoner, "u")
        assert summoner.name == "Vetro"
        assert summoner.account_id == "acc"

    def test_scalar(self) -> None:
        assert decode_body("192", int, "u") == 192

    def test_list_of_models(self) -> None:
        assert decode_body("[]", list[ChampionMastery], "u") == []

    def test_shape_mismatch(self) -> None:
        with pytest.raises(DeserializationError) as exc_info:
            decode_body('{"name": "Vetro"}', Summoner, "https://example.com/s")
        assert exc_info.value.url == "https://example.com/s"

    def test_invalid_json(self) -> None:
        with pytest.raises(DeserializationError):
            decode_body("<html>oops</html>", Summoner, "u")
