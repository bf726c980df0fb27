"""Integration tests for profile and hoyo endpoints."""

import httpx
import pytest

from enka_data_fetcher.errors import UnknownVariantError
from enka_data_fetcher.fetch import get_hoyo, get_hoyos, get_profile
from enka_data_fetcher.models import GenshinHoyo, OtherHoyo, Region


class TestGetProfile:
    def test_fetches_profile(self, mock_http, profile_json):
        mock_http.responder = lambda request: httpx.Response(200, json=profile_json)

        profile = get_profile("algoinde", http_client=mock_http)

        assert str(mock_http.requests[0].url) == "https://enka.network/api/profile/algoinde/?format=json"
        assert profile.username == "algoinde"
        assert profile.id == 4
        assert profile.profile.level == 1


class TestGetHoyos:
    def test_resolves_each_hoyo(self, mock_http, genshin_hoyo_json, other_hoyo_json):
        body = {"4Wjv2e": genshin_hoyo_json, "k8Pq1Z": other_hoyo_json}
        mock_http.responder = lambda request: httpx.Response(200, json=body)

        hoyos = get_hoyos("algoinde", http_client=mock_http)

        assert str(mock_http.requests[0].url) == "https://enka.network/api/profile/algoinde/hoyos"
        assert isinstance(hoyos["4Wjv2e"], GenshinHoyo)
        assert hoyos["4Wjv2e"].region is Region.EUROPE
        assert isinstance(hoyos["k8Pq1Z"], OtherHoyo)
        assert hoyos["k8Pq1Z"].root == other_hoyo_json

    def test_empty_profile(self, mock_http):
        mock_http.responder = lambda request: httpx.Response(200, json={})

        assert get_hoyos("nobody", http_client=mock_http) == {}

    def test_one_unknown_kind_fails_the_map(self, mock_http, genshin_hoyo_json, other_hoyo_json):
        other_hoyo_json["hoyo_type"] = 7
        body = {"4Wjv2e": genshin_hoyo_json, "k8Pq1Z": other_hoyo_json}
        mock_http.responder = lambda request: httpx.Response(200, json=body)

        with pytest.raises(UnknownVariantError):
            get_hoyos("algoinde", http_client=mock_http)


class TestGetHoyo:
    def test_fetches_single_hoyo(self, mock_http, genshin_hoyo_json):
        mock_http.responder = lambda request: httpx.Response(200, json=genshin_hoyo_json)

        hoyo = get_hoyo("algoinde", "4Wjv2e", http_client=mock_http)

        assert str(mock_http.requests[0].url) == (
            "https://enka.network/api/profile/algoinde/hoyos/4Wjv2e/?format=json"
        )
        assert isinstance(hoyo, GenshinHoyo)
        assert hoyo.uid == 12345
        assert hoyo.avatar_order == {10000002: 0}

    @pytest.mark.parametrize("kind", [1, 2])
    def test_other_games_stay_raw(self, mock_http, other_hoyo_json, kind):
        other_hoyo_json["hoyo_type"] = kind
        mock_http.responder = lambda request: httpx.Response(200, json=other_hoyo_json)

        hoyo = get_hoyo("algoinde", "k8Pq1Z", http_client=mock_http)

        assert isinstance(hoyo, OtherHoyo)
        assert hoyo.root == other_hoyo_json

    def test_unmodelled_kind_is_an_error(self, mock_http, genshin_hoyo_json):
        genshin_hoyo_json["hoyo_type"] = 7
        mock_http.responder = lambda request: httpx.Response(200, json=genshin_hoyo_json)

        with pytest.raises(UnknownVariantError, match="unknown Hoyo variant"):
            get_hoyo("algoinde", "4Wjv2e", http_client=mock_http)
