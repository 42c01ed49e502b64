"""Tests for provider deep-link synthesis."""

from urllib.parse import parse_qs, unquote, urlsplit

import pytest

from fakes import BEIJING_WEST, DEVICE_PLACE, SUMMER_PALACE, TIANANMEN
from map_navigator.domain.models import LngLat, MapProvider, PlaceRecord
from map_navigator.geo import midpoint, to_mercator
from map_navigator.navigation import (
    build_amap_url,
    build_baidu_url,
    build_navigation_url,
)
from map_navigator.navigation.urls import encode_component, escape_query_value


class TestEscaping:
    def test_chinese_text_kept_readable(self):
        assert escape_query_value("北京西站") == "北京西站"

    def test_structural_characters_encoded(self):
        assert escape_query_value("A&B=C#D") == "A%26B%3DC%23D"

    def test_space_percent_and_quotes_encoded(self):
        assert escape_query_value("a b%\"'") == "a%20b%25%22%27"

    def test_coordinate_unchanged(self):
        assert escape_query_value("116.322056,39.89491") == "116.322056,39.89491"

    def test_encode_component_encodes_everything_reserved(self):
        assert encode_component("天安门") == "%E5%A4%A9%E5%AE%89%E9%97%A8"
        assert encode_component("a/b") == "a%2Fb"


class TestAMapUrl:
    def test_named_endpoints_readable_in_link(self):
        url = build_amap_url(BEIJING_WEST, TIANANMEN)
        assert url.startswith("https://www.amap.com/dir?dateTime=now&")
        assert "from[name]=北京西站" in url
        assert "to[name]=天安门" in url
        assert url.endswith("&policy=1&type=car")

    def test_endpoint_fields(self):
        url = build_amap_url(BEIJING_WEST, TIANANMEN)
        assert (
            "&from[adcode]=110106&from[id]=&from[lnglat]=116.322056,39.89491"
            "&from[modxy]=116.322056,39.89491&from[name]=北京西站&from[poitype]="
        ) in url
        assert "&to[lnglat]=116.397455,39.909187" in url
        assert url.index("from[name]") < url.index("to[name]")

    def test_missing_adcode_is_empty(self):
        url = build_amap_url(SUMMER_PALACE, TIANANMEN)
        assert "from[adcode]=&from[id]=" in url

    def test_hostile_name_cannot_add_parameters(self):
        hostile = PlaceRecord(name="X&type=bus#", location=LngLat(lng=1.0, lat=2.0))
        url = build_amap_url(hostile, TIANANMEN)
        query = parse_qs(urlsplit(url).query)
        assert query["type"] == ["car"]
        assert query["from[name]"] == ["X&type=bus#"]

    def test_idempotent(self):
        assert build_amap_url(BEIJING_WEST, TIANANMEN) == build_amap_url(
            BEIJING_WEST, TIANANMEN
        )


class TestBaiduUrl:
    def test_path_shape(self):
        url = build_baidu_url(DEVICE_PLACE, SUMMER_PALACE)
        path = urlsplit(url).path
        assert url.startswith("https://map.baidu.com/dir/")
        assert unquote(path).startswith("/dir/北京市西城区西长安街/颐和园/@")
        assert path.endswith(",10z")

    def test_query_parameters(self):
        url = build_baidu_url(DEVICE_PLACE, SUMMER_PALACE)
        assert "?querytype=bt&c=289&sn=1$$$$" in url
        assert "&sc=289&ec=289&pn=0&rn=5&version=5&da_src=shareurl" in url

    def test_centre_is_mercator_midpoint(self):
        start = to_mercator(DEVICE_PLACE.location.lng, DEVICE_PLACE.location.lat)
        end = to_mercator(SUMMER_PALACE.location.lng, SUMMER_PALACE.location.lat)
        centre = midpoint(start, end)
        url = build_baidu_url(DEVICE_PLACE, SUMMER_PALACE)
        assert f"/@{centre.mc_lng:.2f},{centre.mc_lat:.2f},10z?" in url

    def test_endpoint_segments(self):
        start = to_mercator(DEVICE_PLACE.location.lng, DEVICE_PLACE.location.lat)
        end = to_mercator(SUMMER_PALACE.location.lng, SUMMER_PALACE.location.lat)
        url = build_baidu_url(DEVICE_PLACE, SUMMER_PALACE)
        to_name = encode_component("颐和园")
        assert f"&sn=1$$$${start.mc_lng:.0f},{start.mc_lat:.0f}$$" in url
        assert f"&en=1$$$${end.mc_lng:.0f},{end.mc_lat:.0f}$${to_name}$$0$$$$" in url

    def test_names_fully_encoded(self):
        hostile = PlaceRecord(name="A/B?c=1", location=LngLat(lng=116.0, lat=39.0))
        url = build_baidu_url(hostile, SUMMER_PALACE)
        assert "/dir/A%2FB%3Fc%3D1/" in url


@pytest.mark.parametrize(
    "provider, prefix",
    [
        (MapProvider.AMAP, "https://www.amap.com/dir?"),
        (MapProvider.BAIDU, "https://map.baidu.com/dir/"),
    ],
)
def test_build_navigation_url_dispatches_on_provider(provider, prefix):
    url = build_navigation_url(provider, BEIJING_WEST, TIANANMEN)
    assert url.startswith(prefix)
    assert url == build_navigation_url(provider, BEIJING_WEST, TIANANMEN)
