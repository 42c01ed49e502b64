"""Tests for the Baidu place resolver."""

from unittest.mock import MagicMock

import pytest
import requests

from map_navigator.config import BaiduConfig
from map_navigator.domain.errors import ConfigurationError
from map_navigator.domain.models import LngLat, MapProvider
from map_navigator.adapters.places import BaiduPlaceResolver


def json_response(payload):
    response = MagicMock()
    response.json.return_value = payload
    response.raise_for_status.return_value = None
    return response


def make_resolver(*payloads, api_key="baidu-ak"):
    session = MagicMock(spec=requests.Session)
    session.get.side_effect = [json_response(p) for p in payloads]
    resolver = BaiduPlaceResolver(config=BaiduConfig(api_key=api_key), session=session)
    return resolver, session


EMPTY_SEARCH = {"status": 0, "message": "ok", "results": []}


class TestResolvePlace:
    def test_place_search_hit(self):
        reply = {
            "status": 0,
            "results": [
                {
                    "name": "颐和园",
                    "location": {"lat": 40.006276, "lng": 116.281264},
                    "address": "北京市海淀区新建宫门路19号",
                }
            ],
        }
        resolver, session = make_resolver(reply)
        record = resolver.resolve_place("颐和园")

        assert record.name == "颐和园"
        assert record.location == LngLat(lng=116.281264, lat=40.006276)
        assert record.address == "北京市海淀区新建宫门路19号"
        assert record.adcode is None
        assert session.get.call_args.args[0] == "https://api.map.baidu.com/place/v2/search"
        assert session.get.call_args.kwargs["params"] == {
            "query": "颐和园",
            "region": "全国",
            "output": "json",
            "ak": "baidu-ak",
        }

    def test_address_defaults_to_name(self):
        reply = {
            "status": 0,
            "results": [{"name": "颐和园", "location": {"lat": 40.0, "lng": 116.2}}],
        }
        resolver, _ = make_resolver(reply)
        assert resolver.resolve_place("颐和园").address == "颐和园"

    def test_falls_back_to_geocode(self):
        geocode = {"status": 0, "result": {"location": {"lng": 116.4, "lat": 39.9}}}
        resolver, session = make_resolver(EMPTY_SEARCH, geocode)
        record = resolver.resolve_place("天安门广场")

        assert record.name == "天安门广场"
        assert record.address == "天安门广场"
        assert record.location == LngLat(lng=116.4, lat=39.9)
        assert session.get.call_args.args[0].endswith("/geocoding/v3/")
        assert session.get.call_args.kwargs["params"]["ak"] == "baidu-ak"

    def test_non_object_result_falls_back_to_geocode(self):
        search = {"status": 0, "results": ["bad"]}
        geocode = {"status": 0, "result": {"location": {"lng": 116.4, "lat": 39.9}}}
        resolver, session = make_resolver(search, geocode)
        record = resolver.resolve_place("天安门广场")
        assert record.location == LngLat(lng=116.4, lat=39.9)
        assert session.get.call_count == 2

    def test_nonzero_status_is_a_miss(self):
        resolver, _ = make_resolver(
            {"status": 302, "message": "天配额超限"},
            {"status": 1, "msg": "Internal Service Error"},
        )
        assert resolver.resolve_place("颐和园") is None

    def test_http_error_is_a_miss(self):
        failing = MagicMock()
        failing.raise_for_status.side_effect = requests.HTTPError("500")
        session = MagicMock(spec=requests.Session)
        session.get.return_value = failing
        resolver = BaiduPlaceResolver(config=BaiduConfig(api_key="ak"), session=session)
        assert resolver.resolve_place("颐和园") is None

    def test_missing_key_raises(self):
        resolver, _ = make_resolver(api_key="")
        with pytest.raises(ConfigurationError) as exc_info:
            resolver.resolve_place("颐和园")
        assert exc_info.value.setting_name == "BAIDU_MAPS_API_KEY"


class TestResolvePosition:
    def test_sends_lat_first_and_wgs84_coordtype(self):
        reply = {
            "status": 0,
            "result": {
                "formatted_address": "北京市西城区西长安街",
                "location": {"lng": 116.312417, "lat": 39.907442},
            },
        }
        resolver, session = make_resolver(reply)
        record = resolver.resolve_position(LngLat(lng=116.3, lat=39.9))

        params = session.get.call_args.kwargs["params"]
        assert session.get.call_args.args[0].endswith("/reverse_geocoding/v3/")
        assert params["location"] == "39.9,116.3"
        assert params["coordtype"] == "wgs84ll"
        assert params["ak"] == "baidu-ak"

        assert record.name == "北京市西城区西长安街"
        assert record.location == LngLat(lng=116.312417, lat=39.907442)

    def test_missing_result_is_a_miss(self):
        resolver, _ = make_resolver({"status": 0})
        assert resolver.resolve_position(LngLat(lng=116.3, lat=39.9)) is None

    def test_empty_address_is_a_miss(self):
        reply = {
            "status": 0,
            "result": {
                "formatted_address": "",
                "location": {"lng": 0.1, "lat": 0.1},
            },
        }
        resolver, _ = make_resolver(reply)
        assert resolver.resolve_position(LngLat(lng=0.1, lat=0.1)) is None

    def test_missing_key_raises(self):
        resolver, _ = make_resolver(api_key=None)
        with pytest.raises(ConfigurationError):
            resolver.resolve_position(LngLat(lng=116.3, lat=39.9))


def test_provider():
    resolver, _ = make_resolver()
    assert resolver.provider is MapProvider.BAIDU
