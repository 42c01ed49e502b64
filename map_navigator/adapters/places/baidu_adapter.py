"""Baidu Maps place resolver.

Endpoints:
- /place/v2/search          keyword place search -> ``results``
- /geocoding/v3/            structured geocode   -> ``result.location``
- /reverse_geocoding/v3/    reverse geocode      -> ``result``

Baidu reports success as ``status == 0`` and returns BD-09 coordinates.
The reverse geocoder takes ``"lat,lng"`` (latitude first) and must be
told that the input is WGS-84 via ``coordtype=wgs84ll``.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Dict

from ...config import BaiduConfig, get_config
from ...domain.errors import NotFoundError
from ...domain.models import LngLat, MapProvider, PlaceRecord
from .base import RestPlaceResolver, text_field

API_KEY_SETTING = "BAIDU_MAPS_API_KEY"
DEVICE_COORD_TYPE = "wgs84ll"


def _location(payload: Dict[str, Any]) -> LngLat:
    return LngLat(lng=float(payload["lng"]), lat=float(payload["lat"]))


@dataclass
class BaiduPlaceResolver(RestPlaceResolver):
    """Baidu implementation of PlaceResolverPort.

    Records carry no adcode.

    Attributes:
        config: Baidu configuration (API key, base URL, search region)
    """

    config: BaiduConfig = field(default_factory=lambda: get_config().baidu)

    @property
    def provider(self) -> MapProvider:
        return MapProvider.BAIDU

    def _api_key(self) -> str:
        return self._require(self.config.api_key, API_KEY_SETTING)

    def _url(self, path: str) -> str:
        return self.config.base_url.rstrip("/") + path

    def _ok(self, data: Dict[str, Any]) -> bool:
        return str(data.get("status")) == "0"

    def _search(self, keyword: str, api_key: str) -> PlaceRecord:
        data = self._get_json(
            self._url("/place/v2/search"),
            {
                "query": keyword,
                "region": self.config.search_region,
                "output": "json",
                "ak": api_key,
            },
            keyword,
        )
        results = data.get("results")
        if not self._ok(data) or not isinstance(results, list) or not results:
            raise NotFoundError("No place search result", query=keyword)

        poi = results[0]
        name = text_field(poi.get("name"))
        return PlaceRecord(
            name=name,
            location=_location(poi["location"]),
            address=text_field(poi.get("address")) or name,
        )

    def _geocode(self, keyword: str, api_key: str) -> PlaceRecord:
        data = self._get_json(
            self._url("/geocoding/v3/"),
            {"address": keyword, "output": "json", "ak": api_key},
            keyword,
        )
        result = data.get("result")
        if not self._ok(data) or not isinstance(result, dict) or not result:
            raise NotFoundError("No geocode result", query=keyword)

        return PlaceRecord(
            name=keyword,
            location=_location(result["location"]),
            address=keyword,
        )

    def _reverse_geocode(self, location: LngLat, api_key: str) -> PlaceRecord:
        query = location.as_lat_lng()
        data = self._get_json(
            self._url("/reverse_geocoding/v3/"),
            {
                "ak": api_key,
                "output": "json",
                "coordtype": DEVICE_COORD_TYPE,
                "location": query,
            },
            query,
        )
        result = data.get("result")
        if not self._ok(data) or not isinstance(result, dict) or not result:
            raise NotFoundError("No reverse geocode result", query=query)

        formatted = text_field(result.get("formatted_address"))
        if not formatted:
            raise NotFoundError("Reverse geocode has no address", query=query)

        return PlaceRecord(
            name=formatted,
            location=_location(result["location"]),
            address=formatted,
        )
