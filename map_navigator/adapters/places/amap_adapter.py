"""AMap (Gaode) place resolver.

Endpoints (web service API v3):
- /v3/place/text      keyword place search  -> ``pois``
- /v3/geocode/geo     structured geocode    -> ``geocodes``
- /v3/geocode/regeo   reverse geocode       -> ``regeocode``

AMap reports success as ``status == "1"`` and takes coordinates as
``"lng,lat"``.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Dict

from ...config import AMapConfig, get_config
from ...domain.errors import NotFoundError
from ...domain.models import LngLat, MapProvider, PlaceRecord
from .base import RestPlaceResolver, text_field

API_KEY_SETTING = "AMAP_MAPS_API_KEY"


@dataclass
class AMapPlaceResolver(RestPlaceResolver):
    """AMap implementation of PlaceResolverPort.

    Attributes:
        config: AMap configuration (API key and base URL)
    """

    config: AMapConfig = field(default_factory=lambda: get_config().amap)

    @property
    def provider(self) -> MapProvider:
        return MapProvider.AMAP

    def _api_key(self) -> str:
        return self._require(self.config.api_key, API_KEY_SETTING)

    def _url(self, path: str) -> str:
        return self.config.base_url.rstrip("/") + path

    def _ok(self, data: Dict[str, Any]) -> bool:
        return str(data.get("status")) == "1"

    def _search(self, keyword: str, api_key: str) -> PlaceRecord:
        data = self._get_json(
            self._url("/v3/place/text"),
            {"key": api_key, "keywords": keyword, "output": "json"},
            keyword,
        )
        pois = data.get("pois")
        if not self._ok(data) or not isinstance(pois, list) or not pois:
            raise NotFoundError("No place search result", query=keyword)

        poi = pois[0]
        name = text_field(poi.get("name"))
        address = text_field(poi.get("address")) or (
            text_field(poi.get("pname"))
            + text_field(poi.get("cityname"))
            + text_field(poi.get("adname"))
        )
        return PlaceRecord(
            name=name,
            location=LngLat.parse(poi["location"]),
            address=address,
            adcode=text_field(poi.get("adcode")) or None,
        )

    def _geocode(self, keyword: str, api_key: str) -> PlaceRecord:
        data = self._get_json(
            self._url("/v3/geocode/geo"),
            {"key": api_key, "address": keyword, "output": "json"},
            keyword,
        )
        geocodes = data.get("geocodes")
        if not self._ok(data) or not isinstance(geocodes, list) or not geocodes:
            raise NotFoundError("No geocode result", query=keyword)

        geocode = geocodes[0]
        formatted = text_field(geocode.get("formatted_address"))
        return PlaceRecord(
            name=formatted or keyword,
            location=LngLat.parse(geocode["location"]),
            address=formatted or keyword,
            adcode=text_field(geocode.get("adcode")) or None,
        )

    def _reverse_geocode(self, location: LngLat, api_key: str) -> PlaceRecord:
        query = location.as_lng_lat()
        data = self._get_json(
            self._url("/v3/geocode/regeo"),
            {"key": api_key, "location": query, "output": "json"},
            query,
        )
        regeocode = data.get("regeocode")
        if not self._ok(data) or not isinstance(regeocode, dict):
            raise NotFoundError("No reverse geocode result", query=query)

        formatted = text_field(regeocode.get("formatted_address"))
        if not formatted:
            raise NotFoundError("Reverse geocode has no address", query=query)

        component = regeocode.get("addressComponent")
        if not isinstance(component, dict):
            component = {}
        return PlaceRecord(
            name=formatted,
            location=location,
            address=formatted,
            adcode=text_field(component.get("adcode")) or None,
        )
