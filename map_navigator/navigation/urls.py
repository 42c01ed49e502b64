"""Provider-specific navigation deep links.

AMap takes raw ``lng,lat`` strings, names and adcodes as bracketed query
parameters. Baidu's web map works in Mercator metres: both endpoints are
projected, the view is centred on their midpoint, and the endpoints are
repeated inside the compound ``sn``/``en`` parameters.

Every dynamic value is escaped before it is placed into the URL, so a
place name can never add parameters or path segments.
"""

from __future__ import annotations

import string
from typing import Callable, Dict
from urllib.parse import quote

from ..domain.models import MapProvider, PlaceRecord
from ..geo.mercator import location_to_mercator, midpoint

AMAP_DIRECTIONS_URL = "https://www.amap.com/dir"
BAIDU_DIRECTIONS_URL = "https://map.baidu.com/dir"
BAIDU_ZOOM = 10
BAIDU_CITY_CODE = 289

_SAFE_ASCII = frozenset(string.ascii_letters + string.digits + "-._~,")


def escape_query_value(value: str) -> str:
    """Percent-encode URL-significant ASCII characters, keeping other text readable.

    ``"北京西站&x=1"`` becomes ``"北京西站%26x%3D1"``.
    """
    return "".join(
        char if char in _SAFE_ASCII or ord(char) > 127 else quote(char, safe="")
        for char in value
    )


def encode_component(value: str) -> str:
    """Percent-encode everything except unreserved characters."""
    return quote(value, safe="")


def _amap_endpoint(prefix: str, place: PlaceRecord) -> str:
    lnglat = escape_query_value(place.location.as_lng_lat())
    return (
        f"&{prefix}[adcode]={escape_query_value(place.adcode or '')}"
        f"&{prefix}[id]="
        f"&{prefix}[lnglat]={lnglat}"
        f"&{prefix}[modxy]={lnglat}"
        f"&{prefix}[name]={escape_query_value(place.name)}"
        f"&{prefix}[poitype]="
    )


def build_amap_url(origin: PlaceRecord, destination: PlaceRecord) -> str:
    """Build an AMap driving-directions link (default route preference)."""
    return (
        f"{AMAP_DIRECTIONS_URL}?dateTime=now"
        + _amap_endpoint("from", origin)
        + _amap_endpoint("to", destination)
        + "&policy=1&type=car"
    )


def build_baidu_url(origin: PlaceRecord, destination: PlaceRecord) -> str:
    """Build a Baidu directions link from BD-09 endpoints."""
    start = location_to_mercator(origin.location)
    end = location_to_mercator(destination.location)
    center = midpoint(start, end)

    from_name = encode_component(origin.name)
    to_name = encode_component(destination.name)

    return (
        f"{BAIDU_DIRECTIONS_URL}/{from_name}/{to_name}/"
        f"@{center.mc_lng:.2f},{center.mc_lat:.2f},{BAIDU_ZOOM}z"
        f"?querytype=bt"
        f"&c={BAIDU_CITY_CODE}"
        f"&sn=1$$$${start.mc_lng:.0f},{start.mc_lat:.0f}$${from_name}$$0$$$$"
        f"&en=1$$$${end.mc_lng:.0f},{end.mc_lat:.0f}$${to_name}$$0$$$$"
        f"&sc={BAIDU_CITY_CODE}&ec={BAIDU_CITY_CODE}"
        f"&pn=0&rn=5"
        f"&version=5"
        f"&da_src=shareurl"
    )


URL_BUILDERS: Dict[MapProvider, Callable[[PlaceRecord, PlaceRecord], str]] = {
    MapProvider.AMAP: build_amap_url,
    MapProvider.BAIDU: build_baidu_url,
}


def build_navigation_url(
    provider: MapProvider, origin: PlaceRecord, destination: PlaceRecord
) -> str:
    """Build the deep link for ``provider``."""
    return URL_BUILDERS[provider](origin, destination)
