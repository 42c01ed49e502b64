"""BD-09 to Mercator projection used by Baidu's web map.

Baidu's web front end positions everything in a spherical Mercator
plane. The forward projection below is applied directly to BD-09
coordinates, which is what map.baidu.com expects in its share URLs.
"""

from __future__ import annotations

import math

from ..domain.models import LngLat, MercatorPoint

# Half the equatorial circumference of the projection sphere, in metres.
MERCATOR_HALF_EXTENT = 20037508.34


def to_mercator(lng: float, lat: float) -> MercatorPoint:
    """Project a BD-09 longitude/latitude pair to Mercator metres.

    ``ln(tan(pi/4 + phi/2))`` is evaluated as ``asinh(tan(phi))``, which
    is the same function but keeps the equator at exactly zero. No
    validation is performed: at the poles ``tan`` saturates and the
    result is a large finite northing rather than an error.
    """
    mc_lng = lng * MERCATOR_HALF_EXTENT / 180.0
    mc_lat = math.degrees(math.asinh(math.tan(math.radians(lat))))
    mc_lat = mc_lat * MERCATOR_HALF_EXTENT / 180.0
    return MercatorPoint(mc_lng=mc_lng, mc_lat=mc_lat)


def location_to_mercator(location: LngLat) -> MercatorPoint:
    """Project a provider coordinate."""
    return to_mercator(location.lng, location.lat)


def midpoint(a: MercatorPoint, b: MercatorPoint) -> MercatorPoint:
    """Arithmetic midpoint of two projected points."""
    return MercatorPoint(
        mc_lng=(a.mc_lng + b.mc_lng) / 2,
        mc_lat=(a.mc_lat + b.mc_lat) / 2,
    )
