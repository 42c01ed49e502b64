"""Immutable domain models for the map navigator.

All models are frozen dataclasses with slots. They live for the
duration of a single request and are never cached or shared.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from enum import Enum
from typing import Optional

logger = logging.getLogger(__name__)


class MapProvider(Enum):
    """Map provider selecting resolvers, URL template and datum for a request."""

    AMAP = "amap"
    BAIDU = "baidu"

    @property
    def display_name(self) -> str:
        """Localized provider name used in user-facing messages."""
        return "百度地图" if self is MapProvider.BAIDU else "高德地图"

    @classmethod
    def parse(cls, value: Optional[str]) -> MapProvider:
        """Parse a provider name from request input.

        Anything other than ``"baidu"`` selects AMap, which is also the
        default when the value is missing.
        """
        if value is None:
            return cls.AMAP
        normalized = str(value).strip().lower()
        if normalized == cls.BAIDU.value:
            return cls.BAIDU
        if normalized and normalized != cls.AMAP.value:
            logger.warning(
                "Unknown map provider, using amap",
                extra={"map_provider": value},
            )
        return cls.AMAP


def format_coordinate(value: float) -> str:
    """Fixed-point text of a coordinate component (``116.3``, never ``1e-05``).

    Six decimals, trailing zeros stripped.
    """
    text = f"{float(value):.6f}".rstrip("0").rstrip(".")
    return "0" if text == "-0" else text


@dataclass(frozen=True, slots=True)
class LngLat:
    """A longitude/latitude pair.

    The datum depends on where the value came from: WGS-84 for device
    locations, GCJ-02 for AMap results and BD-09 for Baidu results.
    """

    lng: float
    lat: float

    @classmethod
    def parse(cls, text: str) -> LngLat:
        """Parse a provider ``"lng,lat"`` string.

        Raises:
            ValueError: If the text is not two comma-separated numbers.
        """
        parts = str(text).split(",")
        if len(parts) != 2:
            raise ValueError(f"Expected 'lng,lat', got {text!r}")
        return cls(lng=float(parts[0]), lat=float(parts[1]))

    def as_lng_lat(self) -> str:
        """Render as ``"lng,lat"``."""
        return f"{format_coordinate(self.lng)},{format_coordinate(self.lat)}"

    def as_lat_lng(self) -> str:
        """Render as ``"lat,lng"``."""
        return f"{format_coordinate(self.lat)},{format_coordinate(self.lng)}"


# Device coordinates supplied by the browser are plain WGS-84 pairs.
DeviceLocation = LngLat


@dataclass(frozen=True, slots=True)
class PlaceRecord:
    """A resolved endpoint of a route.

    Attributes:
        name: Human-readable place name
        location: Coordinate in the provider's native datum
        address: Formatted address
        adcode: Administrative-division code (AMap only)
    """

    name: str
    location: LngLat
    address: str = ""
    adcode: Optional[str] = None


@dataclass(frozen=True, slots=True)
class ExtractedIntent:
    """Origin and destination names extracted from a request.

    Attributes:
        origin: Origin place name, or None to use the device location
        destination: Destination place name (never empty)
    """

    origin: Optional[str]
    destination: str

    def __post_init__(self) -> None:
        if not self.destination or not self.destination.strip():
            raise ValueError("Destination must not be empty")

    @property
    def uses_device_location(self) -> bool:
        """True when the request did not name an origin."""
        return self.origin is None


@dataclass(frozen=True, slots=True)
class MercatorPoint:
    """A projected coordinate used by Baidu's web map."""

    mc_lng: float
    mc_lat: float


@dataclass(frozen=True, slots=True)
class NavigationPlan:
    """Result of a successful navigation dispatch.

    Attributes:
        provider: Map provider used for the whole request
        intent: Extracted origin/destination names
        origin: Resolved origin place
        destination: Resolved destination place
        url: Provider deep link, directly openable in a browser
    """

    provider: MapProvider
    intent: ExtractedIntent
    origin: PlaceRecord
    destination: PlaceRecord
    url: str

    @property
    def summary(self) -> str:
        """Localized confirmation message."""
        return (
            f"{self.provider.display_name}导航已启动！"
            f"正在规划路线：{self.origin.name} → {self.destination.name}"
        )


@dataclass(frozen=True, slots=True)
class TranscriptionSegment:
    """A recognized speech segment.

    Attributes:
        index: Segment number assigned by the recognition service
        text: Recognized text of this segment
    """

    index: int
    text: str


@dataclass(frozen=True, slots=True)
class TranscriptionResult:
    """Result of speech recognition.

    Attributes:
        full_text: Complete recognized text
        segments: Final segments in order
        language: Recognition language
    """

    full_text: str
    segments: tuple[TranscriptionSegment, ...] = field(default_factory=tuple)
    language: str = "zh_cn"
