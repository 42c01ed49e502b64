"""Place resolution port - Abstraction over map-provider lookup APIs.

This protocol defines the contract shared by every map provider, so the
dispatcher runs one control flow whatever provider is selected.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Optional, Protocol

if TYPE_CHECKING:
    from ..domain.models import LngLat, MapProvider, PlaceRecord


class PlaceResolverPort(Protocol):
    """Port for provider place lookups.

    Implementations:
    - adapters/places/amap_adapter.py (AMapPlaceResolver)
    - adapters/places/baidu_adapter.py (BaiduPlaceResolver)

    Both lookups return None for "not found"; transport failures are
    absorbed into None as well. Only a missing credential raises.
    """

    @property
    def provider(self) -> MapProvider:
        """Return the provider this resolver talks to."""
        ...

    def resolve_place(self, keyword: str) -> Optional[PlaceRecord]:
        """Resolve a free-text place name to the best-matching place.

        Args:
            keyword: Place name as the user said it (e.g., "天安门").

        Returns:
            First place-search hit, else first geocode hit, else None.

        Raises:
            ConfigurationError: If the provider API key is not set.
        """
        ...

    def resolve_position(self, location: LngLat) -> Optional[PlaceRecord]:
        """Reverse geocode a WGS-84 device coordinate.

        Args:
            location: Device coordinate as reported by the browser.

        Returns:
            Place at that coordinate, or None if not found.

        Raises:
            ConfigurationError: If the provider API key is not set.
        """
        ...
