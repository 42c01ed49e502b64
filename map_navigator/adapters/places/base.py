"""Shared control flow for REST-backed place resolvers.

Both providers follow the same recipe: keyword place-search first,
structured geocode as fallback, and a single reverse-geocode call for
device coordinates. Subclasses only describe the endpoints and how a
provider payload maps onto a PlaceRecord.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Any, Callable, Dict, Optional

import requests

from ...domain.errors import ConfigurationError, NotFoundError
from ...domain.models import LngLat, MapProvider, PlaceRecord


def text_field(value: Any) -> str:
    """Return a payload field as text.

    AMap encodes empty string fields as ``[]``; those become ``""``.
    """
    if isinstance(value, str):
        return value
    if isinstance(value, (int, float)) and not isinstance(value, bool):
        return str(value)
    return ""


@dataclass
class RestPlaceResolver:
    """Base class implementing PlaceResolverPort over a JSON web API.

    Attributes:
        timeout_seconds: Timeout applied to every outbound call
        session: HTTP session used for all calls
    """

    timeout_seconds: float = 10.0
    session: requests.Session = field(default_factory=requests.Session, repr=False)

    _logger: logging.Logger = field(init=False, repr=False)

    def __post_init__(self) -> None:
        self._logger = logging.getLogger(type(self).__module__)

    # -- Provider hooks -------------------------------------------------

    @property
    def provider(self) -> MapProvider:
        raise NotImplementedError

    def _api_key(self) -> str:
        """Return the configured API key or raise ConfigurationError."""
        raise NotImplementedError

    def _search(self, keyword: str, api_key: str) -> PlaceRecord:
        raise NotImplementedError

    def _geocode(self, keyword: str, api_key: str) -> PlaceRecord:
        raise NotImplementedError

    def _reverse_geocode(self, location: LngLat, api_key: str) -> PlaceRecord:
        raise NotImplementedError

    # -- Shared helpers -------------------------------------------------

    def _require(self, api_key: Optional[str], setting_name: str) -> str:
        if not api_key or not api_key.strip():
            raise ConfigurationError(
                f"{setting_name} not configured",
                setting_name=setting_name,
            )
        return api_key.strip()

    def _get_json(self, url: str, params: Dict[str, Any], query: str) -> Dict[str, Any]:
        """GET a JSON document.

        Raises:
            NotFoundError: If the call fails or the body is not a JSON object.
        """
        try:
            response = self.session.get(url, params=params, timeout=self.timeout_seconds)
            response.raise_for_status()
            data = response.json()
        except requests.RequestException as e:
            self._logger.warning(
                "Map API call failed",
                extra={"provider": self.provider.value, "query": query, "error": str(e)},
            )
            raise NotFoundError("Map API call failed", cause=e, query=query)
        except ValueError as e:
            self._logger.warning(
                "Map API returned invalid JSON",
                extra={"provider": self.provider.value, "query": query, "error": str(e)},
            )
            raise NotFoundError("Map API returned invalid JSON", cause=e, query=query)

        if not isinstance(data, dict):
            raise NotFoundError("Map API returned an unexpected payload", query=query)
        return data

    def _attempt(
        self,
        step: str,
        lookup: Callable[[], PlaceRecord],
        query: str,
    ) -> Optional[PlaceRecord]:
        """Run one lookup step, turning every miss into None."""
        try:
            record = lookup()
        except NotFoundError as e:
            self._logger.debug(
                "Lookup returned no result",
                extra={
                    "provider": self.provider.value,
                    "step": step,
                    "query": query,
                    "reason": e.message,
                },
            )
            return None
        except (AttributeError, KeyError, TypeError, ValueError) as e:
            self._logger.warning(
                "Lookup result could not be mapped",
                extra={
                    "provider": self.provider.value,
                    "step": step,
                    "query": query,
                    "error": repr(e),
                },
            )
            return None

        self._logger.info(
            "Lookup succeeded",
            extra={
                "provider": self.provider.value,
                "step": step,
                "query": query,
                "place": record.name,
            },
        )
        return record

    # -- PlaceResolverPort ----------------------------------------------

    def resolve_place(self, keyword: str) -> Optional[PlaceRecord]:
        """Resolve a place name: place search, then geocode fallback.

        Args:
            keyword: Place name to look up.

        Returns:
            The first hit of the first step that finds anything, or None.

        Raises:
            ConfigurationError: If the provider API key is not set.
        """
        api_key = self._api_key()
        keyword = (keyword or "").strip()
        if not keyword:
            return None

        record = self._attempt(
            "place_search", lambda: self._search(keyword, api_key), keyword
        )
        if record is None:
            record = self._attempt(
                "geocode", lambda: self._geocode(keyword, api_key), keyword
            )
        if record is None:
            self._logger.info(
                "Place not found",
                extra={"provider": self.provider.value, "query": keyword},
            )
        return record

    def resolve_position(self, location: LngLat) -> Optional[PlaceRecord]:
        """Reverse geocode a device coordinate.

        Args:
            location: WGS-84 coordinate.

        Returns:
            The place at that coordinate, or None.

        Raises:
            ConfigurationError: If the provider API key is not set.
        """
        api_key = self._api_key()
        return self._attempt(
            "reverse_geocode",
            lambda: self._reverse_geocode(location, api_key),
            location.as_lng_lat(),
        )
