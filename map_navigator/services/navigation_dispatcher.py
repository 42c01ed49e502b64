"""Navigation dispatcher service - Main orchestrator.

Per request the dispatcher moves through a linear pipeline:

1. Intent extraction
2. Origin resolution (named place, else device location)
3. Destination resolution
4. URL synthesis for the selected provider
5. Browser launch

Any stage failure aborts the remaining stages; nothing is retried.
"""

from __future__ import annotations

import logging
from concurrent.futures import ThreadPoolExecutor
from dataclasses import dataclass, field
from typing import Callable, Mapping, Optional, Tuple

from ..domain.errors import (
    ConfigurationError,
    DestinationNotFoundError,
    MissingOriginError,
    OriginNotFoundError,
)
from ..domain.models import DeviceLocation, MapProvider, NavigationPlan, PlaceRecord
from ..navigation.urls import build_navigation_url
from ..ports.browser import BrowserLauncherPort
from ..ports.places import PlaceResolverPort
from .intent_extractor import IntentExtractorService

Lookup = Callable[[], Optional[PlaceRecord]]


@dataclass
class NavigationDispatcherService:
    """Turns a free-text request into an opened navigation URL.

    Attributes:
        intent_extractor: Extracts origin/destination names
        resolvers: One place resolver per provider
        browser: Opens the resulting URL
        parallel_resolution: Resolve origin and destination concurrently
    """

    intent_extractor: IntentExtractorService
    resolvers: Mapping[MapProvider, PlaceResolverPort]
    browser: BrowserLauncherPort
    parallel_resolution: bool = False

    _logger: logging.Logger = field(init=False, repr=False)

    def __post_init__(self) -> None:
        self._logger = logging.getLogger(__name__)

    def _resolver(self, provider: MapProvider) -> PlaceResolverPort:
        resolver = self.resolvers.get(provider)
        if resolver is None:
            raise ConfigurationError(
                f"No place resolver registered for {provider.value}",
                setting_name="map_provider",
            )
        return resolver

    def _resolve_endpoints(
        self, resolve_origin: Lookup, resolve_destination: Lookup
    ) -> Tuple[Optional[PlaceRecord], Optional[PlaceRecord]]:
        if not self.parallel_resolution:
            origin = resolve_origin()
            destination = resolve_destination()
            return origin, destination

        with ThreadPoolExecutor(max_workers=2, thread_name_prefix="resolve") as pool:
            origin_future = pool.submit(resolve_origin)
            destination_future = pool.submit(resolve_destination)
            destination = destination_future.result()
            origin = origin_future.result()
        return origin, destination

    def build_plan(
        self,
        free_text: str,
        device_location: Optional[DeviceLocation] = None,
        provider: MapProvider = MapProvider.AMAP,
    ) -> NavigationPlan:
        """Resolve both endpoints and synthesize the URL, without launching.

        Args:
            free_text: The user's request.
            device_location: WGS-84 device coordinate, if the browser shared one.
            provider: Map provider used for the whole request.

        Returns:
            NavigationPlan with both places and the deep link.

        Raises:
            ParseError: If the request could not be understood.
            MissingOriginError: If no origin is named and no location was given.
            DestinationNotFoundError: If the destination cannot be resolved.
            OriginNotFoundError: If the origin cannot be resolved.
            ConfigurationError: If the provider credential is missing.
        """
        resolver = self._resolver(provider)
        self._logger.info(
            "Starting navigation dispatch",
            extra={
                "provider": provider.value,
                "has_location": device_location is not None,
                "input_length": len(free_text),
            },
        )

        intent = self.intent_extractor.extract(free_text)

        resolve_origin: Lookup
        if intent.origin is not None:
            origin_name = intent.origin
            origin_query = origin_name
            resolve_origin = lambda: resolver.resolve_place(origin_name)
            self._logger.info(
                "Resolving origin by name",
                extra={"provider": provider.value, "origin": origin_name},
            )
        elif device_location is not None:
            location = device_location
            origin_query = location.as_lng_lat()
            resolve_origin = lambda: resolver.resolve_position(location)
            self._logger.info(
                "Using device location as origin",
                extra={"provider": provider.value, "location": origin_query},
            )
        else:
            raise MissingOriginError()

        origin, destination = self._resolve_endpoints(
            resolve_origin,
            lambda: resolver.resolve_place(intent.destination),
        )

        # Destination is reported before origin.
        if destination is None:
            raise DestinationNotFoundError(query=intent.destination)
        if origin is None:
            raise OriginNotFoundError(query=origin_query)

        url = build_navigation_url(provider, origin, destination)
        self._logger.info(
            "Navigation URL built",
            extra={
                "provider": provider.value,
                "origin": origin.name,
                "destination": destination.name,
                "url": url,
            },
        )

        return NavigationPlan(
            provider=provider,
            intent=intent,
            origin=origin,
            destination=destination,
            url=url,
        )

    def plan_navigation(
        self,
        free_text: str,
        device_location: Optional[DeviceLocation] = None,
        provider: MapProvider = MapProvider.AMAP,
    ) -> NavigationPlan:
        """Run the full pipeline and open the URL in the browser.

        Raises:
            LaunchError: If the browser could not be opened, in addition to
                everything ``build_plan`` raises.
        """
        plan = self.build_plan(free_text, device_location, provider)
        self.browser.open(plan.url)
        self._logger.info(
            "Navigation launched",
            extra={"provider": provider.value, "url": plan.url},
        )
        return plan
