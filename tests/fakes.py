"""Fake ports and sample places shared by the tests."""

from typing import Dict, List, Optional

from map_navigator.domain.models import LngLat, MapProvider, PlaceRecord
from map_navigator.services.intent_extractor import IntentExtractorService
from map_navigator.services.navigation_dispatcher import NavigationDispatcherService

BEIJING_WEST = PlaceRecord(
    name="北京西站",
    location=LngLat(lng=116.322056, lat=39.89491),
    address="北京市丰台区莲花池东路118号",
    adcode="110106",
)
TIANANMEN = PlaceRecord(
    name="天安门",
    location=LngLat(lng=116.397455, lat=39.909187),
    address="北京市东城区东长安街",
    adcode="110101",
)
SUMMER_PALACE = PlaceRecord(
    name="颐和园",
    location=LngLat(lng=116.281264, lat=40.006276),
    address="北京市海淀区新建宫门路19号",
)
DEVICE_PLACE = PlaceRecord(
    name="北京市西城区西长安街",
    location=LngLat(lng=116.312417, lat=39.907442),
    address="北京市西城区西长安街",
)


class FakeCompletion:
    """TextCompletionPort returning a canned reply and recording prompts."""

    def __init__(self, reply: str):
        self.reply = reply
        self.prompts: List[str] = []

    def complete(self, prompt: str) -> str:
        self.prompts.append(prompt)
        return self.reply


class FakeResolver:
    """PlaceResolverPort backed by dictionaries."""

    def __init__(
        self,
        provider: MapProvider = MapProvider.AMAP,
        places: Optional[Dict[str, PlaceRecord]] = None,
        position: Optional[PlaceRecord] = None,
    ):
        self._provider = provider
        self.places = places or {}
        self.position = position
        self.place_queries: List[str] = []
        self.position_queries: List[LngLat] = []

    @property
    def provider(self) -> MapProvider:
        return self._provider

    def resolve_place(self, keyword: str) -> Optional[PlaceRecord]:
        self.place_queries.append(keyword)
        return self.places.get(keyword)

    def resolve_position(self, location: LngLat) -> Optional[PlaceRecord]:
        self.position_queries.append(location)
        return self.position


class RecordingBrowser:
    """BrowserLauncherPort that only records the URLs it was asked to open."""

    def __init__(self, error: Optional[Exception] = None):
        self.opened: List[str] = []
        self.error = error

    def open(self, url: str) -> None:
        if self.error is not None:
            raise self.error
        self.opened.append(url)


def make_dispatcher(
    reply: str,
    resolvers: Dict[MapProvider, FakeResolver],
    browser: Optional[RecordingBrowser] = None,
    parallel_resolution: bool = False,
) -> NavigationDispatcherService:
    return NavigationDispatcherService(
        intent_extractor=IntentExtractorService(completion=FakeCompletion(reply)),
        resolvers=resolvers,
        browser=browser or RecordingBrowser(),
        parallel_resolution=parallel_resolution,
    )
