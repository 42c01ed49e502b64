"""Tests for the dependency injection container."""

import pytest

from fakes import FakeCompletion, RecordingBrowser
from map_navigator.adapters.browser import SystemBrowserLauncher
from map_navigator.adapters.places import AMapPlaceResolver, BaiduPlaceResolver
from map_navigator.adapters.speech import XfyunSpeechRecognizer
from map_navigator.config import AppConfig
from map_navigator.container import Container
from map_navigator.domain.errors import ConfigurationError
from map_navigator.domain.models import MapProvider
from map_navigator.ports.browser import BrowserLauncherPort
from map_navigator.ports.llm import TextCompletionPort
from map_navigator.ports.speech import SpeechRecognizerPort
from map_navigator.services import NavigationDispatcherService, RequestHandler


class TestContainer:
    def test_resolve_unregistered_raises(self):
        with pytest.raises(KeyError):
            Container(config=AppConfig()).resolve(TextCompletionPort)

    def test_singleton_by_default(self):
        container = Container(config=AppConfig())
        container.register(BrowserLauncherPort, RecordingBrowser)
        assert container.resolve(BrowserLauncherPort) is container.resolve(
            BrowserLauncherPort
        )

    def test_transient_registration(self):
        container = Container(config=AppConfig())
        container.register(BrowserLauncherPort, RecordingBrowser, singleton=False)
        assert container.resolve(BrowserLauncherPort) is not container.resolve(
            BrowserLauncherPort
        )

    def test_clear_singletons_and_all(self):
        container = Container(config=AppConfig())
        container.register(BrowserLauncherPort, RecordingBrowser)
        first = container.resolve(BrowserLauncherPort)
        container.clear_singletons()
        assert container.resolve(BrowserLauncherPort) is not first

        container.clear_all()
        assert not container.is_registered(BrowserLauncherPort)


class TestCreateDefault:
    @pytest.fixture
    def container(self):
        config = AppConfig(parallel_resolution=True, http_timeout_seconds=4.0)
        container = Container.create_default(config)
        container.register(TextCompletionPort, lambda: FakeCompletion("{}"))
        return container

    def test_production_bindings(self, container):
        assert isinstance(container.resolve(BrowserLauncherPort), SystemBrowserLauncher)
        assert isinstance(container.resolve(SpeechRecognizerPort), XfyunSpeechRecognizer)
        assert container.resolve(AMapPlaceResolver).timeout_seconds == 4.0
        assert container.resolve(BaiduPlaceResolver).timeout_seconds == 4.0

    def test_dispatcher_wiring(self, container):
        dispatcher = container.resolve(NavigationDispatcherService)
        assert dispatcher.parallel_resolution is True
        assert set(dispatcher.resolvers) == {MapProvider.AMAP, MapProvider.BAIDU}
        assert dispatcher.resolvers[MapProvider.AMAP] is container.resolve(
            AMapPlaceResolver
        )

    def test_request_handler_wiring(self, container):
        handler = container.resolve(RequestHandler)
        assert handler.dispatcher is container.resolve(NavigationDispatcherService)
        assert handler.speech_recognizer is container.resolve(SpeechRecognizerPort)

    def test_missing_llm_key_surfaces_on_resolve(self):
        container = Container.create_default(AppConfig())
        with pytest.raises(ConfigurationError):
            container.resolve(TextCompletionPort)
