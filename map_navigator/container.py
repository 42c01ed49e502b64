"""Dependency injection container.

Explicit registration and lazy resolution of the navigator's adapters
and services, without an external framework. Adapters are created on
first use so a missing credential only surfaces when the matching
collaborator is actually needed.
"""

from __future__ import annotations

import threading
from dataclasses import dataclass, field
from typing import Any, Callable, Dict, Optional

from .config import AppConfig, get_config


@dataclass
class Container:
    """Dependency injection container.

    Usage:
        # Production
        container = Container.create_default()
        handler = container.resolve(RequestHandler)

        # Testing
        container = Container()
        container.register(BrowserLauncherPort, lambda: RecordingBrowser())
        browser = container.resolve(BrowserLauncherPort)

    Attributes:
        config: Application configuration
    """

    config: AppConfig = field(default_factory=get_config)

    _factories: Dict[type[Any], Callable[[], Any]] = field(
        default_factory=dict, repr=False
    )
    _singletons: Dict[type[Any], Any] = field(default_factory=dict, repr=False)
    _singleton_types: set[type[Any]] = field(default_factory=set, repr=False)
    _lock: threading.RLock = field(default_factory=threading.RLock, repr=False)

    def register(
        self,
        port_type: type[Any],
        factory: Callable[[], Any],
        singleton: bool = True,
    ) -> None:
        """Register a factory for a port type.

        Args:
            port_type: The type (usually a Protocol) to register.
            factory: A callable that creates instances of the type.
            singleton: If True, only one instance is created.
        """
        with self._lock:
            self._factories[port_type] = factory
            if singleton:
                self._singleton_types.add(port_type)
            else:
                self._singleton_types.discard(port_type)
            self._singletons.pop(port_type, None)

    def resolve(self, port_type: type[Any]) -> Any:
        """Resolve an instance of a port type.

        Raises:
            KeyError: If the type is not registered.
        """
        with self._lock:
            if port_type not in self._factories:
                raise KeyError(f"Type not registered: {port_type}")

            if port_type in self._singleton_types:
                if port_type not in self._singletons:
                    self._singletons[port_type] = self._factories[port_type]()
                return self._singletons[port_type]

            return self._factories[port_type]()

    def is_registered(self, port_type: type[Any]) -> bool:
        return port_type in self._factories

    def clear_singletons(self) -> None:
        """Drop cached singletons so the next resolve builds fresh ones."""
        with self._lock:
            self._singletons.clear()

    def clear_all(self) -> None:
        with self._lock:
            self._factories.clear()
            self._singletons.clear()
            self._singleton_types.clear()

    @classmethod
    def create_default(cls, config: Optional[AppConfig] = None) -> Container:
        """Create a container with the production bindings.

        Args:
            config: Optional configuration override.

        Returns:
            A configured Container instance.
        """
        from .adapters.browser import SystemBrowserLauncher
        from .adapters.llm import AnthropicCompletionAdapter
        from .adapters.places import AMapPlaceResolver, BaiduPlaceResolver
        from .adapters.speech import XfyunSpeechRecognizer
        from .domain.models import MapProvider
        from .ports.browser import BrowserLauncherPort
        from .ports.llm import TextCompletionPort
        from .ports.speech import SpeechRecognizerPort
        from .services import (
            IntentExtractorService,
            NavigationDispatcherService,
            RequestHandler,
        )

        config = config or get_config()
        container = cls(config=config)

        # Language model
        container.register(
            TextCompletionPort,
            lambda: AnthropicCompletionAdapter(config=config.llm),
        )

        # Map providers
        container.register(
            AMapPlaceResolver,
            lambda: AMapPlaceResolver(
                config=config.amap, timeout_seconds=config.http_timeout_seconds
            ),
        )
        container.register(
            BaiduPlaceResolver,
            lambda: BaiduPlaceResolver(
                config=config.baidu, timeout_seconds=config.http_timeout_seconds
            ),
        )

        # Browser and speech
        container.register(BrowserLauncherPort, lambda: SystemBrowserLauncher())
        container.register(
            SpeechRecognizerPort,
            lambda: XfyunSpeechRecognizer(config=config.speech),
        )

        # Services
        container.register(
            IntentExtractorService,
            lambda: IntentExtractorService(
                completion=container.resolve(TextCompletionPort)
            ),
        )

        def create_dispatcher() -> NavigationDispatcherService:
            return NavigationDispatcherService(
                intent_extractor=container.resolve(IntentExtractorService),
                resolvers={
                    MapProvider.AMAP: container.resolve(AMapPlaceResolver),
                    MapProvider.BAIDU: container.resolve(BaiduPlaceResolver),
                },
                browser=container.resolve(BrowserLauncherPort),
                parallel_resolution=config.parallel_resolution,
            )

        container.register(NavigationDispatcherService, create_dispatcher)
        container.register(
            RequestHandler,
            lambda: RequestHandler(
                dispatcher=container.resolve(NavigationDispatcherService),
                speech_recognizer=container.resolve(SpeechRecognizerPort),
            ),
        )

        return container
