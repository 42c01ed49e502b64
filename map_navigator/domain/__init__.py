"""Domain layer - Core business models and errors.

This module contains immutable domain models and typed errors
used throughout the application. No external dependencies.
"""

from .errors import (
    ConfigurationError,
    DestinationNotFoundError,
    LanguageModelError,
    LaunchError,
    MissingOriginError,
    NavigationError,
    NavigatorError,
    NotFoundError,
    OriginNotFoundError,
    ParseError,
    SpeechRecognitionError,
)
from .models import (
    DeviceLocation,
    ExtractedIntent,
    LngLat,
    MapProvider,
    MercatorPoint,
    NavigationPlan,
    PlaceRecord,
    TranscriptionResult,
    TranscriptionSegment,
)

__all__ = [
    # Models
    "MapProvider",
    "LngLat",
    "DeviceLocation",
    "PlaceRecord",
    "ExtractedIntent",
    "MercatorPoint",
    "NavigationPlan",
    "TranscriptionSegment",
    "TranscriptionResult",
    # Errors
    "NavigatorError",
    "ConfigurationError",
    "NotFoundError",
    "ParseError",
    "LanguageModelError",
    "NavigationError",
    "MissingOriginError",
    "OriginNotFoundError",
    "DestinationNotFoundError",
    "LaunchError",
    "SpeechRecognitionError",
]
