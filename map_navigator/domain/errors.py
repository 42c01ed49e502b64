"""Typed domain errors for the map navigator.

All errors inherit from NavigatorError and can optionally wrap a root
cause exception for debugging. User-facing errors carry the localized
message that is returned to the caller as-is.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Optional

MISSING_ORIGIN_MESSAGE = (
    "未获取到您的位置信息,请明确指定起点(例如:从xx到yy)或允许浏览器获取位置权限"
)
ORIGIN_NOT_FOUND_MESSAGE = "无法找到起点信息，请使用更具体的地址"
DESTINATION_NOT_FOUND_MESSAGE = "无法找到终点信息，请使用更具体的地址"
PARSE_ERROR_MESSAGE = "无法解析地点信息"


@dataclass
class NavigatorError(Exception):
    """Base error for the navigator domain.

    Attributes:
        message: Human-readable error description
        cause: Optional underlying exception that caused this error
    """

    message: str
    cause: Optional[Exception] = field(default=None, repr=False)

    def __str__(self) -> str:
        if self.cause:
            return f"{self.message}: {self.cause}"
        return self.message

    def __post_init__(self) -> None:
        super().__init__(self.message)


@dataclass
class ConfigurationError(NavigatorError):
    """Invalid or missing configuration (usually an API credential).

    Attributes:
        setting_name: Name of the environment variable that is missing
    """

    setting_name: str = ""


@dataclass
class NotFoundError(NavigatorError):
    """A lookup returned no match.

    Adapters recover this into a ``None`` result; it never leaves them.

    Attributes:
        query: The keyword or coordinate that was looked up
    """

    query: str = ""


@dataclass
class ParseError(NavigatorError):
    """The language model reply did not contain a usable JSON object.

    Attributes:
        reply: The raw reply text
    """

    reply: str = field(default="", repr=False)


@dataclass
class LanguageModelError(NavigatorError):
    """The language model call itself failed.

    Attributes:
        model: Model identifier that was requested
    """

    model: str = ""


@dataclass
class NavigationError(NavigatorError):
    """Base for failures reported to the user by the dispatcher."""


@dataclass
class MissingOriginError(NavigationError):
    """No origin was named and no device location was supplied."""

    message: str = MISSING_ORIGIN_MESSAGE


@dataclass
class OriginNotFoundError(NavigationError):
    """The origin could not be resolved by the provider.

    Attributes:
        query: Origin keyword, or the device coordinate as text
    """

    message: str = ORIGIN_NOT_FOUND_MESSAGE
    query: str = ""


@dataclass
class DestinationNotFoundError(NavigationError):
    """The destination could not be resolved by the provider.

    Attributes:
        query: Destination keyword
    """

    message: str = DESTINATION_NOT_FOUND_MESSAGE
    query: str = ""


@dataclass
class LaunchError(NavigatorError):
    """Opening the navigation URL in the browser failed.

    Attributes:
        url: The URL that could not be opened
    """

    url: str = ""


@dataclass
class SpeechRecognitionError(NavigatorError):
    """Speech recognition failed.

    Attributes:
        code: Error code reported by the recognition service, if any
        is_connection_error: True when the service could not be reached
    """

    code: Optional[int] = None
    is_connection_error: bool = False
