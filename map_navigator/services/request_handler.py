"""Inbound request handling.

Maps loosely-typed request payloads onto the navigation and speech
services and their outcomes onto ``(status, body)`` envelopes:

    navigate  -> 400 missing input | 500 pipeline failure | 200 success
    speech    -> 400 missing audio | 500 recognition failure | 200 text

The HTTP/UI layer only has to forward these.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Any, Dict, Mapping, Optional

from pydantic import BaseModel, ConfigDict, Field, ValidationError

from ..domain.errors import NavigatorError, SpeechRecognitionError
from ..domain.models import DeviceLocation, MapProvider
from ..ports.speech import SpeechRecognizerPort
from .navigation_dispatcher import NavigationDispatcherService

MISSING_INPUT_MESSAGE = "请输入导航需求"
INVALID_REQUEST_MESSAGE = "请求参数无效"
GENERIC_ERROR_MESSAGE = "处理请求时出错"
MISSING_AUDIO_MESSAGE = "未接收到音频文件"
RECOGNITION_FAILED_MESSAGE = "语音识别失败"
SPEECH_CONNECTION_FAILED_MESSAGE = "连接语音服务失败"


class UserLocationPayload(BaseModel):
    """Device coordinate as sent by the browser."""

    lng: float
    lat: float


class NavigateRequest(BaseModel):
    """Body of a navigation request."""

    model_config = ConfigDict(populate_by_name=True, extra="ignore")

    input: Optional[str] = None
    user_location: Optional[UserLocationPayload] = Field(
        default=None, alias="userLocation"
    )
    map_provider: Optional[str] = Field(default=None, alias="mapProvider")

    @property
    def device_location(self) -> Optional[DeviceLocation]:
        if self.user_location is None:
            return None
        return DeviceLocation(lng=self.user_location.lng, lat=self.user_location.lat)


@dataclass(frozen=True)
class HandlerResponse:
    """Status code and JSON body for the transport layer."""

    status: int
    body: Dict[str, Any]

    @property
    def ok(self) -> bool:
        return self.status == 200


def _failure(status: int, message: str) -> HandlerResponse:
    return HandlerResponse(status=status, body={"success": False, "error": message})


@dataclass
class RequestHandler:
    """Entry point used by the front-end for both request kinds.

    Attributes:
        dispatcher: Navigation pipeline
        speech_recognizer: Optional speech-to-text collaborator
    """

    dispatcher: NavigationDispatcherService
    speech_recognizer: Optional[SpeechRecognizerPort] = None

    _logger: logging.Logger = field(init=False, repr=False)

    def __post_init__(self) -> None:
        self._logger = logging.getLogger(__name__)

    def navigate(self, payload: Mapping[str, Any]) -> HandlerResponse:
        """Handle a navigation request payload.

        Args:
            payload: ``{"input": str, "userLocation"?: {lng, lat},
                "mapProvider"?: "amap" | "baidu"}``

        Returns:
            HandlerResponse following the navigation envelope.
        """
        try:
            request = NavigateRequest.model_validate(dict(payload))
        except ValidationError as e:
            self._logger.warning(
                "Invalid navigation request", extra={"error": str(e)}
            )
            return _failure(400, INVALID_REQUEST_MESSAGE)

        provider = MapProvider.parse(request.map_provider)
        self._logger.info(
            "Navigation request received",
            extra={
                "provider": provider.value,
                "has_location": request.user_location is not None,
            },
        )

        if not request.input or not request.input.strip():
            return _failure(400, MISSING_INPUT_MESSAGE)

        try:
            plan = self.dispatcher.plan_navigation(
                request.input,
                device_location=request.device_location,
                provider=provider,
            )
        except NavigatorError as e:
            self._logger.warning(
                "Navigation request failed",
                extra={"error_type": type(e).__name__, "error": str(e)},
            )
            return _failure(500, e.message or GENERIC_ERROR_MESSAGE)
        except Exception:
            self._logger.exception("Unexpected error in navigation request")
            return _failure(500, GENERIC_ERROR_MESSAGE)

        return HandlerResponse(
            status=200,
            body={
                "success": True,
                "message": plan.summary,
                "from": plan.origin.name,
                "to": plan.destination.name,
                "map": provider.display_name,
            },
        )

    def speech_to_text(self, pcm_audio: Optional[bytes]) -> HandlerResponse:
        """Handle a speech-to-text request.

        Args:
            pcm_audio: Decoded 16-bit mono PCM, or None when nothing was uploaded.

        Returns:
            HandlerResponse with ``{"success": True, "text": ...}`` on success.
        """
        if not pcm_audio:
            return _failure(400, MISSING_AUDIO_MESSAGE)
        if self.speech_recognizer is None:
            return _failure(500, SPEECH_CONNECTION_FAILED_MESSAGE)

        try:
            result = self.speech_recognizer.transcribe(pcm_audio)
        except SpeechRecognitionError as e:
            message = (
                SPEECH_CONNECTION_FAILED_MESSAGE
                if e.is_connection_error
                else RECOGNITION_FAILED_MESSAGE
            )
            return _failure(500, message)
        except NavigatorError as e:
            self._logger.warning(
                "Speech request failed",
                extra={"error_type": type(e).__name__, "error": str(e)},
            )
            return _failure(500, e.message)

        return HandlerResponse(
            status=200, body={"success": True, "text": result.full_text or ""}
        )
