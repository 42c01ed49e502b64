"""Glue between the Gradio widgets and the RequestHandler.

Kept free of Gradio imports so the formatting can be exercised in tests.
"""

from __future__ import annotations

from typing import Any, Dict, Optional, Tuple

from ..adapters.speech import load_pcm16
from ..domain.errors import SpeechRecognitionError
from ..domain.models import MapProvider
from ..services.request_handler import (
    RECOGNITION_FAILED_MESSAGE,
    HandlerResponse,
    RequestHandler,
)

PROVIDER_CHOICES = [
    (MapProvider.AMAP.display_name, MapProvider.AMAP.value),
    (MapProvider.BAIDU.display_name, MapProvider.BAIDU.value),
]


def build_navigate_payload(
    text: Optional[str],
    provider: Optional[str],
    lng: Optional[float] = None,
    lat: Optional[float] = None,
) -> Dict[str, Any]:
    """Assemble a navigation request body from the form fields.

    The location is only sent when both coordinates were filled in.
    """
    payload: Dict[str, Any] = {"input": text or "", "mapProvider": provider}
    if lng is not None and lat is not None:
        payload["userLocation"] = {"lng": lng, "lat": lat}
    return payload


def render_response(response: HandlerResponse) -> str:
    body = response.body
    if response.ok:
        return f"✅ {body['message']}"
    return f"❌ {body.get('error', '')}"


def navigate(
    handler: RequestHandler,
    text: Optional[str],
    provider: Optional[str],
    lng: Optional[float] = None,
    lat: Optional[float] = None,
) -> str:
    response = handler.navigate(build_navigate_payload(text, provider, lng, lat))
    return render_response(response)


def transcribe(
    handler: RequestHandler,
    audio_path: Optional[str],
    sample_rate: int = 16000,
) -> Tuple[str, str]:
    """Transcribe an uploaded clip.

    Returns:
        ``(recognized_text, status_line)``; the text is empty on failure.
    """
    pcm_audio: Optional[bytes] = None
    if audio_path:
        try:
            pcm_audio = load_pcm16(audio_path, sample_rate)
        except SpeechRecognitionError:
            return "", f"❌ {RECOGNITION_FAILED_MESSAGE}"

    response = handler.speech_to_text(pcm_audio)
    if response.ok:
        return response.body["text"], "✅"
    return "", render_response(response)
