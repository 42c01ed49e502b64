"""iFlytek (XFYUN) streaming dictation adapter.

Protocol summary:
1. Sign ``host``, ``date`` and the request line with HMAC-SHA256 using
   the API secret, wrap the signature in an authorization header value,
   base64 it and pass it as query parameters of the ``wss://`` URL.
2. Send one frame holding the whole clip (``status: 2`` = last frame).
3. Read replies until ``data.status == 2``. Each reply carries a
   numbered segment (``sn``); with dynamic correction enabled
   (``dwa=wpgs``) a reply may replace a range of earlier segments
   (``pgs == "rpl"``, ``rg == [first, last]``).
"""

from __future__ import annotations

import base64
import hashlib
import hmac
import json
import logging
from dataclasses import dataclass, field
from datetime import datetime, timezone
from email.utils import format_datetime
from typing import Any, Callable, Dict, Optional, Tuple
from urllib.parse import urlencode

import websocket

from ...config import SpeechConfig, get_config
from ...domain.errors import ConfigurationError, SpeechRecognitionError
from ...domain.models import TranscriptionResult, TranscriptionSegment

LAST_FRAME_STATUS = 2


def rfc1123_date(now: Optional[datetime] = None) -> str:
    """Format a timestamp as an RFC 1123 GMT date (``Tue, 20 Oct 2026 08:00:00 GMT``)."""
    now = now or datetime.now(timezone.utc)
    return format_datetime(now.astimezone(timezone.utc), usegmt=True)


def sign_request(api_secret: str, host: str, date: str, path: str) -> str:
    """Return the base64 HMAC-SHA256 signature of the canonical request string."""
    signature_origin = f"host: {host}\ndate: {date}\nGET {path} HTTP/1.1"
    digest = hmac.new(
        api_secret.encode("utf-8"),
        signature_origin.encode("utf-8"),
        hashlib.sha256,
    ).digest()
    return base64.b64encode(digest).decode("ascii")


def build_auth_url(
    api_key: str,
    api_secret: str,
    host: str,
    path: str,
    date: Optional[str] = None,
) -> str:
    """Build the signed WebSocket URL."""
    date = date or rfc1123_date()
    signature = sign_request(api_secret, host, date, path)
    authorization_origin = (
        f'api_key="{api_key}", algorithm="hmac-sha256", '
        f'headers="host date request-line", signature="{signature}"'
    )
    authorization = base64.b64encode(authorization_origin.encode("utf-8")).decode(
        "ascii"
    )
    query = urlencode({"authorization": authorization, "date": date, "host": host})
    return f"wss://{host}{path}?{query}"


class TranscriptAssembler:
    """Collects numbered result segments into the final transcript."""

    def __init__(self) -> None:
        self._segments: Dict[int, str] = {}

    def add(self, result: Dict[str, Any]) -> None:
        words = result.get("ws") or []
        text = "".join(
            candidate.get("w", "")
            for word in words
            for candidate in (word.get("cw") or [])
        )
        index = int(result.get("sn", len(self._segments) + 1))

        if result.get("pgs") == "rpl":
            span = result.get("rg") or []
            if len(span) == 2:
                for replaced in range(int(span[0]), int(span[1]) + 1):
                    self._segments.pop(replaced, None)

        self._segments[index] = text

    @property
    def segments(self) -> Tuple[TranscriptionSegment, ...]:
        return tuple(
            TranscriptionSegment(index=index, text=self._segments[index])
            for index in sorted(self._segments)
        )

    @property
    def text(self) -> str:
        return "".join(segment.text for segment in self.segments)


@dataclass
class XfyunSpeechRecognizer:
    """SpeechRecognizerPort implementation over the XFYUN IAT WebSocket API.

    Attributes:
        config: Credentials, endpoint and recognition parameters
        connect: WebSocket factory (``websocket.create_connection``)
    """

    config: SpeechConfig = field(default_factory=lambda: get_config().speech)
    connect: Callable[..., Any] = field(
        default=websocket.create_connection, repr=False
    )

    _logger: logging.Logger = field(init=False, repr=False)

    def __post_init__(self) -> None:
        self._logger = logging.getLogger(__name__)

    def _credentials(self) -> Tuple[str, str, str]:
        missing = [
            name
            for name, value in (
                ("XFYUN_APPID", self.config.appid),
                ("XFYUN_API_KEY", self.config.api_key),
                ("XFYUN_API_SECRET", self.config.api_secret),
            )
            if not value
        ]
        if missing:
            raise ConfigurationError(
                f"{', '.join(missing)} not configured",
                setting_name=missing[0],
            )
        assert self.config.appid and self.config.api_key and self.config.api_secret
        return self.config.appid, self.config.api_key, self.config.api_secret

    def _request_frame(self, appid: str, pcm_audio: bytes) -> Dict[str, Any]:
        return {
            "common": {"app_id": appid},
            "business": {
                "language": self.config.language,
                "domain": "iat",
                "accent": self.config.accent,
                "vad_eos": self.config.vad_eos_ms,
                "dwa": "wpgs",
            },
            "data": {
                "status": LAST_FRAME_STATUS,
                "format": f"audio/L16;rate={self.config.sample_rate}",
                "encoding": "raw",
                "audio": base64.b64encode(pcm_audio).decode("ascii"),
            },
        }

    def transcribe(self, pcm_audio: bytes) -> TranscriptionResult:
        """Transcribe a PCM clip.

        Args:
            pcm_audio: 16-bit mono PCM at ``config.sample_rate``.

        Returns:
            TranscriptionResult with the assembled transcript.

        Raises:
            ConfigurationError: If any XFYUN credential is missing.
            SpeechRecognitionError: On a service error code or a connection failure.
        """
        appid, api_key, api_secret = self._credentials()
        url = build_auth_url(api_key, api_secret, self.config.host, self.config.path)

        self._logger.info(
            "Starting speech recognition",
            extra={"host": self.config.host, "audio_bytes": len(pcm_audio)},
        )

        try:
            ws = self.connect(url, timeout=self.config.timeout_seconds)
        except (websocket.WebSocketException, OSError) as e:
            self._logger.error(
                "Speech service connection failed", extra={"error": str(e)}
            )
            raise SpeechRecognitionError(
                "Speech service connection failed",
                cause=e,
                is_connection_error=True,
            )

        assembler = TranscriptAssembler()
        try:
            ws.send(json.dumps(self._request_frame(appid, pcm_audio)))
            while True:
                raw = ws.recv()
                if not raw:
                    break
                message = json.loads(raw)

                code = message.get("code")
                if code != 0:
                    self._logger.error(
                        "Speech service returned an error",
                        extra={"code": code, "error": message.get("message")},
                    )
                    raise SpeechRecognitionError(
                        f"Speech service error: {message.get('message')}",
                        code=code,
                    )

                data = message.get("data") or {}
                if data.get("result"):
                    assembler.add(data["result"])
                if data.get("status") == LAST_FRAME_STATUS:
                    break
        except (websocket.WebSocketException, OSError) as e:
            self._logger.error("Speech stream failed", extra={"error": str(e)})
            raise SpeechRecognitionError(
                "Speech stream failed",
                cause=e,
                is_connection_error=True,
            )
        except ValueError as e:
            self._logger.error("Speech service sent invalid JSON", extra={"error": str(e)})
            raise SpeechRecognitionError("Speech service sent invalid JSON", cause=e)
        finally:
            ws.close()

        result = TranscriptionResult(
            full_text=assembler.text,
            segments=assembler.segments,
            language=self.config.language,
        )
        self._logger.info(
            "Speech recognition complete",
            extra={"segments": len(result.segments), "chars": len(result.full_text)},
        )
        return result
