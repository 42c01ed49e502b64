"""Speech port - Abstraction for speech-to-text services."""

from __future__ import annotations

from typing import TYPE_CHECKING, Protocol

if TYPE_CHECKING:
    from ..domain.models import TranscriptionResult


class SpeechRecognizerPort(Protocol):
    """Port for speech recognition.

    Implementation: adapters/speech/xfyun_adapter.py

    Recognizers turn a short recorded clip into the free text that
    feeds a navigation request.
    """

    def transcribe(self, pcm_audio: bytes) -> TranscriptionResult:
        """Transcribe raw audio.

        Args:
            pcm_audio: 16-bit little-endian mono PCM at the configured rate.

        Returns:
            TranscriptionResult with the full text and its segments.

        Raises:
            ConfigurationError: If credentials are missing.
            SpeechRecognitionError: If the service fails or is unreachable.
        """
        ...
