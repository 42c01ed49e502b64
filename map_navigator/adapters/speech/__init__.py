"""Speech adapters - Implementations of SpeechRecognizerPort.

Available implementations:
- XfyunSpeechRecognizer: iFlytek streaming dictation over WebSocket
"""

from .audio import load_pcm16, to_pcm16
from .xfyun_adapter import XfyunSpeechRecognizer

__all__ = ["XfyunSpeechRecognizer", "load_pcm16", "to_pcm16"]
