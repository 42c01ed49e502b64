"""Audio decoding for the speech recognizer.

The dictation service accepts 16-bit mono PCM at a fixed sample rate.
Uploaded clips are decoded with soundfile, down-mixed and resampled
with linear interpolation.
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Union

import numpy as np
import soundfile as sf

from ...domain.errors import SpeechRecognitionError

logger = logging.getLogger(__name__)


def to_pcm16(samples: np.ndarray, source_rate: int, target_rate: int = 16000) -> bytes:
    """Convert float or integer samples to 16-bit mono PCM bytes.

    Args:
        samples: Array shaped ``(frames,)`` or ``(frames, channels)``.
        source_rate: Sample rate of ``samples``.
        target_rate: Sample rate expected by the service.
    """
    data = np.asarray(samples)
    if data.ndim > 1:
        data = data.mean(axis=1)

    if np.issubdtype(data.dtype, np.integer):
        scale = float(np.iinfo(data.dtype).max)
        data = data.astype(np.float64) / scale
    else:
        data = data.astype(np.float64)

    if source_rate != target_rate and data.size:
        duration = data.size / float(source_rate)
        target_frames = max(1, int(round(duration * target_rate)))
        source_times = np.arange(data.size) / float(source_rate)
        target_times = np.arange(target_frames) / float(target_rate)
        data = np.interp(target_times, source_times, data)

    clipped = np.clip(data, -1.0, 1.0)
    return (clipped * 32767.0).astype("<i2").tobytes()


def load_pcm16(audio_path: Union[str, Path], target_rate: int = 16000) -> bytes:
    """Decode an audio file into 16-bit mono PCM.

    Raises:
        SpeechRecognitionError: If the file cannot be decoded.
    """
    try:
        samples, source_rate = sf.read(str(audio_path), dtype="float32", always_2d=False)
    except (RuntimeError, OSError) as e:
        logger.warning(
            "Could not decode audio", extra={"audio_path": str(audio_path), "error": str(e)}
        )
        raise SpeechRecognitionError("Could not decode audio file", cause=e)

    logger.debug(
        "Audio decoded",
        extra={"audio_path": str(audio_path), "sample_rate": source_rate},
    )
    return to_pcm16(samples, int(source_rate), target_rate)
