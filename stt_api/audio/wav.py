"""WAV encoding — float samples (16 kHz, mono) to a linear-PCM container."""
import io
from collections.abc import Iterable

import numpy as np
from scipy.io.wavfile import write

from stt_api.constants import PCM_SCALE, SAMPLE_RATE


def to_pcm16(samples: Iterable[float]) -> np.ndarray:
    """Clamp to [-1.0, 1.0], scale and truncate toward zero. NaN becomes silence."""
    audio = np.fromiter(samples, dtype=np.float32)
    audio = np.clip(np.nan_to_num(audio, nan=0.0), -1.0, 1.0)
    return (audio * PCM_SCALE).astype(np.int16)


def samples_to_wav(samples: Iterable[float]) -> bytes:
    """Encode samples as a 44-byte-header WAV. Out-of-range values are clamped.

    Never fails: an empty sequence yields the bare header with a zero-length
    data chunk.
    """
    wav_buffer = io.BytesIO()
    write(wav_buffer, SAMPLE_RATE, to_pcm16(samples))
    return wav_buffer.getvalue()


def read_f32le(raw: bytes) -> list[float]:
    """Decode raw little-endian float32 samples; a trailing partial sample is dropped."""
    count = len(raw) // 4
    return np.frombuffer(raw[: count * 4], dtype="<f4").tolist()
