"""Capture configuration."""

from __future__ import annotations

import math
from dataclasses import dataclass

from voice_bip39.errors import InvalidParameter

SAMPLE_RATE = 44100  # 44.1 kHz
DURATION = 15.0  # seconds of audio to record
CHANNELS = 1
BITS_PER_SAMPLE = 16
MAX_BAR_COUNT = 50  # width of the volume bar

AUDIO_FILENAME = "audio-data.wav"
MNEMONIC_FILENAME = "mnemonic.txt"


@dataclass(frozen=True)
class CaptureConfig:
    """Parameters handed to the audio capture collaborator.

    Samples are always serialized as signed 16-bit little-endian PCM,
    interleaved when ``channels > 1``.
    """

    sample_rate: int = SAMPLE_RATE
    duration: float = DURATION
    channels: int = CHANNELS
    bar_width: int = MAX_BAR_COUNT
    device: int | str | None = None

    def __post_init__(self) -> None:
        if not math.isfinite(self.duration) or self.duration <= 0:
            raise InvalidParameter(f"duration must be positive, got {self.duration}", stage="config")
        if self.sample_rate <= 0:
            raise InvalidParameter(f"sample rate must be positive, got {self.sample_rate}", stage="config")
        if self.channels < 1:
            raise InvalidParameter(f"channels must be at least 1, got {self.channels}", stage="config")
        if self.bar_width < 1:
            raise InvalidParameter(f"bar width must be at least 1, got {self.bar_width}", stage="config")

    @property
    def block_size(self) -> int:
        """Frames per read, a tenth of a second."""
        return max(1, self.sample_rate // 10)

    @property
    def bytes_per_frame(self) -> int:
        return self.channels * BITS_PER_SAMPLE // 8

    @property
    def expected_bytes(self) -> int:
        return int(self.sample_rate * self.duration) * self.bytes_per_frame
