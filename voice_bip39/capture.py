"""Audio capture collaborators.

The pipeline only ever sees the frozen ``bytes`` returned by
:meth:`AudioCapture.capture`. Samples are serialized as signed 16-bit
little-endian PCM: floats are clipped to [-1, 1], scaled by 32767 and
truncated toward zero.
"""

from __future__ import annotations

import logging
import math
import threading
from abc import ABC, abstractmethod

import numpy as np

from voice_bip39.config import CaptureConfig
from voice_bip39.errors import CaptureError, EmptyInput, InvalidParameter

logger = logging.getLogger(__name__)

PCM16_DTYPE = np.dtype("<i2")
PCM16_SCALE = 32767


def float_to_pcm16(samples: np.ndarray) -> bytes:
    """Serialize float samples in [-1, 1] as signed 16-bit LE PCM."""
    arr = np.clip(np.asarray(samples, dtype=np.float32), -1.0, 1.0)
    return (arr * PCM16_SCALE).astype(PCM16_DTYPE).tobytes()


def calculate_volume(samples: np.ndarray) -> float:
    """RMS level of a float block, limited to a maximum of 1.0."""
    arr = np.asarray(samples, dtype=np.float64).ravel()
    if arr.size == 0:
        return 0.0
    rms = float(np.sqrt(np.mean(arr * arr)))
    return min(rms, 1.0)


def volume_bar(volume: float, width: int) -> str:
    """Render ``[###   ]`` with *width* cells filled in proportion to *volume*."""
    length = int(volume * width)
    length = max(0, min(length, width))
    return f"[{'#' * length}{' ' * (width - length)}]"


class AudioCapture(ABC):
    """A source of one complete, frozen audio buffer."""

    name: str = "unnamed"
    description: str = ""

    def __init__(self, config: CaptureConfig | None = None) -> None:
        self.config = config or CaptureConfig()

    @abstractmethod
    def is_available(self) -> bool:
        """Return True if the capture can run on this machine."""
        ...

    @abstractmethod
    def capture(self, duration: float | None = None) -> bytes:
        """Record for *duration* seconds (config default) and return PCM bytes.

        The returned buffer is complete; nothing is streamed afterwards.
        """
        ...

    def __repr__(self) -> str:
        return f"<{self.__class__.__name__} name={self.name!r}>"


class BufferCapture(AudioCapture):
    """Replays a fixed PCM buffer, e.g. one loaded from a saved WAV file."""

    name = "buffer"
    description = "Pre-recorded PCM buffer"

    def __init__(self, data: bytes, config: CaptureConfig | None = None) -> None:
        super().__init__(config)
        self._data = bytes(data)

    def is_available(self) -> bool:
        return len(self._data) > 0

    def capture(self, duration: float | None = None) -> bytes:
        if not self._data:
            raise EmptyInput("replay buffer is empty", stage="capture")
        return self._data


class SoundDeviceCapture(AudioCapture):
    """Microphone capture through PortAudio (requires ``sounddevice``).

    Blocks of ``config.block_size`` frames are accumulated from the
    stream callback. A meter object with an ``update(volume)`` method may
    be passed to render the live level; it runs on the calling thread.
    """

    name = "microphone"
    description = "Default input device via sounddevice"

    # extra seconds allowed past the requested duration before giving up
    timeout_margin = 5.0

    def __init__(self, config: CaptureConfig | None = None, meter=None) -> None:
        super().__init__(config)
        self.meter = meter
        self._volume = 0.0

    def is_available(self) -> bool:
        try:
            import sounddevice as sd

            devs = sd.query_devices()
            return any(d.get("max_input_channels", 0) > 0 for d in devs)  # type: ignore[union-attr]
        except Exception:
            return False

    def capture(self, duration: float | None = None) -> bytes:
        import sounddevice as sd

        cfg = self.config
        duration = cfg.duration if duration is None else duration
        if not math.isfinite(duration) or duration <= 0:
            raise InvalidParameter(f"duration must be positive, got {duration}", stage="capture")
        frames_needed = int(cfg.sample_rate * duration)
        if frames_needed < 1:
            raise InvalidParameter(f"duration {duration}s is shorter than one frame", stage="capture")

        blocks: list[np.ndarray] = []
        collected = [0]
        lock = threading.Lock()
        finished = threading.Event()

        def _callback(indata, frames, time_info, status):
            if status:
                logger.warning("Input stream status: %s", status)
            with lock:
                blocks.append(indata.copy())
                collected[0] += frames
                done = collected[0] >= frames_needed
            self._volume = calculate_volume(indata)
            if done:
                raise sd.CallbackStop

        logger.debug(
            "Recording %.1fs at %d Hz, %d channel(s)", duration, cfg.sample_rate, cfg.channels
        )
        try:
            stream = sd.InputStream(
                samplerate=cfg.sample_rate,
                channels=cfg.channels,
                dtype="float32",
                blocksize=cfg.block_size,
                device=cfg.device,
                callback=_callback,
                finished_callback=finished.set,
            )
            with stream:
                if self.meter is not None:
                    with self.meter:
                        self._wait(finished, duration)
                else:
                    self._wait(finished, duration)
        except sd.PortAudioError as e:
            raise CaptureError(f"audio stream error: {e}", stage="capture") from e

        with lock:
            if not blocks:
                raise EmptyInput("no audio frames were captured", stage="capture")
            audio = np.concatenate(blocks)[:frames_needed]
        logger.debug("Captured %d frames", len(audio))
        return float_to_pcm16(audio)

    def _wait(self, finished: threading.Event, duration: float) -> None:
        deadline = duration + self.timeout_margin
        waited = 0.0
        step = 0.05
        while not finished.wait(step):
            if self.meter is not None:
                self.meter.update(self._volume)
            waited += step
            if waited > deadline:
                raise CaptureError(
                    f"recording did not finish within {deadline:.1f}s", stage="capture"
                )


def list_input_devices() -> list[dict]:
    """Describe every device with at least one input channel."""
    import sounddevice as sd

    devices = []
    for index, dev in enumerate(sd.query_devices()):
        if dev.get("max_input_channels", 0) > 0:
            devices.append({
                "index": index,
                "name": dev.get("name", "?"),
                "channels": dev.get("max_input_channels", 0),
                "sample_rate": dev.get("default_samplerate", 0.0),
            })
    return devices
