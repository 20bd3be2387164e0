"""WAV and mnemonic file writers.

The pipeline never reads these files back; :func:`read_wav_pcm` exists so
the ``derive`` command can replay a saved recording.
"""

from __future__ import annotations

import logging
import struct
from pathlib import Path

from voice_bip39.config import BITS_PER_SAMPLE, CHANNELS, SAMPLE_RATE
from voice_bip39.errors import InvalidParameter

logger = logging.getLogger(__name__)

WAV_HEADER_SIZE = 44
PCM_FORMAT = 1
_HEADER = struct.Struct("<4sI4s4sIHHIIHH4sI")


def wav_header(
    data_length: int,
    sample_rate: int = SAMPLE_RATE,
    channels: int = CHANNELS,
    bits_per_sample: int = BITS_PER_SAMPLE,
) -> bytes:
    """Build the canonical 44-byte RIFF/WAVE PCM header."""
    byte_rate = sample_rate * channels * bits_per_sample // 8
    block_align = channels * bits_per_sample // 8
    return _HEADER.pack(
        b"RIFF",
        4 + (8 + 16) + (8 + data_length),
        b"WAVE",
        b"fmt ",
        16,
        PCM_FORMAT,
        channels,
        sample_rate,
        byte_rate,
        block_align,
        bits_per_sample,
        b"data",
        data_length,
    )


def write_wav(
    path: str | Path,
    pcm: bytes,
    sample_rate: int = SAMPLE_RATE,
    channels: int = CHANNELS,
    bits_per_sample: int = BITS_PER_SAMPLE,
) -> Path:
    """Write *pcm* with a WAV header; returns the path written."""
    path = Path(path)
    with open(path, "wb") as f:
        f.write(wav_header(len(pcm), sample_rate, channels, bits_per_sample))
        f.write(pcm)
    logger.debug("Wrote %d bytes of audio to %s", len(pcm), path)
    return path


def read_wav_pcm(path: str | Path) -> bytes:
    """Return the ``data`` payload of a WAV file written by :func:`write_wav`.

    Files without a RIFF/WAVE header are returned verbatim as raw PCM.
    """
    raw = Path(path).read_bytes()
    if raw[:4] != b"RIFF" or raw[8:12] != b"WAVE":
        return raw
    if len(raw) < WAV_HEADER_SIZE:
        raise InvalidParameter(f"{path}: truncated WAV header", stage="storage")

    # walk chunks after "WAVE" until "data"
    offset = 12
    while offset + 8 <= len(raw):
        chunk_id, size = struct.unpack_from("<4sI", raw, offset)
        offset += 8
        if offset + size > len(raw):
            raise InvalidParameter(
                f"{path}: {chunk_id!r} chunk declares {size} bytes, only {len(raw) - offset} present",
                stage="storage",
            )
        if chunk_id == b"fmt ":
            if size < 2:
                raise InvalidParameter(f"{path}: fmt chunk too short", stage="storage")
            fmt = struct.unpack_from("<H", raw, offset)[0]
            if fmt != PCM_FORMAT:
                raise InvalidParameter(f"{path}: not PCM (format {fmt})", stage="storage")
        elif chunk_id == b"data":
            return raw[offset:offset + size]
        offset += size + (size & 1)
    raise InvalidParameter(f"{path}: no data chunk", stage="storage")


def save_mnemonic(path: str | Path, mnemonic: str) -> Path:
    """Write the mnemonic phrase unchanged as plain text."""
    path = Path(path)
    path.write_text(mnemonic, encoding="utf-8")
    logger.debug("Wrote mnemonic to %s", path)
    return path
