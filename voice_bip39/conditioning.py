"""Audio hashing and entropy combination.

The audio digest never replaces the CSPRNG entropy: both are fed, in a
fixed order, through one more SHA-256 pass.
"""

from __future__ import annotations

import hashlib
import logging

from voice_bip39.errors import EmptyInput, InvalidParameter

logger = logging.getLogger(__name__)

DIGEST_SIZE = 32


def hash_audio(samples: bytes) -> bytes:
    """SHA-256 of the serialized audio buffer.

    An empty buffer raises :class:`EmptyInput` rather than returning the
    digest of zero bytes.
    """
    if not samples:
        raise EmptyInput("audio buffer is empty", stage="hash_audio")
    digest = hashlib.sha256(bytes(samples)).digest()
    logger.debug("Hashed %d bytes of audio", len(samples))
    return digest


def combine(entropy: bytes, audio_digest: bytes) -> bytes:
    """Return SHA-256(entropy ‖ audio_digest). Entropy always comes first."""
    if not entropy:
        raise InvalidParameter("entropy must not be empty", stage="combine")
    if len(audio_digest) != DIGEST_SIZE:
        raise InvalidParameter(
            f"audio digest must be {DIGEST_SIZE} bytes, got {len(audio_digest)}",
            stage="combine",
        )
    h = hashlib.sha256()
    h.update(bytes(entropy))
    h.update(bytes(audio_digest))
    return h.digest()
