"""Single forward pass: entropy → (key ∥ audio digest) → combine → encode.

Usage::

    from voice_bip39.pipeline import run_pipeline
    result = run_pipeline(pcm_bytes)
    print(result.mnemonic)
"""

from __future__ import annotations

import logging
from dataclasses import dataclass

from voice_bip39.bip39 import VALID_ENTROPY_LENGTHS, encode_mnemonic
from voice_bip39.conditioning import combine, hash_audio
from voice_bip39.entropy import derive_key, generate_entropy
from voice_bip39.errors import InvalidParameter

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class PipelineResult:
    """Every intermediate value of one run, plus the final mnemonic."""

    entropy: bytes
    derived_key: bytes
    audio_hash: bytes
    combined_hash: bytes
    mnemonic: str

    @property
    def words(self) -> list[str]:
        return self.mnemonic.split(" ")

    def to_dict(self) -> dict:
        return {
            "entropy": self.entropy.hex(),
            "derived_key": self.derived_key.hex(),
            "audio_hash": self.audio_hash.hex(),
            "combined_hash": self.combined_hash.hex(),
            "mnemonic": self.mnemonic,
        }


def run_pipeline(
    audio: bytes,
    bit_size: int = 256,
    entropy: bytes | None = None,
) -> PipelineResult:
    """Derive a mnemonic from a frozen audio buffer.

    Parameters
    ----------
    audio:
        Complete serialized audio capture (signed 16-bit LE PCM).
    bit_size:
        Entropy size to draw from the OS when *entropy* is not given.
    entropy:
        Pre-generated entropy, for deterministic replays. Must be a legal
        BIP-39 entropy length.

    Any error aborts the whole derivation; nothing is retried.
    """
    if entropy is None:
        entropy = generate_entropy(bit_size)
    elif len(entropy) not in VALID_ENTROPY_LENGTHS:
        raise InvalidParameter(
            f"entropy must be 16, 20, 24, 28 or 32 bytes, got {len(entropy)}", stage="entropy"
        )
    entropy = bytes(entropy)

    logger.debug("Deriving cryptographic key")
    key = derive_key(entropy)

    logger.debug("Hashing recorded audio data")
    audio_hash = hash_audio(audio)

    logger.debug("Combining entropy with audio data hash")
    combined = combine(entropy, audio_hash)

    logger.debug("Generating BIP-39 mnemonic from combined hash")
    mnemonic = encode_mnemonic(combined)

    return PipelineResult(
        entropy=entropy,
        derived_key=key,
        audio_hash=audio_hash,
        combined_hash=combined,
        mnemonic=mnemonic,
    )
