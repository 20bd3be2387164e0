"""
voice-bip39: BIP-39 mnemonics from OS entropy mixed with ambient audio.

The CSPRNG entropy is combined with a SHA-256 digest of a microphone
recording and the result is encoded as a 24-word English mnemonic.
"""

__version__ = "0.1.0"

from voice_bip39.bip39 import encode_mnemonic
from voice_bip39.conditioning import combine, hash_audio
from voice_bip39.entropy import derive_key, generate_entropy
from voice_bip39.errors import (
    CaptureError,
    DerivationError,
    EmptyInput,
    InvalidEntropyLength,
    InvalidParameter,
    SourceUnavailable,
    VoiceBip39Error,
)
from voice_bip39.pipeline import PipelineResult, run_pipeline

__all__ = [
    "generate_entropy",
    "derive_key",
    "hash_audio",
    "combine",
    "encode_mnemonic",
    "run_pipeline",
    "PipelineResult",
    "VoiceBip39Error",
    "InvalidParameter",
    "SourceUnavailable",
    "DerivationError",
    "InvalidEntropyLength",
    "EmptyInput",
    "CaptureError",
    "__version__",
]
