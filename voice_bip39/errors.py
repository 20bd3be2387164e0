"""Exception hierarchy for voice-bip39.

Every error is terminal for the current run. Each carries the pipeline
stage that raised it so a caller can log and abort.
"""

from __future__ import annotations

__all__ = [
    "VoiceBip39Error",
    "InvalidParameter",
    "SourceUnavailable",
    "DerivationError",
    "InvalidEntropyLength",
    "EmptyInput",
    "CaptureError",
]


class VoiceBip39Error(Exception):
    """Base exception for all voice-bip39 errors."""

    def __init__(self, message: str, stage: str | None = None) -> None:
        super().__init__(message)
        self.message = message
        self.stage = stage

    def __str__(self) -> str:
        if self.stage:
            return f"[{self.stage}] {self.message}"
        return self.message


class InvalidParameter(VoiceBip39Error):
    """Raised for a bad bit size, buffer length or configuration value."""


class SourceUnavailable(VoiceBip39Error):
    """Raised when the OS entropy source cannot deliver bytes."""


class DerivationError(VoiceBip39Error):
    """Raised when HKDF is asked for an impossible output length."""


class InvalidEntropyLength(VoiceBip39Error):
    """Raised when the mnemonic encoder gets a non-standard entropy length."""

    def __init__(self, length: int, stage: str | None = "encode") -> None:
        super().__init__(
            f"entropy must be 16, 20, 24, 28 or 32 bytes, got {length}", stage
        )
        self.length = length


class EmptyInput(VoiceBip39Error):
    """Raised when the audio buffer is empty."""


class CaptureError(VoiceBip39Error):
    """Raised when the audio device fails while recording."""
