#!/usr/bin/env python3
"""Derive a mnemonic from a short microphone recording.

Records two seconds, runs the pipeline and prints every intermediate value.

Usage:
    pip install -e .
    python examples/python/basic.py
"""

from voice_bip39 import __version__, run_pipeline
from voice_bip39.capture import SoundDeviceCapture
from voice_bip39.config import CaptureConfig

print(f"voice-bip39 v{__version__}")

capture = SoundDeviceCapture(CaptureConfig(duration=2.0))
if not capture.is_available():
    raise SystemExit("No audio input device found.")

print("Recording 2s...")
audio = capture.capture()
print(f"Captured {len(audio):,} bytes of 16-bit PCM")

result = run_pipeline(audio)
for name, value in result.to_dict().items():
    print(f"{name:>14}: {value}")
