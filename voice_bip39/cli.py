"""CLI for voice-bip39."""

from __future__ import annotations

import json
import logging
import sys

import click

from voice_bip39 import __version__
from voice_bip39.config import (
    AUDIO_FILENAME,
    DURATION,
    MNEMONIC_FILENAME,
    SAMPLE_RATE,
    CaptureConfig,
)
from voice_bip39.entropy import VALID_BIT_SIZES
from voice_bip39.errors import VoiceBip39Error

logger = logging.getLogger(__name__)


@click.group()
@click.version_option(__version__)
def main() -> None:
    """🎙  voice-bip39 — BIP-39 mnemonics from OS entropy and ambient audio."""


# ────────────────────────────────────────────────────────────
# Generate — record, derive, save
# ────────────────────────────────────────────────────────────


@main.command()
@click.option("--bits", default="256", type=click.Choice([str(b) for b in VALID_BIT_SIZES]),
              help="Bits of OS entropy to generate.")
@click.option("--duration", default=DURATION, type=float, help="Seconds of audio to record.")
@click.option("--sample-rate", default=SAMPLE_RATE, type=int, help="Capture sample rate in Hz.")
@click.option("--device", default=None, help="Input device index or name.")
@click.option("--audio-out", default=AUDIO_FILENAME, help="Where to save the recording.")
@click.option("--mnemonic-out", default=MNEMONIC_FILENAME, help="Where to save the mnemonic.")
@click.option("--no-save", is_flag=True, help="Do not write any files.")
@click.option("--json", "as_json", is_flag=True, help="Print the result as JSON.")
@click.option("--debug", is_flag=True, help="Enable debug mode.")
def generate(
    bits: str,
    duration: float,
    sample_rate: int,
    device: str | None,
    audio_out: str,
    mnemonic_out: str,
    no_save: bool,
    as_json: bool,
    debug: bool,
) -> None:
    """Record audio and derive a mnemonic from it.

    Examples:

        voice-bip39 generate

        voice-bip39 generate --duration 5 --no-save --json
    """
    from rich.console import Console

    from voice_bip39.pipeline import run_pipeline
    from voice_bip39.storage import save_mnemonic, write_wav

    _setup_logging(debug)
    console = Console(stderr=as_json)

    try:
        config = CaptureConfig(
            sample_rate=sample_rate, duration=duration, device=_parse_device(device)
        )
        capture = _make_capture(config, console)

        if not debug and not as_json:
            console.clear()
        if not as_json:
            click.echo("Recording. Speak into the microphone.")
        audio = capture.capture(config.duration)
        if not as_json:
            click.echo("Recording complete. Processing...")
        if not debug and not as_json:
            console.clear()

        result = run_pipeline(audio, bit_size=int(bits))
        _print_result(result, as_json)

        if not no_save:
            write_wav(audio_out, audio, sample_rate=config.sample_rate, channels=config.channels)
            save_mnemonic(mnemonic_out, result.mnemonic)
            if not as_json:
                click.echo(f"Saved audio to {audio_out}")
                click.echo(f"Saved mnemonic to {mnemonic_out}")
    except (VoiceBip39Error, OSError) as e:
        _fail(e)


# ────────────────────────────────────────────────────────────
# Derive — deterministic replay from saved inputs
# ────────────────────────────────────────────────────────────


@main.command()
@click.argument("audio_path", type=click.Path(exists=True, dir_okay=False))
@click.option("--entropy", "entropy_hex", required=True, help="Entropy as hex (16–32 bytes).")
@click.option("--mnemonic-out", default=None, help="Also save the mnemonic to this path.")
@click.option("--json", "as_json", is_flag=True, help="Print the result as JSON.")
@click.option("--debug", is_flag=True, help="Enable debug mode.")
def derive(
    audio_path: str,
    entropy_hex: str,
    mnemonic_out: str | None,
    as_json: bool,
    debug: bool,
) -> None:
    """Re-run the pipeline on a saved recording (WAV or raw PCM)."""
    from voice_bip39.capture import BufferCapture
    from voice_bip39.pipeline import run_pipeline
    from voice_bip39.storage import read_wav_pcm, save_mnemonic

    _setup_logging(debug)

    try:
        entropy = bytes.fromhex(entropy_hex.strip())
    except ValueError:
        raise click.BadParameter("not a hex string", param_hint="--entropy") from None

    try:
        audio = BufferCapture(read_wav_pcm(audio_path)).capture()
        result = run_pipeline(audio, entropy=entropy)
        _print_result(result, as_json)
        if mnemonic_out:
            save_mnemonic(mnemonic_out, result.mnemonic)
    except (VoiceBip39Error, OSError) as e:
        _fail(e)


# ────────────────────────────────────────────────────────────
# Devices
# ────────────────────────────────────────────────────────────


@main.command()
def devices() -> None:
    """List audio input devices."""
    from voice_bip39.capture import list_input_devices

    try:
        found = list_input_devices()
    except OSError as e:
        click.echo(f"Error: audio backend unavailable: {e}", err=True)
        sys.exit(1)

    click.echo(f"Found {len(found)} input device(s):\n")
    for dev in found:
        click.echo(
            f"  {dev['index']:>3}  {dev['name']:<40} "
            f"{dev['channels']} ch  {dev['sample_rate']:.0f} Hz"
        )
    if not found:
        click.echo("  (none found)")


# ────────────────────────────────────────────────────────────
# Helpers
# ────────────────────────────────────────────────────────────


def _setup_logging(debug: bool) -> None:
    from rich.console import Console
    from rich.logging import RichHandler

    handler = RichHandler(console=Console(stderr=True), show_path=False, rich_tracebacks=True)
    logging.basicConfig(
        level=logging.DEBUG if debug else logging.WARNING,
        format="%(message)s",
        handlers=[handler],
        force=True,
    )


def _make_capture(config: CaptureConfig, console):
    """Microphone capture with a live volume bar."""
    from voice_bip39.capture import SoundDeviceCapture
    from voice_bip39.meter import VolumeMeter

    return SoundDeviceCapture(config, meter=VolumeMeter(config.bar_width, console=console))


def _parse_device(device: str | None) -> int | str | None:
    if device is None:
        return None
    return int(device) if device.isdigit() else device


def _print_result(result, as_json: bool) -> None:
    if as_json:
        click.echo(json.dumps(result.to_dict(), indent=2))
        return
    values = result.to_dict()
    click.echo(f"Entropy:       {values['entropy']}")
    click.echo(f"Derived key:   {values['derived_key']}")
    click.echo(f"Audio hash:    {values['audio_hash']}")
    click.echo(f"Combined hash: {values['combined_hash']}")
    click.echo(f"Mnemonic: {values['mnemonic']}")


def _fail(error: Exception) -> None:
    logger.debug("Aborting after %s", type(error).__name__)
    click.echo(f"Error: {error}", err=True)
    sys.exit(1)
