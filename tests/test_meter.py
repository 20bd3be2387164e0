"""Tests for the live volume meter."""

import io

from rich.console import Console

from voice_bip39.meter import VolumeMeter, _bar_text


def test_bar_text_contains_bar():
    text = _bar_text(0.5, 10)
    assert "[#####     ]" in text.plain


def test_bar_text_colors():
    assert _bar_text(0.9, 10).spans[-2].style == "red"
    assert _bar_text(0.0, 10).spans[-2].style == "bright_black"


def test_meter_updates():
    console = Console(file=io.StringIO(), force_terminal=False, width=80)
    with VolumeMeter(width=20, console=console) as meter:
        meter.update(0.25)
        meter.update(0.75)
    assert meter.last_volume == 0.75
