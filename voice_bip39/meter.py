"""Live volume bar shown while recording."""

from __future__ import annotations

from rich.console import Console
from rich.live import Live
from rich.text import Text

from voice_bip39.capture import volume_bar
from voice_bip39.config import MAX_BAR_COUNT


def _bar_text(volume: float, width: int) -> Text:
    """Colored volume bar."""
    if volume > 0.8:
        color = "red"
    elif volume > 0.5:
        color = "yellow"
    elif volume > 0.05:
        color = "green"
    else:
        color = "bright_black"
    text = Text("🎙  ", style="bold")
    text.append(volume_bar(volume, width), style=color)
    text.append(f" {volume:4.2f}", style="dim")
    return text


class VolumeMeter:
    """Context manager that redraws a single-line volume bar.

    Usage::

        with VolumeMeter() as meter:
            meter.update(0.3)
    """

    def __init__(self, width: int = MAX_BAR_COUNT, console: Console | None = None) -> None:
        self.width = width
        self.console = console or Console()
        self._live: Live | None = None
        self.last_volume = 0.0

    def __enter__(self) -> VolumeMeter:
        self._live = Live(
            _bar_text(0.0, self.width),
            console=self.console,
            refresh_per_second=10,
            transient=False,
        )
        self._live.__enter__()
        return self

    def update(self, volume: float) -> None:
        self.last_volume = volume
        if self._live is not None:
            self._live.update(_bar_text(volume, self.width))

    def __exit__(self, exc_type, exc, tb) -> None:
        if self._live is not None:
            self._live.__exit__(exc_type, exc, tb)
            self._live = None
