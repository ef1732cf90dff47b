"""Shared test helpers."""

from __future__ import annotations

from textual.app import App
from textual.screen import Screen


class FakeClock:
    """Monotonic clock stand-in advanced by hand."""

    def __init__(self, start: float = 100.0) -> None:
        self.value = start

    def __call__(self) -> float:
        return self.value

    def advance(self, seconds: float) -> None:
        self.value += seconds


class ScreenHost(App[None]):
    """Minimal app that shows a single screen."""

    def __init__(self, screen: Screen) -> None:
        super().__init__()
        self._hosted = screen
        self.messages: list[object] = []

    def on_mount(self) -> None:
        self.push_screen(self._hosted)

    def on_countdown_screen_ticked(self, event) -> None:  # type: ignore[no-untyped-def]
        self.messages.append(event.countdown)
