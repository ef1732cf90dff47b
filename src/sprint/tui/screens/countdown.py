"""Countdown screen."""

import time
from typing import Callable, Optional

from textual.app import ComposeResult
from textual.containers import Container
from textual.message import Message
from textual.screen import Screen
from textual.timer import Timer

from ...countdown import CountdownState, StatusFile, format_remaining, tick
from ...util.log import Log
from ..widgets import CountdownDisplay, KeyHints

log = Log.create({"service": "tui.countdown"})


class CountdownScreen(Screen):
    """Shows the remaining time and mirrors it to the status file.

    Ticks come from a one-shot timer that is armed again only after the
    previous tick has been handled, so a slow tick delays the next one
    instead of overlapping it. Elapsed time is measured in whole seconds on
    a monotonic clock; the fractional remainder carries over to the next
    tick.
    """

    CSS = """
    CountdownScreen {
        layout: vertical;
    }

    #countdown-body {
        height: auto;
        margin: 1 2;
    }

    #countdown-hints {
        margin-top: 1;
    }
    """

    class Ticked(Message):
        """Message sent after each tick with the new remaining time."""

        def __init__(self, countdown: CountdownState) -> None:
            self.countdown = countdown
            super().__init__()

    def __init__(
        self,
        countdown: CountdownState,
        status_file: StatusFile,
        tick_interval: float = 1.0,
        now: Callable[[], float] = time.monotonic,
        **kwargs,
    ) -> None:
        super().__init__(**kwargs)
        self.countdown = countdown
        self.status_file = status_file
        self.tick_interval = tick_interval
        self._now = now
        self._last = 0.0
        self._tick_timer: Optional[Timer] = None

    def compose(self) -> ComposeResult:
        yield Container(
            CountdownDisplay(self.countdown, id="countdown-clock"),
            KeyHints([("esc/q", "quit")], id="countdown-hints"),
            id="countdown-body",
        )

    def on_mount(self) -> None:
        self._last = self._now()
        self.status_file.write(self.render_text())
        log.info("countdown started", {"remaining": self.render_text()})
        self._arm()

    def on_unmount(self) -> None:
        self._disarm()

    @property
    def ticking(self) -> bool:
        return self._tick_timer is not None

    def render_text(self) -> str:
        return format_remaining(self.countdown)

    def _arm(self) -> None:
        self._disarm()
        if self.countdown.finished:
            return
        self._tick_timer = self.set_timer(self.tick_interval, self._on_timer)

    def _disarm(self) -> None:
        if self._tick_timer is not None:
            self._tick_timer.stop()
            self._tick_timer = None

    def _on_timer(self) -> None:
        # One-shot: the timer that called us is spent
        self._tick_timer = None
        self._on_tick()

    def _on_tick(self) -> None:
        self._disarm()
        now = self._now()
        elapsed = int(now - self._last)
        self._last += elapsed
        self.advance(elapsed)
        self._arm()

    def advance(self, elapsed: int) -> CountdownState:
        """Apply ``elapsed`` seconds, refresh the display and the status file."""
        was_finished = self.countdown.finished
        self.countdown = tick(self.countdown, elapsed)
        text = self.render_text()

        self.query_one(CountdownDisplay).show(self.countdown)
        self.status_file.write(text)
        self.post_message(self.Ticked(self.countdown))

        if self.countdown.finished and not was_finished:
            log.info("countdown finished")
            self.app.bell()
        return self.countdown
