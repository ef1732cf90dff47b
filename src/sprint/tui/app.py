"""Main TUI application.

This module provides the Textual application that moves from the duration
form to the countdown and owns the ``AppState``.
"""

import time
from typing import Callable, Optional

from textual.app import App

from ..core.config import Config
from ..countdown import StatusFile
from ..util.log import Log
from .bindings import APP_BINDINGS
from .screens import CountdownScreen, FormScreen
from .state import AppState, FormState, Phase
from .theme import ThemeManager

log = Log.create({"service": "tui.app"})


class SprintApp(App):
    """Duration form followed by a countdown mirrored to a status file."""

    TITLE = "sprint"

    CSS = """
    Screen {
        background: $background;
    }
    """

    BINDINGS = APP_BINDINGS

    def __init__(
        self,
        config: Optional[Config] = None,
        now: Callable[[], float] = time.monotonic,
        **kwargs,
    ) -> None:
        """Initialize the TUI application.

        Args:
            config: Resolved configuration, defaults when omitted
            now: Monotonic clock used to measure countdown ticks
        """
        super().__init__(**kwargs)
        self.config = config or Config()
        self._tick_clock = now
        self.status_file = StatusFile(self.config.status_file)
        self.state = AppState(
            view=FormState.single(
                label=self.config.label,
                char_limit=self.config.char_limit,
                placeholder=self.config.placeholder,
            )
        )

        if self.config.theme and not ThemeManager.set_theme(self.config.theme):
            log.warn("unknown theme", {"theme": self.config.theme})

        log.info("TUI app initialized", {
            "status_file": self.config.status_file,
            "char_limit": self.config.char_limit,
        })

    def on_mount(self) -> None:
        self.push_screen(FormScreen(self.state.view))

    def on_form_screen_duration_submitted(self, event: FormScreen.DurationSubmitted) -> None:
        if self.state.phase is not Phase.FORM_ENTRY:
            return
        countdown = self.state.start_countdown(event.minutes)
        log.info("phase changed", {"phase": self.state.phase.value, "minutes": event.minutes})
        self.switch_screen(
            CountdownScreen(
                countdown,
                self.status_file,
                tick_interval=self.config.tick_interval,
                now=self._tick_clock,
            )
        )

    def on_countdown_screen_ticked(self, event: CountdownScreen.Ticked) -> None:
        if self.state.phase is Phase.COUNTDOWN:
            self.state.update_countdown(event.countdown)

    def action_quit(self) -> None:
        """Quit the application."""
        self.state.quit()
        log.info("quitting", {"status_file": self.config.status_file})
        self.exit()


def run_tui(config: Optional[Config] = None) -> SprintApp:
    """Run the TUI application until the user quits.

    Returns:
        The finished app, for inspecting its state and return code
    """
    app = SprintApp(config=config)
    app.run()
    return app
