"""Top-level application state: which view is active and whether we are quitting."""

from dataclasses import dataclass
from enum import Enum
from typing import Union

from ...countdown import CountdownState
from .form import FormState

View = Union[FormState, CountdownState]


class Phase(str, Enum):
    FORM_ENTRY = "form_entry"
    COUNTDOWN = "countdown"
    TERMINATED = "terminated"


@dataclass
class AppState:
    """Form or countdown view plus the terminal ``quitting`` flag.

    Transitions only move forward: FORM_ENTRY to COUNTDOWN, and either of
    them to TERMINATED.
    """

    view: View
    quitting: bool = False

    @property
    def phase(self) -> Phase:
        if self.quitting:
            return Phase.TERMINATED
        if isinstance(self.view, CountdownState):
            return Phase.COUNTDOWN
        return Phase.FORM_ENTRY

    def start_countdown(self, minutes: int) -> CountdownState:
        if self.phase is not Phase.FORM_ENTRY:
            raise RuntimeError(f"cannot start a countdown from {self.phase.value}")
        countdown = CountdownState(minutes=minutes, seconds=0)
        self.view = countdown
        return countdown

    def update_countdown(self, countdown: CountdownState) -> None:
        if self.phase is not Phase.COUNTDOWN:
            raise RuntimeError(f"no countdown running in {self.phase.value}")
        self.view = countdown

    def quit(self) -> None:
        self.quitting = True
