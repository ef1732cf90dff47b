"""Remaining-time value and the pure tick that advances it."""

from dataclasses import dataclass

SECONDS_PER_MINUTE = 60


@dataclass(frozen=True)
class CountdownState:
    """Remaining countdown time.

    Attributes:
        minutes: Whole minutes left, never negative
        seconds: Seconds left within the current minute, 0 to 59
    """

    minutes: int
    seconds: int = 0

    def __post_init__(self) -> None:
        if self.minutes < 0:
            raise ValueError(f"minutes must be non-negative, got {self.minutes}")
        if not 0 <= self.seconds < SECONDS_PER_MINUTE:
            raise ValueError(f"seconds must be in [0, 59], got {self.seconds}")

    @classmethod
    def from_total(cls, total_seconds: int) -> "CountdownState":
        minutes, seconds = divmod(max(0, total_seconds), SECONDS_PER_MINUTE)
        return cls(minutes=minutes, seconds=seconds)

    @property
    def total_seconds(self) -> int:
        return self.minutes * SECONDS_PER_MINUTE + self.seconds

    @property
    def finished(self) -> bool:
        return self.total_seconds == 0


def tick(state: CountdownState, elapsed: int = 1) -> CountdownState:
    """Advance the countdown by ``elapsed`` whole seconds, stopping at zero."""
    if elapsed < 0:
        raise ValueError(f"elapsed must be non-negative, got {elapsed}")
    if elapsed == 0 or state.finished:
        return state
    return CountdownState.from_total(state.total_seconds - elapsed)


def format_remaining(state: CountdownState) -> str:
    """Render the remaining time as zero-padded ``MM:SS``."""
    return f"{state.minutes:02d}:{state.seconds:02d}"
