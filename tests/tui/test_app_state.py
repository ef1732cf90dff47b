import pytest

from sprint.countdown import CountdownState
from sprint.tui.state import AppState, FormState, Phase


def _state() -> AppState:
    return AppState(view=FormState.single(label="Duration ", char_limit=2))


def test_starts_in_form_entry() -> None:
    state = _state()

    assert state.phase is Phase.FORM_ENTRY
    assert state.quitting is False


def test_start_countdown_moves_to_countdown_with_zero_seconds() -> None:
    state = _state()

    countdown = state.start_countdown(25)

    assert countdown == CountdownState(25, 0)
    assert state.view == countdown
    assert state.phase is Phase.COUNTDOWN


def test_countdown_never_returns_to_form_entry() -> None:
    state = _state()
    state.start_countdown(1)

    with pytest.raises(RuntimeError):
        state.start_countdown(2)


def test_update_countdown_requires_running_countdown() -> None:
    state = _state()

    with pytest.raises(RuntimeError):
        state.update_countdown(CountdownState(0, 1))

    state.start_countdown(1)
    state.update_countdown(CountdownState(0, 59))
    assert state.view == CountdownState(0, 59)


@pytest.mark.parametrize("start_countdown", [False, True])
def test_quit_terminates_from_any_phase(start_countdown: bool) -> None:
    state = _state()
    if start_countdown:
        state.start_countdown(3)

    state.quit()

    assert state.quitting is True
    assert state.phase is Phase.TERMINATED
