"""Terminal User Interface (TUI) for sprint.

A duration form that hands over to a countdown, built on Textual.

Example:
    from sprint.tui import run_tui

    run_tui()
"""

from .app import SprintApp, run_tui
from .screens import CountdownScreen, FormScreen
from .state import AppState, DurationError, Field, FormState, Phase
from .theme import THEMES, Theme, ThemeManager

__all__ = [
    # Main app
    "SprintApp",
    "run_tui",
    # Screens
    "CountdownScreen",
    "FormScreen",
    # State
    "AppState",
    "DurationError",
    "Field",
    "FormState",
    "Phase",
    # Theme
    "THEMES",
    "Theme",
    "ThemeManager",
]
