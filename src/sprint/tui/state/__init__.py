"""View models driving the TUI screens."""

from .app_state import AppState, Phase
from .form import DurationError, Field, FormState

__all__ = [
    "AppState",
    "DurationError",
    "Field",
    "FormState",
    "Phase",
]
