"""TUI widgets for sprint.

Custom Textual widgets for the duration form and the countdown readout.
"""

from .display import CountdownDisplay, KeyHints
from .form import FieldRow, FormMessage, SubmitButton

__all__ = [
    "CountdownDisplay",
    "FieldRow",
    "FormMessage",
    "KeyHints",
    "SubmitButton",
]
