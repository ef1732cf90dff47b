"""Screen modules for TUI application."""

from .countdown import CountdownScreen
from .form import FormScreen

__all__ = [
    "CountdownScreen",
    "FormScreen",
]
