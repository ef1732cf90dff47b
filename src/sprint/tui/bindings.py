"""Key binding definitions for the TUI application."""

from textual.binding import Binding

APP_BINDINGS = [
    Binding("escape", "quit", "Quit", show=True, priority=True),
    Binding("q", "quit", "Quit", show=False, priority=True),
    Binding("ctrl+c", "quit", "Quit", show=False, priority=True),
]

FORM_BINDINGS = [
    Binding("tab", "next_field", "Next", show=False, priority=True),
    Binding("down", "next_field", "Next", show=False, priority=True),
    Binding("shift+tab", "previous_field", "Previous", show=False, priority=True),
    Binding("up", "previous_field", "Previous", show=False, priority=True),
]
