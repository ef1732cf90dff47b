"""Countdown domain: remaining-time arithmetic and the status file."""

from .clock import CountdownState, format_remaining, tick
from .status_file import StatusFile

__all__ = ["CountdownState", "StatusFile", "format_remaining", "tick"]
