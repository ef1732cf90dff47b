"""Utility modules."""

from .log import Log
from .error import SprintError, format_error, format_unknown_error

__all__ = ["Log", "SprintError", "format_error", "format_unknown_error"]
