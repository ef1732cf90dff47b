"""Error formatting utilities.

Turns known application errors into one-line messages for the terminal and
falls back to a full traceback for anything else.
"""

import json
import traceback
from typing import Any


class SprintError(Exception):
    """Base class for errors whose message is meant for the user."""


def format_error(error: Any) -> str | None:
    """Format known application errors into user-friendly messages.

    Returns None if the error type is not recognized, allowing
    fallback to format_unknown_error.
    """
    if isinstance(error, SprintError):
        return str(error)

    if isinstance(error, OSError) and error.filename:
        reason = error.strerror or error.__class__.__name__
        return f"{reason}: {error.filename}"

    return None


def format_unknown_error(error: Any) -> str:
    """Format any error into a string representation.

    Handles Exception objects, serializable objects, and primitives.
    """
    if isinstance(error, Exception):
        if error.__traceback__:
            return "".join(traceback.format_exception(type(error), error, error.__traceback__))
        return f"{error.__class__.__name__}: {error}"

    if isinstance(error, (dict, list)):
        try:
            return json.dumps(error, indent=2)
        except (TypeError, ValueError):
            return "Unexpected error (unserializable)"

    return str(error)
