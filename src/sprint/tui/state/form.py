"""Form view model: labelled fields, a submit slot, and focus cycling.

Focus positions run from 0 to ``len(fields)``; the last position is the
submit control. Moving past either end wraps around.
"""

import re
from dataclasses import dataclass, field
from typing import List, Optional

from ...util.error import SprintError

_INTEGER = re.compile(r"[+-]?[0-9]+")


class DurationError(SprintError, ValueError):
    """Submitted duration is not a non-negative whole number of minutes."""


@dataclass
class Field:
    """A single-line text entry with a hard character limit."""

    label: str
    char_limit: int
    content: str = ""
    placeholder: str = ""
    focused: bool = False

    def set_content(self, text: str) -> str:
        """Store ``text`` truncated to the character limit and return it."""
        self.content = text[: self.char_limit]
        return self.content


@dataclass
class FormState:
    """Fields plus the index of the focused slot."""

    fields: List[Field] = field(default_factory=list)
    focus_index: int = 0

    def __post_init__(self) -> None:
        if not self.fields:
            raise ValueError("a form needs at least one field")
        if not 0 <= self.focus_index <= len(self.fields):
            raise ValueError(f"focus index out of range: {self.focus_index}")
        self._apply_focus()

    @classmethod
    def single(cls, label: str, char_limit: int, placeholder: str = "") -> "FormState":
        return cls(fields=[Field(label=label, char_limit=char_limit, placeholder=placeholder)])

    @property
    def slot_count(self) -> int:
        """Number of focus positions, fields plus the submit control."""
        return len(self.fields) + 1

    @property
    def submit_focused(self) -> bool:
        return self.focus_index == len(self.fields)

    @property
    def focused_field(self) -> Optional[Field]:
        if self.submit_focused:
            return None
        return self.fields[self.focus_index]

    def focus_next(self) -> int:
        return self.focus((self.focus_index + 1) % self.slot_count)

    def focus_previous(self) -> int:
        return self.focus((self.focus_index - 1) % self.slot_count)

    def focus(self, index: int) -> int:
        if not 0 <= index < self.slot_count:
            raise ValueError(f"focus index out of range: {index}")
        self.focus_index = index
        self._apply_focus()
        return index

    def _apply_focus(self) -> None:
        for i, item in enumerate(self.fields):
            item.focused = i == self.focus_index

    def parse_duration(self) -> int:
        """Parse the first field as a whole number of minutes.

        Raises:
            DurationError: If the content is empty, not an integer, or negative
        """
        text = self.fields[0].content.strip()
        if not text:
            raise DurationError("Enter a duration in minutes.")
        if not _INTEGER.fullmatch(text):
            raise DurationError(f"'{text}' is not a whole number of minutes.")
        minutes = int(text)
        if minutes < 0:
            raise DurationError("The duration cannot be negative.")
        return minutes
