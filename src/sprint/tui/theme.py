"""Theme system for TUI.

Colour definitions for the form and countdown views, with a dark and a
light variant selectable from configuration.
"""

from dataclasses import dataclass
from typing import Dict


@dataclass(frozen=True)
class Theme:
    """Theme color definitions.

    Colors are specified as hex strings (e.g., "#ffffff").
    """

    text: str = "#eeeeee"
    # Focused field, focused submit control, countdown digits (xterm 205)
    focused: str = "#ff5faf"
    # Unfocused submit label (xterm 240)
    blurred: str = "#585858"
    # Key hints (xterm 244)
    help: str = "#808080"
    error: str = "#f87171"


DARK_THEME = Theme()

LIGHT_THEME = Theme(
    text="#1a1a1a",
    focused="#d7005f",
    blurred="#9e9e9e",
    help="#666666",
    error="#dc2626",
)

THEMES: Dict[str, Theme] = {
    "dark": DARK_THEME,
    "light": LIGHT_THEME,
}


class ThemeManager:
    """Process-wide theme selection."""

    _current_theme: str = "dark"

    @classmethod
    def get_theme(cls) -> Theme:
        return THEMES.get(cls._current_theme, DARK_THEME)

    @classmethod
    def set_theme(cls, name: str) -> bool:
        """Set the current theme by name.

        Returns:
            True if theme was set, False if not found
        """
        if name in THEMES:
            cls._current_theme = name
            return True
        return False

    @classmethod
    def list_themes(cls) -> list[str]:
        return list(THEMES.keys())
