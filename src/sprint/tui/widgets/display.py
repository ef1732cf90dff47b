"""Display widgets: CountdownDisplay, KeyHints."""

from typing import Sequence, Tuple

from textual.widgets import Digits, Static
from rich.text import Text

from ...countdown import CountdownState, format_remaining
from ..theme import ThemeManager


class CountdownDisplay(Digits):
    """Large ``MM:SS`` readout of the remaining time."""

    DEFAULT_CSS = """
    CountdownDisplay {
        width: auto;
    }
    """

    def __init__(self, state: CountdownState, **kwargs) -> None:
        super().__init__(format_remaining(state), **kwargs)

    def on_mount(self) -> None:
        self.styles.color = ThemeManager.get_theme().focused

    def show(self, state: CountdownState) -> None:
        self.update(format_remaining(state))


class KeyHints(Static):
    """One-line summary of the keys available on the current screen."""

    def __init__(self, hints: Sequence[Tuple[str, str]], **kwargs) -> None:
        super().__init__(**kwargs)
        self.hints = list(hints)

    def render(self) -> Text:
        theme = ThemeManager.get_theme()
        text = Text(no_wrap=True, overflow="ellipsis")
        for i, (key, description) in enumerate(self.hints):
            if i:
                text.append(" • ", style=theme.help)
            text.append(key, style=f"bold {theme.help}")
            text.append(f" {description}", style=theme.help)
        return text
