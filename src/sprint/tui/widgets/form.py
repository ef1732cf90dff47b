"""Form widgets: FieldRow, SubmitButton, FormMessage."""

from textual.app import ComposeResult
from textual.binding import Binding
from textual.message import Message
from textual.reactive import reactive
from textual.widget import Widget
from textual.widgets import Input, Static
from rich.text import Text

from ..state.form import Field
from ..theme import ThemeManager


class FieldRow(Widget):
    """Label and single-line input for one form field."""

    DEFAULT_CSS = """
    FieldRow {
        layout: horizontal;
        width: 100%;
        height: auto;
    }

    FieldRow > .field-label {
        width: auto;
        padding: 1 1 0 0;
    }

    FieldRow > Input {
        width: 16;
    }
    """

    focused = reactive(False)

    def __init__(self, field: Field, **kwargs) -> None:
        super().__init__(**kwargs)
        self.field = field

    def compose(self) -> ComposeResult:
        yield Static(self.field.label, classes="field-label")
        yield Input(
            value=self.field.content,
            placeholder=self.field.placeholder,
            max_length=self.field.char_limit,
        )

    @property
    def input(self) -> Input:
        return self.query_one(Input)

    def watch_focused(self, focused: bool) -> None:
        theme = ThemeManager.get_theme()
        color = theme.focused if focused else theme.text
        for node in self.query(".field-label, Input"):
            node.styles.color = color


class SubmitButton(Static, can_focus=True):
    """``[ Submit ]`` control, highlighted while it has focus."""

    LABEL = "Submit"

    BINDINGS = [
        Binding("enter", "press", "Submit", show=False),
    ]

    class Pressed(Message):
        """Message sent when the control is activated."""

    def render(self) -> Text:
        theme = ThemeManager.get_theme()
        if self.has_focus:
            return Text(f"[ {self.LABEL} ]", style=theme.focused)
        text = Text("[ ")
        text.append(self.LABEL, style=theme.blurred)
        text.append(" ]")
        return text

    def on_focus(self) -> None:
        self.refresh()

    def on_blur(self) -> None:
        self.refresh()

    def on_click(self) -> None:
        self.action_press()

    def action_press(self) -> None:
        self.post_message(self.Pressed())


class FormMessage(Static):
    """Inline validation message below the form."""

    DEFAULT_CSS = """
    FormMessage {
        height: auto;
        min-height: 1;
    }
    """

    error_text = ""

    def show_error(self, message: str) -> None:
        self.error_text = message
        self.update(Text(message, style=ThemeManager.get_theme().error))

    def clear(self) -> None:
        self.error_text = ""
        self.update("")
