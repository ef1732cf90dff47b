"""Duration entry screen."""

from textual import events
from textual.app import ComposeResult
from textual.containers import Container
from textual.message import Message
from textual.screen import Screen
from textual.widgets import Input

from ...util.log import Log
from ..bindings import FORM_BINDINGS
from ..state import DurationError, FormState
from ..widgets import FieldRow, FormMessage, KeyHints, SubmitButton

log = Log.create({"service": "tui.form"})

FORM_HINTS = [
    ("tab", "next"),
    ("shift+tab", "previous"),
    ("enter", "submit"),
    ("esc/q", "quit"),
]


class FormScreen(Screen):
    """Collects the countdown length in minutes.

    Focus is owned by ``FormState``; widget focus follows it. A valid
    submission posts ``DurationSubmitted`` and leaves the transition to the
    app.
    """

    BINDINGS = FORM_BINDINGS

    CSS = """
    FormScreen {
        layout: vertical;
    }

    #form-body {
        height: auto;
        margin: 1 2;
    }

    #form-fields {
        height: auto;
    }

    SubmitButton {
        width: auto;
        margin-top: 1;
    }

    #form-message {
        margin-top: 1;
    }
    """

    class DurationSubmitted(Message):
        """Message sent when a valid duration is submitted."""

        def __init__(self, minutes: int) -> None:
            self.minutes = minutes
            super().__init__()

    def __init__(self, form: FormState, **kwargs) -> None:
        super().__init__(**kwargs)
        self.form = form

    def compose(self) -> ComposeResult:
        yield Container(
            Container(
                *[
                    FieldRow(item, id=f"field-{index}")
                    for index, item in enumerate(self.form.fields)
                ],
                id="form-fields",
            ),
            SubmitButton(id="submit"),
            FormMessage(id="form-message"),
            KeyHints(FORM_HINTS, id="form-hints"),
            id="form-body",
        )

    def on_mount(self) -> None:
        self._sync_focus()

    def _rows(self) -> list[FieldRow]:
        return list(self.query(FieldRow))

    def _paint_rows(self) -> list[FieldRow]:
        rows = self._rows()
        for row in rows:
            row.focused = row.field.focused
        return rows

    def _sync_focus(self) -> None:
        """Apply ``form.focus_index`` to the widgets."""
        rows = self._paint_rows()
        if self.form.submit_focused:
            self.query_one(SubmitButton).focus()
        else:
            rows[self.form.focus_index].input.focus()

    def on_descendant_focus(self, event: events.DescendantFocus) -> None:
        # Focus moved by mouse or by Textual; record it in the form
        widget = event.widget
        if isinstance(widget, SubmitButton):
            index = len(self.form.fields)
        else:
            inputs = [row.input for row in self._rows()]
            if widget not in inputs:
                return
            index = inputs.index(widget)

        if index != self.form.focus_index:
            self.form.focus(index)
            self._paint_rows()

    def action_next_field(self) -> None:
        self.form.focus_next()
        self._sync_focus()

    def action_previous_field(self) -> None:
        self.form.focus_previous()
        self._sync_focus()

    def on_input_changed(self, event: Input.Changed) -> None:
        for row in self._rows():
            if row.input is event.input:
                row.field.set_content(event.value)
                break
        self.query_one(FormMessage).clear()

    def on_input_submitted(self, event: Input.Submitted) -> None:
        # Enter on a text field does not submit the form
        event.stop()

    def on_submit_button_pressed(self, event: SubmitButton.Pressed) -> None:
        event.stop()
        self.submit()

    def submit(self) -> bool:
        """Validate the form and post ``DurationSubmitted`` on success."""
        try:
            minutes = self.form.parse_duration()
        except DurationError as e:
            log.warn("invalid duration", {"value": self.form.fields[0].content, "error": e})
            self.query_one(FormMessage).show_error(str(e))
            return False

        log.info("duration submitted", {"minutes": minutes})
        self.post_message(self.DurationSubmitted(minutes))
        return True
