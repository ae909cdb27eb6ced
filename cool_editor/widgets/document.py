"""Document view widget for cool-editor."""

from __future__ import annotations

from rich.text import Text
from textual import events
from textual.message import Message
from textual.widgets import Static

from ..keymap import action_for_key
from ..models import Action, DocumentContent, MoveTo, Paste, SelectLine, SelectTo, SelectWord

CURSOR_STYLE = "reverse"
SELECTION_STYLE = "on #264f78"

# One cell per character, so screen x equals the document column
TAB_SIZE = 1


def render_document(content: DocumentContent) -> Text:
    """Build the rich Text for a document, with cursor and selection styled."""
    cursor_line, cursor_col = content.cursor_position()
    selection = content.selection()

    result = Text(no_wrap=True, overflow="ignore", tab_size=TAB_SIZE)
    for index, line_text in enumerate(content.lines):
        line = Text(line_text, tab_size=TAB_SIZE)
        if selection is not None:
            (start_line, start_col), (end_line, end_col) = selection
            if start_line <= index <= end_line:
                start = start_col if index == start_line else 0
                # Show selected line breaks as one highlighted cell
                end = end_col if index == end_line else len(line_text) + 1
                if end > len(line_text):
                    line.append(" ")
                line.stylize(SELECTION_STYLE, start, end)
        if index == cursor_line:
            if cursor_col >= len(line):
                line.append(" ")
            line.stylize(CURSOR_STYLE, cursor_col, cursor_col + 1)
        result.append_text(line)
        if index < content.line_count - 1:
            result.append("\n")
    return result


class DocumentView(Static):
    """Renders a :class:`DocumentContent` and reports edits as messages.

    The widget never changes the document itself. Key presses, clicks and
    pastes are turned into edit actions and posted as :class:`Edited`; the
    app applies them and calls :meth:`show` with the new content.
    """

    can_focus = True

    class Edited(Message):
        """Message sent when the user performs an edit action."""

        def __init__(self, action: Action):
            super().__init__()
            self.action = action

    def show(self, content: DocumentContent) -> None:
        """Redraw from the given document."""
        self.update(render_document(content))

    def on_key(self, event: events.Key) -> None:
        action = action_for_key(event.key, event.character)
        if action is None:
            return
        event.stop()
        event.prevent_default()
        self.post_message(self.Edited(action))

    def on_paste(self, event: events.Paste) -> None:
        event.stop()
        if event.text:
            self.post_message(self.Edited(Paste(event.text)))

    def on_click(self, event: events.Click) -> None:
        self.focus()
        line, column = event.y, event.x
        if event.shift:
            self.post_message(self.Edited(SelectTo(line, column)))
            return
        self.post_message(self.Edited(MoveTo(line, column)))
        chain = getattr(event, "chain", 1)
        if chain == 2:
            self.post_message(self.Edited(SelectWord()))
        elif chain >= 3:
            self.post_message(self.Edited(SelectLine()))
