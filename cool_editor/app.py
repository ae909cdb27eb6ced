"""Main application for cool-editor."""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Optional

from textual.app import App, ComposeResult
from textual.containers import Horizontal, ScrollableContainer
from textual.geometry import Region
from textual.message import Message
from textual.widgets import Button, Static

from .config import Config
from .loader import FilePicker
from .models import Command, Edit, EditorMessage, EditorState, Open
from .widgets import DocumentView, OpenFileDialog

logger = logging.getLogger(__name__)


class CoolEditorApp(App):
    """Single-document text editor.

    All state lives in :class:`EditorState`. The app feeds it messages one
    at a time from Textual's message queue, runs the commands it returns as
    workers, and posts each command's result back onto the queue.
    """

    CSS = """
    #controls {
        height: auto;
    }

    #document-scroll {
        height: 1fr;
        border: solid $primary;
    }

    #document {
        width: auto;
        height: auto;
        min-width: 100%;
    }

    #status-bar {
        height: 1;
    }

    #error {
        width: 1fr;
        color: $error;
    }

    #position {
        width: auto;
    }
    """

    class CommandFinished(Message):
        """Message carrying the result of a finished command."""

        def __init__(self, editor_message: EditorMessage):
            super().__init__()
            self.editor_message = editor_message

    def __init__(
        self,
        path: str | None = None,
        config: Optional[Config] = None,
        picker: Optional[FilePicker] = None,
    ):
        super().__init__()
        self._scroll: ScrollableContainer | None = None
        self._document_view: DocumentView | None = None
        self._error_line: Static | None = None
        self._position: Static | None = None
        self.config = config or Config.load(Path.cwd())
        default_path = Path(path) if path else self.config.editor.get_default_path()
        self.editor_state = EditorState(
            picker=picker or self.pick_file,
            dialog_title=self.config.dialog.title,
            default_path=default_path,
            page_size=self.config.editor.page_size,
        )

    def compose(self) -> ComposeResult:
        with Horizontal(id="controls"):
            yield Button("Open", id="open")
        self._scroll = ScrollableContainer(id="document-scroll")
        with self._scroll:
            self._document_view = DocumentView(id="document")
            yield self._document_view
        with Horizontal(id="status-bar"):
            self._error_line = Static("", id="error")
            yield self._error_line
            self._position = Static("", id="position")
            yield self._position

    def on_mount(self) -> None:
        theme = self.config.editor.theme
        if theme in self.available_themes:
            self.theme = theme
        else:
            logger.warning("Unknown theme %r, keeping %r", theme, self.theme)
        self.title = self.config.editor.title
        self.refresh_view()
        self._document_view.focus()
        self.start_command(self.editor_state.startup())

    async def pick_file(self, title: str) -> Optional[Path]:
        """Show the open-file dialog. Must be awaited from a worker."""
        dialog = OpenFileDialog(title, self.config.dialog.get_start_directory())
        return await self.push_screen_wait(dialog)

    def send_editor_message(self, message: EditorMessage) -> None:
        """Feed one message to the editor state and start any resulting work."""
        previous_error = self.editor_state.last_error
        command = self.editor_state.update(message)
        self.refresh_view()
        if self.editor_state.last_error is not previous_error:
            self.notify(self.editor_state.error_text(), severity="error")
        self.start_command(command)

    def start_command(self, command: Optional[Command]) -> None:
        if command is None:
            return
        # Commands are never cancelled; overlapping loads all finish
        self.run_worker(self._perform(command), group="commands", exclusive=False)

    async def _perform(self, command: Command) -> None:
        message = await command()
        self.post_message(self.CommandFinished(message))

    def on_cool_editor_app_command_finished(self, event: CommandFinished) -> None:
        self.send_editor_message(event.editor_message)

    def on_button_pressed(self, event: Button.Pressed) -> None:
        if event.button.id == "open":
            self.send_editor_message(Open())

    def on_document_view_edited(self, event: DocumentView.Edited) -> None:
        self.send_editor_message(Edit(event.action))

    def refresh_view(self) -> None:
        """Redraw everything from the editor state."""
        content = self.editor_state.content
        self._document_view.show(content)
        self._position.update(self.editor_state.status_text())
        self._error_line.update(self.editor_state.error_text())

        line, column = content.cursor_position()
        self._scroll.scroll_to_region(Region(column, line, 1, 1), animate=False)


def main():
    """Entry point."""
    import sys

    path = sys.argv[1] if len(sys.argv) > 1 else None
    app = CoolEditorApp(path)
    app.run()


if __name__ == "__main__":
    main()
