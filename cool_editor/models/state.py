"""Editor state and its message handling."""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from pathlib import Path
from typing import Optional

from ..config.defaults import DEFAULT_DIALOG_TITLE, DEFAULT_PAGE_SIZE
from ..exceptions import DialogClosed, EditorError, FileReadError, IOErrorKind
from ..loader import FilePicker, load_file, pick_and_load
from .document import DocumentContent
from .messages import Command, Edit, EditorMessage, FileOpened, Open

logger = logging.getLogger(__name__)

ERROR_DESCRIPTIONS = {
    IOErrorKind.NOT_FOUND: "file not found",
    IOErrorKind.PERMISSION_DENIED: "permission denied",
    IOErrorKind.OTHER: "could not be read",
}


@dataclass
class EditorState:
    """State of the single open document.

    Only :meth:`update` changes the state. It handles one message at a time
    and may hand back a :data:`Command`, an async callable whose result is
    the next message to feed into :meth:`update`.

    ``last_error`` keeps the most recent failure. A later successful load
    does not clear it.
    """

    picker: Optional[FilePicker] = None
    dialog_title: str = DEFAULT_DIALOG_TITLE
    default_path: Optional[Path] = None
    page_size: int = DEFAULT_PAGE_SIZE
    content: DocumentContent = field(default_factory=DocumentContent.new)
    last_error: Optional[EditorError] = None

    def __post_init__(self):
        self.content.page_size = self.page_size

    def startup(self) -> Optional[Command]:
        """Get the command that loads the default file, if one is configured."""
        if self.default_path is None:
            return None
        path = self.default_path

        async def load_default() -> EditorMessage:
            return FileOpened(await load_file(path))

        return load_default

    def update(self, message: EditorMessage) -> Optional[Command]:
        """Apply a message and return any async work it starts."""
        if isinstance(message, Edit):
            self.content.apply_action(message.action)
            return None

        if isinstance(message, Open):
            if self.picker is None:
                raise EditorError("Cannot open a file: no file picker available")
            picker, title = self.picker, self.dialog_title

            async def pick_file() -> EditorMessage:
                return FileOpened(await pick_and_load(picker, title))

            return pick_file

        if isinstance(message, FileOpened):
            result = message.result
            if result.ok:
                self.content = DocumentContent.with_text(result.content or "", page_size=self.page_size)
            else:
                logger.info("Open failed: %s", result.error)
                self.last_error = result.error
            return None

        raise EditorError(f"Unknown message: {message!r}")

    def status_text(self) -> str:
        """Get the cursor position as one-indexed "line:column"."""
        line, column = self.content.cursor_position()
        return f"{line + 1}:{column + 1}"

    def error_text(self) -> str:
        """Describe the last error for display, or return an empty string."""
        error = self.last_error
        if error is None:
            return ""
        if isinstance(error, DialogClosed):
            return "No file selected"
        if isinstance(error, FileReadError):
            text = f"{error.path}: {ERROR_DESCRIPTIONS[error.kind]}"
            if error.kind is IOErrorKind.OTHER and error.detail:
                text = f"{text} ({error.detail})"
            return text
        return str(error)
