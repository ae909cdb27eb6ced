"""Custom exceptions for cool-editor.

This module defines the exception hierarchy for cool-editor. Errors that
happen while opening a file are not raised to the caller: they are carried
back to the editor state and remembered as its last error.

Example:
    ```python
    from cool_editor.exceptions import CoolEditorError, FileReadError

    if isinstance(state.last_error, FileReadError):
        print(f"Could not read {state.last_error.path}")
    ```
"""

from __future__ import annotations

from enum import Enum
from pathlib import Path


class CoolEditorError(Exception):
    """Base exception for all cool-editor errors."""

    pass


class ConfigError(CoolEditorError):
    """Error related to configuration values.

    Raised when:
    - A configuration value has the wrong type
    """

    pass


class EditorError(CoolEditorError):
    """Error related to the editor state.

    Subclasses are stored as the editor's last error. The base class itself
    is raised for messages the editor does not understand.
    """

    pass


class DialogClosed(EditorError):
    """The file picker was closed without choosing a file."""

    def __init__(self) -> None:
        super().__init__("No file selected")

    def __eq__(self, other: object) -> bool:
        return isinstance(other, DialogClosed)

    def __hash__(self) -> int:
        return hash(DialogClosed)


class IOErrorKind(str, Enum):
    """Platform independent classification of a failed read."""

    NOT_FOUND = "not-found"
    PERMISSION_DENIED = "permission-denied"
    OTHER = "other"


class FileReadError(EditorError):
    """A file could not be read.

    Attributes:
        path: The path that was being read.
        kind: Classification of the underlying OS error.
    """

    def __init__(self, path: Path | str, kind: IOErrorKind, detail: str = "") -> None:
        self.path = Path(path)
        self.kind = kind
        self.detail = detail
        message = f"{self.path}: {kind.value}"
        if detail:
            message = f"{message} ({detail})"
        super().__init__(message)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, FileReadError):
            return NotImplemented
        return self.path == other.path and self.kind == other.kind

    def __hash__(self) -> int:
        return hash((self.path, self.kind))
