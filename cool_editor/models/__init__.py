"""Data models for cool-editor."""

from .actions import (
    Action,
    Backspace,
    Delete,
    InsertChar,
    InsertNewline,
    Motion,
    Move,
    MoveTo,
    Paste,
    Select,
    SelectAll,
    SelectLine,
    SelectTo,
    SelectWord,
)
from .document import DocumentContent
from .messages import Command, Edit, EditorMessage, FileOpened, Open
from .state import EditorState

__all__ = [
    "Action",
    "Backspace",
    "Delete",
    "InsertChar",
    "InsertNewline",
    "Motion",
    "Move",
    "MoveTo",
    "Paste",
    "Select",
    "SelectAll",
    "SelectLine",
    "SelectTo",
    "SelectWord",
    "DocumentContent",
    "Command",
    "Edit",
    "EditorMessage",
    "FileOpened",
    "Open",
    "EditorState",
]
