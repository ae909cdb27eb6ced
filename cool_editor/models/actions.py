"""Edit actions understood by the document model."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Union


class Motion(str, Enum):
    """Directions the cursor can move in."""

    LEFT = "left"
    RIGHT = "right"
    UP = "up"
    DOWN = "down"
    WORD_LEFT = "word_left"
    WORD_RIGHT = "word_right"
    HOME = "home"
    END = "end"
    PAGE_UP = "page_up"
    PAGE_DOWN = "page_down"
    DOCUMENT_START = "document_start"
    DOCUMENT_END = "document_end"


@dataclass(frozen=True)
class InsertChar:
    char: str


@dataclass(frozen=True)
class InsertNewline:
    pass


@dataclass(frozen=True)
class Paste:
    text: str


@dataclass(frozen=True)
class Backspace:
    pass


@dataclass(frozen=True)
class Delete:
    pass


@dataclass(frozen=True)
class Move:
    motion: Motion


@dataclass(frozen=True)
class MoveTo:
    line: int
    column: int


@dataclass(frozen=True)
class Select:
    """Extend the selection by a motion."""

    motion: Motion


@dataclass(frozen=True)
class SelectTo:
    """Extend the selection to an absolute position."""

    line: int
    column: int


@dataclass(frozen=True)
class SelectWord:
    pass


@dataclass(frozen=True)
class SelectLine:
    pass


@dataclass(frozen=True)
class SelectAll:
    pass


Action = Union[
    InsertChar,
    InsertNewline,
    Paste,
    Backspace,
    Delete,
    Move,
    MoveTo,
    Select,
    SelectTo,
    SelectWord,
    SelectLine,
    SelectAll,
]
