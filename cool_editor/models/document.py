"""Document model: a list of lines with a cursor and an optional selection."""

from __future__ import annotations

from typing import Optional

from ..config.defaults import DEFAULT_PAGE_SIZE
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

Position = tuple[int, int]

VERTICAL_MOTIONS = {Motion.UP, Motion.DOWN, Motion.PAGE_UP, Motion.PAGE_DOWN}


def _is_word_char(ch: str) -> bool:
    return ch.isalnum() or ch == "_"


class DocumentContent:
    """Editable text held as lines, with a cursor and an optional selection.

    The cursor is a zero-indexed ``(line, column)`` pair. It always points at
    an existing line, and its column is never past the end of that line. The
    document always has at least one (possibly empty) line.

    The selection runs between an anchor and the cursor. It is empty when
    there is no anchor or when the anchor equals the cursor.

    Example:
        ```python
        doc = DocumentContent.with_text("hello\\nworld")
        doc.apply_action(Move(Motion.END))
        doc.cursor_position()  # (0, 5)
        ```
    """

    def __init__(self, page_size: int = DEFAULT_PAGE_SIZE):
        self._lines: list[str] = [""]
        self._line = 0
        self._column = 0
        self._anchor: Optional[Position] = None
        # Column that vertical motions try to return to
        self._preferred_column: Optional[int] = None
        self.page_size = page_size

    @classmethod
    def new(cls, page_size: int = DEFAULT_PAGE_SIZE) -> "DocumentContent":
        """Create an empty document."""
        return cls(page_size=page_size)

    @classmethod
    def with_text(cls, text: str, page_size: int = DEFAULT_PAGE_SIZE) -> "DocumentContent":
        """Create a document from text, splitting it on newlines."""
        doc = cls(page_size=page_size)
        doc._lines = text.replace("\r\n", "\n").split("\n")
        return doc

    def __repr__(self) -> str:
        return (
            f"DocumentContent(lines={len(self._lines)}, "
            f"cursor={self.cursor_position()}, selection={self.selection()})"
        )

    # ------------------------------------------------------------------
    # Queries
    # ------------------------------------------------------------------

    @property
    def lines(self) -> tuple[str, ...]:
        return tuple(self._lines)

    @property
    def line_count(self) -> int:
        return len(self._lines)

    @property
    def text(self) -> str:
        return "\n".join(self._lines)

    def line(self, index: int) -> str:
        return self._lines[index]

    def cursor_position(self) -> Position:
        """Get the cursor as a zero-indexed (line, column) pair."""
        return (self._line, self._column)

    def selection(self) -> Optional[tuple[Position, Position]]:
        """Get the selected range as (start, end), or None if nothing is selected."""
        if self._anchor is None:
            return None
        cursor = self.cursor_position()
        if self._anchor == cursor:
            return None
        return (min(self._anchor, cursor), max(self._anchor, cursor))

    def selected_text(self) -> str:
        selection = self.selection()
        if selection is None:
            return ""
        (start_line, start_col), (end_line, end_col) = selection
        if start_line == end_line:
            return self._lines[start_line][start_col:end_col]
        parts = [self._lines[start_line][start_col:]]
        parts.extend(self._lines[start_line + 1 : end_line])
        parts.append(self._lines[end_line][:end_col])
        return "\n".join(parts)

    # ------------------------------------------------------------------
    # Edits
    # ------------------------------------------------------------------

    def apply_action(self, action: Action) -> None:
        """Apply one edit action in place.

        Positions outside the document are clamped, and edits that have
        nothing to act on (e.g. backspace at the start) do nothing.
        """
        if isinstance(action, (InsertChar, Paste)):
            text = action.char if isinstance(action, InsertChar) else action.text
            self._insert(text.replace("\r\n", "\n"))
        elif isinstance(action, InsertNewline):
            self._insert("\n")
        elif isinstance(action, Backspace):
            self._backspace()
        elif isinstance(action, Delete):
            self._delete()
        elif isinstance(action, Move):
            self._move(action.motion, extend=False)
        elif isinstance(action, Select):
            self._move(action.motion, extend=True)
        elif isinstance(action, MoveTo):
            self._anchor = None
            self._set_cursor(self._clamp(action.line, action.column))
        elif isinstance(action, SelectTo):
            if self._anchor is None:
                self._anchor = self.cursor_position()
            self._set_cursor(self._clamp(action.line, action.column))
        elif isinstance(action, SelectWord):
            self._select_word()
        elif isinstance(action, SelectLine):
            self._select_line()
        elif isinstance(action, SelectAll):
            self._anchor = (0, 0)
            self._set_cursor(self._document_end())
        else:
            raise TypeError(f"Unknown edit action: {action!r}")

    def _set_cursor(self, position: Position, preferred_column: Optional[int] = None) -> None:
        self._line, self._column = position
        self._preferred_column = preferred_column

    def _clamp(self, line: int, column: int) -> Position:
        line = max(0, min(line, len(self._lines) - 1))
        column = max(0, min(column, len(self._lines[line])))
        return (line, column)

    def _document_end(self) -> Position:
        last = len(self._lines) - 1
        return (last, len(self._lines[last]))

    def _delete_selection(self) -> bool:
        """Remove the selected text. Returns True if anything was removed."""
        selection = self.selection()
        self._anchor = None
        if selection is None:
            return False
        (start_line, start_col), (end_line, end_col) = selection
        self._lines[start_line : end_line + 1] = [
            self._lines[start_line][:start_col] + self._lines[end_line][end_col:]
        ]
        self._set_cursor((start_line, start_col))
        return True

    def _insert(self, text: str) -> None:
        self._delete_selection()
        if not text:
            return
        current = self._lines[self._line]
        head, tail = current[: self._column], current[self._column :]
        parts = text.split("\n")
        if len(parts) == 1:
            self._lines[self._line] = head + text + tail
            self._set_cursor((self._line, self._column + len(text)))
            return
        new_lines = [head + parts[0], *parts[1:-1], parts[-1] + tail]
        self._lines[self._line : self._line + 1] = new_lines
        self._set_cursor((self._line + len(parts) - 1, len(parts[-1])))

    def _backspace(self) -> None:
        if self._delete_selection():
            return
        if self._column > 0:
            current = self._lines[self._line]
            self._lines[self._line] = current[: self._column - 1] + current[self._column :]
            self._set_cursor((self._line, self._column - 1))
        elif self._line > 0:
            previous = self._lines[self._line - 1]
            self._lines[self._line - 1] = previous + self._lines[self._line]
            del self._lines[self._line]
            self._set_cursor((self._line - 1, len(previous)))

    def _delete(self) -> None:
        if self._delete_selection():
            return
        current = self._lines[self._line]
        if self._column < len(current):
            self._lines[self._line] = current[: self._column] + current[self._column + 1 :]
            self._preferred_column = None
        elif self._line + 1 < len(self._lines):
            self._lines[self._line] = current + self._lines[self._line + 1]
            del self._lines[self._line + 1]
            self._preferred_column = None

    # ------------------------------------------------------------------
    # Motion
    # ------------------------------------------------------------------

    def _move(self, motion: Motion, extend: bool) -> None:
        selection = self.selection()
        if not extend and selection is not None and motion in (Motion.LEFT, Motion.RIGHT):
            # Collapse the selection instead of moving past it
            self._anchor = None
            self._set_cursor(selection[0] if motion is Motion.LEFT else selection[1])
            return

        if extend:
            if self._anchor is None:
                self._anchor = self.cursor_position()
        else:
            self._anchor = None

        if motion in VERTICAL_MOTIONS:
            self._move_vertical(motion)
        else:
            self._set_cursor(self._horizontal_target(motion))

    def _move_vertical(self, motion: Motion) -> None:
        want = self._column if self._preferred_column is None else self._preferred_column
        step = self.page_size if motion in (Motion.PAGE_UP, Motion.PAGE_DOWN) else 1
        last = len(self._lines) - 1

        if motion in (Motion.UP, Motion.PAGE_UP):
            if self._line == 0:
                self._set_cursor((0, 0))
                return
            line = max(0, self._line - step)
        else:
            if self._line == last:
                self._set_cursor(self._document_end())
                return
            line = min(last, self._line + step)

        self._set_cursor((line, min(want, len(self._lines[line]))), preferred_column=want)

    def _horizontal_target(self, motion: Motion) -> Position:
        line, column = self._line, self._column
        current = self._lines[line]

        if motion is Motion.LEFT:
            if column > 0:
                return (line, column - 1)
            if line > 0:
                return (line - 1, len(self._lines[line - 1]))
            return (line, column)
        if motion is Motion.RIGHT:
            if column < len(current):
                return (line, column + 1)
            if line + 1 < len(self._lines):
                return (line + 1, 0)
            return (line, column)
        if motion is Motion.WORD_LEFT:
            return self._word_left_target()
        if motion is Motion.WORD_RIGHT:
            return self._word_right_target()
        if motion is Motion.HOME:
            return (line, 0)
        if motion is Motion.END:
            return (line, len(current))
        if motion is Motion.DOCUMENT_START:
            return (0, 0)
        if motion is Motion.DOCUMENT_END:
            return self._document_end()
        raise TypeError(f"Unknown motion: {motion!r}")

    def _word_left_target(self) -> Position:
        line, pos = self._line, self._column
        if pos == 0:
            if line > 0:
                return (line - 1, len(self._lines[line - 1]))
            return (line, pos)
        text = self._lines[line]
        # Skip whitespace, then the word before it
        while pos > 0 and text[pos - 1].isspace():
            pos -= 1
        while pos > 0 and not text[pos - 1].isspace():
            pos -= 1
        return (line, pos)

    def _word_right_target(self) -> Position:
        line, pos = self._line, self._column
        text = self._lines[line]
        if pos >= len(text):
            if line + 1 < len(self._lines):
                return (line + 1, 0)
            return (line, pos)
        while pos < len(text) and not text[pos].isspace():
            pos += 1
        while pos < len(text) and text[pos].isspace():
            pos += 1
        return (line, pos)

    def _select_word(self) -> None:
        text = self._lines[self._line]
        start = end = self._column
        while start > 0 and _is_word_char(text[start - 1]):
            start -= 1
        while end < len(text) and _is_word_char(text[end]):
            end += 1
        if start == end:
            self._anchor = None
            return
        self._anchor = (self._line, start)
        self._set_cursor((self._line, end))

    def _select_line(self) -> None:
        self._anchor = (self._line, 0)
        if self._line + 1 < len(self._lines):
            self._set_cursor((self._line + 1, 0))
        else:
            self._set_cursor((self._line, len(self._lines[self._line])))
