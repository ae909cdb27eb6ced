"""Tests for the document model."""

import pytest

from cool_editor.models import (
    Backspace,
    Delete,
    DocumentContent,
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


class TestConstruction:
    """Tests for creating documents."""

    def test_new_is_empty(self):
        """A new document has one empty line and the cursor at the origin."""
        doc = DocumentContent.new()

        assert doc.lines == ("",)
        assert doc.cursor_position() == (0, 0)
        assert doc.selection() is None

    def test_with_text_splits_lines(self):
        """with_text should split on newlines and reset the cursor."""
        doc = DocumentContent.with_text("line1\nline2")

        assert doc.lines == ("line1", "line2")
        assert doc.cursor_position() == (0, 0)

    @pytest.mark.parametrize("text", ["", "one", "a\nb\nc", "tabs\tand  spaces\n\nblank"])
    def test_text_reconstructs_input(self, text):
        """Joining the lines should give back the original text."""
        assert DocumentContent.with_text(text).text == text

    def test_windows_newlines_are_normalised(self):
        """CRLF line endings should not leave carriage returns in lines."""
        doc = DocumentContent.with_text("a\r\nb")

        assert doc.lines == ("a", "b")


class TestInsert:
    """Tests for inserting text."""

    def test_typing_scenario(self):
        """Typing a, b, newline, c gives two lines with the cursor after c."""
        doc = DocumentContent.new()
        doc.apply_action(InsertChar("a"))
        doc.apply_action(InsertChar("b"))
        doc.apply_action(InsertNewline())
        doc.apply_action(InsertChar("c"))

        assert doc.lines == ("ab", "c")
        assert doc.cursor_position() == (1, 1)

    def test_column_increases_and_stays_in_bounds(self):
        """Each inserted character moves the cursor one column right."""
        doc = DocumentContent.with_text("xy")
        doc.apply_action(MoveTo(0, 1))
        previous = doc.cursor_position()[1]

        for ch in "hello world":
            doc.apply_action(InsertChar(ch))
            line, column = doc.cursor_position()
            assert column == previous + 1
            assert column <= len(doc.line(line))
            previous = column

        assert doc.text == "xhello worldy"

    def test_newline_splits_line(self):
        """InsertNewline should split the current line at the cursor."""
        doc = DocumentContent.with_text("abcd")
        doc.apply_action(MoveTo(0, 2))
        doc.apply_action(InsertNewline())

        assert doc.lines == ("ab", "cd")
        assert doc.cursor_position() == (1, 0)

    def test_newline_char_acts_like_insert_newline(self):
        """InsertChar with a newline character should split the line."""
        doc = DocumentContent.new()
        doc.apply_action(InsertChar("\n"))

        assert doc.lines == ("", "")
        assert doc.cursor_position() == (1, 0)

    def test_paste_multiline(self):
        """Paste should insert several lines and leave the cursor after them."""
        doc = DocumentContent.with_text("[]")
        doc.apply_action(MoveTo(0, 1))
        doc.apply_action(Paste("one\ntwo\nthree"))

        assert doc.lines == ("[one", "two", "three]")
        assert doc.cursor_position() == (2, 5)

    def test_insert_replaces_selection(self):
        """Typing over a selection should replace it."""
        doc = DocumentContent.with_text("hello world")
        doc.apply_action(MoveTo(0, 6))
        doc.apply_action(SelectTo(0, 11))
        doc.apply_action(InsertChar("X"))

        assert doc.text == "hello X"
        assert doc.selection() is None


class TestDelete:
    """Tests for Backspace and Delete."""

    def test_backspace_removes_previous_char(self):
        doc = DocumentContent.with_text("abc")
        doc.apply_action(MoveTo(0, 2))
        doc.apply_action(Backspace())

        assert doc.text == "ac"
        assert doc.cursor_position() == (0, 1)

    def test_backspace_joins_lines(self):
        """Backspace at column 0 should join with the previous line."""
        doc = DocumentContent.with_text("ab\ncd")
        doc.apply_action(MoveTo(1, 0))
        doc.apply_action(Backspace())

        assert doc.lines == ("abcd",)
        assert doc.cursor_position() == (0, 2)

    def test_backspace_at_start_is_noop(self):
        """Backspace at the start of the document does nothing."""
        doc = DocumentContent.new()
        doc.apply_action(Backspace())

        assert doc.lines == ("",)
        assert doc.cursor_position() == (0, 0)

    def test_delete_removes_next_char(self):
        doc = DocumentContent.with_text("abc")
        doc.apply_action(Delete())

        assert doc.text == "bc"
        assert doc.cursor_position() == (0, 0)

    def test_delete_joins_next_line(self):
        """Delete at end of line should pull up the next line."""
        doc = DocumentContent.with_text("ab\ncd")
        doc.apply_action(MoveTo(0, 2))
        doc.apply_action(Delete())

        assert doc.lines == ("abcd",)
        assert doc.cursor_position() == (0, 2)

    def test_delete_at_end_is_noop(self):
        doc = DocumentContent.with_text("ab")
        doc.apply_action(Move(Motion.DOCUMENT_END))
        doc.apply_action(Delete())

        assert doc.text == "ab"
        assert doc.cursor_position() == (0, 2)

    def test_backspace_removes_multiline_selection(self):
        """Deleting a selection spanning lines should merge the ends."""
        doc = DocumentContent.with_text("first\nsecond\nthird")
        doc.apply_action(MoveTo(0, 2))
        doc.apply_action(SelectTo(2, 3))
        doc.apply_action(Backspace())

        assert doc.lines == ("fird",)
        assert doc.cursor_position() == (0, 2)


class TestMotion:
    """Tests for cursor movement."""

    def test_move_to_clamps_past_end(self):
        """MoveTo beyond the document clamps to the last valid position."""
        doc = DocumentContent.with_text("ab\nc")
        doc.apply_action(MoveTo(100, 100))

        assert doc.cursor_position() == (1, 1)

    def test_move_to_clamps_column(self):
        doc = DocumentContent.with_text("ab\nc")
        doc.apply_action(MoveTo(0, 50))

        assert doc.cursor_position() == (0, 2)

    def test_move_to_clamps_negative(self):
        doc = DocumentContent.with_text("ab\nc")
        doc.apply_action(MoveTo(-3, -1))

        assert doc.cursor_position() == (0, 0)

    def test_left_wraps_to_previous_line(self):
        doc = DocumentContent.with_text("ab\ncd")
        doc.apply_action(MoveTo(1, 0))
        doc.apply_action(Move(Motion.LEFT))

        assert doc.cursor_position() == (0, 2)

    def test_right_wraps_to_next_line(self):
        doc = DocumentContent.with_text("ab\ncd")
        doc.apply_action(MoveTo(0, 2))
        doc.apply_action(Move(Motion.RIGHT))

        assert doc.cursor_position() == (1, 0)

    def test_left_at_start_stays(self):
        doc = DocumentContent.with_text("ab")
        doc.apply_action(Move(Motion.LEFT))

        assert doc.cursor_position() == (0, 0)

    def test_vertical_motion_preserves_column(self):
        """Moving through a short line should return to the original column."""
        doc = DocumentContent.with_text("long line\nab\nanother line")
        doc.apply_action(MoveTo(0, 7))
        doc.apply_action(Move(Motion.DOWN))

        assert doc.cursor_position() == (1, 2)

        doc.apply_action(Move(Motion.DOWN))

        assert doc.cursor_position() == (2, 7)

    def test_up_on_first_line_goes_to_start(self):
        doc = DocumentContent.with_text("abc\ndef")
        doc.apply_action(MoveTo(0, 2))
        doc.apply_action(Move(Motion.UP))

        assert doc.cursor_position() == (0, 0)

    def test_down_on_last_line_goes_to_end(self):
        doc = DocumentContent.with_text("abc\ndef")
        doc.apply_action(MoveTo(1, 1))
        doc.apply_action(Move(Motion.DOWN))

        assert doc.cursor_position() == (1, 3)

    def test_page_down_uses_page_size(self):
        doc = DocumentContent.with_text("\n".join(str(i) for i in range(10)), page_size=4)
        doc.apply_action(Move(Motion.PAGE_DOWN))

        assert doc.cursor_position() == (4, 0)

        doc.apply_action(Move(Motion.PAGE_DOWN))
        doc.apply_action(Move(Motion.PAGE_DOWN))

        assert doc.cursor_position() == (9, 0)

    def test_home_and_end(self):
        doc = DocumentContent.with_text("hello")
        doc.apply_action(Move(Motion.END))

        assert doc.cursor_position() == (0, 5)

        doc.apply_action(Move(Motion.HOME))

        assert doc.cursor_position() == (0, 0)

    def test_word_right(self):
        doc = DocumentContent.with_text("one two  three")
        doc.apply_action(Move(Motion.WORD_RIGHT))

        assert doc.cursor_position() == (0, 4)

        doc.apply_action(Move(Motion.WORD_RIGHT))

        assert doc.cursor_position() == (0, 9)

        doc.apply_action(Move(Motion.WORD_RIGHT))

        assert doc.cursor_position() == (0, 14)

    def test_word_left(self):
        doc = DocumentContent.with_text("one two  three")
        doc.apply_action(Move(Motion.END))
        doc.apply_action(Move(Motion.WORD_LEFT))

        assert doc.cursor_position() == (0, 9)

        doc.apply_action(Move(Motion.WORD_LEFT))

        assert doc.cursor_position() == (0, 4)

    def test_word_motion_crosses_lines(self):
        doc = DocumentContent.with_text("ab\ncd")
        doc.apply_action(MoveTo(0, 2))
        doc.apply_action(Move(Motion.WORD_RIGHT))

        assert doc.cursor_position() == (1, 0)

        doc.apply_action(Move(Motion.WORD_LEFT))

        assert doc.cursor_position() == (0, 2)

    def test_cursor_stays_valid_through_random_edits(self):
        """No sequence of actions should leave the cursor out of range."""
        doc = DocumentContent.with_text("alpha\nbeta\n\ngamma delta")
        actions = [
            Move(Motion.DOCUMENT_END),
            Backspace(),
            Move(Motion.UP),
            Delete(),
            Delete(),
            Select(Motion.DOCUMENT_START),
            Backspace(),
            MoveTo(7, 2),
            Move(Motion.PAGE_DOWN),
            InsertNewline(),
            Move(Motion.WORD_LEFT),
            Backspace(),
        ]
        for action in actions:
            doc.apply_action(action)
            line, column = doc.cursor_position()
            assert 0 <= line < doc.line_count
            assert 0 <= column <= len(doc.line(line))


class TestSelection:
    """Tests for selection actions."""

    def test_select_motion_extends_from_cursor(self):
        doc = DocumentContent.with_text("hello")
        doc.apply_action(Select(Motion.RIGHT))
        doc.apply_action(Select(Motion.RIGHT))

        assert doc.selection() == ((0, 0), (0, 2))
        assert doc.selected_text() == "he"

    def test_select_to_across_lines(self):
        doc = DocumentContent.with_text("abc\ndef\nghi")
        doc.apply_action(MoveTo(2, 1))
        doc.apply_action(SelectTo(0, 1))

        assert doc.selection() == ((0, 1), (2, 1))
        assert doc.selected_text() == "bc\ndef\ng"
        assert doc.cursor_position() == (0, 1)

    def test_select_to_clamps(self):
        doc = DocumentContent.with_text("abc")
        doc.apply_action(SelectTo(9, 9))

        assert doc.selection() == ((0, 0), (0, 3))

    def test_move_clears_selection(self):
        doc = DocumentContent.with_text("hello")
        doc.apply_action(SelectAll())
        doc.apply_action(Move(Motion.HOME))

        assert doc.selection() is None

    def test_left_collapses_to_selection_start(self):
        doc = DocumentContent.with_text("hello")
        doc.apply_action(MoveTo(0, 1))
        doc.apply_action(SelectTo(0, 4))
        doc.apply_action(Move(Motion.LEFT))

        assert doc.selection() is None
        assert doc.cursor_position() == (0, 1)

    def test_right_collapses_to_selection_end(self):
        doc = DocumentContent.with_text("hello")
        doc.apply_action(MoveTo(0, 4))
        doc.apply_action(SelectTo(0, 1))
        doc.apply_action(Move(Motion.RIGHT))

        assert doc.cursor_position() == (0, 4)

    def test_select_word(self):
        doc = DocumentContent.with_text("say hello_there now")
        doc.apply_action(MoveTo(0, 7))
        doc.apply_action(SelectWord())

        assert doc.selected_text() == "hello_there"

    def test_select_word_on_space_is_noop(self):
        doc = DocumentContent.with_text("a  b")
        doc.apply_action(MoveTo(0, 2))
        doc.apply_action(SelectWord())

        assert doc.selection() is None

    def test_select_word_on_space_clears_selection(self):
        """A stale selection should not survive a word select on whitespace."""
        doc = DocumentContent.with_text("ab  cd")
        doc.apply_action(MoveTo(0, 2))
        doc.apply_action(Select(Motion.RIGHT))
        doc.apply_action(SelectWord())

        assert doc.selection() is None

        doc.apply_action(Move(Motion.RIGHT))
        assert doc.cursor_position() == (0, 4)

    def test_select_line(self):
        doc = DocumentContent.with_text("one\ntwo")
        doc.apply_action(SelectLine())

        assert doc.selected_text() == "one\n"

    def test_select_last_line(self):
        doc = DocumentContent.with_text("one\ntwo")
        doc.apply_action(MoveTo(1, 1))
        doc.apply_action(SelectLine())

        assert doc.selected_text() == "two"

    def test_select_all(self):
        doc = DocumentContent.with_text("one\ntwo")
        doc.apply_action(SelectAll())

        assert doc.selected_text() == "one\ntwo"
        assert doc.cursor_position() == (1, 3)

    def test_unknown_action_raises(self):
        """Objects that are not edit actions are rejected."""
        with pytest.raises(TypeError):
            DocumentContent.new().apply_action("insert")
