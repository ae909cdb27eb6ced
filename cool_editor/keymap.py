"""Translate key presses into edit actions."""

from __future__ import annotations

from typing import Optional

from .models.actions import (
    Action,
    Backspace,
    Delete,
    InsertChar,
    InsertNewline,
    Motion,
    Move,
    Select,
    SelectAll,
)

# Keys that move the cursor; with "shift+" they extend the selection instead
MOTION_KEYS = {
    "left": Motion.LEFT,
    "right": Motion.RIGHT,
    "up": Motion.UP,
    "down": Motion.DOWN,
    "ctrl+left": Motion.WORD_LEFT,
    "ctrl+right": Motion.WORD_RIGHT,
    "home": Motion.HOME,
    "end": Motion.END,
    "pageup": Motion.PAGE_UP,
    "pagedown": Motion.PAGE_DOWN,
    "ctrl+home": Motion.DOCUMENT_START,
    "ctrl+end": Motion.DOCUMENT_END,
}

EDIT_KEYS: dict[str, Action] = {
    "enter": InsertNewline(),
    "backspace": Backspace(),
    "delete": Delete(),
    "tab": InsertChar("\t"),
    "ctrl+a": SelectAll(),
}


def _without_shift(key: str) -> Optional[str]:
    parts = key.split("+")
    if "shift" not in parts:
        return None
    parts.remove("shift")
    return "+".join(parts)


def action_for_key(key: str, character: Optional[str] = None) -> Optional[Action]:
    """Get the edit action for a key press, or None if the key is not an edit.

    Args:
        key: Textual key name, e.g. "shift+left".
        character: The printable character produced by the key, if any.
    """
    if key in MOTION_KEYS:
        return Move(MOTION_KEYS[key])

    unshifted = _without_shift(key)
    if unshifted in MOTION_KEYS:
        return Select(MOTION_KEYS[unshifted])

    if key in EDIT_KEYS:
        return EDIT_KEYS[key]

    if character and len(character) == 1 and character.isprintable():
        return InsertChar(character)
    return None
