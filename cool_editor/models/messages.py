"""Messages consumed by the editor state machine."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Awaitable, Callable, Union

from ..loader import LoadResult
from .actions import Action


@dataclass(frozen=True)
class Edit:
    """The user edited the document."""

    action: Action


@dataclass(frozen=True)
class Open:
    """The user asked to open a file."""


@dataclass(frozen=True)
class FileOpened:
    """A file load finished, successfully or not."""

    result: LoadResult


EditorMessage = Union[Edit, Open, FileOpened]

# Async work requested by the state machine; its result is fed back in
Command = Callable[[], Awaitable[EditorMessage]]
