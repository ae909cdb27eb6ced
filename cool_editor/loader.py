"""Asynchronous file loading.

Reading happens in a worker thread so the UI's event loop keeps running.
Failures are returned, never raised: callers get a :class:`LoadResult`
holding either the file's text or an :class:`~cool_editor.exceptions.EditorError`.
"""

from __future__ import annotations

import asyncio
import logging
from dataclasses import dataclass
from pathlib import Path
from typing import Optional, Protocol

from .exceptions import DialogClosed, EditorError, FileReadError, IOErrorKind

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class LoadResult:
    """Outcome of loading a file: text on success, an error otherwise."""

    content: Optional[str] = None
    error: Optional[EditorError] = None

    @classmethod
    def success(cls, content: str) -> "LoadResult":
        return cls(content=content)

    @classmethod
    def failure(cls, error: EditorError) -> "LoadResult":
        return cls(error=error)

    @property
    def ok(self) -> bool:
        return self.error is None


class FilePicker(Protocol):
    """Anything that asks the user for a file and returns it, or None if cancelled."""

    async def __call__(self, title: str) -> Optional[Path]: ...


def classify_os_error(error: BaseException) -> IOErrorKind:
    """Map an OS level error onto the editor's small set of error kinds."""
    if isinstance(error, FileNotFoundError):
        return IOErrorKind.NOT_FOUND
    if isinstance(error, PermissionError):
        return IOErrorKind.PERMISSION_DENIED
    return IOErrorKind.OTHER


def _read_text(path: Path) -> str:
    with open(path, encoding="utf-8", newline="") as f:
        return f.read()


async def load_file(path: Path | str) -> LoadResult:
    """Read a whole file as UTF-8 text without blocking the event loop."""
    path = Path(path)
    try:
        content = await asyncio.to_thread(_read_text, path)
    except (OSError, UnicodeDecodeError, ValueError) as e:
        # ValueError covers paths open() rejects outright, e.g. embedded NUL
        kind = classify_os_error(e)
        logger.warning("Cannot read %s: %s", path, e)
        if isinstance(e, UnicodeDecodeError):
            detail = "not valid UTF-8"
        elif isinstance(e, OSError):
            detail = e.strerror or ""
        else:
            detail = str(e)
        return LoadResult.failure(FileReadError(path, kind, detail))

    logger.debug("Loaded %s (%d characters)", path, len(content))
    return LoadResult.success(content)


async def pick_and_load(picker: FilePicker, title: str) -> LoadResult:
    """Ask the picker for a file, then load it."""
    path = await picker(title)
    if path is None:
        logger.debug("File picker closed without a selection")
        return LoadResult.failure(DialogClosed())
    return await load_file(path)
