"""cool-editor: a minimal single-document text editor for the terminal.

The editor's state lives in plain models that can be used without the UI.

Quick Start (Application):
    ```python
    from cool_editor import CoolEditorApp

    app = CoolEditorApp("/path/to/file.txt")
    app.run()
    ```

Using the Models Directly:
    ```python
    from cool_editor.models import DocumentContent, InsertChar

    doc = DocumentContent.new()
    doc.apply_action(InsertChar("a"))
    ```
"""

__version__ = "0.1.0"

from .app import CoolEditorApp
from .config import Config
from .exceptions import (
    ConfigError,
    CoolEditorError,
    DialogClosed,
    EditorError,
    FileReadError,
    IOErrorKind,
)
from .loader import LoadResult, load_file
from .models import DocumentContent, EditorState

__all__ = [
    # Main application
    "CoolEditorApp",
    # Configuration
    "Config",
    # Models
    "DocumentContent",
    "EditorState",
    # Loading
    "LoadResult",
    "load_file",
    # Exceptions
    "CoolEditorError",
    "ConfigError",
    "EditorError",
    "DialogClosed",
    "FileReadError",
    "IOErrorKind",
    # Version
    "__version__",
]
