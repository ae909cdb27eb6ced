"""Widget components for cool-editor."""

from .dialogs import OpenFileDialog
from .document import DocumentView

__all__ = ["DocumentView", "OpenFileDialog"]
