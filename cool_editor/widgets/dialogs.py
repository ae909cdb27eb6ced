"""Dialog widgets for cool-editor."""

from __future__ import annotations

from pathlib import Path
from typing import Optional

from textual.app import ComposeResult
from textual.binding import Binding
from textual.containers import Horizontal, Vertical
from textual.screen import ModalScreen
from textual.widgets import Button, DirectoryTree, Label


class OpenFileDialog(ModalScreen[Optional[Path]]):
    """Dialog to pick a file to open. Dismisses with None when cancelled."""

    CSS = """
    OpenFileDialog {
        align: center middle;
    }

    #dialog {
        width: 80;
        height: 80%;
        border: thick $primary;
        background: $surface;
        padding: 1 2;
    }

    #dialog-tree {
        height: 1fr;
    }

    #buttons {
        height: auto;
        margin-top: 1;
        align: center middle;
    }
    """

    BINDINGS = [Binding("escape", "cancel", "Cancel")]

    def __init__(self, title: str, start_directory: Path):
        super().__init__()
        self.dialog_title = title
        self.start_directory = start_directory

    def compose(self) -> ComposeResult:
        with Vertical(id="dialog"):
            yield Label(self.dialog_title, id="dialog-title")
            yield DirectoryTree(str(self.start_directory), id="dialog-tree")
            with Horizontal(id="buttons"):
                yield Button("Cancel", id="cancel")

    def on_directory_tree_file_selected(self, event: DirectoryTree.FileSelected) -> None:
        self.dismiss(Path(event.path))

    def on_button_pressed(self, event: Button.Pressed) -> None:
        if event.button.id == "cancel":
            self.dismiss(None)

    def action_cancel(self) -> None:
        self.dismiss(None)
