"""Default configuration values for cool-editor."""

DEFAULT_TITLE = "A cool editor"
DEFAULT_THEME = "textual-dark"
DEFAULT_DIALOG_TITLE = "Choose File"

# Lines moved by a page up / page down motion
DEFAULT_PAGE_SIZE = 20
