"""Configuration module for cool-editor."""

from .defaults import DEFAULT_DIALOG_TITLE, DEFAULT_THEME, DEFAULT_TITLE
from .settings import Config

__all__ = ["DEFAULT_DIALOG_TITLE", "DEFAULT_THEME", "DEFAULT_TITLE", "Config"]
