"""Configuration settings for cool-editor."""

from __future__ import annotations

import logging
import os
import tomllib
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Optional

from ..exceptions import ConfigError
from .defaults import DEFAULT_DIALOG_TITLE, DEFAULT_PAGE_SIZE, DEFAULT_THEME, DEFAULT_TITLE

logger = logging.getLogger(__name__)


def _toml_string(value: str) -> str:
    """Quote a value as a TOML basic string."""
    escaped = value.replace("\\", "\\\\").replace('"', '\\"')
    escaped = escaped.replace("\n", "\\n").replace("\t", "\\t")
    return f'"{escaped}"'


def _typed(section: dict[str, Any], key: str, kind: type) -> Any:
    value = section[key]
    # bool is a subclass of int
    if kind is int and isinstance(value, bool) or not isinstance(value, kind):
        raise ConfigError(f"'{key}' must be of type {kind.__name__}, got {value!r}")
    return value


@dataclass
class EditorConfig:
    """Editor-related settings."""

    theme: str = DEFAULT_THEME
    title: str = DEFAULT_TITLE
    default_path: str = ""  # Empty means no file is loaded at startup
    page_size: int = DEFAULT_PAGE_SIZE

    def get_default_path(self) -> Optional[Path]:
        """Get the file to load at startup, if any."""
        if self.default_path:
            return Path(self.default_path).expanduser()
        return None


@dataclass
class DialogConfig:
    """Open-file dialog settings."""

    title: str = DEFAULT_DIALOG_TITLE
    start_directory: str = ""  # Empty means the current directory

    def get_start_directory(self) -> Path:
        if self.start_directory:
            return Path(self.start_directory).expanduser()
        return Path.cwd()


@dataclass
class Config:
    """Main configuration class for cool-editor."""

    editor: EditorConfig = field(default_factory=EditorConfig)
    dialog: DialogConfig = field(default_factory=DialogConfig)

    # XDG config directory
    CONFIG_DIR = Path(os.environ.get("XDG_CONFIG_HOME") or (Path.home() / ".config")) / "cool-editor"
    CONFIG_FILE = CONFIG_DIR / "config.toml"
    PROJECT_CONFIG_FILE = ".cool-editor.toml"

    @classmethod
    def load(cls, project_path: Optional[Path] = None) -> "Config":
        """Load configuration from files.

        Priority (highest to lowest):
        1. Project-specific config (.cool-editor.toml in project root)
        2. User config (~/.config/cool-editor/config.toml)
        3. Default values
        """
        config = cls()

        if cls.CONFIG_FILE.exists():
            config._load_from_file(cls.CONFIG_FILE)

        if project_path:
            project_config = project_path / cls.PROJECT_CONFIG_FILE
            if project_config.exists():
                config._load_from_file(project_config)

        return config

    def _load_from_file(self, path: Path) -> None:
        """Load configuration from a TOML file.

        Args:
            path: Path to the TOML configuration file.

        Note:
            Invalid configurations are logged but don't raise exceptions.
            The application continues with the values loaded so far.
        """
        try:
            with open(path, "rb") as f:
                data = tomllib.load(f)
        except FileNotFoundError:
            return
        except tomllib.TOMLDecodeError as e:
            logger.warning("Invalid TOML in %s: %s", path, e)
            return
        except OSError as e:
            logger.warning("Cannot read config file %s: %s", path, e)
            return

        self.apply(data, source=str(path))

    def apply(self, data: dict[str, Any], source: str = "<dict>") -> None:
        """Apply settings from parsed TOML data, skipping invalid values."""
        sections = {
            "editor": (self.editor, {"theme": str, "title": str, "default_path": str, "page_size": int}),
            "dialog": (self.dialog, {"title": str, "start_directory": str}),
        }
        for name, (target, schema) in sections.items():
            section = data.get(name)
            if not isinstance(section, dict):
                continue
            for key, kind in schema.items():
                if key not in section:
                    continue
                try:
                    setattr(target, key, _typed(section, key, kind))
                except ConfigError as e:
                    logger.warning("Ignoring [%s] setting in %s: %s", name, source, e)

        if self.editor.page_size < 1:
            logger.warning("page_size must be positive in %s, using %d", source, DEFAULT_PAGE_SIZE)
            self.editor.page_size = DEFAULT_PAGE_SIZE

    def save(self) -> None:
        """Save configuration to user config file."""
        self.CONFIG_DIR.mkdir(parents=True, exist_ok=True)

        content = f"""# cool-editor configuration

[editor]
theme = {_toml_string(self.editor.theme)}
title = {_toml_string(self.editor.title)}
default_path = {_toml_string(self.editor.default_path)}  # Empty string skips the startup load
page_size = {self.editor.page_size}

[dialog]
title = {_toml_string(self.dialog.title)}
start_directory = {_toml_string(self.dialog.start_directory)}  # Empty string uses the current directory
"""
        with open(self.CONFIG_FILE, "w", encoding="utf-8") as f:
            f.write(content)
