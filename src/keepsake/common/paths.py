"""XDG location helpers for Keepsake."""

from __future__ import annotations

import os
from pathlib import Path

from keepsake.utils.directories import AppDirectories


def _xdg_root(variable: str, *fallback: str) -> Path:
    configured = os.getenv(variable)
    if configured:
        return Path(configured).expanduser()
    return Path.home().joinpath(*fallback)


def get_global_config_root(directories: AppDirectories) -> Path:
    """Folder holding the settings file: ``$XDG_CONFIG_HOME/{app_name}``, else ``~/.config/{app_name}``."""
    return _xdg_root("XDG_CONFIG_HOME", ".config") / directories.app_name


def get_data_directory_from_dirs(directories: AppDirectories) -> Path:
    """Application-private writable folder.

    File backends, the JSON file registry and CLI logs all live here:
    ``$XDG_DATA_HOME/{app_name}``, else ``~/.local/share/{app_name}``.
    """
    return _xdg_root("XDG_DATA_HOME", ".local", "share") / directories.app_name
