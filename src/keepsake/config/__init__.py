"""Persistence settings: models, sources and environment overrides."""

from __future__ import annotations

from .loader import StaticSettingsSource, YamlSettingsSource, default_settings_path, validate_settings
from .models import (
    BackendKind,
    PersistenceSettings,
    SettingsError,
    SettingsIOError,
    SettingsNotFoundError,
    SettingsValidationError,
    SettingsYamlError,
)
from .protocol import SettingsSource

__all__ = [
    "BackendKind",
    "PersistenceSettings",
    "SettingsError",
    "SettingsIOError",
    "SettingsNotFoundError",
    "SettingsSource",
    "SettingsValidationError",
    "SettingsYamlError",
    "StaticSettingsSource",
    "YamlSettingsSource",
    "default_settings_path",
    "validate_settings",
]
