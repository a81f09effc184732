"""Settings sources: YAML files and in-memory instances."""

from __future__ import annotations

from collections.abc import Mapping
from pathlib import Path

import yaml
from pydantic import ValidationError
from result import Err, Ok, Result

from keepsake.common import AppDirectories, create_logger, get_global_config_root
from keepsake.constants import DEFAULT_SETTINGS_FILENAME
from keepsake.utils.validation import first_validation_error

from .models import (
    PersistenceSettings,
    SettingsError,
    SettingsIOError,
    SettingsNotFoundError,
    SettingsValidationError,
    SettingsYamlError,
)
from .protocol import SettingsSource
from .resolver import apply_env_overrides

logger = create_logger("config")


def default_settings_path(directories: AppDirectories, filename: str = DEFAULT_SETTINGS_FILENAME) -> Path:
    return get_global_config_root(directories) / filename


class YamlSettingsSource(SettingsSource):
    """Settings stored in a YAML file, with environment overrides applied on top."""

    def __init__(self, path: Path, environ: Mapping[str, str] | None = None) -> None:
        self.path = path
        self._environ = environ

    def load(self) -> Result[PersistenceSettings, SettingsError]:
        logger.debug("Loading settings file", path=str(self.path))

        if not self.path.exists() or not self.path.is_file():
            overrides = apply_env_overrides({}, self._environ)
            if overrides:
                logger.debug("Settings file missing, using environment overrides", path=str(self.path))
                return validate_settings(overrides)
            return Err(
                SettingsNotFoundError(
                    expected_path=self.path,
                    message=f"Settings file not found: {self.path}",
                ),
            )

        try:
            raw_text = self.path.read_text(encoding="utf-8")
        except OSError as exc:
            logger.error("Settings file read error", path=str(self.path), error=str(exc))
            return Err(SettingsIOError(path=self.path, message=str(exc)))

        try:
            data = yaml.safe_load(raw_text)
        except yaml.YAMLError as exc:
            mark = getattr(exc, "problem_mark", None)
            line = getattr(mark, "line", None)
            column = getattr(mark, "column", None)
            logger.error("Settings YAML parse error", path=str(self.path), line=line, column=column, error=str(exc))
            return Err(
                SettingsYamlError(
                    path=self.path,
                    line=(line + 1) if line is not None else None,
                    column=(column + 1) if column is not None else None,
                    message=str(exc),
                ),
            )

        if data is None:
            data = {}

        if not isinstance(data, dict):
            logger.error("Settings must be a mapping", path=str(self.path))
            return Err(
                SettingsValidationError(
                    path=self.path,
                    field=None,
                    message="Settings root must be a mapping of keys to values.",
                ),
            )

        return validate_settings(apply_env_overrides(data, self._environ), path=self.path)


class StaticSettingsSource(SettingsSource):
    """Settings constructed in memory by the host."""

    def __init__(self, settings: PersistenceSettings | None = None) -> None:
        self._settings = settings

    def load(self) -> Result[PersistenceSettings, SettingsError]:
        if self._settings is None:
            return Err(SettingsNotFoundError(message="No settings were provided."))
        return Ok(self._settings)


def validate_settings(data: Mapping[str, object], path: Path | None = None) -> Result[PersistenceSettings, SettingsError]:
    try:
        settings = PersistenceSettings.model_validate(dict(data))
    except ValidationError as exc:
        field, message = first_validation_error(exc)
        logger.error("Settings validation error", path=str(path) if path else None, field=field, error=message)
        return Err(SettingsValidationError(path=path, field=field, message=message))

    return Ok(settings)
