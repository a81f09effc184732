"""Process-level application settings, read from ``KEEPSAKE_*`` environment variables."""

from __future__ import annotations

from functools import cache
from pathlib import Path

from pydantic_settings import BaseSettings, SettingsConfigDict

from keepsake.common import AppDirectories, AppInfo, AppPaths, LoggingConfig, get_global_config_root


class Settings(BaseSettings):
    """Where Keepsake looks for its files and how the CLI logs.

    These are not persistence settings: backend, obfuscation and auto-save
    options live in the settings file, see ``keepsake.config``.
    """

    model_config = SettingsConfigDict(
        env_prefix="KEEPSAKE_",
        env_nested_delimiter="__",
        case_sensitive=False,
        nested_model_default_partial_update=True,
        extra="ignore",
    )

    app: AppInfo = AppInfo()
    paths: AppPaths = AppPaths()
    logging: LoggingConfig = LoggingConfig()

    def to_app_directories(self) -> AppDirectories:
        return AppDirectories(app_name=self.paths.data_dir_name)

    def default_settings_file(self) -> Path:
        config_root = get_global_config_root(AppDirectories(app_name=self.paths.config_dir_name))
        return config_root / self.paths.settings_filename


@cache
def get_settings() -> Settings:
    return Settings()


__all__ = [
    "Settings",
    "get_settings",
]
