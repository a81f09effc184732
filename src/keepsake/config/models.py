"""Pydantic models for persistence settings and settings errors."""

from __future__ import annotations

from enum import Enum
from pathlib import Path

from pydantic import BaseModel, ConfigDict, Field, model_validator

from keepsake.common import NonEmptyString


class BackendKind(str, Enum):
    """Storage medium the service flushes to."""

    REGISTRY = "registry"
    FILE = "file"


class PersistenceSettings(BaseModel):
    """Configuration record for a persistence service.

    Immutable once loaded. Changing configuration means loading a new instance
    and rebinding the backend, see ``PersistenceService.refresh_settings``.
    """

    model_config = ConfigDict(extra="forbid", frozen=True)

    backend: BackendKind = BackendKind.REGISTRY
    registry_key: NonEmptyString = "GameSaveData"
    file_name: NonEmptyString = "GameData.json"
    folder_name: str = "SaveData"

    use_encryption: bool = False
    encryption_key: str = "DefaultEncryptionKey"

    pretty_print: bool = True

    auto_save_interval: float = Field(default=0.0, ge=0.0, description="Seconds between flushes, 0 disables.")
    save_on_pause: bool = False
    save_on_focus_lost: bool = False
    save_on_quit: bool = True

    @model_validator(mode="after")
    def _validate_encryption_key(self) -> PersistenceSettings:
        if self.use_encryption and not self.encryption_key:
            raise ValueError("encryption_key must be set when use_encryption is enabled")
        return self

    @property
    def auto_save_enabled(self) -> bool:
        return self.auto_save_interval > 0 or self.save_on_pause or self.save_on_focus_lost


class SettingsNotFoundError(BaseModel):
    """Settings file not found at expected location."""

    model_config = ConfigDict(extra="forbid")

    expected_path: Path | None = None
    message: str


class SettingsYamlError(BaseModel):
    """YAML parsing error in a settings file."""

    model_config = ConfigDict(extra="forbid")

    path: Path
    line: int | None = None
    column: int | None = None
    message: str


class SettingsValidationError(BaseModel):
    """Schema validation error in settings."""

    model_config = ConfigDict(extra="forbid")

    path: Path | None = None
    field: str | None = None
    message: str


class SettingsIOError(BaseModel):
    """File I/O error reading settings."""

    model_config = ConfigDict(extra="forbid")

    path: Path
    message: str


type SettingsError = SettingsNotFoundError | SettingsYamlError | SettingsValidationError | SettingsIOError
