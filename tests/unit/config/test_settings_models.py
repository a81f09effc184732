from __future__ import annotations

import pytest
from pydantic import ValidationError

from keepsake.config import BackendKind, PersistenceSettings


def test_defaults_match_documented_values() -> None:
    settings = PersistenceSettings()

    assert settings.backend is BackendKind.REGISTRY
    assert settings.registry_key == "GameSaveData"
    assert settings.file_name == "GameData.json"
    assert settings.folder_name == "SaveData"
    assert settings.use_encryption is False
    assert settings.pretty_print is True
    assert settings.auto_save_interval == 0
    assert settings.save_on_quit is True


def test_encryption_requires_key() -> None:
    with pytest.raises(ValidationError, match="encryption_key must be set"):
        PersistenceSettings(use_encryption=True, encryption_key="")


def test_empty_key_is_fine_without_encryption() -> None:
    settings = PersistenceSettings(use_encryption=False, encryption_key="")

    assert settings.encryption_key == ""


def test_negative_interval_is_rejected() -> None:
    with pytest.raises(ValidationError):
        PersistenceSettings(auto_save_interval=-1)


def test_empty_file_name_is_rejected() -> None:
    with pytest.raises(ValidationError):
        PersistenceSettings(file_name="")


def test_settings_are_frozen() -> None:
    settings = PersistenceSettings()

    with pytest.raises(ValidationError):
        settings.backend = BackendKind.FILE  # type: ignore[misc]


@pytest.mark.parametrize(
    ("overrides", "expected"),
    [
        ({}, False),
        ({"auto_save_interval": 5}, True),
        ({"save_on_pause": True}, True),
        ({"save_on_focus_lost": True}, True),
        ({"save_on_quit": False}, False),
    ],
)
def test_auto_save_enabled(overrides: dict[str, object], expected: bool) -> None:
    assert PersistenceSettings(**overrides).auto_save_enabled is expected
