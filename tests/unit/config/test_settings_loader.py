from __future__ import annotations

from pathlib import Path

import pytest
import yaml
from result import is_err, is_ok

from keepsake.config import (
    BackendKind,
    PersistenceSettings,
    SettingsIOError,
    SettingsNotFoundError,
    SettingsValidationError,
    SettingsYamlError,
    StaticSettingsSource,
    YamlSettingsSource,
)


def _write_yaml(path: Path, data: object) -> None:
    path.write_text(yaml.dump(data))


def test_yaml_source_loads_settings(tmp_path: Path) -> None:
    path = tmp_path / "settings.yaml"
    _write_yaml(
        path,
        {
            "backend": "file",
            "file_name": "save.json",
            "folder_name": "slots",
            "use_encryption": True,
            "encryption_key": "secret",
            "pretty_print": False,
            "auto_save_interval": 30,
            "save_on_focus_lost": True,
        },
    )

    result = YamlSettingsSource(path, environ={}).load()

    assert is_ok(result)
    settings = result.unwrap()
    assert settings.backend is BackendKind.FILE
    assert settings.file_name == "save.json"
    assert settings.folder_name == "slots"
    assert settings.use_encryption is True
    assert settings.encryption_key == "secret"
    assert settings.pretty_print is False
    assert settings.auto_save_interval == 30.0
    assert settings.save_on_focus_lost is True


def test_yaml_source_empty_file_yields_defaults(tmp_path: Path) -> None:
    path = tmp_path / "settings.yaml"
    path.write_text("")

    result = YamlSettingsSource(path, environ={}).load()

    assert is_ok(result)
    assert result.unwrap() == PersistenceSettings()


def test_yaml_source_missing_file_returns_not_found(tmp_path: Path) -> None:
    missing = tmp_path / "missing.yaml"

    result = YamlSettingsSource(missing, environ={}).load()

    assert is_err(result)
    error = result.err_value
    assert isinstance(error, SettingsNotFoundError)
    assert error.expected_path == missing


def test_yaml_source_missing_file_uses_env_overrides(tmp_path: Path) -> None:
    environ = {"KEEPSAKE_SETTINGS__BACKEND": "file", "KEEPSAKE_SETTINGS__AUTO_SAVE_INTERVAL": "15"}

    result = YamlSettingsSource(tmp_path / "missing.yaml", environ=environ).load()

    assert is_ok(result)
    settings = result.unwrap()
    assert settings.backend is BackendKind.FILE
    assert settings.auto_save_interval == 15.0
    assert settings.file_name == "GameData.json"


def test_yaml_source_missing_file_with_invalid_env_override(tmp_path: Path) -> None:
    environ = {"KEEPSAKE_SETTINGS__AUTO_SAVE_INTERVAL": "-3"}

    result = YamlSettingsSource(tmp_path / "missing.yaml", environ=environ).load()

    assert is_err(result)
    error = result.err_value
    assert isinstance(error, SettingsValidationError)
    assert error.field == "auto_save_interval"


def test_yaml_source_invalid_yaml(tmp_path: Path) -> None:
    path = tmp_path / "broken.yaml"
    path.write_text("backend: [")

    result = YamlSettingsSource(path).load()

    assert is_err(result)
    error = result.err_value
    assert isinstance(error, SettingsYamlError)
    assert error.path == path
    assert error.line is not None
    assert error.message


def test_yaml_source_non_mapping_root(tmp_path: Path) -> None:
    path = tmp_path / "list.yaml"
    _write_yaml(path, ["not", "a", "mapping"])

    result = YamlSettingsSource(path).load()

    assert is_err(result)
    error = result.err_value
    assert isinstance(error, SettingsValidationError)
    assert error.message == "Settings root must be a mapping of keys to values."


def test_yaml_source_rejects_unknown_fields(tmp_path: Path) -> None:
    path = tmp_path / "settings.yaml"
    _write_yaml(path, {"backend": "file", "compression": "zstd"})

    result = YamlSettingsSource(path, environ={}).load()

    assert is_err(result)
    error = result.err_value
    assert isinstance(error, SettingsValidationError)
    assert error.field == "compression"


def test_yaml_source_rejects_unknown_backend(tmp_path: Path) -> None:
    path = tmp_path / "settings.yaml"
    _write_yaml(path, {"backend": "cloud"})

    result = YamlSettingsSource(path, environ={}).load()

    assert is_err(result)
    error = result.err_value
    assert isinstance(error, SettingsValidationError)
    assert error.field == "backend"


def test_yaml_source_handles_io_errors(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
    path = tmp_path / "io.yaml"
    _write_yaml(path, {})

    original = Path.read_text

    def fake_read_text(self: Path, *args, **kwargs):
        if self == path:
            raise OSError("boom")
        return original(self, *args, **kwargs)

    monkeypatch.setattr(Path, "read_text", fake_read_text, raising=False)

    result = YamlSettingsSource(path).load()

    assert is_err(result)
    error = result.err_value
    assert isinstance(error, SettingsIOError)
    assert error.path == path
    assert error.message == "boom"


def test_yaml_source_applies_env_overrides(tmp_path: Path) -> None:
    path = tmp_path / "settings.yaml"
    _write_yaml(path, {"backend": "file", "auto_save_interval": 30})
    environ = {
        "KEEPSAKE_SETTINGS__AUTO_SAVE_INTERVAL": "10",
        "KEEPSAKE_SETTINGS__SAVE_ON_PAUSE": "true",
        "UNRELATED": "1",
    }

    result = YamlSettingsSource(path, environ=environ).load()

    assert is_ok(result)
    settings = result.unwrap()
    assert settings.backend is BackendKind.FILE
    assert settings.auto_save_interval == 10.0
    assert settings.save_on_pause is True


def test_static_source_returns_given_settings() -> None:
    settings = PersistenceSettings(backend=BackendKind.FILE)

    result = StaticSettingsSource(settings).load()

    assert is_ok(result)
    assert result.unwrap() is settings


def test_static_source_without_settings_returns_not_found() -> None:
    result = StaticSettingsSource().load()

    assert is_err(result)
    assert isinstance(result.err_value, SettingsNotFoundError)
