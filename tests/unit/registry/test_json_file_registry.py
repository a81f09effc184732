from __future__ import annotations

import json
from pathlib import Path

import pytest
from result import is_err, is_ok

from keepsake.common import AppDirectories
from keepsake.registry import JsonFileRegistry, RegistryReadError, RegistryWriteError


@pytest.fixture
def registry_path(tmp_path: Path) -> Path:
    return tmp_path / "nested" / "registry.json"


@pytest.fixture
def registry(registry_path: Path) -> JsonFileRegistry:
    return JsonFileRegistry(registry_path)


def test_set_string_creates_file_and_parents(registry: JsonFileRegistry, registry_path: Path) -> None:
    result = registry.set_string("GameSaveData", "blob")

    assert is_ok(result)
    assert registry_path.exists()
    assert json.loads(registry_path.read_text()) == {"GameSaveData": "blob"}


def test_slots_are_independent(registry: JsonFileRegistry) -> None:
    registry.set_string("a", "1")
    registry.set_string("b", "2")

    assert registry.get_string("a").unwrap() == "1"
    assert registry.get_string("b").unwrap() == "2"


def test_get_string_missing_file_returns_none(registry: JsonFileRegistry) -> None:
    assert registry.get_string("slot").unwrap() is None
    assert not registry.has_key("slot")


def test_delete_key_removes_only_that_slot(registry: JsonFileRegistry) -> None:
    registry.set_string("a", "1")
    registry.set_string("b", "2")

    assert is_ok(registry.delete_key("a"))

    assert not registry.has_key("a")
    assert registry.has_key("b")


def test_delete_key_missing_is_ok(registry: JsonFileRegistry, registry_path: Path) -> None:
    assert is_ok(registry.delete_key("missing"))
    assert not registry_path.exists()


def test_corrupt_file_reports_read_error(registry: JsonFileRegistry, registry_path: Path) -> None:
    registry_path.parent.mkdir(parents=True)
    registry_path.write_text("{not json")

    result = registry.get_string("slot")

    assert is_err(result)
    assert isinstance(result.err_value, RegistryReadError)
    assert result.err_value.slot == "slot"
    assert not registry.has_key("slot")


def test_corrupt_file_reports_write_error(registry: JsonFileRegistry, registry_path: Path) -> None:
    registry_path.parent.mkdir(parents=True)
    registry_path.write_text("[]")

    result = registry.set_string("slot", "value")

    assert is_err(result)
    assert isinstance(result.err_value, RegistryWriteError)


def test_non_string_slot_reports_read_error(registry: JsonFileRegistry, registry_path: Path) -> None:
    registry_path.parent.mkdir(parents=True)
    registry_path.write_text(json.dumps({"slot": 42}))

    result = registry.get_string("slot")

    assert is_err(result)
    assert "does not hold a string" in result.err_value.message


def test_from_directories_uses_data_home(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("XDG_DATA_HOME", str(tmp_path / "data"))

    registry = JsonFileRegistry.from_directories(AppDirectories(app_name="demo"))

    assert registry.path == tmp_path / "data" / "demo" / "registry.json"
