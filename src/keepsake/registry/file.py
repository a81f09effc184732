"""File-based host registry implementation."""

from __future__ import annotations

import json
from pathlib import Path
from threading import RLock

from result import Err, Ok, Result

from keepsake.common import AppDirectories, get_data_directory_from_dirs
from keepsake.constants import DEFAULT_REGISTRY_FILENAME

from .models import RegistryError, RegistryReadError, RegistryWriteError


class JsonFileRegistry:
    """Registry persisted as a single JSON object mapping slot names to strings."""

    def __init__(self, path: Path) -> None:
        self._path = path
        self._lock = RLock()

    @classmethod
    def from_directories(cls, directories: AppDirectories, filename: str = DEFAULT_REGISTRY_FILENAME) -> JsonFileRegistry:
        return cls(get_data_directory_from_dirs(directories) / filename)

    @property
    def path(self) -> Path:
        return self._path

    def has_key(self, slot: str) -> bool:
        with self._lock:
            result = self._read_all()
            return result.is_ok() and slot in result.unwrap()

    def get_string(self, slot: str) -> Result[str | None, RegistryError]:
        with self._lock:
            read_result = self._read_all()
            if read_result.is_err():
                return Err(RegistryReadError(slot=slot, message=f"Failed to read registry: {read_result.unwrap_err()}"))

            value = read_result.unwrap().get(slot)
            if value is not None and not isinstance(value, str):
                return Err(RegistryReadError(slot=slot, message=f"Slot '{slot}' does not hold a string"))
            return Ok(value)

    def set_string(self, slot: str, value: str) -> Result[None, RegistryError]:
        with self._lock:
            read_result = self._read_all()
            if read_result.is_err():
                return Err(RegistryWriteError(slot=slot, message=f"Failed to read registry: {read_result.unwrap_err()}"))

            slots = read_result.unwrap()
            slots[slot] = value
            return self._write_all(slots).map_err(lambda message: RegistryWriteError(slot=slot, message=message))

    def delete_key(self, slot: str) -> Result[None, RegistryError]:
        with self._lock:
            if not self._path.exists():
                return Ok(None)

            read_result = self._read_all()
            if read_result.is_err():
                return Err(RegistryWriteError(slot=slot, message=f"Failed to read registry: {read_result.unwrap_err()}"))

            slots = read_result.unwrap()
            if slot not in slots:
                return Ok(None)

            del slots[slot]
            return self._write_all(slots).map_err(lambda message: RegistryWriteError(slot=slot, message=message))

    def _read_all(self) -> Result[dict[str, object], str]:
        if not self._path.exists():
            return Ok({})

        try:
            data = json.loads(self._path.read_text(encoding="utf-8"))
        except (OSError, ValueError) as e:
            return Err(str(e))

        if not isinstance(data, dict):
            return Err("Registry file must contain a JSON object")
        return Ok(data)

    def _write_all(self, slots: dict[str, object]) -> Result[None, str]:
        try:
            self._path.parent.mkdir(parents=True, exist_ok=True)
            self._path.write_text(json.dumps(slots, indent=2), encoding="utf-8")
        except (OSError, TypeError, ValueError) as e:
            return Err(f"Failed to write registry: {e}")
        return Ok(None)
