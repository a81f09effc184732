"""In-memory host registry."""

from __future__ import annotations

from threading import RLock

from result import Ok, Result

from .models import RegistryError


class InMemoryRegistry:
    """Registry living for the lifetime of the process. Useful for tests and ephemeral hosts."""

    def __init__(self, initial: dict[str, str] | None = None) -> None:
        self._lock = RLock()
        self._slots: dict[str, str] = dict(initial or {})

    def has_key(self, slot: str) -> bool:
        with self._lock:
            return slot in self._slots

    def get_string(self, slot: str) -> Result[str | None, RegistryError]:
        with self._lock:
            return Ok(self._slots.get(slot))

    def set_string(self, slot: str, value: str) -> Result[None, RegistryError]:
        with self._lock:
            self._slots[slot] = value
        return Ok(None)

    def delete_key(self, slot: str) -> Result[None, RegistryError]:
        with self._lock:
            self._slots.pop(slot, None)
        return Ok(None)
