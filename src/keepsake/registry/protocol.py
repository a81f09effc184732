"""Host key-value registry protocol."""

from __future__ import annotations

from typing import Protocol

from result import Result

from .models import RegistryError


class KeyValueRegistry(Protocol):
    """A small persistent string registry provided by the host.

    Each slot holds one string. Writing a slot replaces it atomically from the
    caller's point of view.
    """

    def has_key(self, slot: str) -> bool: ...

    def get_string(self, slot: str) -> Result[str | None, RegistryError]: ...

    def set_string(self, slot: str, value: str) -> Result[None, RegistryError]: ...

    def delete_key(self, slot: str) -> Result[None, RegistryError]: ...
