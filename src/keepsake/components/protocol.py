"""Saveable component protocol."""

from __future__ import annotations

from typing import Protocol, runtime_checkable


@runtime_checkable
class SaveableComponent(Protocol):
    """An object that takes part in bulk saves and loads."""

    @property
    def save_key(self) -> str: ...

    @property
    def auto_save(self) -> bool: ...

    @property
    def auto_load(self) -> bool: ...

    def save(self) -> None:
        """Push current state into the service's store."""
        ...

    def load(self) -> None:
        """Pull state from the service's store."""
        ...
