"""Storage backend protocol."""

from __future__ import annotations

from typing import Protocol

from result import Result

from .models import BackendError


class StorageBackend(Protocol):
    """One durable location holding the entire encoded store.

    ``write`` and ``read`` always operate on the whole blob. There is no
    per-key storage: durability is all-or-nothing per flush.
    """

    def write(self, blob: str) -> Result[None, BackendError]: ...

    def read(self) -> Result[str | None, BackendError]:
        """Return the stored blob, or ``None`` when nothing has been written yet."""
        ...

    def delete(self) -> Result[None, BackendError]:
        """Remove the stored blob. Deleting absent data succeeds."""
        ...

    def exists(self) -> bool: ...

    def describe(self) -> str:
        """Human-readable location, used in logs."""
        ...
