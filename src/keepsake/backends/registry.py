"""Registry-slot storage backend."""

from __future__ import annotations

from result import Result

from keepsake.common import create_logger
from keepsake.registry import KeyValueRegistry

from .models import BackendError, BackendReadError, BackendWriteError
from .protocol import StorageBackend

logger = create_logger("backend.registry")


class RegistryBackend(StorageBackend):
    """Stores the blob as a single string under one slot of a host registry."""

    def __init__(self, registry: KeyValueRegistry, slot: str) -> None:
        if not slot:
            raise ValueError("Registry slot name must not be empty")
        self._registry = registry
        self._slot = slot

    @property
    def slot(self) -> str:
        return self._slot

    def write(self, blob: str) -> Result[None, BackendError]:
        return (
            self._registry.set_string(self._slot, blob)
            .map_err(lambda error: BackendWriteError(location=self.describe(), message=error.message))
            .inspect(lambda _: logger.debug("Data written", slot=self._slot))
        )

    def read(self) -> Result[str | None, BackendError]:
        return self._registry.get_string(self._slot).map_err(
            lambda error: BackendReadError(location=self.describe(), message=error.message)
        )

    def delete(self) -> Result[None, BackendError]:
        return self._registry.delete_key(self._slot).map_err(
            lambda error: BackendWriteError(location=self.describe(), message=error.message)
        )

    def exists(self) -> bool:
        return self._registry.has_key(self._slot)

    def describe(self) -> str:
        return f"registry:{self._slot}"
