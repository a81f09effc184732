"""Backend selection from settings."""

from __future__ import annotations

from collections.abc import Callable

from keepsake.common import AppDirectories
from keepsake.config import BackendKind, PersistenceSettings
from keepsake.registry import JsonFileRegistry, KeyValueRegistry

from .file import FileBackend
from .protocol import StorageBackend
from .registry import RegistryBackend

type BackendFactory = Callable[[PersistenceSettings, AppDirectories, KeyValueRegistry | None], StorageBackend]


def create_backend(
    settings: PersistenceSettings,
    directories: AppDirectories,
    registry: KeyValueRegistry | None = None,
) -> StorageBackend:
    """Build the backend bound to the bucket named by ``settings``.

    Without an explicit host registry the registry backend uses the JSON file
    registry under the application data directory.
    """
    match settings.backend:
        case BackendKind.FILE:
            return FileBackend.from_settings(settings, directories)
        case BackendKind.REGISTRY:
            host_registry = registry if registry is not None else JsonFileRegistry.from_directories(directories)
            return RegistryBackend(host_registry, settings.registry_key)
        case _:
            raise ValueError(f"Unexpected backend kind: {settings.backend}")
