"""Keepsake storage backends."""

from .factory import BackendFactory, create_backend
from .file import FileBackend
from .models import BackendError, BackendReadError, BackendWriteError
from .protocol import StorageBackend
from .registry import RegistryBackend

__all__ = [
    "BackendError",
    "BackendFactory",
    "BackendReadError",
    "BackendWriteError",
    "FileBackend",
    "RegistryBackend",
    "StorageBackend",
    "create_backend",
]
