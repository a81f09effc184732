"""Host key-value registries used by the registry backend."""

from .file import JsonFileRegistry
from .memory import InMemoryRegistry
from .models import RegistryError, RegistryReadError, RegistryWriteError
from .protocol import KeyValueRegistry

__all__ = [
    "InMemoryRegistry",
    "JsonFileRegistry",
    "KeyValueRegistry",
    "RegistryError",
    "RegistryReadError",
    "RegistryWriteError",
]
