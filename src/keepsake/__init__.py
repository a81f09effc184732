"""Keepsake - an embedded, pluggable key-value persistence layer.

By default, Keepsake's internal logging is disabled when used as a library.
Library users can enable logging by calling keepsake.enable_logging().
"""

from keepsake.common import disable_library_logging, enable_library_logging

from .backends import FileBackend, RegistryBackend, StorageBackend, create_backend
from .codec import Codec
from .components import ComponentRegistry, SaveableComponent, SaveableComponentBase
from .config import BackendKind, PersistenceSettings, StaticSettingsSource, YamlSettingsSource
from .registry import InMemoryRegistry, JsonFileRegistry, KeyValueRegistry
from .scheduler import AutoSaveScheduler, ManualTicker, ThreadTicker
from .service import IssueKind, PersistenceIssue, PersistenceService, ServiceState
from .store import Store

disable_library_logging()

enable_logging = enable_library_logging

__all__ = [
    "AutoSaveScheduler",
    "BackendKind",
    "Codec",
    "ComponentRegistry",
    "FileBackend",
    "InMemoryRegistry",
    "IssueKind",
    "JsonFileRegistry",
    "KeyValueRegistry",
    "ManualTicker",
    "PersistenceIssue",
    "PersistenceService",
    "PersistenceSettings",
    "RegistryBackend",
    "SaveableComponent",
    "SaveableComponentBase",
    "ServiceState",
    "StaticSettingsSource",
    "StorageBackend",
    "Store",
    "ThreadTicker",
    "YamlSettingsSource",
    "create_backend",
    "enable_logging",
]
