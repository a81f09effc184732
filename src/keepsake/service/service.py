"""Save/load orchestration service."""

from __future__ import annotations

import asyncio
import threading
from datetime import UTC, datetime
from types import TracebackType
from typing import Self

from result import Err, Ok

from keepsake.backends import BackendFactory, StorageBackend, create_backend
from keepsake.codec import Codec
from keepsake.common import AppDirectories, JsonDict, create_logger
from keepsake.components import ComponentRegistry, SaveableComponent
from keepsake.config import (
    PersistenceSettings,
    SettingsNotFoundError,
    SettingsSource,
    YamlSettingsSource,
    default_settings_path,
)
from keepsake.constants import LAST_SAVE_TIME_KEY
from keepsake.registry import KeyValueRegistry
from keepsake.scheduler import AutoSaveScheduler, SchedulerFactory
from keepsake.store import Store
from keepsake.utils import Clock, utc_now

from .models import ISSUE_LOG_LEVELS, IssueHandler, IssueKind, PersistenceIssue, ServiceState

logger = create_logger("service")

NEVER_SAVED = datetime.min.replace(tzinfo=UTC)


class PersistenceService:
    """Single entry point for all persistence operations.

    ``save`` only touches memory. Data reaches the backend on ``save_all``
    (called by the host, the auto-save scheduler or ``dispose``) or on
    ``save_direct``. Persistence failures never propagate: they are logged and
    reported to ``on_issue`` when a handler is given.

    All store access goes through one lock and all backend I/O through a
    second one, so flushes triggered by the scheduler never overlap with
    flushes or loads requested by callers.
    """

    def __init__(
        self,
        settings_source: SettingsSource | None = None,
        *,
        directories: AppDirectories | None = None,
        registry: KeyValueRegistry | None = None,
        backend_factory: BackendFactory = create_backend,
        scheduler_factory: SchedulerFactory = AutoSaveScheduler.from_settings,
        clock: Clock = utc_now,
        on_issue: IssueHandler | None = None,
        auto_initialize: bool = True,
    ) -> None:
        self._directories = directories or AppDirectories()
        self._settings_source = settings_source or YamlSettingsSource(default_settings_path(self._directories))
        self._registry = registry
        self._backend_factory = backend_factory
        self._scheduler_factory = scheduler_factory
        self._clock = clock
        self._on_issue = on_issue
        self._auto_initialize = auto_initialize

        self._store = Store()
        self._components = ComponentRegistry()
        self._store_lock = threading.RLock()
        self._flush_lock = threading.RLock()
        self._lifecycle_lock = threading.RLock()

        self._state = ServiceState.UNINITIALIZED
        self._settings: PersistenceSettings | None = None
        self._backend: StorageBackend | None = None
        self._codec: Codec | None = None
        self._scheduler: AutoSaveScheduler | None = None

    @property
    def state(self) -> ServiceState:
        return self._state

    @property
    def is_initialized(self) -> bool:
        return self._state is ServiceState.READY

    @property
    def backend(self) -> StorageBackend | None:
        return self._backend

    @property
    def scheduler(self) -> AutoSaveScheduler | None:
        return self._scheduler

    # Lifecycle

    def initialize(self) -> None:
        """Load settings, bind backend and codec, load stored data, start auto-save.

        Calling it again while initialized does nothing.
        """
        with self._lifecycle_lock:
            if self._state is not ServiceState.UNINITIALIZED:
                return

            self._state = ServiceState.INITIALIZING
            try:
                self._bind(self._load_settings())
                self._load_all_locked()
                self._start_scheduler()
            except BaseException:
                self._release()
                self._state = ServiceState.UNINITIALIZED
                raise

            self._state = ServiceState.READY
            logger.info("Initialized", backend=self._backend.describe() if self._backend else None)

    async def initialize_async(self) -> None:
        if self._state is ServiceState.READY:
            return
        await asyncio.to_thread(self.initialize)

    def refresh_settings(self) -> None:
        """Reload settings and rebind backend, codec and scheduler. The store is kept as is."""
        with self._lifecycle_lock:
            if not self._ensure_ready("refresh_settings"):
                return

            if self._scheduler is not None:
                self._scheduler.stop()
            with self._flush_lock:
                self._bind(self._load_settings())
            self._start_scheduler()
            logger.info("Settings refreshed", backend=self._backend.describe() if self._backend else None)

    def dispose(self) -> None:
        """Flush everything and return to the uninitialized state. Never raises."""
        with self._lifecycle_lock:
            if self._state is not ServiceState.READY:
                return

            try:
                if self._scheduler is not None:
                    self._scheduler.stop()
                self._state = ServiceState.DISPOSING

                for component in self._components.auto_save_components():
                    self._call_component(component, "save")
                self._components.clear()

                self._flush()
            except Exception:
                logger.exception("Error during disposal")
            finally:
                # Waits for any flush still running on a worker thread.
                with self._flush_lock, self._store_lock:
                    self._store.clear()
                    self._release()
                self._state = ServiceState.UNINITIALIZED

            logger.info("Disposed")

    async def dispose_async(self) -> None:
        await asyncio.to_thread(self.dispose)

    def __enter__(self) -> Self:
        self.initialize()
        return self

    def __exit__(
        self,
        exc_type: type[BaseException] | None,
        exc: BaseException | None,
        tb: TracebackType | None,
    ) -> None:
        self.dispose()

    async def __aenter__(self) -> Self:
        await self.initialize_async()
        return self

    async def __aexit__(
        self,
        exc_type: type[BaseException] | None,
        exc: BaseException | None,
        tb: TracebackType | None,
    ) -> None:
        await self.dispose_async()

    # Memory operations

    def save(self, key: str, value: object) -> None:
        """Store ``value`` in memory. Nothing is written until the next flush."""
        if not self._ensure_ready("save"):
            return
        with self._store_lock:
            self._store.set(key, value)

    def save_direct(self, key: str, value: object) -> bool:
        """Store ``value`` and flush the whole store immediately."""
        if not self._ensure_ready("save_direct"):
            return False
        with self._store_lock:
            self._store.set(key, value)
        return self._flush()

    def load[T](self, key: str, default: T, type_: type[T] | None = None) -> T:
        """Return the value stored under ``key`` as ``type_``.

        The target type defaults to the type of ``default``. Values that went
        through the wire format are converted back on demand. A missing key or
        a failed conversion returns ``default``.

        A value already of the requested type is returned as stored, not
        copied: mutating a returned list, dict or model changes the store and
        reaches the next flush without a ``save`` call.
        """
        if not self._ensure_ready("load"):
            return default

        with self._store_lock:
            if not self._store.contains(key):
                logger.debug("No data for key, returning default", key=key)
                return default
            value = self._store.get(key)

        target = type_ if type_ is not None else (type(default) if default is not None else None)
        if target is None:
            return value  # type: ignore[return-value]

        match Codec.materialize(value, target):
            case Ok(converted):
                return converted
            case Err(error):
                self._report(IssueKind.CONVERSION, "Failed to load data, returning default", key=key, error=error.message)
                return default

    def has_data(self, key: str) -> bool:
        if not self._ensure_ready("has_data"):
            return False
        with self._store_lock:
            return self._store.contains(key)

    def delete_data(self, key: str) -> None:
        if not self._ensure_ready("delete_data"):
            return
        with self._store_lock:
            removed = self._store.delete(key)
        if removed:
            logger.info("Deleted data", key=key)

    def get_all_data(self) -> dict[str, object]:
        """Copy of the in-memory store."""
        if not self._ensure_ready("get_all_data"):
            return {}
        with self._store_lock:
            return self._store.snapshot()

    def get_last_save_time(self) -> datetime:
        return self.load(LAST_SAVE_TIME_KEY, NEVER_SAVED, datetime)

    def get_settings(self) -> PersistenceSettings | None:
        if not self._ensure_ready("get_settings"):
            return None
        return self._settings

    # Storage operations

    def save_all(self) -> bool:
        """Flush registered components and the whole store to the backend.

        Returns whether the backend write succeeded. Failures are logged and
        reported, and the in-memory store stays intact for a later retry.
        """
        if not self._ensure_ready("save_all"):
            return False
        return self._flush()

    async def save_all_async(self) -> bool:
        if not await self._ensure_ready_async("save_all_async"):
            return False
        self._collect_components()
        return await asyncio.to_thread(self._flush_store)

    def load_all(self) -> None:
        """Replace the store with the data held by the backend."""
        if not self._ensure_ready("load_all"):
            return
        self._load_all_locked()

    async def load_all_async(self) -> None:
        if not await self._ensure_ready_async("load_all_async"):
            return
        await asyncio.to_thread(self._load_all_locked)

    def save_data_exists(self) -> bool:
        if not self._ensure_ready("save_data_exists"):
            return False
        with self._flush_lock:
            if (bound := self._bound("save_data_exists")) is None:
                return False
            backend, _ = bound
            return backend.exists()

    def is_data_persisted(self, key: str) -> bool:
        """Whether ``key`` is present in the stored blob, ignoring unsaved changes."""
        if not self._ensure_ready("is_data_persisted"):
            return False

        with self._flush_lock:
            if (bound := self._bound("is_data_persisted")) is None:
                return False
            backend, codec = bound
            read_result = backend.read()
            if read_result.is_err() or read_result.unwrap() is None:
                return False
            decoded = codec.decode(read_result.unwrap())

        return decoded.is_ok() and key in decoded.unwrap()

    def delete_all_data(self) -> None:
        """Delete the stored blob and clear the store."""
        if not self._ensure_ready("delete_all_data"):
            return

        with self._flush_lock:
            if (bound := self._bound("delete_all_data")) is None:
                return
            backend, _ = bound
            delete_result = backend.delete()
            if delete_result.is_err():
                self._report(IssueKind.BACKEND_WRITE, "Failed to delete save data", error=delete_result.unwrap_err().message)
            with self._store_lock:
                self._store.clear()

        logger.info("All save data deleted", backend=backend.describe())

    # Components

    def register_component(self, component: SaveableComponent) -> None:
        if not self._ensure_ready("register_component"):
            return
        if not self._components.add(component):
            return

        logger.debug("Component registered", save_key=component.save_key)
        if component.auto_load:
            self._call_component(component, "load")

    def unregister_component(self, component: SaveableComponent) -> None:
        if not self._ensure_ready("unregister_component"):
            return
        if component not in self._components:
            return

        if component.auto_save:
            self._call_component(component, "save")
        self._components.remove(component)
        logger.debug("Component unregistered", save_key=component.save_key)

    # Host lifecycle signals

    def notify_pause(self, paused: bool) -> None:
        if self._scheduler is not None:
            self._scheduler.notify_pause(paused)

    def notify_focus(self, has_focus: bool) -> None:
        if self._scheduler is not None:
            self._scheduler.notify_focus(has_focus)

    def notify_quit(self) -> None:
        if self._scheduler is not None:
            self._scheduler.notify_quit()

    # Internals

    def _ensure_ready(self, operation: str) -> bool:
        if self._state is ServiceState.READY:
            return True

        # Blocks while another thread is initializing or disposing.
        with self._lifecycle_lock:
            if self._state is ServiceState.DISPOSING:
                # Only reachable from the disposing thread itself.
                return True
            if self._state is ServiceState.UNINITIALIZED and self._auto_initialize:
                self.initialize()
            if self._state is ServiceState.READY:
                return True

        self._report(IssueKind.NOT_INITIALIZED, "Service not initialized", error=f"{operation} skipped")
        return False

    async def _ensure_ready_async(self, operation: str) -> bool:
        if self._state is ServiceState.UNINITIALIZED and self._auto_initialize:
            await self.initialize_async()
        return self._ensure_ready(operation)

    def _load_settings(self) -> PersistenceSettings:
        match self._settings_source.load():
            case Ok(settings):
                return settings
            case Err(SettingsNotFoundError() as error):
                self._report(IssueKind.SETTINGS_MISSING, "No settings found, using defaults", error=error.message)
            case Err(error):
                self._report(IssueKind.SETTINGS_INVALID, "Invalid settings, using defaults", error=error.message)
        return PersistenceSettings()

    def _bind(self, settings: PersistenceSettings) -> None:
        self._settings = settings
        self._codec = Codec.from_settings(settings)
        self._backend = self._backend_factory(settings, self._directories, self._registry)
        self._scheduler = self._scheduler_factory(self.save_all, settings)

    def _release(self) -> None:
        if self._scheduler is not None:
            self._scheduler.stop()
        self._scheduler = None
        self._backend = None
        self._codec = None
        self._settings = None

    def _start_scheduler(self) -> None:
        if self._scheduler is not None and self._settings is not None and self._settings.auto_save_enabled:
            self._scheduler.start()

    def _flush(self) -> bool:
        self._collect_components()
        return self._flush_store()

    def _collect_components(self) -> None:
        for component in self._components.auto_save_components():
            self._call_component(component, "save")

    def _flush_store(self) -> bool:
        with self._flush_lock:
            if (bound := self._bound("save_all")) is None:
                return False
            backend, codec = bound

            # Nested values must not change while being encoded.
            with self._store_lock:
                self._store.set(LAST_SAVE_TIME_KEY, self._clock().isoformat())
                snapshot = self._store.snapshot()
                encoded = codec.encode(snapshot)

            if encoded.is_err():
                self._report(IssueKind.ENCODE, "Failed to encode save data", error=encoded.unwrap_err().message)
                return False

            written = backend.write(encoded.unwrap())
            if written.is_err():
                self._report(IssueKind.BACKEND_WRITE, "Failed to write save data", error=written.unwrap_err().message)
                return False

        logger.info("All data saved", backend=backend.describe(), keys=len(snapshot))
        return True

    def _load_all_locked(self) -> None:
        with self._flush_lock:
            if (bound := self._bound("load_all")) is None:
                return
            data = self._read_backend(*bound)
            with self._store_lock:
                self._store.replace(data)

    def _bound(self, operation: str) -> tuple[StorageBackend, Codec] | None:
        """Backend and codec currently bound. Call with the flush lock held.

        A dispose on another thread may have released them after the caller
        passed the readiness check.
        """
        backend, codec = self._backend, self._codec
        if backend is None or codec is None:
            self._report(IssueKind.NOT_INITIALIZED, "Service released before backend access", error=f"{operation} skipped")
            return None
        return backend, codec

    def _read_backend(self, backend: StorageBackend, codec: Codec) -> JsonDict:
        read_result = backend.read()
        if read_result.is_err():
            self._report(IssueKind.BACKEND_READ, "Failed to read save data", error=read_result.unwrap_err().message)
            return {}

        blob = read_result.unwrap()
        if blob is None:
            logger.info("No save data found, starting fresh", backend=backend.describe())
            return {}

        decoded = codec.decode(blob)
        if decoded.is_err():
            self._report(IssueKind.DECODE, "Corrupt save data, starting fresh", error=decoded.unwrap_err().message)
            return {}

        data = decoded.unwrap()
        logger.info("Data loaded", backend=backend.describe(), keys=len(data))
        return data

    def _call_component(self, component: SaveableComponent, action: str) -> None:
        try:
            getattr(component, action)()
        except Exception as e:
            self._report(IssueKind.COMPONENT, f"Component {action} failed", key=component.save_key, error=str(e))

    def _report(self, kind: IssueKind, message: str, *, key: str | None = None, error: str | None = None) -> None:
        level = ISSUE_LOG_LEVELS.get(kind, "ERROR")
        logger.log(level, message, kind=kind.value, key=key, error=error)

        if self._on_issue is None:
            return
        try:
            detail = f"{message}: {error}" if error else message
            self._on_issue(PersistenceIssue(kind=kind, message=detail, key=key))
        except Exception:
            logger.exception("Issue handler failed", kind=kind.value)
