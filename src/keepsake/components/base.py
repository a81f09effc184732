"""Convenience base class for components bound to a persistence service."""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from keepsake.service import PersistenceService


class SaveableComponentBase[T](ABC):
    """Component whose state is a single value of type ``T`` stored under ``save_key``.

    Subclasses provide ``get_save_data`` and ``load_save_data``. ``activate``
    registers the component with its service and ``deactivate`` unregisters
    it, which triggers the auto-load and auto-save hooks.

    Example:
        class PlayerStats(SaveableComponentBase[Stats]):
            def get_save_data(self) -> Stats:
                return self.stats

            def load_save_data(self, data: Stats) -> None:
                self.stats = data

        stats = PlayerStats(service, Stats, save_key="player-stats")
        stats.activate()
    """

    def __init__(
        self,
        service: PersistenceService,
        data_type: type[T],
        *,
        save_key: str | None = None,
        auto_save: bool = True,
        auto_load: bool = True,
    ) -> None:
        self._service = service
        self._data_type = data_type
        self._save_key = save_key or f"{type(self).__name__}_{id(self):x}"
        self._auto_save = auto_save
        self._auto_load = auto_load

    @property
    def save_key(self) -> str:
        return self._save_key

    @property
    def auto_save(self) -> bool:
        return self._auto_save

    @property
    def auto_load(self) -> bool:
        return self._auto_load

    @abstractmethod
    def get_save_data(self) -> T: ...

    @abstractmethod
    def load_save_data(self, data: T) -> None: ...

    def save(self) -> None:
        self._service.save(self.save_key, self.get_save_data())

    def load(self) -> None:
        if not self._service.has_data(self.save_key):
            return

        data = self._service.load(self.save_key, None, self._data_type)
        if data is not None:
            self.load_save_data(data)

    def activate(self) -> None:
        self._service.register_component(self)

    def deactivate(self) -> None:
        self._service.unregister_component(self)
