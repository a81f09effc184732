"""Identity-keyed set of registered components."""

from __future__ import annotations

from collections.abc import Iterator
from threading import RLock

from .protocol import SaveableComponent


class ComponentRegistry:
    """Unordered set of components, de-duplicated by object identity.

    Iteration walks a snapshot so components may register or unregister
    others while a flush is running.
    """

    def __init__(self) -> None:
        self._lock = RLock()
        self._components: dict[int, SaveableComponent] = {}

    def add(self, component: SaveableComponent) -> bool:
        with self._lock:
            if id(component) in self._components:
                return False
            self._components[id(component)] = component
            return True

    def remove(self, component: SaveableComponent) -> bool:
        with self._lock:
            return self._components.pop(id(component), None) is not None

    def clear(self) -> None:
        with self._lock:
            self._components.clear()

    def auto_save_components(self) -> list[SaveableComponent]:
        return [component for component in self if component.auto_save]

    def __contains__(self, component: object) -> bool:
        with self._lock:
            return id(component) in self._components

    def __iter__(self) -> Iterator[SaveableComponent]:
        with self._lock:
            snapshot = list(self._components.values())
        return iter(snapshot)

    def __len__(self) -> int:
        with self._lock:
            return len(self._components)
