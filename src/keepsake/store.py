"""In-memory key-value store mirrored to durable storage."""

from __future__ import annotations

from collections.abc import Iterator, Mapping


class Store:
    """Mapping from logical key to value.

    Not thread-safe on its own; the owning service serializes access.
    """

    def __init__(self, data: Mapping[str, object] | None = None) -> None:
        self._data: dict[str, object] = dict(data or {})

    def get(self, key: str, default: object = None) -> object:
        return self._data.get(key, default)

    def set(self, key: str, value: object) -> None:
        self._data[key] = value

    def delete(self, key: str) -> bool:
        """Remove ``key``. Returns whether something was removed."""
        return self._data.pop(key, _MISSING) is not _MISSING

    def contains(self, key: str) -> bool:
        return key in self._data

    def keys(self) -> list[str]:
        return list(self._data)

    def snapshot(self) -> dict[str, object]:
        return dict(self._data)

    def replace(self, data: Mapping[str, object]) -> None:
        self._data = dict(data)

    def clear(self) -> None:
        self._data.clear()

    def __contains__(self, key: object) -> bool:
        return key in self._data

    def __iter__(self) -> Iterator[str]:
        return iter(list(self._data))

    def __len__(self) -> int:
        return len(self._data)


_MISSING = object()
