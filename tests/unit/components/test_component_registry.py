from __future__ import annotations

from dataclasses import dataclass

from keepsake.components import ComponentRegistry, SaveableComponent


@dataclass(eq=True)
class Counter:
    save_key: str
    auto_save: bool = True
    auto_load: bool = True

    def save(self) -> None:
        pass

    def load(self) -> None:
        pass


def test_counter_satisfies_protocol() -> None:
    assert isinstance(Counter("a"), SaveableComponent)


def test_add_deduplicates_by_identity() -> None:
    registry = ComponentRegistry()
    first = Counter("same")
    second = Counter("same")

    assert registry.add(first) is True
    assert registry.add(first) is False
    assert registry.add(second) is True
    assert len(registry) == 2


def test_remove_reports_membership() -> None:
    registry = ComponentRegistry()
    component = Counter("a")
    registry.add(component)

    assert registry.remove(component) is True
    assert registry.remove(component) is False
    assert component not in registry


def test_auto_save_components_filters_flag() -> None:
    registry = ComponentRegistry()
    saving = Counter("a")
    passive = Counter("b", auto_save=False)
    registry.add(saving)
    registry.add(passive)

    assert registry.auto_save_components() == [saving]


def test_iteration_uses_snapshot() -> None:
    registry = ComponentRegistry()
    components = [Counter(str(index)) for index in range(3)]
    for component in components:
        registry.add(component)

    for component in registry:
        registry.remove(component)

    assert len(registry) == 0


def test_clear_removes_everything() -> None:
    registry = ComponentRegistry()
    registry.add(Counter("a"))

    registry.clear()

    assert len(registry) == 0
