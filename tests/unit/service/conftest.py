from __future__ import annotations

from collections.abc import Callable
from datetime import UTC, datetime, timedelta

import pytest

from keepsake.config import PersistenceSettings, SettingsSource, StaticSettingsSource
from keepsake.registry import InMemoryRegistry
from keepsake.scheduler import AutoSaveScheduler, ManualTicker
from keepsake.service import PersistenceIssue, PersistenceService


class FakeClock:
    """Clock advancing one second per call."""

    def __init__(self, start: datetime | None = None) -> None:
        self.now = start or datetime(2024, 1, 1, tzinfo=UTC)

    def __call__(self) -> datetime:
        self.now += timedelta(seconds=1)
        return self.now


type ServiceFactory = Callable[..., PersistenceService]


@pytest.fixture
def registry() -> InMemoryRegistry:
    return InMemoryRegistry()


@pytest.fixture
def ticker() -> ManualTicker:
    return ManualTicker()


@pytest.fixture
def clock() -> FakeClock:
    return FakeClock()


@pytest.fixture
def issues() -> list[PersistenceIssue]:
    return []


@pytest.fixture
def make_service(
    registry: InMemoryRegistry,
    ticker: ManualTicker,
    clock: FakeClock,
    issues: list[PersistenceIssue],
) -> ServiceFactory:
    """Build services sharing one host registry, ticker, clock and issue log."""

    def factory(
        settings: PersistenceSettings | SettingsSource | None = None,
        **kwargs,
    ) -> PersistenceService:
        if settings is None:
            settings = PersistenceSettings()
        source = StaticSettingsSource(settings) if isinstance(settings, PersistenceSettings) else settings
        kwargs.setdefault("registry", registry)
        kwargs.setdefault("clock", clock)
        kwargs.setdefault("on_issue", issues.append)
        kwargs.setdefault(
            "scheduler_factory",
            lambda flush, loaded: AutoSaveScheduler.from_settings(flush, loaded, ticker),
        )
        return PersistenceService(source, **kwargs)

    return factory
