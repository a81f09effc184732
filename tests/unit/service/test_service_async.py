from __future__ import annotations

import asyncio

import pytest

from keepsake.registry import InMemoryRegistry
from keepsake.service import ServiceState


@pytest.mark.asyncio
async def test_async_context_manager_flushes_on_exit(make_service, registry: InMemoryRegistry) -> None:
    async with make_service() as service:
        assert service.state is ServiceState.READY
        service.save("score", 10)

    assert service.state is ServiceState.UNINITIALIZED
    assert '"score"' in registry.get_string("GameSaveData").unwrap()


@pytest.mark.asyncio
async def test_save_all_async_writes_store(make_service, registry: InMemoryRegistry) -> None:
    service = make_service()
    await service.initialize_async()
    service.save("score", 10)

    assert await service.save_all_async() is True

    assert service.is_data_persisted("score")
    await service.dispose_async()


@pytest.mark.asyncio
async def test_save_all_async_initializes_lazily(make_service) -> None:
    service = make_service()

    assert await service.save_all_async() is True
    assert service.state is ServiceState.READY
    await service.dispose_async()


@pytest.mark.asyncio
async def test_load_all_async_restores_persisted_state(make_service) -> None:
    async with make_service() as service:
        service.save_direct("score", 10)
        service.save("score", 20)

        await service.load_all_async()

        assert service.load("score", 0) == 10


@pytest.mark.asyncio
async def test_concurrent_async_flushes(make_service) -> None:
    async with make_service() as service:
        for index in range(5):
            service.save(f"key{index}", index)

        results = await asyncio.gather(*(service.save_all_async() for _ in range(5)))

        assert all(results)
        assert all(service.is_data_persisted(f"key{index}") for index in range(5))


@pytest.mark.asyncio
async def test_async_operations_skipped_when_not_initialized(make_service, issues) -> None:
    service = make_service(auto_initialize=False)

    assert await service.save_all_async() is False
    await service.load_all_async()

    assert service.state is ServiceState.UNINITIALIZED
    assert len(issues) == 2
