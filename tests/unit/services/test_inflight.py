"""
Tests pour InflightRegistry.

Verifie que les appels concurrents sur une meme cle partagent un seul
travail (resultat ou exception), et que la cle est liberee ensuite.
"""

import asyncio

import pytest

from src.core.errors import CityExplorerError
from src.services.inflight import InflightRegistry


@pytest.mark.asyncio
async def test_concurrent_calls_share_one_execution():
    registry: InflightRegistry[int] = InflightRegistry()
    release = asyncio.Event()
    calls = 0

    async def work() -> int:
        nonlocal calls
        calls += 1
        await release.wait()
        return 42

    tasks = [asyncio.create_task(registry.run("seattle", work)) for _ in range(3)]
    await asyncio.sleep(0)
    assert "seattle" in registry

    release.set()
    results = await asyncio.gather(*tasks)

    assert results == [42, 42, 42]
    assert calls == 1
    assert "seattle" not in registry


@pytest.mark.asyncio
async def test_different_keys_run_independently():
    registry: InflightRegistry[str] = InflightRegistry()
    calls: list[str] = []

    async def work(key: str) -> str:
        calls.append(key)
        await asyncio.sleep(0)
        return key.upper()

    results = await asyncio.gather(
        registry.run("a", lambda: work("a")),
        registry.run("b", lambda: work("b")),
    )

    assert results == ["A", "B"]
    assert sorted(calls) == ["a", "b"]


@pytest.mark.asyncio
async def test_exception_is_shared_then_key_released():
    registry: InflightRegistry[int] = InflightRegistry()
    release = asyncio.Event()

    async def failing() -> int:
        await release.wait()
        raise RuntimeError("fournisseur en panne")

    tasks = [asyncio.create_task(registry.run("k", failing)) for _ in range(2)]
    await asyncio.sleep(0)
    release.set()
    results = await asyncio.gather(*tasks, return_exceptions=True)

    assert all(isinstance(r, RuntimeError) for r in results)
    assert "k" not in registry

    async def recovered() -> int:
        return 1

    assert await registry.run("k", recovered) == 1


@pytest.mark.asyncio
async def test_sequential_calls_run_again():
    """Pas de memorisation : une fois termine, le travail est relance."""
    registry: InflightRegistry[int] = InflightRegistry()
    calls = 0

    async def work() -> int:
        nonlocal calls
        calls += 1
        return calls

    assert await registry.run("k", work) == 1
    assert await registry.run("k", work) == 2


@pytest.mark.asyncio
async def test_cancelled_owner_fails_waiters_with_domain_error():
    """L'annulation du premier appelant ne se propage pas aux appelants en attente."""
    registry: InflightRegistry[int] = InflightRegistry()
    started = asyncio.Event()

    async def never_finishes() -> int:
        started.set()
        await asyncio.Event().wait()
        return 0

    owner = asyncio.create_task(registry.run("seattle", never_finishes))
    await started.wait()
    waiter = asyncio.create_task(registry.run("seattle", never_finishes))
    await asyncio.sleep(0)

    owner.cancel()
    owner_result, waiter_result = await asyncio.gather(owner, waiter, return_exceptions=True)

    assert isinstance(owner_result, asyncio.CancelledError)
    assert isinstance(waiter_result, CityExplorerError)
    assert "seattle" not in registry
