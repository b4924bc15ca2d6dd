"""
Tests for gather_all.
"""

import asyncio

import pytest

from posbridge.utils.concurrency import gather_all, resolved


class TestGatherAll:
    @pytest.mark.asyncio
    async def test_results_in_order(self) -> None:
        async def delayed(value, delay):
            await asyncio.sleep(delay)
            return value

        results = await gather_all(delayed("a", 0.02), resolved("b"), delayed("c", 0))

        assert results == ["a", "b", "c"]

    @pytest.mark.asyncio
    async def test_empty(self) -> None:
        assert await gather_all() == []

    @pytest.mark.asyncio
    async def test_failure_cancels_siblings(self) -> None:
        cancelled = []

        async def slow(name):
            try:
                await asyncio.sleep(10)
            except asyncio.CancelledError:
                cancelled.append(name)
                raise

        async def fail():
            raise KeyError("missing")

        with pytest.raises(KeyError):
            await gather_all(slow("one"), fail(), slow("two"))

        assert sorted(cancelled) == ["one", "two"]

    @pytest.mark.asyncio
    async def test_first_error_wins(self) -> None:
        async def fail_fast():
            raise ValueError("fast")

        async def fail_slow():
            await asyncio.sleep(0.01)
            raise RuntimeError("slow")

        with pytest.raises(ValueError):
            await gather_all(fail_slow(), fail_fast())


class TestResolved:
    @pytest.mark.asyncio
    async def test_returns_value(self) -> None:
        assert await resolved(0) == 0
        assert await resolved(None) is None
