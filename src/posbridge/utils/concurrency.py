"""
Concurrency helpers.
"""

from __future__ import annotations

import asyncio
from typing import Any, Awaitable, List


async def gather_all(*aws: Awaitable[Any]) -> List[Any]:
    """
    Run awaitables concurrently and return their results in order.

    Waits for every task; on the first failure the remaining tasks are
    cancelled and the error is re-raised, so callers never see a partial
    result.

    Example:
        >>> gas, price = await gather_all(chain.estimate_gas(tx), chain.get_gas_price())
    """
    tasks = [asyncio.ensure_future(aw) for aw in aws]
    try:
        return list(await asyncio.gather(*tasks))
    except BaseException:
        for task in tasks:
            if not task.done():
                task.cancel()
        await asyncio.gather(*tasks, return_exceptions=True)
        raise


async def resolved(value: Any) -> Any:
    """Wrap an already known value as an awaitable."""
    return value
