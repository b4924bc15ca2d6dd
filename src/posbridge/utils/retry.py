"""
Retry helper for posbridge HTTP fetches.

Exponential backoff with optional full jitter. Used by the ABI manager for
transport failures; chain RPC calls are never retried.
"""

from __future__ import annotations

import asyncio
import random
from dataclasses import dataclass, field
from typing import Awaitable, Callable, Optional, Tuple, Type, TypeVar

from posbridge.constants import (
    RETRY_BASE_DELAY_MS,
    RETRY_MAX_ATTEMPTS,
    RETRY_MAX_DELAY_MS,
)
from posbridge.utils.logging import get_logger

T = TypeVar("T")

_logger = get_logger(__name__)


@dataclass
class RetryConfig:
    """
    Configuration for retry behavior.

    Example:
        ```python
        config = RetryConfig(
            max_attempts=4,
            base_delay_ms=250,
            retryable_errors=(httpx.TransportError,),
        )
        ```
    """

    max_attempts: int = RETRY_MAX_ATTEMPTS
    base_delay_ms: int = RETRY_BASE_DELAY_MS
    max_delay_ms: int = RETRY_MAX_DELAY_MS
    jitter: bool = True
    retryable_errors: Tuple[Type[Exception], ...] = field(
        default_factory=lambda: (Exception,)
    )


def calculate_delay(attempt: int, config: RetryConfig) -> float:
    """
    Delay in seconds before retry number ``attempt`` (zero-based).
    """
    delay_ms = min(config.base_delay_ms * (2 ** attempt), config.max_delay_ms)
    if config.jitter:
        delay_ms = random.uniform(0, delay_ms)
    return delay_ms / 1000


async def retry_async(
    fn: Callable[[], Awaitable[T]],
    config: Optional[RetryConfig] = None,
) -> T:
    """
    Await ``fn()`` until it succeeds or the attempts run out.

    Errors outside ``config.retryable_errors`` propagate immediately; after
    the last attempt the last retryable error is raised.
    """
    config = config or RetryConfig()
    attempt = 0
    while True:
        try:
            return await fn()
        except config.retryable_errors as e:
            attempt += 1
            if attempt >= config.max_attempts:
                raise
            delay = calculate_delay(attempt - 1, config)
            _logger.debug(
                "Retrying after transient failure",
                extra={"attempt": attempt, "delay_s": delay, "error": str(e)},
            )
            await asyncio.sleep(delay)
