"""
Tests for the ABI fetch retry helper.

Tests cover:
- RetryConfig defaults
- Delay calculation with exponential backoff, cap and jitter
- Retryable error filtering
- Sleep schedule between attempts
"""

from typing import List
from unittest.mock import AsyncMock, call, patch

import httpx
import pytest

from posbridge.utils.retry import RetryConfig, calculate_delay, retry_async


class TestRetryConfig:
    """Tests for RetryConfig dataclass."""

    def test_default_values(self) -> None:
        config = RetryConfig()

        assert config.max_attempts == 3
        assert config.base_delay_ms == 500
        assert config.max_delay_ms == 8000
        assert config.jitter is True
        assert config.retryable_errors == (Exception,)


class TestDelayCalculation:
    """Tests for calculate_delay function."""

    def test_exponential_growth(self) -> None:
        config = RetryConfig(base_delay_ms=500, max_delay_ms=100_000, jitter=False)

        delays = [calculate_delay(i, config) for i in range(4)]

        # 0.5s, 1s, 2s, 4s
        assert delays == [0.5, 1.0, 2.0, 4.0]

    def test_max_delay_cap(self) -> None:
        config = RetryConfig(base_delay_ms=500, max_delay_ms=8000, jitter=False)

        assert calculate_delay(10, config) == 8.0

    def test_jitter_within_bounds(self) -> None:
        config = RetryConfig(base_delay_ms=1000, jitter=True)

        delays = [calculate_delay(0, config) for _ in range(100)]

        assert min(delays) != max(delays)
        assert all(0 <= d <= 1.0 for d in delays)


class TestRetryAsync:
    """Tests for retry_async function."""

    @pytest.mark.asyncio
    async def test_success_on_first_attempt(self) -> None:
        fn = AsyncMock(return_value="ok")

        assert await retry_async(fn) == "ok"
        assert fn.await_count == 1

    @pytest.mark.asyncio
    async def test_retry_until_success(self) -> None:
        fn = AsyncMock(side_effect=[ValueError("transient"), ValueError("transient"), "ok"])
        config = RetryConfig(max_attempts=5, base_delay_ms=1, jitter=False)

        assert await retry_async(fn, config) == "ok"
        assert fn.await_count == 3

    @pytest.mark.asyncio
    async def test_last_error_raised_after_max_attempts(self) -> None:
        errors: List[Exception] = [ValueError("first"), ValueError("second")]
        fn = AsyncMock(side_effect=errors)
        config = RetryConfig(max_attempts=2, base_delay_ms=1, jitter=False)

        with pytest.raises(ValueError) as exc_info:
            await retry_async(fn, config)

        assert exc_info.value is errors[1]

    @pytest.mark.asyncio
    async def test_non_retryable_error_raised_immediately(self) -> None:
        fn = AsyncMock(side_effect=httpx.InvalidURL("bad url"))
        config = RetryConfig(max_attempts=5, retryable_errors=(httpx.TransportError,))

        with pytest.raises(httpx.InvalidURL):
            await retry_async(fn, config)

        assert fn.await_count == 1

    @pytest.mark.asyncio
    async def test_sleep_schedule(self) -> None:
        fn = AsyncMock(side_effect=[
            httpx.ConnectError("reset"),
            httpx.ReadTimeout("slow"),
            "ok",
        ])
        config = RetryConfig(
            max_attempts=3,
            base_delay_ms=100,
            jitter=False,
            retryable_errors=(httpx.TransportError,),
        )

        with patch("posbridge.utils.retry.asyncio.sleep", new_callable=AsyncMock) as sleep:
            assert await retry_async(fn, config) == "ok"

        assert sleep.await_args_list == [call(0.1), call(0.2)]
