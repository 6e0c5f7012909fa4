"""
Unit tests for bounded-time waits.
"""

import asyncio

import pytest

from telemetry.resilience import RaceStatus, TimeoutError, race_with_timeout, with_timeout


async def _sleep_then(value, delay):
    await asyncio.sleep(delay)
    return value


async def _fail():
    raise RuntimeError("boom")


class TestWithTimeout:
    @pytest.mark.asyncio
    async def test_returns_value_in_time(self):
        assert await with_timeout(_sleep_then("ok", 0), 1, "fast op") == "ok"

    @pytest.mark.asyncio
    async def test_raises_timeout_error(self):
        with pytest.raises(TimeoutError) as exc_info:
            await with_timeout(_sleep_then("late", 1), 0.01, "slow op")

        assert exc_info.value.operation == "slow op"
        assert "timed out after" in str(exc_info.value)


class TestRaceWithTimeout:
    @pytest.mark.asyncio
    async def test_completed(self):
        result = await race_with_timeout(_sleep_then(42, 0), 1, "op")

        assert result.status == RaceStatus.COMPLETED
        assert result.completed
        assert result.value == 42
        assert result.elapsed_ms >= 0

    @pytest.mark.asyncio
    async def test_timed_out_discards_late_result(self):
        result = await race_with_timeout(_sleep_then("late", 1), 0.01, "op")

        assert result.status == RaceStatus.TIMED_OUT
        assert result.value is None
        assert isinstance(result.error, TimeoutError)

    @pytest.mark.asyncio
    async def test_failure_is_reported_not_raised(self):
        result = await race_with_timeout(_fail(), 1, "op")

        assert result.status == RaceStatus.FAILED
        assert isinstance(result.error, RuntimeError)
