"""
Timeout handling for async operations.

``with_timeout`` raises on expiry; ``race_with_timeout`` never raises for the
expected outcomes and instead returns a tagged ``RaceResult`` so a caller
walking a list of fallbacks can branch on status rather than on exceptions.
"""

import asyncio
import time
from dataclasses import dataclass
from enum import Enum
from typing import Any, Awaitable, Generic, Optional, TypeVar

from ..exceptions import BaseScripterError
from ..logging import get_logger

T = TypeVar("T")
logger = get_logger(__name__)


class TimeoutError(BaseScripterError):
    def __init__(self, operation: str, timeout_seconds: float, **kwargs: Any):
        message = f"{operation} timed out after {timeout_seconds}s"
        details = {"operation": operation, "timeout_seconds": timeout_seconds}
        details.update(kwargs)
        super().__init__(message, details)
        self.operation = operation
        self.timeout_seconds = timeout_seconds


class RaceStatus(str, Enum):
    COMPLETED = "completed"
    TIMED_OUT = "timed_out"
    FAILED = "failed"


@dataclass
class RaceResult(Generic[T]):
    """Outcome of racing one awaitable against a timer."""

    status: RaceStatus
    value: Optional[T] = None
    error: Optional[BaseException] = None
    elapsed_ms: float = 0.0

    @property
    def completed(self) -> bool:
        return self.status == RaceStatus.COMPLETED


async def with_timeout(
    awaitable: Awaitable[T],
    timeout_seconds: float,
    operation: str = "operation",
) -> T:
    """
    Await ``awaitable`` for at most ``timeout_seconds``.

    On expiry the pending work is cancelled and its eventual result is
    discarded; TimeoutError is raised.
    """
    try:
        return await asyncio.wait_for(awaitable, timeout=timeout_seconds)
    except asyncio.TimeoutError as e:
        logger.warning(
            f"{operation} timed out after {timeout_seconds}s",
            extra={"operation": operation, "timeout": timeout_seconds},
        )
        raise TimeoutError(operation, timeout_seconds) from e


async def race_with_timeout(
    awaitable: Awaitable[T],
    timeout_seconds: float,
    operation: str = "operation",
) -> RaceResult[T]:
    """Race ``awaitable`` against a timer and report completed/timed_out/failed."""
    start_time = time.perf_counter()

    def _elapsed() -> float:
        return (time.perf_counter() - start_time) * 1000

    try:
        value = await with_timeout(awaitable, timeout_seconds, operation)
    except TimeoutError as e:
        return RaceResult(status=RaceStatus.TIMED_OUT, error=e, elapsed_ms=_elapsed())
    except asyncio.CancelledError:
        raise
    except Exception as e:
        logger.debug(f"{operation} failed after {_elapsed():.0f} ms: {e}")
        return RaceResult(status=RaceStatus.FAILED, error=e, elapsed_ms=_elapsed())

    return RaceResult(status=RaceStatus.COMPLETED, value=value, elapsed_ms=_elapsed())


__all__ = ["TimeoutError", "RaceStatus", "RaceResult", "with_timeout", "race_with_timeout"]
