"""
Timing decorators.

``timed_operation`` logs how long a sync or async callable took, in
milliseconds. Failures are logged with their elapsed time and re-raised.
"""

import functools
import inspect
import logging
import time
from typing import Any, Callable, Optional, TypeVar, cast

from ..logging import get_logger

F = TypeVar("F", bound=Callable[..., Any])

logger = get_logger(__name__)


def timed_operation(
    name: Optional[str] = None,
    logger_instance: Optional[logging.Logger] = None,
    level: int = logging.INFO,
    threshold_ms: Optional[float] = None,
) -> Callable[[F], F]:
    """
    Decorator that times function execution and logs elapsed time.

    Args:
        name: Operation name for the log line (defaults to the function name)
        logger_instance: Logger to use (defaults to this module's logger)
        level: Logging level for the timing message
        threshold_ms: Only log successful calls slower than this

    Example:
        >>> @timed_operation(name="script generation", threshold_ms=1000)
        ... async def generate(...):
        ...     ...
    """

    def decorator(func: F) -> F:
        operation_name = name or func.__name__
        func_logger = logger_instance or logger

        def _report(start_time: float) -> None:
            elapsed_ms = (time.perf_counter() - start_time) * 1000
            if threshold_ms is None or elapsed_ms >= threshold_ms:
                func_logger.log(level, f"{operation_name} completed in {elapsed_ms:.2f} ms")

        def _report_failure(start_time: float, exc: Exception) -> None:
            elapsed_ms = (time.perf_counter() - start_time) * 1000
            func_logger.error(
                f"{operation_name} failed after {elapsed_ms:.2f} ms: "
                f"{type(exc).__name__}: {exc}"
            )

        if inspect.iscoroutinefunction(func):

            @functools.wraps(func)
            async def async_wrapper(*args: Any, **kwargs: Any) -> Any:
                start_time = time.perf_counter()
                try:
                    result = await func(*args, **kwargs)
                except Exception as e:
                    _report_failure(start_time, e)
                    raise
                _report(start_time)
                return result

            return cast(F, async_wrapper)

        @functools.wraps(func)
        def sync_wrapper(*args: Any, **kwargs: Any) -> Any:
            start_time = time.perf_counter()
            try:
                result = func(*args, **kwargs)
            except Exception as e:
                _report_failure(start_time, e)
                raise
            _report(start_time)
            return result

        return cast(F, sync_wrapper)

    return decorator


__all__ = ["timed_operation"]
