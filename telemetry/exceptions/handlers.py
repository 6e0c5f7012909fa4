"""
Exception handling decorators and context managers.
"""

import functools
import inspect
import logging
from contextlib import contextmanager
from typing import Any, Callable, Optional, Type, TypeVar, Union, cast

from ..logging import get_logger
from .context import log_exception
from .custom_exceptions import ExternalServiceError

F = TypeVar("F", bound=Callable[..., Any])
T = TypeVar("T")

logger = get_logger(__name__)


def handle_exceptions(
    exceptions: Union[Type[Exception], tuple[Type[Exception], ...]] = Exception,
    logger_instance: Optional[logging.Logger] = None,
    level: int = logging.ERROR,
    reraise: bool = True,
    default_return: Optional[T] = None,
    include_traceback: bool = True,
    context_message: Optional[str] = None,
) -> Callable[[F], F]:
    """
    Decorator to log exceptions and optionally re-raise them.

    Works for both sync and async callables.

    Example:
        >>> @handle_exceptions(ExternalServiceError, reraise=False, default_return="")
        ... async def fetch_title(video_id: str) -> str:
        ...     ...
    """

    def _log(func: Callable[..., Any], exc: Exception, args: tuple, kwargs: dict) -> None:
        context: dict[str, Any] = {"function": func.__name__, "args": args, "kwargs": kwargs}
        if context_message:
            context["message"] = context_message
        log_exception(
            exc,
            logger_instance or get_logger(func.__module__),
            level,
            include_traceback,
            context,
        )

    def decorator(func: F) -> F:
        if inspect.iscoroutinefunction(func):

            @functools.wraps(func)
            async def async_wrapper(*args: Any, **kwargs: Any) -> Any:
                try:
                    return await func(*args, **kwargs)
                except exceptions as e:
                    _log(func, e, args, kwargs)
                    if reraise:
                        raise
                    return default_return

            return cast(F, async_wrapper)

        @functools.wraps(func)
        def sync_wrapper(*args: Any, **kwargs: Any) -> Any:
            try:
                return func(*args, **kwargs)
            except exceptions as e:
                _log(func, e, args, kwargs)
                if reraise:
                    raise
                return default_return

        return cast(F, sync_wrapper)

    return decorator


@contextmanager
def handle_api_errors(service_name: str):
    """
    Convert any error raised inside the block into ExternalServiceError.

    Example:
        >>> with handle_api_errors("OpenRouter"):
        ...     response = await client.chat.completions.create(...)
    """
    try:
        yield
    except ExternalServiceError:
        raise
    except Exception as e:
        status_code = getattr(e, "status_code", None)
        response = getattr(e, "response", None)
        if status_code is None and response is not None:
            status_code = getattr(response, "status_code", None)

        logger.error(
            f"{service_name} error: {e}",
            extra={"service": service_name, "original_error": type(e).__name__},
        )
        raise ExternalServiceError(
            service=service_name,
            message=str(e),
            status_code=status_code,
            original_error=type(e).__name__,
        ) from e


__all__ = ["handle_exceptions", "handle_api_errors"]
