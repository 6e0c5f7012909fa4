"""Exception logging helpers."""

import logging
from typing import Any, Dict, Optional

from ..logging import get_logger
from .custom_exceptions import BaseScripterError

logger = get_logger(__name__)


def log_exception(
    exc: BaseException,
    logger_instance: Optional[logging.Logger] = None,
    level: int = logging.ERROR,
    include_traceback: bool = True,
    extra_context: Optional[Dict[str, Any]] = None,
) -> None:
    """Log an exception with its type, details and caller context."""
    log = logger_instance or logger

    exc_info: Dict[str, Any] = {
        "type": type(exc).__name__,
        "message": str(exc),
        "module": type(exc).__module__,
    }

    if isinstance(exc, BaseScripterError) and exc.details:
        exc_info["details"] = exc.details

    if extra_context:
        exc_info["context"] = extra_context

    log.log(level, f"Exception occurred: {exc_info}", exc_info=include_traceback)


__all__ = ["log_exception"]
