"""
Logging utilities.

- get_logger: named logger, console fallback outside Django
- JSONFormatter: structured formatter used by the file handlers
"""

from .formatters import JSONFormatter
from .logger import DEFAULT_DATE_FORMAT, DEFAULT_FORMAT, get_logger

__all__ = [
    "get_logger",
    "JSONFormatter",
    "DEFAULT_FORMAT",
    "DEFAULT_DATE_FORMAT",
]
