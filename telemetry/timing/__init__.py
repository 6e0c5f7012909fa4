"""
Timing utilities for performance measurement.

- decorators: @timed_operation for sync and async callables
"""

from .decorators import timed_operation

__all__ = ["timed_operation"]
