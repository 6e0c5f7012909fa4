"""
Resilience utilities.

- timeout: bounded-time waits for async operations, raising or tagged
"""

from .timeout import RaceResult, RaceStatus, TimeoutError, race_with_timeout, with_timeout

__all__ = [
    "TimeoutError",
    "RaceStatus",
    "RaceResult",
    "with_timeout",
    "race_with_timeout",
]
