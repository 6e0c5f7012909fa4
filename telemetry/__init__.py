"""
Telemetry package for the script generator.
Provides centralized logging, timing, error handling and timeout patterns.

- telemetry.logging: logger access and formatters
- telemetry.timing: @timed_operation
- telemetry.exceptions: the error taxonomy and handling decorators
- telemetry.resilience: bounded-time waits
"""

__version__ = "1.0.0"

from .exceptions import *  # noqa: F401,F403
from .logging import *  # noqa: F401,F403
from .resilience import *  # noqa: F401,F403
from .timing import *  # noqa: F401,F403
