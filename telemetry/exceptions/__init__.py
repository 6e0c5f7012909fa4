"""
Exception handling utilities.

- custom_exceptions: the error taxonomy (configuration, acquisition
  exhaustion, unsupported input, upstream block, external service)
- handlers: decorators and context managers
- context: exception logging helpers
"""

from .context import log_exception
from .custom_exceptions import (
    BaseScripterError,
    CaptionFetchError,
    ConfigurationError,
    ExternalServiceError,
    ManualTranscriptRequiredError,
    TranscriptUnavailableError,
    UnsupportedURLError,
    UpstreamBlockedError,
    ValidationError,
)
from .handlers import handle_api_errors, handle_exceptions

__all__ = [
    "BaseScripterError",
    "CaptionFetchError",
    "ConfigurationError",
    "ExternalServiceError",
    "ManualTranscriptRequiredError",
    "TranscriptUnavailableError",
    "UnsupportedURLError",
    "UpstreamBlockedError",
    "ValidationError",
    "handle_exceptions",
    "handle_api_errors",
    "log_exception",
]
