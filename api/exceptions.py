"""
Custom API Exceptions with telemetry integration.
Maps the core's error taxonomy onto HTTP status codes and error codes.
"""

from typing import Any

from telemetry import (
    CaptionFetchError,
    ConfigurationError,
    TranscriptUnavailableError,
    UnsupportedURLError,
    UpstreamBlockedError,
)
from telemetry import ValidationError as CoreValidationError

# Generic failures whose message contains one of these are still treated as
# "paste a manual transcript and retry"
TRANSCRIPT_UNAVAILABLE_MARKERS = (
    "Transcript is disabled",
    "No transcript available",
    "require a manual transcript",
    "Could not transcribe",
    "GOOGLE_AI_KEY",
)

CAPTION_FETCH_STATUS = {
    "blocked": 403,
    "no_captions": 404,
    "empty_captions": 404,
    "transcript_too_short": 404,
    "caption_fetch_failed": 502,
}


class APIException(Exception):
    """
    Base exception for API-specific errors.
    Integrates with the telemetry exception handling system.
    """

    def __init__(
        self,
        message: str,
        status_code: int = 500,
        details: dict[str, Any] | None = None,
        code: str | None = None,
        debug: str | None = None,
    ):
        super().__init__(message)
        self.message = message
        self.status_code = status_code
        self.details = details or {}
        self.code = code
        self.debug = debug


class ValidationError(APIException):
    """Exception raised when request validation fails."""

    def __init__(self, message: str, details: dict[str, Any] | None = None):
        super().__init__(message, status_code=400, details=details)


class ConfigurationAPIError(APIException):
    """A required credential is missing on the server."""

    def __init__(self, message: str):
        super().__init__(message, status_code=500, code="CONFIGURATION_ERROR")


class TranscriptUnavailableAPIError(APIException):
    """No transcript could be acquired; the caller should paste one and retry."""

    def __init__(self, message: str, debug: str | None = None):
        super().__init__(message, status_code=422, code="TRANSCRIPT_UNAVAILABLE", debug=debug)


class UpstreamBlockedAPIError(APIException):
    """The video host blocked automated access."""

    def __init__(self, message: str):
        super().__init__(message, status_code=403, code="UPSTREAM_BLOCKED")


class CaptionFetchAPIError(APIException):
    """Client-assisted caption fetch failed with a known category."""

    def __init__(self, category: str, message: str | None = None):
        super().__init__(
            category,
            status_code=CAPTION_FETCH_STATUS.get(category, 502),
            details={"message": message} if message and message != category else None,
        )
        self.category = category


def is_transcript_unavailable_message(message: str) -> bool:
    return any(marker in message for marker in TRANSCRIPT_UNAVAILABLE_MARKERS)


def to_api_exception(error: Exception) -> APIException:
    """Translate any error raised by the core into an APIException"""
    if isinstance(error, APIException):
        return error

    if isinstance(error, ConfigurationError):
        return ConfigurationAPIError(error.message)

    if isinstance(error, (UnsupportedURLError, CoreValidationError)):
        return ValidationError(error.message, details=error.details)

    if isinstance(error, UpstreamBlockedError):
        return UpstreamBlockedAPIError(error.message)

    if isinstance(error, TranscriptUnavailableError):
        return TranscriptUnavailableAPIError(error.message, debug=error.last_error or None)

    if isinstance(error, CaptionFetchError):
        return CaptionFetchAPIError(error.category, error.message)

    message = str(error) or "An unexpected error occurred"
    if is_transcript_unavailable_message(message):
        return TranscriptUnavailableAPIError(message)

    return APIException(message, status_code=500)
