"""
Custom exception classes for the script generator.

Every error the core raises on purpose derives from BaseScripterError so the
HTTP boundary can map it to a status code without string matching. The
"transcript unavailable" family is recoverable by the caller: paste a manual
transcript and retry.
"""

from typing import Any, Dict, Optional


class BaseScripterError(Exception):
    """Base exception class for all script generator errors."""

    def __init__(self, message: str, details: Optional[Dict[str, Any]] = None):
        super().__init__(message)
        self.message = message
        self.details = details or {}

    def __str__(self) -> str:
        return self.message


class ConfigurationError(BaseScripterError):
    """A required credential or setting is missing. Raised before any network call."""

    def __init__(self, message: str, setting: Optional[str] = None, **kwargs: Any):
        details = {"setting": setting}
        details.update(kwargs)
        super().__init__(message, details)


class ExternalServiceError(BaseScripterError):
    """Exception raised when an external service fails (OpenRouter, Gemini, YouTube...)."""

    def __init__(
        self,
        service: str,
        message: str,
        status_code: Optional[int] = None,
        **kwargs: Any,
    ):
        details = {"service": service, "status_code": status_code}
        details.update(kwargs)
        super().__init__(f"{service} error: {message}", details)
        self.service = service
        self.status_code = status_code


class ValidationError(BaseScripterError):
    """Exception raised for validation failures."""

    def __init__(
        self, message: str, field: Optional[str] = None, value: Any = None, **kwargs: Any
    ):
        details = {"field": field, "value": value}
        details.update(kwargs)
        super().__init__(message, details)


class UnsupportedURLError(ValidationError):
    """The URL does not belong to a supported video platform."""

    def __init__(self, message: str, url: Optional[str] = None):
        super().__init__(message, field="url", value=url)


class TranscriptUnavailableError(BaseScripterError):
    """
    Every transcript source was exhausted.

    ``attempts`` holds the per-source diagnostics of the request that failed,
    ``last_error`` the most recent one; both are for out-of-band debugging and
    never part of the user-facing message.
    """

    def __init__(
        self,
        message: str,
        video_id: Optional[str] = None,
        attempts: Optional[list[dict[str, Any]]] = None,
        last_error: str = "",
    ):
        super().__init__(message, {"video_id": video_id})
        self.video_id = video_id
        self.attempts = attempts or []
        self.last_error = last_error


class ManualTranscriptRequiredError(TranscriptUnavailableError):
    """The platform has no transcript support; the caller must paste one."""


class UpstreamBlockedError(BaseScripterError):
    """The video host demanded sign-in or blocked automated access."""

    def __init__(self, message: str, video_id: Optional[str] = None, **kwargs: Any):
        details = {"video_id": video_id}
        details.update(kwargs)
        super().__init__(message, details)
        self.video_id = video_id


class CaptionFetchError(BaseScripterError):
    """
    Client-assisted caption fetch failed.

    ``category`` is one of: caption_fetch_failed, empty_captions,
    transcript_too_short, no_captions, blocked.
    """

    def __init__(self, category: str, message: Optional[str] = None, **kwargs: Any):
        details = {"category": category}
        details.update(kwargs)
        super().__init__(message or category, details)
        self.category = category


__all__ = [
    "BaseScripterError",
    "ConfigurationError",
    "ExternalServiceError",
    "ValidationError",
    "UnsupportedURLError",
    "TranscriptUnavailableError",
    "ManualTranscriptRequiredError",
    "UpstreamBlockedError",
    "CaptionFetchError",
]
