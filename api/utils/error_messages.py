"""
Error Message Utilities
Converts technical validation errors to user-friendly messages
"""

from typing import Any

from pydantic import ValidationError

from ..schemas import MISSING_INPUT_MESSAGE

FIELD_MESSAGES = {
    "targetSeconds": "Target length must be 30, 45, 60 or 90 seconds",
    "target_seconds": "Target length must be 30, 45, 60 or 90 seconds",
    "style": "Style must be 'hype', 'analytical' or 'conversational'",
    "videoId": "Missing videoId",
    "video_id": "Missing videoId",
    "fps": "fps must be between 1 and 120",
    "sections": "Timeline requests need sections with hook, body and cta text",
}

PICKS_FIELDS = {"picks", "sport", "day", "date"}


def get_friendly_error_message(validation_error: Any) -> str:
    """Convert technical validation errors (Pydantic/other) to user-friendly messages"""
    if isinstance(validation_error, ValidationError):
        for error in validation_error.errors():
            message = _message_for(error)
            if message:
                return message

    error_str = str(validation_error)
    if MISSING_INPUT_MESSAGE in error_str:
        return MISSING_INPUT_MESSAGE

    # Fallback for unknown errors
    return "Invalid request format"


def _message_for(error: dict) -> str | None:
    if MISSING_INPUT_MESSAGE in error.get("msg", ""):
        return MISSING_INPUT_MESSAGE

    location = [str(part) for part in error.get("loc", ())]
    if location and location[0] in PICKS_FIELDS:
        return "Missing required fields: picks, sport, day, date"

    for part in location:
        if part in FIELD_MESSAGES:
            return FIELD_MESSAGES[part]

    if error.get("type") == "missing" and location:
        return f"Missing required field: {location[-1]}"

    return None
