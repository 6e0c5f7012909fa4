# API utilities

from .error_messages import get_friendly_error_message
from .request_body import parse_json_body

__all__ = ["get_friendly_error_message", "parse_json_body"]
