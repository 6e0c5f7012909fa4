"""
Response Service for API response formatting.
Keeps success and error payloads in one shape for the UI.
"""
from typing import Any, Dict, Optional

from pydantic import BaseModel

from telemetry import get_logger

from ..exceptions import APIException


class ResponseService:
    """
    Handles response formatting for the API layer.

    Success payloads are pydantic models dumped with camelCase aliases.
    Error payloads always carry the user-facing text under ``error``.
    """

    def __init__(self):
        self.logger = get_logger(__name__)

    def format_model(self, model: BaseModel, **extra: Any) -> Dict[str, Any]:
        """Dump a model to its camelCase JSON form and merge in extra top-level keys"""
        payload = model.model_dump(mode="json", by_alias=True)
        payload.update(extra)
        return payload

    def format_error_response(
        self,
        message: str,
        status: str = "error",
        code: Optional[str] = None,
        debug: Optional[str] = None,
        details: Optional[Dict[str, Any]] = None,
    ) -> Dict[str, Any]:
        """
        Format standardized error responses.

        Args:
            message: User-facing error message
            status: Short status label (bad_request, internal_error, ...)
            code: Machine-readable error code, e.g. TRANSCRIPT_UNAVAILABLE
            debug: Last acquisition diagnostic, for out-of-band debugging
            details: Additional error details

        Returns:
            Formatted error response dictionary
        """
        response: Dict[str, Any] = {
            'error': message,
            'status': status,
        }

        if code:
            response['code'] = code
        if debug:
            response['debug'] = debug
        if details:
            response['details'] = details

        return response

    def format_api_exception(self, error: APIException) -> Dict[str, Any]:
        return self.format_error_response(
            message=error.message,
            status=self._status_label(error.status_code),
            code=error.code,
            debug=error.debug,
            details=error.details,
        )

    @staticmethod
    def _status_label(status_code: int) -> str:
        return {
            400: "bad_request",
            403: "forbidden",
            404: "not_found",
            422: "unprocessable",
            502: "bad_gateway",
        }.get(status_code, "internal_error")
