"""
Timeline Views - recomputes the editing timeline after the UI edits section text.
"""
from rest_framework import status
from rest_framework.exceptions import ParseError
from rest_framework.response import Response
from rest_framework.views import APIView
from pydantic import ValidationError

from script_engine.timeline import derive_timeline
from telemetry.logging import get_logger

from ..schemas import TimelineRequest
from ..services import ResponseService
from ..utils import get_friendly_error_message

logger = get_logger(__name__)
response_service = ResponseService()


class TimelineView(APIView):
    """Pure recompute; no model call and no transcript acquisition"""

    def post(self, request):
        try:
            timeline_request = TimelineRequest(**request.data)
        except ValidationError as e:
            logger.warning(f"Timeline request validation failed: {e}")
            return Response(
                response_service.format_error_response(
                    message=get_friendly_error_message(e), status="bad_request"
                ),
                status=status.HTTP_400_BAD_REQUEST,
            )
        except (ParseError, TypeError) as e:
            logger.warning(f"JSON parse error: {e}")
            return Response(
                response_service.format_error_response(
                    message="Invalid JSON format", status="bad_request"
                ),
                status=status.HTTP_400_BAD_REQUEST,
            )

        timeline = derive_timeline(
            timeline_request.sections, timeline_request.footage, timeline_request.fps
        )
        return Response(response_service.format_model(timeline))
