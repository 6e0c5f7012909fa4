"""
Transcript Views - server-side fallback for client-assisted caption fetch.
The browser calls this when reading captions directly fails (CORS).
"""
import asyncio

from django.http import HttpRequest, JsonResponse
from django.views.decorators.csrf import csrf_exempt
from django.views.decorators.http import require_http_methods
from pydantic import ValidationError

from telemetry import get_logger, handle_exceptions, timed_operation
from video_processor.services import fetch_player_captions

from ..exceptions import to_api_exception
from ..schemas import CaptionFetchRequest
from ..services import ResponseService
from ..utils import parse_json_body

logger = get_logger(__name__)
response_service = ResponseService()


@csrf_exempt
@require_http_methods(["POST"])
@handle_exceptions(reraise=True)
@timed_operation()
async def fetch_transcript(request: HttpRequest) -> JsonResponse:
    """
    Fetch captions for ``videoId`` (optionally from a known ``captionUrl``).

    Returns:
        JsonResponse {"transcript": ...}, or {"error": <category>} with
        403 blocked, 404 no_captions/empty_captions/transcript_too_short,
        502 caption_fetch_failed
    """
    try:
        caption_request = CaptionFetchRequest(**parse_json_body(request))
    except (ValidationError, ValueError) as e:
        logger.warning(f"Invalid transcript request: {e}")
        error_response = response_service.format_error_response(
            message="Missing videoId",
            status="bad_request",
        )
        return JsonResponse(error_response, status=400)

    try:
        transcript = await asyncio.to_thread(
            fetch_player_captions, caption_request.video_id, caption_request.caption_url
        )
    except Exception as e:
        api_error = to_api_exception(e)
        logger.warning(
            f"Caption fetch for {caption_request.video_id} failed: "
            f"{api_error.message} ({api_error.status_code})"
        )
        return JsonResponse(
            response_service.format_api_exception(api_error), status=api_error.status_code
        )

    return JsonResponse({"transcript": transcript})
