"""
Script Views - turns a video URL or pasted transcript into a timed script.
"""
from django.http import HttpRequest, JsonResponse
from django.views.decorators.csrf import csrf_exempt
from django.views.decorators.http import require_http_methods
from pydantic import ValidationError

from script_engine.generator import ensure_script_model_configured
from telemetry import get_logger, handle_exceptions, log_exception, timed_operation

from ..exceptions import to_api_exception
from ..schemas import GenerateScriptRequest
from ..services import ResponseService, get_service_container
from ..utils import get_friendly_error_message, parse_json_body

logger = get_logger(__name__)
response_service = ResponseService()


@csrf_exempt
@require_http_methods(["POST"])
@handle_exceptions(reraise=True)
@timed_operation()
async def generate_script(request: HttpRequest) -> JsonResponse:
    """
    Generate a short-form script for one video.

    This endpoint:
    1. Validates the body (url and/or manualTranscript, settings)
    2. Checks the model credential before any network call
    3. Acquires the transcript (pasted text wins over the URL)
    4. Generates the script, production notes and editing timeline

    Returns:
        JsonResponse with the GeneratedScript fields plus videoTitle,
        channel, videoId and platform
    """
    try:
        generate_request = GenerateScriptRequest(**parse_json_body(request))
    except ValidationError as e:
        logger.warning(f"Invalid generate request: {e}")
        error_response = response_service.format_error_response(
            message=get_friendly_error_message(e),
            status="bad_request",
        )
        return JsonResponse(error_response, status=400)
    except ValueError as e:
        logger.warning(f"JSON parse error: {e}")
        error_response = response_service.format_error_response(
            message="Invalid JSON format",
            status="bad_request",
        )
        return JsonResponse(error_response, status=400)

    try:
        ensure_script_model_configured()

        container = get_service_container()
        transcript_chain = container.get_service("transcript_chain")
        script_generator = container.get_service("script_generator")

        result = await transcript_chain.fetch(
            generate_request.url, generate_request.manual_transcript
        )
        meta = result.meta
        script = await script_generator.generate(
            result.transcript, meta.title, meta.channel, generate_request.settings
        )
    except Exception as e:
        api_error = to_api_exception(e)
        if api_error.status_code >= 500:
            log_exception(e, logger, extra_context={"endpoint": "generate"})
        else:
            logger.warning(f"Generate failed ({api_error.status_code}): {api_error.message}")
        return JsonResponse(
            response_service.format_api_exception(api_error), status=api_error.status_code
        )

    logger.info(f"Script generated for {meta.platform} video {meta.video_id}")
    return JsonResponse(
        response_service.format_model(
            script,
            videoTitle=meta.title,
            channel=meta.channel,
            videoId=meta.video_id,
            platform=meta.platform,
        )
    )
