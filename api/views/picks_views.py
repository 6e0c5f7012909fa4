"""
Picks Views - script generation straight from a list of betting picks.
"""
from django.http import HttpRequest, JsonResponse
from django.views.decorators.csrf import csrf_exempt
from django.views.decorators.http import require_http_methods
from pydantic import ValidationError

from script_engine.generator import ensure_script_model_configured
from script_engine.models import PicksRequest
from telemetry import get_logger, handle_exceptions, log_exception, timed_operation

from ..exceptions import to_api_exception
from ..services import ResponseService, get_service_container
from ..utils import get_friendly_error_message, parse_json_body

logger = get_logger(__name__)
response_service = ResponseService()


@csrf_exempt
@require_http_methods(["POST"])
@handle_exceptions(reraise=True)
@timed_operation()
async def generate_from_picks(request: HttpRequest) -> JsonResponse:
    """
    Generate a script from picks plus a hook line.

    Body: picks[{matchup, selection, odds?, reasoning?}], sport, day, date,
    and optionally hookId / hookText / tone / style / targetSeconds.
    """
    try:
        picks_request = PicksRequest(**parse_json_body(request))
    except ValidationError as e:
        logger.warning(f"Invalid picks request: {e}")
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
        picks_generator = get_service_container().get_service("picks_generator")
        result = await picks_generator.generate(picks_request)
    except Exception as e:
        api_error = to_api_exception(e)
        if api_error.status_code >= 500:
            log_exception(e, logger, extra_context={"endpoint": "generate-from-picks"})
        return JsonResponse(
            response_service.format_api_exception(api_error), status=api_error.status_code
        )

    return JsonResponse(response_service.format_model(result))
