import json
from typing import Any, Dict

from django.http import HttpRequest


def parse_json_body(request: HttpRequest) -> Dict[str, Any]:
    """
    Decode a JSON object body.

    Raises:
        ValueError: body is not valid JSON or not an object
    """
    data = json.loads(request.body or b"{}")
    if not isinstance(data, dict):
        raise ValueError("Request body must be a JSON object")
    return data
