"""
Function handler for password authentication and audio URL serving.

Event Flow:
1. Gateway invokes `handler` with httpMethod, headers and body
2. Event is mapped to a GatewayRequest
3. AuthHandler produces the response
"""
from typing import Any, Dict

from app.adapters.mappers.http_mapper import HttpMapper
from app.api.dependencies import get_auth_handler


def handler(event: Dict[str, Any], context: Any = None) -> Dict[str, Any]:
    """
    Function handler for the authenticate endpoint.

    Args:
        event: Gateway event
        context: Runtime context (unused)

    Returns:
        Dict with statusCode, headers and a JSON string body
    """
    request = HttpMapper.from_lambda_event(event)
    response = get_auth_handler().handle(request)
    return HttpMapper.to_lambda_response(response)
