"""
Function handler for saving visitor reactions.

Reactions live in an in-memory buffer owned by the dependency container.
The buffer resets on cold start and is bounded per function instance.
"""
from typing import Any, Dict, List

from app.adapters.mappers.http_mapper import HttpMapper
from app.api.dependencies import get_reaction_handler


def handler(event: Dict[str, Any], context: Any = None) -> Dict[str, Any]:
    """
    Function handler for the save-reaction endpoint.

    Args:
        event: Gateway event
        context: Runtime context (unused)

    Returns:
        Dict with statusCode, headers and a JSON string body
    """
    request = HttpMapper.from_lambda_event(event)
    response = get_reaction_handler().handle(request)
    return HttpMapper.to_lambda_response(response)


def get_reactions() -> List[Dict[str, Any]]:
    """All buffered reactions of this instance, oldest first (debugging aid)."""
    return [record.to_dict() for record in get_reaction_handler().snapshot()]


def clear_reactions() -> Dict[str, Any]:
    """Empty the buffer of this instance (debugging aid)."""
    cleared = get_reaction_handler().reset()
    return {"cleared": True, "count": cleared}
