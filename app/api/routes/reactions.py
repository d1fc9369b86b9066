"""
Reaction routes for Surprise Gateway API.
Only submission is exposed; buffer maintenance stays off the HTTP surface.
"""
from fastapi import APIRouter, Depends, Request, Response
from fastapi.concurrency import run_in_threadpool

from app.adapters.mappers.http_mapper import HttpMapper
from app.api.dependencies import get_reaction_handler
from app.api.handlers.reaction_handler import ReactionHandler
from app.api.routes.auth import HANDLED_METHODS

router = APIRouter(tags=["Reactions"])


@router.api_route("/save-reaction", methods=HANDLED_METHODS)
async def save_reaction(
    request: Request,
    reaction_handler: ReactionHandler = Depends(get_reaction_handler)
) -> Response:
    """
    Store a visitor reaction.

    Body: {"reaction": "...", "timestamp": "optional ISO-8601"}
    """
    gateway_request = await HttpMapper.from_fastapi_request(request)
    gateway_response = await run_in_threadpool(reaction_handler.handle, gateway_request)
    return HttpMapper.to_fastapi_response(gateway_response)
