"""
Authentication routes for Surprise Gateway API.
Thin adapter over AuthHandler; the handler owns CORS, method checks and errors.
"""
from fastapi import APIRouter, Depends, Request, Response
from fastapi.concurrency import run_in_threadpool

from app.adapters.mappers.http_mapper import HttpMapper
from app.api.dependencies import get_auth_handler
from app.api.handlers.auth_handler import AuthHandler

router = APIRouter(tags=["Authentication"])

# Every method reaches the handler so it can answer preflight and 405 itself
HANDLED_METHODS = ["GET", "HEAD", "POST", "PUT", "PATCH", "DELETE", "OPTIONS", "TRACE"]


@router.api_route("/authenticate", methods=HANDLED_METHODS)
async def authenticate(
    request: Request,
    auth_handler: AuthHandler = Depends(get_auth_handler)
) -> Response:
    """
    Check the master password, or return the surprise audio URL.

    Body: {"password": "..."} or {"getAudio": true}
    """
    gateway_request = await HttpMapper.from_fastapi_request(request)
    gateway_response = await run_in_threadpool(auth_handler.handle, gateway_request)
    return HttpMapper.to_fastapi_response(gateway_response)
