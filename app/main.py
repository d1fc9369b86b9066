"""
Surprise Gateway FastAPI Application.
Serves the authentication and reaction handlers for local runs and container deployments.
"""
from contextlib import asynccontextmanager
from fastapi import FastAPI, Request
from fastapi.exception_handlers import http_exception_handler
from starlette.exceptions import HTTPException as StarletteHTTPException

from app.adapters.mappers.http_mapper import HttpMapper
from app.api.http import GatewayResponse
from app.api.routes.auth import router as auth_router
from app.api.routes.reactions import router as reactions_router
from app.api.routes.healthcheck import router as healthcheck_router
from app.core.exceptions import MethodNotAllowedError
from app.schemas.auth import AuthErrorResponse

from app.api.dependencies import validate_dependencies
from app.infrastructure.logging.log_config import get_logger

logger = get_logger("main")


@asynccontextmanager
async def lifespan(app: FastAPI):
    """
    Application lifespan manager.
    """
    validate_dependencies()
    logger.info("Surprise Gateway started")

    yield


async def method_not_allowed_handler(request: Request, exc: StarletteHTTPException):
    """
    Answer methods the router itself rejects (custom verbs) with the
    handlers' 405 body and CORS headers.
    """
    if exc.status_code != 405:
        return await http_exception_handler(request, exc)

    logger.warning("Method rejected by router", extra={
        "extra_fields": {"method": request.method, "path": request.url.path}
    })
    response = GatewayResponse.from_model(
        405, AuthErrorResponse(error=MethodNotAllowedError().message)
    )
    return HttpMapper.to_fastapi_response(response)


def create_app() -> FastAPI:
    """
    Create and configure FastAPI application.

    CORS headers are written by the handlers themselves, so no CORS
    middleware is installed (it would answer preflight before the handler).
    """
    app = FastAPI(
        title="Surprise Gateway API",
        version="1.0.0",
        description="Password gate, surprise audio URL and visitor reactions",
        lifespan=lifespan
    )

    app.add_exception_handler(StarletteHTTPException, method_not_allowed_handler)

    # Route registration
    app.include_router(healthcheck_router, prefix="/api")
    app.include_router(auth_router, prefix="/api")
    app.include_router(reactions_router, prefix="/api")

    return app


app = create_app()
