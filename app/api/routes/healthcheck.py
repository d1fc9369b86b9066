"""
Health check routes for Surprise Gateway.
Provides application health status.
"""
from datetime import datetime, timezone

from fastapi import APIRouter, Depends

from app.api.dependencies import get_reaction_repository
from app.config.settings import get_settings
from app.core.ports.reaction_repository import ReactionRepositoryPort


router = APIRouter()


@router.get("/ping", tags=["Health"])
async def ping():
    """
    Basic health check endpoint.

    Returns:
        dict: Simple pong response
    """
    return {"message": "pong"}


@router.get("/health", tags=["Health"])
async def health_check(
    reaction_repository: ReactionRepositoryPort = Depends(get_reaction_repository)
):
    """
    Application health including configuration state and buffer usage.

    Reports counts and flags only; no secrets or reaction content.
    """
    settings = get_settings()
    return {
        "status": "healthy" if settings.has_master_password else "degraded",
        "timestamp": datetime.now(timezone.utc).isoformat(),
        "environment": settings.environment,
        "services": {
            "authentication": {
                "master_password_configured": settings.has_master_password
            },
            "reactions": {
                "buffered": reaction_repository.count(),
                "capacity": settings.reaction_buffer_capacity
            }
        }
    }
