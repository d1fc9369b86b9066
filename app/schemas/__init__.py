"""
Schemas module for Surprise Gateway API.
Contains Pydantic models for response bodies.
"""

from .auth import AuthSuccessResponse, AuthErrorResponse
from .reaction import ReactionSavedResponse, ReactionErrorResponse

__all__ = [
    "AuthSuccessResponse",
    "AuthErrorResponse",
    "ReactionSavedResponse",
    "ReactionErrorResponse"
]
