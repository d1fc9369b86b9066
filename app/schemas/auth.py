"""
Authentication schemas for Surprise Gateway API.
"""
from pydantic import BaseModel, Field
from typing import Optional


class AuthSuccessResponse(BaseModel):
    """
    Response schema for a successful password check or audio URL lookup.
    """
    success: bool = Field(default=True)
    message: str = Field(..., description="Human readable outcome")
    audioUrl: Optional[str] = Field(default=None, description="Absolute audio URL (audio mode only)")


class AuthErrorResponse(BaseModel):
    """
    Response schema for a rejected or failed authentication request.
    """
    success: bool = Field(default=False)
    error: str = Field(..., description="User-facing error message")
    details: Optional[str] = Field(default=None, description="Internal detail, development only")
