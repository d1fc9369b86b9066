"""
Reaction schemas for Surprise Gateway API.
The reaction text itself never appears in a response.
"""
from pydantic import BaseModel, Field
from typing import Optional


class ReactionSavedResponse(BaseModel):
    success: bool = Field(default=True)
    message: str = Field(default="Reaction saved successfully")
    id: str = Field(..., description="Generated reaction id")
    savedAt: str = Field(..., description="Server capture time (ISO-8601)")


class ReactionErrorResponse(BaseModel):
    success: bool = Field(default=False)
    error: str = Field(..., description="User-facing error message")
    details: Optional[str] = Field(default=None, description="Internal detail, development only")
