"""
Core domain models for Surprise Gateway.
"""
from .reaction import (
    ReactionRecord,
    generate_reaction_id,
    normalize_reaction_text,
    utc_now_iso,
    TRUNCATION_MARKER,
    UNKNOWN
)

__all__ = [
    "ReactionRecord",
    "generate_reaction_id",
    "normalize_reaction_text",
    "utc_now_iso",
    "TRUNCATION_MARKER",
    "UNKNOWN"
]
