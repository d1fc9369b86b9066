"""
Mappers package for Surprise Gateway.
Converts transport payloads to and from handler requests/responses.
"""

from .http_mapper import HttpMapper

__all__ = [
    "HttpMapper"
]
