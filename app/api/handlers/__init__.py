"""
Request handlers for Surprise Gateway.
Each handler maps a GatewayRequest to a GatewayResponse and never raises.
"""
from .auth_handler import AuthHandler
from .reaction_handler import ReactionHandler

__all__ = ["AuthHandler", "ReactionHandler"]
