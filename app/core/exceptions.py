"""
Domain exceptions for Surprise Gateway.
Each error carries the HTTP status code and the user-facing message it maps to.
"""
from typing import Optional


class GatewayError(Exception):
    """Base class for errors that map directly onto a response."""

    status_code: int = 500

    def __init__(self, message: str, status_code: Optional[int] = None):
        super().__init__(message)
        self.message = message
        if status_code is not None:
            self.status_code = status_code


class ClientError(GatewayError):
    """Request was rejected because of something the caller sent."""

    status_code = 400


class MethodNotAllowedError(ClientError):
    status_code = 405

    def __init__(self, message: str = "Method not allowed. Use POST."):
        super().__init__(message)


class ValidationError(ClientError):
    """Missing or invalid body field."""

    status_code = 400


class AuthenticationError(ClientError):
    """Submitted password did not match."""

    status_code = 401


class ConfigurationError(GatewayError):
    """A required setting is absent. Fatal for the request, never retried."""

    status_code = 500
