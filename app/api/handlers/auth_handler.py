"""
Authentication handler for Surprise Gateway.

Two modes on a single POST endpoint:
1. Audio mode (`getAudio` truthy): returns the absolute audio URL
2. Password mode: checks `password` against MASTER_PASSWORD
"""
from typing import Callable, Optional

from app.api.handlers.base import BaseHandler
from app.api.http import GatewayRequest, GatewayResponse, ensure_post
from app.config.settings import Settings, get_settings
from app.core.exceptions import GatewayError
from app.core.usecases.authenticate import AuthenticateUseCase
from app.infrastructure.logging.log_config import get_logger
from app.schemas.auth import AuthErrorResponse, AuthSuccessResponse


class AuthHandler(BaseHandler):
    """Password gate and audio URL endpoint."""

    def __init__(
        self,
        use_case: Optional[AuthenticateUseCase] = None,
        settings_provider: Callable[[], Settings] = get_settings
    ):
        super().__init__(settings_provider)
        self.use_case = use_case or AuthenticateUseCase(settings_provider)
        self.logger = get_logger(self.__class__.__name__)

    def handle(self, request: GatewayRequest) -> GatewayResponse:
        """
        Handle an authentication request.

        Args:
            request: Incoming request

        Returns:
            GatewayResponse: CORS-enabled JSON response
        """
        if request.is_preflight:
            return GatewayResponse.preflight()

        try:
            ensure_post(request)
            data = request.json()

            if data.get('getAudio'):
                audio_url = self.use_case.resolve_audio_url(
                    host=request.header('host'),
                    protocol=request.header('x-forwarded-proto')
                )
                return GatewayResponse.from_model(200, AuthSuccessResponse(
                    audioUrl=audio_url,
                    message="Audio URL retrieved successfully"
                ))

            self.use_case.verify_password(data.get('password'))
            return GatewayResponse.from_model(200, AuthSuccessResponse(
                message="Authentication successful! Preparing your surprise..."
            ))

        except GatewayError as e:
            return GatewayResponse.from_model(e.status_code, AuthErrorResponse(error=e.message))

        except Exception as e:
            self.logger.error("Authentication error", exc_info=True, extra={
                "extra_fields": {
                    "error": str(e),
                    "error_type": type(e).__name__
                }
            })
            return GatewayResponse.from_model(500, AuthErrorResponse(
                error="Authentication failed due to server error",
                details=self.error_details(e, fallback="Contact support")
            ))
