"""
Reaction handler for Surprise Gateway.
Accepts free-text reactions and keeps the most recent ones in memory.
"""
from typing import Callable, Optional, Tuple

from app.api.handlers.base import BaseHandler
from app.api.http import GatewayRequest, GatewayResponse, ensure_post
from app.config.settings import Settings, get_settings
from app.core.exceptions import GatewayError
from app.core.models.reaction import ReactionRecord
from app.core.ports.reaction_repository import ReactionRepositoryPort
from app.core.usecases.save_reaction import SaveReactionUseCase
from app.infrastructure.logging.log_config import get_logger
from app.schemas.reaction import ReactionErrorResponse, ReactionSavedResponse


class ReactionHandler(BaseHandler):
    """
    Reaction endpoint plus maintenance access to the buffer.

    `snapshot()` and `reset()` are for operational tooling and are not
    routed over HTTP.
    """

    def __init__(
        self,
        reaction_repository: ReactionRepositoryPort,
        use_case: Optional[SaveReactionUseCase] = None,
        settings_provider: Callable[[], Settings] = get_settings
    ):
        super().__init__(settings_provider)
        self.reaction_repository = reaction_repository
        self.use_case = use_case or SaveReactionUseCase(reaction_repository, settings_provider)
        self.logger = get_logger(self.__class__.__name__)

    def handle(self, request: GatewayRequest) -> GatewayResponse:
        if request.is_preflight:
            return GatewayResponse.preflight()

        try:
            ensure_post(request)
            data = request.json()

            record = self.use_case.execute(
                reaction=data.get('reaction'),
                timestamp=data.get('timestamp'),
                ip=request.client_ip,
                user_agent=request.header('user-agent'),
                referer=request.header('referer')
            )
            return GatewayResponse.from_model(200, ReactionSavedResponse(
                id=record.id,
                savedAt=record.saved_at
            ))

        except GatewayError as e:
            return GatewayResponse.from_model(e.status_code, ReactionErrorResponse(error=e.message))

        except Exception as e:
            self.logger.error("Error saving reaction", exc_info=True, extra={
                "extra_fields": {
                    "error": str(e),
                    "error_type": type(e).__name__
                }
            })
            return GatewayResponse.from_model(500, ReactionErrorResponse(
                error="Failed to save reaction. Please try again.",
                details=self.error_details(e)
            ))

    def snapshot(self) -> Tuple[ReactionRecord, ...]:
        """Stored reactions, oldest first."""
        return self.reaction_repository.snapshot()

    def reset(self) -> int:
        """Clear the buffer and return how many reactions were dropped."""
        return self.reaction_repository.reset()
