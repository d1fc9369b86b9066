"""
Save reaction use case for Surprise Gateway.
Validates, normalizes and stores visitor reactions.
"""
import json
from typing import Any, Callable, Optional

from app.config.settings import Settings, get_settings
from app.core.exceptions import ValidationError
from app.core.models.reaction import ReactionRecord, normalize_reaction_text
from app.core.ports.reaction_repository import ReactionRepositoryPort
from app.infrastructure.logging.log_config import get_logger


def _client_timestamp(timestamp: Any) -> Optional[str]:
    """Client timestamp as stored text; non-string JSON values keep their JSON form."""
    if not timestamp:
        return None
    if isinstance(timestamp, str):
        return timestamp
    return json.dumps(timestamp, ensure_ascii=False)


class SaveReactionUseCase:
    """Use case for accepting a reaction into the bounded buffer."""

    def __init__(
        self,
        reaction_repository: ReactionRepositoryPort,
        settings_provider: Callable[[], Settings] = get_settings
    ):
        """
        Initialize save reaction use case.

        Args:
            reaction_repository: Buffer the records are appended to
            settings_provider: Source of the truncation limit
        """
        self.reaction_repository = reaction_repository
        self.settings_provider = settings_provider
        self.logger = get_logger(self.__class__.__name__)

    def execute(
        self,
        reaction: Any,
        timestamp: Any = None,
        ip: Optional[str] = None,
        user_agent: Optional[str] = None,
        referer: Optional[str] = None
    ) -> ReactionRecord:
        """
        Validate and store a reaction.

        Args:
            reaction: Raw `reaction` body field
            timestamp: Optional client timestamp
            ip: Caller address from forwarding headers
            user_agent: Caller user agent
            referer: Referring page

        Returns:
            ReactionRecord: The stored record

        Raises:
            ValidationError: If the reaction is missing, not text, or blank
        """
        if not reaction or not isinstance(reaction, str):
            raise ValidationError("Valid reaction text is required")

        if not reaction.strip():
            raise ValidationError("Reaction cannot be empty")

        max_length = self.settings_provider().reaction_max_length
        text = normalize_reaction_text(reaction, max_length=max_length)

        record = ReactionRecord.create(
            reaction=text,
            timestamp=_client_timestamp(timestamp),
            ip=ip,
            user_agent=user_agent,
            referer=referer
        )

        self.reaction_repository.append(record)

        self.logger.info("New reaction saved", extra={
            "extra_fields": {
                "id": record.id,
                "timestamp": record.timestamp,
                "reaction_length": len(record.reaction),
                "ip": record.ip,
                "preview": record.preview()
            }
        })
        return record
