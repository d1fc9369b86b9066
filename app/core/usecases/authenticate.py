"""
Authenticate use case for Surprise Gateway.
Static password check and audio URL resolution.
"""
from typing import Any, Callable, Optional

from app.config.settings import Settings, get_settings
from app.core.exceptions import AuthenticationError, ConfigurationError, ValidationError
from app.infrastructure.logging.log_config import get_logger


class AuthenticateUseCase:
    """
    Use case for the password gate in front of the surprise.

    Settings are read through `settings_provider` on every call so that
    configuration changes apply without a restart.
    """

    def __init__(self, settings_provider: Callable[[], Settings] = get_settings):
        self.settings_provider = settings_provider
        self.logger = get_logger(self.__class__.__name__)

    def verify_password(self, password: Any) -> None:
        """
        Compare the submitted password against the configured secret.

        Plain string equality, no hashing. A timing-safe comparison
        (hmac.compare_digest) would be a drop-in hardening.

        Args:
            password: Value of the `password` body field

        Raises:
            ValidationError: If no password was submitted
            ConfigurationError: If MASTER_PASSWORD is not configured
            AuthenticationError: If the password does not match
        """
        if not password:
            raise ValidationError("Password is required")

        settings = self.settings_provider()
        submitted = str(password)

        self.logger.info("Password check", extra={
            "extra_fields": {
                "has_master_password": settings.has_master_password,
                "input_length": len(submitted),
                "input_first_chars": submitted[:3] + "..."
            }
        })

        if not settings.has_master_password:
            self.logger.error("MASTER_PASSWORD environment variable is not set")
            raise ConfigurationError("Server configuration error. Please contact administrator.")

        if password == settings.master_password:
            self.logger.info("Password authentication SUCCESS")
            return

        self.logger.info("Password authentication FAILED", extra={
            "extra_fields": {"input_length": len(submitted)}
        })
        raise AuthenticationError("Oops! Try Again!!")

    def resolve_audio_url(self, host: Optional[str] = None, protocol: Optional[str] = None) -> str:
        """
        Resolve the absolute URL of the surprise audio.

        Args:
            host: Request host header
            protocol: Request forwarded-protocol header

        Returns:
            Absolute audio URL
        """
        settings = self.settings_provider()
        site_url = settings.get_site_base_url(host=host, protocol=protocol)
        final_audio_url = settings.get_full_audio_url(site_url)

        self.logger.info("Audio URL requested", extra={
            "extra_fields": {
                "audio_url": settings.resolved_audio_url,
                "final_audio_url": final_audio_url,
                "site_url": site_url
            }
        })
        return final_audio_url
