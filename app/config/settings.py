"""
Application settings for Surprise Gateway.
All configuration values sourced from environment variables (or env files) at call time.
"""
from pydantic import AliasChoices, Field
from pydantic_settings import BaseSettings, SettingsConfigDict
from typing import Optional


DEFAULT_AUDIO_URL = "/audio/surprise.mp3"
FALLBACK_SITE_URL = "https://your-site.netlify.app"


class Settings(BaseSettings):
    """
    Application settings with validation and type safety.
    All values configurable via environment variables.
    """

    # Environment
    environment: str = Field(
        default="production",
        validation_alias=AliasChoices("environment", "node_env")
    )

    # Authentication
    master_password: Optional[str] = None

    # Audio delivery
    audio_url: Optional[str] = None
    site_url: Optional[str] = Field(
        default=None,
        validation_alias=AliasChoices("site_url", "url")
    )

    # Reaction buffer
    reaction_buffer_capacity: int = Field(default=500, gt=0)
    reaction_max_length: int = Field(default=1000, gt=0)

    # Logging
    log_level: str = "INFO"
    service_name: str = "surprise-gateway"

    # Configuration
    model_config = SettingsConfigDict(
        env_file=[".env.local", ".env.development", ".env.production"],
        env_file_encoding="utf-8",
        case_sensitive=False,
        populate_by_name=True,
        extra="ignore"
    )

    @property
    def is_development(self) -> bool:
        """Check if running in development mode."""
        return self.environment.lower() in ("development", "dev", "local")

    @property
    def has_master_password(self) -> bool:
        """Empty values count as not configured."""
        return bool(self.master_password)

    @property
    def resolved_audio_url(self) -> str:
        return self.audio_url or DEFAULT_AUDIO_URL

    def get_site_base_url(self, host: Optional[str] = None, protocol: Optional[str] = None) -> str:
        """
        Resolve the public base URL of the site.

        Args:
            host: Request host header, used when no site URL is configured
            protocol: Forwarded protocol header (defaults to https)

        Returns:
            Base URL like 'https://example.com'
        """
        if self.site_url:
            return self.site_url
        if host:
            return f"{protocol or 'https'}://{host}"
        return FALLBACK_SITE_URL

    def get_full_audio_url(self, site_base_url: str) -> str:
        """
        Convert a site-relative audio path to an absolute URL.

        Args:
            site_base_url: Base URL like 'https://x.com'

        Returns:
            'https://x.com/audio/surprise.mp3' for relative paths, the configured
            value unchanged for absolute URLs
        """
        audio_url = self.resolved_audio_url
        if audio_url.startswith('/'):
            return f"{site_base_url}{audio_url}"
        return audio_url


def get_settings() -> Settings:
    """Read settings from the environment for the current call."""
    return Settings()
