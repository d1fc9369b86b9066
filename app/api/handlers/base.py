"""
Shared helpers for the request handlers.
"""
from typing import Callable, Optional

from pydantic import ValidationError as SettingsValidationError

from app.config.settings import Settings, get_settings


class BaseHandler:
    """Common settings access for handlers."""

    def __init__(self, settings_provider: Callable[[], Settings] = get_settings):
        self.settings_provider = settings_provider

    def error_details(self, error: Exception, fallback: Optional[str] = None) -> Optional[str]:
        """
        Exception message in development configuration, otherwise `fallback`.

        Unreadable settings count as production.
        """
        try:
            is_development = self.settings_provider().is_development
        except SettingsValidationError:
            is_development = False
        return str(error) if is_development else fallback
