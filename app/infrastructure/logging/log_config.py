"""
Logging setup for Surprise Gateway.

Every component logs through `get_logger(name)`, which places the logger under
the `surprise-gateway` namespace and installs one stdout handler on that
namespace the first time it is asked for. Production output is one JSON object
per line; development output is colored text. Structured fields travel as
`extra={"extra_fields": {...}}`.
"""
import json
import logging
import sys
import threading
from datetime import datetime, timezone
from typing import Any, Dict, Optional

from app.config.settings import Settings, get_settings


LOGGER_NAMESPACE = "surprise-gateway"
QUIET_LOGGERS = ("uvicorn.access", "httpx")


def _extra_fields(record: logging.LogRecord) -> Dict[str, Any]:
    return getattr(record, 'extra_fields', None) or {}


class JSONFormatter(logging.Formatter):
    """One JSON document per record, extra fields merged at the top level."""

    def __init__(self, environment: str = "production", service: str = LOGGER_NAMESPACE):
        super().__init__()
        self.environment = environment
        self.service = service

    def format(self, record: logging.LogRecord) -> str:
        entry = {
            "timestamp": datetime.fromtimestamp(record.created, timezone.utc).isoformat(),
            "level": record.levelname,
            "logger": record.name,
            "message": record.getMessage(),
            "location": f"{record.module}.{record.funcName}:{record.lineno}",
            "service": self.service,
            "environment": self.environment,
            **_extra_fields(record)
        }
        if record.exc_info:
            entry["exception"] = self.formatException(record.exc_info)

        return json.dumps(entry, ensure_ascii=False, default=str)


class DevelopmentFormatter(logging.Formatter):
    """Colored single-line output with `key=value` extras appended."""

    LEVEL_COLORS = {
        'DEBUG': '\033[36m',
        'INFO': '\033[32m',
        'WARNING': '\033[33m',
        'ERROR': '\033[31m',
        'CRITICAL': '\033[35m',
    }
    RESET = '\033[0m'

    def __init__(self):
        super().__init__("%(asctime)s - %(name)s - %(levelname)s - %(message)s")

    def format(self, record: logging.LogRecord) -> str:
        color = self.LEVEL_COLORS.get(record.levelname)
        original_level = record.levelname
        if color:
            record.levelname = f"{color}{original_level}{self.RESET}"
        try:
            line = super().format(record)
        finally:
            record.levelname = original_level

        extras = _extra_fields(record)
        if extras:
            line += " | " + " | ".join(f"{key}={value}" for key, value in extras.items())
        return line


class LoggingManager:
    """Installs the namespace handler once and hands out namespaced loggers."""

    def __init__(self, namespace: str = LOGGER_NAMESPACE):
        self.namespace = namespace
        self._handler: Optional[logging.Handler] = None
        self._lock = threading.Lock()

    @staticmethod
    def build_formatter(settings: Settings) -> logging.Formatter:
        if settings.is_development:
            return DevelopmentFormatter()
        return JSONFormatter(settings.environment, service=LOGGER_NAMESPACE)

    def configure(self, settings: Optional[Settings] = None) -> None:
        """
        Attach the stdout handler to the namespace logger. Later calls are no-ops.

        Records still propagate, so handlers added to the root logger
        (uvicorn, pytest's caplog) see them too.
        """
        if self._handler is not None:
            return

        with self._lock:
            if self._handler is not None:
                return

            settings = settings or get_settings()
            level = logging.getLevelName(settings.log_level.upper())
            if not isinstance(level, int):
                level = logging.INFO

            handler = logging.StreamHandler(sys.stdout)
            handler.setLevel(level)
            handler.setFormatter(self.build_formatter(settings))

            namespace_logger = logging.getLogger(self.namespace)
            namespace_logger.setLevel(level)
            namespace_logger.addHandler(handler)

            for name in QUIET_LOGGERS:
                quiet = logging.getLogger(name)
                if quiet.level < logging.WARNING:
                    quiet.setLevel(logging.WARNING)

            self._handler = handler

        namespace_logger.debug("Logging configured", extra={
            'extra_fields': {
                "environment": settings.environment,
                "log_level": logging.getLevelName(level),
                "formatter": type(handler.formatter).__name__
            }
        })

    def get_logger(self, name: str) -> logging.Logger:
        self.configure()
        if name != self.namespace and not name.startswith(f"{self.namespace}."):
            name = f"{self.namespace}.{name}"
        return logging.getLogger(name)


logging_manager = LoggingManager()


def get_logger(name: str) -> logging.Logger:
    """
    Get a logger under the surprise-gateway namespace.

    Example:
        get_logger("AuthHandler").name == "surprise-gateway.AuthHandler"
    """
    return logging_manager.get_logger(name)
