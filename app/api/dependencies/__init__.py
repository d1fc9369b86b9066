"""
Dependency injection configuration for Surprise Gateway.
Central wiring shared by the FastAPI routes and the serverless entrypoints.
"""
import threading
from functools import lru_cache

# Domain ports
from app.core.ports.reaction_repository import ReactionRepositoryPort

# Domain use cases
from app.core.usecases.authenticate import AuthenticateUseCase
from app.core.usecases.save_reaction import SaveReactionUseCase

# Handlers
from app.api.handlers.auth_handler import AuthHandler
from app.api.handlers.reaction_handler import ReactionHandler

# Infrastructure adapters
from app.adapters.repositories.memory_reaction_repository import MemoryReactionRepository
from app.config.settings import get_settings


class DependencyContainer:
    """
    Dependency injection container.

    The reaction repository is the only stateful dependency; everything
    else is rebuilt cheaply when an override is applied. Singletons are
    created under a re-entrant lock because FastAPI resolves sync
    dependencies on worker threads, and concurrent first requests must
    share one buffer.
    """

    def __init__(self):
        """Initialize dependency container."""
        self._lock = threading.RLock()
        self._reaction_repository = None
        self._authenticate_use_case = None
        self._save_reaction_use_case = None
        self._auth_handler = None
        self._reaction_handler = None

    # INFRASTRUCTURE LAYER
    @property
    def reaction_repository(self) -> ReactionRepositoryPort:
        """Get reaction buffer (singleton), sized from settings at first use."""
        repository = self._reaction_repository
        if repository is None:
            with self._lock:
                if self._reaction_repository is None:
                    self._reaction_repository = MemoryReactionRepository(
                        capacity=get_settings().reaction_buffer_capacity
                    )
                repository = self._reaction_repository
        return repository

    # APPLICATION LAYER (Use cases)
    @property
    def authenticate_use_case(self) -> AuthenticateUseCase:
        use_case = self._authenticate_use_case
        if use_case is None:
            with self._lock:
                if self._authenticate_use_case is None:
                    self._authenticate_use_case = AuthenticateUseCase(get_settings)
                use_case = self._authenticate_use_case
        return use_case

    @property
    def save_reaction_use_case(self) -> SaveReactionUseCase:
        use_case = self._save_reaction_use_case
        if use_case is None:
            with self._lock:
                if self._save_reaction_use_case is None:
                    self._save_reaction_use_case = SaveReactionUseCase(
                        reaction_repository=self.reaction_repository,
                        settings_provider=get_settings
                    )
                use_case = self._save_reaction_use_case
        return use_case

    # PRESENTATION LAYER (Handlers)
    @property
    def auth_handler(self) -> AuthHandler:
        handler = self._auth_handler
        if handler is None:
            with self._lock:
                if self._auth_handler is None:
                    self._auth_handler = AuthHandler(
                        use_case=self.authenticate_use_case,
                        settings_provider=get_settings
                    )
                handler = self._auth_handler
        return handler

    @property
    def reaction_handler(self) -> ReactionHandler:
        handler = self._reaction_handler
        if handler is None:
            with self._lock:
                if self._reaction_handler is None:
                    self._reaction_handler = ReactionHandler(
                        reaction_repository=self.reaction_repository,
                        use_case=self.save_reaction_use_case,
                        settings_provider=get_settings
                    )
                handler = self._reaction_handler
        return handler

    # TESTING SUPPORT
    def override_reaction_repository(self, repository: ReactionRepositoryPort) -> None:
        """Override reaction repository (for testing)."""
        with self._lock:
            self._reaction_repository = repository
            # Reset dependent services
            self._save_reaction_use_case = None
            self._reaction_handler = None

    def reset(self) -> None:
        """Drop every singleton, including buffered reactions."""
        with self._lock:
            self._reaction_repository = None
            self._authenticate_use_case = None
            self._save_reaction_use_case = None
            self._auth_handler = None
            self._reaction_handler = None


# GLOBAL CONTAINER INSTANCE
@lru_cache()
def get_dependency_container() -> DependencyContainer:
    """Get global dependency container (singleton)."""
    return DependencyContainer()


# FASTAPI DEPENDENCY FUNCTIONS
def get_reaction_repository() -> ReactionRepositoryPort:
    """FastAPI dependency for the reaction buffer."""
    return get_dependency_container().reaction_repository


def get_auth_handler() -> AuthHandler:
    """FastAPI dependency for the authentication handler."""
    return get_dependency_container().auth_handler


def get_reaction_handler() -> ReactionHandler:
    """FastAPI dependency for the reaction handler."""
    return get_dependency_container().reaction_handler


def configure_dependencies(**overrides) -> DependencyContainer:
    """
    Apply overrides to the global container.

    Args:
        **overrides: e.g. reaction_repository=MemoryReactionRepository(capacity=3)

    Returns:
        The global dependency container
    """
    container = get_dependency_container()
    for dependency_name, implementation in overrides.items():
        override = getattr(container, f"override_{dependency_name}", None)
        if override is None:
            raise ValueError(f"Unknown dependency override: {dependency_name}")
        override(implementation)
    return container


# CONFIGURATION VALIDATION
def validate_dependencies() -> None:
    """
    Validate that all dependencies can be created successfully.
    Call this at application startup.

    Raises:
        RuntimeError: If any dependency fails to build
    """
    try:
        container = get_dependency_container()
        container.auth_handler
        container.reaction_handler
    except Exception as e:
        raise RuntimeError(f"Dependency validation failed: {str(e)}") from e
