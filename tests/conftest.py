"""
Shared test configuration and fixtures for Surprise Gateway tests.
"""
import pytest
from fastapi.testclient import TestClient

from app.adapters.repositories.memory_reaction_repository import MemoryReactionRepository
from app.api.dependencies import get_dependency_container
from app.api.handlers.auth_handler import AuthHandler
from app.api.handlers.reaction_handler import ReactionHandler
from app.config.settings import get_settings
from tests.utils.mock_helpers import MockHelpers


MASTER_PASSWORD = "open-sesame"

CONFIG_ENV_VARS = [
    "MASTER_PASSWORD", "AUDIO_URL", "SITE_URL", "URL", "ENVIRONMENT", "NODE_ENV",
    "LOG_LEVEL", "REACTION_BUFFER_CAPACITY", "REACTION_MAX_LENGTH"
]


# ENVIRONMENT & CONFIGURATION FIXTURES

@pytest.fixture(autouse=True)
def clean_environment(monkeypatch):
    """Start every test from an unconfigured environment."""
    for key in CONFIG_ENV_VARS:
        monkeypatch.delenv(key, raising=False)


@pytest.fixture(autouse=True)
def fresh_container():
    """Reset global singletons (and the global reaction buffer) around each test."""
    container = get_dependency_container()
    container.reset()
    yield container
    container.reset()


@pytest.fixture
def master_password(monkeypatch) -> str:
    monkeypatch.setenv("MASTER_PASSWORD", MASTER_PASSWORD)
    return MASTER_PASSWORD


@pytest.fixture
def development_env(monkeypatch):
    monkeypatch.setenv("ENVIRONMENT", "development")


# COMPONENT FIXTURES

@pytest.fixture
def reaction_repository() -> MemoryReactionRepository:
    return MemoryReactionRepository(capacity=500)


@pytest.fixture
def auth_handler() -> AuthHandler:
    return AuthHandler(settings_provider=get_settings)


@pytest.fixture
def reaction_handler(reaction_repository) -> ReactionHandler:
    return ReactionHandler(reaction_repository=reaction_repository, settings_provider=get_settings)


@pytest.fixture
def client():
    """FastAPI test client with lifespan events."""
    from app.main import app
    with TestClient(app) as test_client:
        yield test_client


# TEST DATA FIXTURES

@pytest.fixture
def make_request():
    return MockHelpers.create_request


@pytest.fixture
def make_event():
    return MockHelpers.create_event
