"""
Shared test fixtures and utilities.

This module provides common test infrastructure used across all test modules:
in-memory stores, a recording notifier, a controllable clock, services
wired to them and a TestClient routed to those services.
"""

import pytest
from datetime import datetime, timedelta, timezone
from unittest.mock import AsyncMock, MagicMock
from fastapi.testclient import TestClient

from api import app
from api.dependencies import (
    get_auth_service,
    get_discussion_service,
    get_project_service,
    get_team_service,
    reset_container,
)
from shared.config import Settings
from modules.auth.repository import InMemoryUserRepository
from modules.auth.service import AuthService
from modules.discussions.repository import InMemoryMessageRepository
from modules.discussions.service import DiscussionService
from modules.projects.repository import InMemoryProjectRepository, InMemoryTaskRepository
from modules.projects.service import ProjectService
from modules.team.repository import InMemoryTeamRepository
from modules.team.service import TeamService


TEST_FRONTEND_URL = "http://localhost:3000"
TEST_NOW = datetime(2026, 1, 15, 12, 0, 0, tzinfo=timezone.utc)


class RecordingNotifier:
    """INotifier that remembers every message it was asked to send."""

    def __init__(self) -> None:
        self.messages: list[tuple[str, str]] = []

    def notify(self, destination: str, message: str) -> None:
        self.messages.append((destination, message))

    def last_code(self) -> str:
        """The one-time code from the most recent message."""
        _, message = self.messages[-1]
        return message.rsplit(" ", 1)[-1]


class FakeClock:
    """Callable clock whose time only moves when told to."""

    def __init__(self, now: datetime) -> None:
        self.now = now

    def __call__(self) -> datetime:
        return self.now

    def advance(self, **kwargs) -> None:
        self.now += timedelta(**kwargs)


@pytest.fixture(autouse=True)
def reset_service_container():
    """Reset the service container before and after each test."""
    reset_container()
    yield
    reset_container()


@pytest.fixture
def settings() -> Settings:
    """Settings with Google configured and an in-memory store."""
    return Settings(
        data_store="memory",
        frontend_url=TEST_FRONTEND_URL,
        google_client_id="test-client-id",
        google_client_secret="test-client-secret",
        google_redirect_uri="http://localhost:4001/auth/google/callback",
        otp_ttl_minutes=5,
        session_ttl_days=30,
    )


@pytest.fixture
def users() -> InMemoryUserRepository:
    return InMemoryUserRepository()


@pytest.fixture
def notifier() -> RecordingNotifier:
    return RecordingNotifier()


@pytest.fixture
def clock() -> FakeClock:
    return FakeClock(TEST_NOW)


@pytest.fixture
def identity_provider() -> MagicMock:
    """Mock Google provider; tests set exchange_code's result or side effect."""
    provider = MagicMock()
    provider.authorization_url.return_value = (
        "https://accounts.google.com/o/oauth2/v2/auth?client_id=test-client-id"
    )
    provider.exchange_code = AsyncMock()
    return provider


@pytest.fixture
def auth_service(users, notifier, identity_provider, settings, clock) -> AuthService:
    return AuthService(
        users=users,
        notifier=notifier,
        identity_provider=identity_provider,
        settings=settings,
        clock=clock,
    )


@pytest.fixture
def projects() -> InMemoryProjectRepository:
    return InMemoryProjectRepository()


@pytest.fixture
def tasks() -> InMemoryTaskRepository:
    return InMemoryTaskRepository()


@pytest.fixture
def project_service(projects, tasks, users, notifier, clock) -> ProjectService:
    return ProjectService(
        projects=projects,
        tasks=tasks,
        users=users,
        notifier=notifier,
        clock=clock,
    )


@pytest.fixture
def team_service(clock) -> TeamService:
    return TeamService(members=InMemoryTeamRepository(), clock=clock)


@pytest.fixture
def discussion_service(clock) -> DiscussionService:
    return DiscussionService(messages=InMemoryMessageRepository(), clock=clock)


@pytest.fixture
def client(auth_service, project_service, team_service, discussion_service):
    """TestClient whose routes are served by the in-memory services above."""
    app.dependency_overrides[get_auth_service] = lambda: auth_service
    app.dependency_overrides[get_project_service] = lambda: project_service
    app.dependency_overrides[get_team_service] = lambda: team_service
    app.dependency_overrides[get_discussion_service] = lambda: discussion_service
    yield TestClient(app)
    app.dependency_overrides.clear()
