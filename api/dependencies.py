"""
Dependency injection setup for FastAPI.

This module provides the "container" that wires together each module's
implementations. Routes depend on service interfaces; the container
decides which stores (DATA_STORE), notifier and identity provider back
them.

Tests replace services with app.dependency_overrides or reset_container().
"""

from typing import TYPE_CHECKING

from shared.config import get_settings

# Type checking imports for interfaces (avoids circular imports)
if TYPE_CHECKING:
    from modules.auth.interfaces import (
        IAuthService,
        IIdentityProvider,
        INotifier,
        IUserRepository,
    )
    from modules.discussions.interfaces import IDiscussionService, IMessageRepository
    from modules.projects.interfaces import (
        IProjectRepository,
        IProjectService,
        ITaskRepository,
    )
    from modules.team.interfaces import ITeamRepository, ITeamService


def _use_memory_store() -> bool:
    return get_settings().data_store == "memory"


class ServiceContainer:
    """
    Container for all service instances.

    Services are created lazily on first access and cached as singletons
    within the container. Use reset() to clear them for testing.
    """

    def __init__(self) -> None:
        self._user_repository: "IUserRepository | None" = None
        self._project_repository: "IProjectRepository | None" = None
        self._task_repository: "ITaskRepository | None" = None
        self._team_repository: "ITeamRepository | None" = None
        self._message_repository: "IMessageRepository | None" = None
        self._notifier: "INotifier | None" = None
        self._identity_provider: "IIdentityProvider | None" = None
        self._auth_service: "IAuthService | None" = None
        self._project_service: "IProjectService | None" = None
        self._team_service: "ITeamService | None" = None
        self._discussion_service: "IDiscussionService | None" = None

    # -------------------------------------------------------------------------
    # Repositories
    # -------------------------------------------------------------------------

    @property
    def users(self) -> "IUserRepository":
        """Get the user repository selected by DATA_STORE."""
        if self._user_repository is None:
            if _use_memory_store():
                from modules.auth.repository import InMemoryUserRepository
                self._user_repository = InMemoryUserRepository()
            else:
                from modules.auth.repository import SupabaseUserRepository
                from shared.database import get_supabase_client
                self._user_repository = SupabaseUserRepository(get_supabase_client())
        return self._user_repository

    @property
    def projects(self) -> "IProjectRepository":
        if self._project_repository is None:
            if _use_memory_store():
                from modules.projects.repository import InMemoryProjectRepository
                self._project_repository = InMemoryProjectRepository()
            else:
                from modules.projects.repository import SupabaseProjectRepository
                from shared.database import get_supabase_client
                self._project_repository = SupabaseProjectRepository(get_supabase_client())
        return self._project_repository

    @property
    def tasks(self) -> "ITaskRepository":
        if self._task_repository is None:
            if _use_memory_store():
                from modules.projects.repository import InMemoryTaskRepository
                self._task_repository = InMemoryTaskRepository()
            else:
                from modules.projects.repository import SupabaseTaskRepository
                from shared.database import get_supabase_client
                self._task_repository = SupabaseTaskRepository(get_supabase_client())
        return self._task_repository

    @property
    def team(self) -> "ITeamRepository":
        if self._team_repository is None:
            if _use_memory_store():
                from modules.team.repository import InMemoryTeamRepository
                self._team_repository = InMemoryTeamRepository()
            else:
                from modules.team.repository import SupabaseTeamRepository
                from shared.database import get_supabase_client
                self._team_repository = SupabaseTeamRepository(get_supabase_client())
        return self._team_repository

    @property
    def messages(self) -> "IMessageRepository":
        if self._message_repository is None:
            if _use_memory_store():
                from modules.discussions.repository import InMemoryMessageRepository
                self._message_repository = InMemoryMessageRepository()
            else:
                from modules.discussions.repository import SupabaseMessageRepository
                from shared.database import get_supabase_client
                self._message_repository = SupabaseMessageRepository(get_supabase_client())
        return self._message_repository

    # -------------------------------------------------------------------------
    # Adapters
    # -------------------------------------------------------------------------

    @property
    def notifier(self) -> "INotifier":
        """Get the notifier used for OTP and project-completion messages."""
        if self._notifier is None:
            from modules.auth.notifier import LogNotifier
            self._notifier = LogNotifier()
        return self._notifier

    @property
    def identity_provider(self) -> "IIdentityProvider":
        """Get the Google identity provider instance."""
        if self._identity_provider is None:
            from modules.auth.oauth import GoogleIdentityProvider
            self._identity_provider = GoogleIdentityProvider.from_settings(get_settings())
        return self._identity_provider

    # -------------------------------------------------------------------------
    # Services
    # -------------------------------------------------------------------------

    @property
    def auth(self) -> "IAuthService":
        """Get the auth service instance."""
        if self._auth_service is None:
            from modules.auth.service import AuthService
            self._auth_service = AuthService(
                users=self.users,
                notifier=self.notifier,
                identity_provider=self.identity_provider,
                settings=get_settings(),
            )
        return self._auth_service

    @property
    def project_service(self) -> "IProjectService":
        """Get the project service (depends on the auth module's user store and notifier)."""
        if self._project_service is None:
            from modules.projects.service import ProjectService
            self._project_service = ProjectService(
                projects=self.projects,
                tasks=self.tasks,
                users=self.users,
                notifier=self.notifier,
            )
        return self._project_service

    @property
    def team_service(self) -> "ITeamService":
        if self._team_service is None:
            from modules.team.service import TeamService
            self._team_service = TeamService(members=self.team)
        return self._team_service

    @property
    def discussion_service(self) -> "IDiscussionService":
        if self._discussion_service is None:
            from modules.discussions.service import DiscussionService
            self._discussion_service = DiscussionService(messages=self.messages)
        return self._discussion_service

    def reset(self) -> None:
        """
        Reset all cached services.

        This is primarily for testing - allows tests to get fresh
        service instances with different mock dependencies.
        """
        self._user_repository = None
        self._project_repository = None
        self._task_repository = None
        self._team_repository = None
        self._message_repository = None
        self._notifier = None
        self._identity_provider = None
        self._auth_service = None
        self._project_service = None
        self._team_service = None
        self._discussion_service = None


# Module-level container singleton
_container: ServiceContainer | None = None


def get_container() -> ServiceContainer:
    """Get the singleton service container."""
    global _container
    if _container is None:
        _container = ServiceContainer()
    return _container


def reset_container() -> None:
    """
    Reset the service container.

    The next call to get_container() creates a fresh container with new
    service instances.
    """
    global _container
    _container = None


# FastAPI dependency functions
# These are the functions that should be used in route Depends() calls


def get_auth_service() -> "IAuthService":
    """FastAPI dependency for auth service."""
    return get_container().auth


def get_project_service() -> "IProjectService":
    """FastAPI dependency for project service."""
    return get_container().project_service


def get_team_service() -> "ITeamService":
    """FastAPI dependency for team service."""
    return get_container().team_service


def get_discussion_service() -> "IDiscussionService":
    """FastAPI dependency for discussion service."""
    return get_container().discussion_service
