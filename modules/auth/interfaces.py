"""
Authentication module interfaces.

The API layer depends on IAuthService; the service depends on the
store, notifier and identity-provider protocols below. This keeps the
service testable with in-memory or mock collaborators.
"""

from typing import Any, Optional, Protocol, runtime_checkable

from .models import (
    FederatedIdentity,
    LoginChallenge,
    LoginRequest,
    OkResponse,
    PublicUser,
    RegisterRequest,
    SessionUser,
    UserRecord,
    UserStatus,
    VerifyOTPRequest,
)


@runtime_checkable
class IUserRepository(Protocol):
    """
    Store adapter over the users table.

    Lookups return None when nothing matches; "not found" is never an error
    at this level.
    """

    def list_all(self) -> list[UserRecord]:
        """Return every user record."""
        ...

    def get_by_id(self, user_id: str) -> Optional[UserRecord]:
        ...

    def get_by_email(self, email: str) -> Optional[UserRecord]:
        ...

    def get_by_token(self, token: str) -> Optional[UserRecord]:
        ...

    def list_by_role_status(self, role: str, status: UserStatus) -> list[UserRecord]:
        """Return users holding this role with this account status."""
        ...

    def create(self, user: UserRecord, promote_first: bool = False) -> UserRecord:
        """
        Insert a user if no record with the same email exists.

        The existence check and the insert form one atomic step. With
        promote_first, a user inserted into an empty store is stored as an
        active Admin instead of with its own role and status.

        Returns:
            The record as stored

        Raises:
            DuplicateUserError: If the email is already registered
        """
        ...

    def update(self, user_id: str, changes: dict[str, Any]) -> None:
        """
        Set attributes on a record. A value of None removes the attribute.

        Raises:
            UserNotFoundError: If no record has this id
        """
        ...

    def delete(self, user_id: str) -> None:
        """
        Raises:
            UserNotFoundError: If no record has this id
        """
        ...


@runtime_checkable
class INotifier(Protocol):
    """Delivers one-time codes to users."""

    def notify(self, destination: str, message: str) -> None:
        ...


@runtime_checkable
class IIdentityProvider(Protocol):
    """External OAuth2 / OpenID Connect identity provider."""

    def authorization_url(self) -> str:
        """URL the browser is sent to in order to start the login."""
        ...

    async def exchange_code(self, code: str) -> FederatedIdentity:
        """
        Exchange an authorization code for the caller's identity.

        Raises:
            UpstreamAuthError: If the token exchange or profile fetch fails
        """
        ...


@runtime_checkable
class IAuthService(Protocol):
    """
    Interface for authentication and user-management operations.

    Implementations raise ProtusError subclasses; the API layer turns them
    into HTTP responses.
    """

    async def register(self, request: RegisterRequest) -> PublicUser:
        """Create an account. The first account ever becomes an active Admin."""
        ...

    async def login(self, request: LoginRequest) -> LoginChallenge:
        """Check credentials and send a one-time code."""
        ...

    async def verify_otp(self, request: VerifyOTPRequest) -> SessionUser:
        """Check the one-time code and issue a session token."""
        ...

    async def validate_token(self, token: str) -> Optional[PublicUser]:
        """Resolve a bearer token to its user, or None."""
        ...

    async def get_me(self, token: str) -> PublicUser:
        ...

    async def logout(self, token: str) -> OkResponse:
        ...

    def google_auth_url(self) -> str:
        ...

    async def google_callback(self, code: str) -> str:
        """Complete a Google login and return the front-end redirect URL."""
        ...

    async def list_users(self) -> list[PublicUser]:
        ...

    async def approve_user(self, user_id: str, role: Optional[str]) -> OkResponse:
        ...

    async def update_user_role(self, user_id: str, role: Optional[str]) -> OkResponse:
        ...

    async def delete_user(self, user_id: str) -> OkResponse:
        ...
