"""
Authentication module.

Handles registration, password + one-time-code login, session tokens,
Google login and admin user management.

Public API:
- IAuthService: Interface for auth operations
- IUserRepository, INotifier, IIdentityProvider: Collaborator interfaces
- UserRecord: Stored user
- PublicUser / SessionUser: Client-safe user views
- Auth exceptions: InvalidCredentialsError, InvalidOTPError, etc.
"""

from .interfaces import IAuthService, IUserRepository, INotifier, IIdentityProvider
from .models import (
    ADMIN_ROLE,
    PENDING_ROLE,
    UserStatus,
    UserRecord,
    PublicUser,
    SessionUser,
    LoginChallenge,
    FederatedIdentity,
)
from .exceptions import (
    InvalidInputError,
    DuplicateUserError,
    InvalidCredentialsError,
    PendingApprovalError,
    InvalidUserError,
    InvalidOTPError,
    OTPExpiredError,
    InvalidTokenError,
    AdminRequiredError,
    UserNotFoundError,
    ConfigurationMissingError,
    UpstreamAuthError,
)

__all__ = [
    # Interfaces
    "IAuthService",
    "IUserRepository",
    "INotifier",
    "IIdentityProvider",
    # Models
    "ADMIN_ROLE",
    "PENDING_ROLE",
    "UserStatus",
    "UserRecord",
    "PublicUser",
    "SessionUser",
    "LoginChallenge",
    "FederatedIdentity",
    # Exceptions
    "InvalidInputError",
    "DuplicateUserError",
    "InvalidCredentialsError",
    "PendingApprovalError",
    "InvalidUserError",
    "InvalidOTPError",
    "OTPExpiredError",
    "InvalidTokenError",
    "AdminRequiredError",
    "UserNotFoundError",
    "ConfigurationMissingError",
    "UpstreamAuthError",
]
