"""
Authentication module exceptions.

These exceptions are raised by the auth module and are converted into
HTTP responses by the API error handlers using each base class's
status code.
"""

from typing import Optional

from shared.exceptions import (
    AuthenticationError,
    AuthorizationError,
    ConfigurationError,
    ExternalServiceError,
    InvalidInputError,
    NotFoundError,
    ValidationError,
)


class DuplicateUserError(ValidationError):
    """Raised when registering an email that already has an account."""

    def __init__(self, email: str):
        super().__init__(
            "User already exists",
            code="USER_EXISTS",
            details={"email": email},
        )


class InvalidCredentialsError(AuthenticationError):
    """
    Raised for an unknown email or a wrong password.

    Both cases share one message so callers cannot tell them apart.
    """

    def __init__(self):
        super().__init__("Invalid credentials", code="INVALID_CREDENTIALS")


class PendingApprovalError(AuthorizationError):
    """Raised when a pending account tries to authenticate."""

    def __init__(self):
        super().__init__("Account pending approval", code="PENDING_APPROVAL")


class InvalidUserError(AuthenticationError):
    """Raised when OTP verification names an unknown user."""

    def __init__(self):
        super().__init__("Invalid user", code="INVALID_USER")


class InvalidOTPError(AuthenticationError):
    """Raised when no code is pending or the code does not match."""

    def __init__(self):
        super().__init__("Invalid OTP", code="INVALID_OTP")


class OTPExpiredError(AuthenticationError):
    """Raised when the pending code is past its expiry."""

    def __init__(self):
        super().__init__("OTP expired", code="OTP_EXPIRED")


class InvalidTokenError(AuthenticationError):
    """Raised when a session token is missing, unknown or expired."""

    def __init__(self, message: str = "Invalid token"):
        super().__init__(message, code="INVALID_TOKEN")


class AdminRequiredError(AuthorizationError):
    """Raised when a non-admin calls an admin-only operation."""

    def __init__(self, role: str):
        super().__init__(
            "Admin access required",
            code="ADMIN_REQUIRED",
            details={"role": role},
        )


class UserNotFoundError(NotFoundError):
    """Raised when an admin action targets a user that doesn't exist."""

    def __init__(self, user_id: str):
        super().__init__(
            f"User not found: {user_id}",
            code="USER_NOT_FOUND",
            details={"user_id": user_id},
        )


class ConfigurationMissingError(ConfigurationError):
    """Raised when Google OAuth client credentials are not configured."""

    def __init__(self, message: str = "Google OAuth not configured"):
        super().__init__(message, code="CONFIGURATION_MISSING")


class UpstreamAuthError(ExternalServiceError):
    """Raised when the identity provider rejects or fails a request."""

    def __init__(self, message: str, original_error: Optional[str] = None):
        super().__init__(
            message,
            service="google",
            code="UPSTREAM_AUTH_FAILED",
            details={"original_error": original_error},
        )
