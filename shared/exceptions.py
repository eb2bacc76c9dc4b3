"""
Base exception classes for the Protus backend.

Each module should define its own exceptions that inherit from these bases.
The API layer maps every ProtusError to an HTTP response using the
class-level ``status_code`` and ``to_dict()``.
"""

from typing import Optional, Any


class ProtusError(Exception):
    """
    Base exception for all Protus errors.

    All custom exceptions should inherit from this class.
    """

    status_code: int = 500

    def __init__(
        self,
        message: str,
        code: Optional[str] = None,
        details: Optional[dict[str, Any]] = None,
    ):
        super().__init__(message)
        self.message = message
        self.code = code or self.__class__.__name__
        self.details = details or {}

    def to_dict(self) -> dict[str, Any]:
        """Convert exception to a dictionary for API responses."""
        return {
            "error": self.code,
            "message": self.message,
            "details": self.details,
        }


class ValidationError(ProtusError):
    """Input validation failed."""

    status_code = 400


class AuthenticationError(ProtusError):
    """Authentication failed (invalid or missing credentials)."""

    status_code = 401


class AuthorizationError(ProtusError):
    """Authorization failed (insufficient permissions)."""

    status_code = 403


class NotFoundError(ProtusError):
    """Resource not found."""

    status_code = 404


class ConfigurationError(ProtusError):
    """Required server configuration is missing."""

    status_code = 500


class ExternalServiceError(ProtusError):
    """Error communicating with an external service."""

    status_code = 502

    def __init__(
        self,
        message: str,
        service: str,
        code: Optional[str] = None,
        details: Optional[dict[str, Any]] = None,
    ):
        super().__init__(message, code, details)
        self.service = service
        self.details["service"] = service


class InvalidInputError(ValidationError):
    """Raised when required request fields are missing."""

    def __init__(self, fields: list[str]):
        super().__init__(
            f"{_join(fields)} {'is' if len(fields) == 1 else 'are'} required",
            code="INVALID_INPUT",
            details={"fields": fields},
        )


def require_fields(**fields: Any) -> None:
    """Raise InvalidInputError naming every empty field, in argument order."""
    missing = [name for name, value in fields.items() if not value]
    if missing:
        raise InvalidInputError(missing)


def _join(fields: list[str]) -> str:
    if len(fields) <= 2:
        return " and ".join(fields)
    return ", ".join(fields[:-1]) + f", and {fields[-1]}"
