"""
Authentication module data models.

UserRecord is the stored shape of a user (snake_case columns, sensitive
fields included). Everything returned to API clients goes through
PublicUser, an explicit whitelist of safe fields serialized in camelCase.
"""

import uuid
from datetime import datetime
from enum import Enum
from typing import Any, Optional
from pydantic import BaseModel, Field, field_validator

from shared.models import ApiModel, OkResponse, utcnow


ADMIN_ROLE = "Admin"
PENDING_ROLE = "Pending"


class UserStatus(str, Enum):
    """Account status. Only active accounts may authenticate."""

    ACTIVE = "active"
    PENDING = "pending"


class PublicUser(ApiModel):
    """
    Client-safe view of a user record.

    Never add password, OTP or session token fields here.
    """

    user_id: str = Field(..., description="User ID (UUID)")
    email: str = Field(..., description="Email address")
    name: str = Field(..., description="Display name")
    role: str = Field(..., description="Admin, Pending or a custom role")
    status: UserStatus = Field(..., description="Account status")
    google_id: Optional[str] = Field(None, description="Google account id")
    created_at: datetime = Field(..., description="Account creation time")
    last_login: Optional[datetime] = Field(None, description="Last completed login")


class SessionUser(PublicUser):
    """Public user view returned after a completed login."""

    token: str = Field(..., description="Session bearer token")


class UserRecord(BaseModel):
    """A user as persisted in the users table."""

    user_id: str = Field(default_factory=lambda: str(uuid.uuid4()))
    email: str
    name: str
    password: str = ""  # empty for Google-only accounts
    role: str = PENDING_ROLE
    status: UserStatus = UserStatus.PENDING
    google_id: Optional[str] = None
    created_at: datetime = Field(default_factory=utcnow)
    last_login: Optional[datetime] = None

    otp: Optional[str] = None
    otp_expiry: Optional[datetime] = None
    token: Optional[str] = None
    token_expiry: Optional[datetime] = None

    @property
    def is_active(self) -> bool:
        return self.status == UserStatus.ACTIVE

    def to_public(self) -> PublicUser:
        """Project the record onto its client-safe fields."""
        return PublicUser(
            user_id=self.user_id,
            email=self.email,
            name=self.name,
            role=self.role,
            status=self.status,
            google_id=self.google_id,
            created_at=self.created_at,
            last_login=self.last_login,
        )


class RegisterRequest(ApiModel):
    """Registration form. Fields are checked by the service, not by FastAPI."""

    email: Optional[str] = None
    password: Optional[str] = None
    name: Optional[str] = None


class LoginRequest(ApiModel):
    """Login step one: email and password."""

    email: Optional[str] = None
    password: Optional[str] = None


class VerifyOTPRequest(ApiModel):
    """Login step two: the user id returned by step one plus the emailed code."""

    user_id: Optional[str] = None
    otp: Optional[str] = None

    @field_validator("otp", mode="before")
    @classmethod
    def numeric_otp_as_string(cls, value: Any) -> Any:
        # Clients may send the code as a JSON number.
        if isinstance(value, int) and not isinstance(value, bool):
            return str(value)
        return value


class RoleRequest(ApiModel):
    """Body for approve/role-change admin actions."""

    role: Optional[str] = None


class LoginChallenge(ApiModel):
    """Response to a successful login step one."""

    requires_otp: bool = Field(default=True, alias="requiresOTP")
    user_id: str
    message: str = "OTP sent to your email"


class FederatedIdentity(BaseModel):
    """Identity asserted by an external provider after a code exchange."""

    subject: str = Field(..., description="Provider account id")
    email: str
    name: Optional[str] = None

    model_config = {"frozen": True}

    @property
    def display_name(self) -> str:
        """Provider name, falling back to the email local part."""
        return self.name or self.email.split("@")[0]
