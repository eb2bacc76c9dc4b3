"""
Authentication service implementation.

Covers the whole account lifecycle against the user store:
registration (with first-user admin bootstrap), password + one-time-code
login, session token validation and logout, Google login, and the admin
operations that approve, re-role and delete accounts.
"""

import logging
from datetime import datetime
from typing import Callable, Optional
from urllib.parse import urlencode

from shared.config import Settings
from shared.exceptions import require_fields

from .interfaces import IAuthService, IIdentityProvider, INotifier, IUserRepository
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
    utcnow,
)
from .exceptions import (
    ConfigurationMissingError,
    DuplicateUserError,
    InvalidCredentialsError,
    InvalidOTPError,
    InvalidTokenError,
    InvalidUserError,
    OTPExpiredError,
    PendingApprovalError,
    UpstreamAuthError,
)
from .security import (
    generate_otp,
    hash_password,
    is_expired,
    issue_session_token,
    otp_expiry,
    otp_matches,
    session_expiry,
    verify_password,
)

logger = logging.getLogger(__name__)

GOOGLE_AUTH_FAILED = "google_auth_failed"
PENDING_APPROVAL = "pending_approval"

class AuthService(IAuthService):
    """
    Implementation of the authentication service.

    Stateless apart from its collaborators: every call reads and writes
    the user store directly. The clock is injectable so expiry handling
    can be tested without sleeping.
    """

    def __init__(
        self,
        users: IUserRepository,
        notifier: INotifier,
        identity_provider: IIdentityProvider,
        settings: Settings,
        clock: Callable[[], datetime] = utcnow,
    ):
        self._users = users
        self._notifier = notifier
        self._identity = identity_provider
        self._settings = settings
        self._clock = clock

    # -------------------------------------------------------------------------
    # Registration and password login
    # -------------------------------------------------------------------------

    async def register(self, request: RegisterRequest) -> PublicUser:
        """
        Create an account.

        The first account in an empty store is created as an active Admin;
        every later one starts as Pending until an admin approves it.

        Raises:
            InvalidInputError: If email, password or name is missing
            DuplicateUserError: If the email is already registered
        """
        require_fields(email=request.email, password=request.password, name=request.name)

        user = UserRecord(
            email=request.email,
            name=request.name,
            password=hash_password(request.password),
            created_at=self._clock(),
        )
        stored = self._users.create(user, promote_first=True)

        logger.info(f"Registered user {stored.user_id} as {stored.role} ({stored.status.value})")
        return stored.to_public()

    async def login(self, request: LoginRequest) -> LoginChallenge:
        """
        Check email and password, then send a one-time code.

        Raises:
            InvalidInputError: If email or password is missing
            InvalidCredentialsError: For an unknown email or a wrong password
            PendingApprovalError: If the account is not active
        """
        require_fields(email=request.email, password=request.password)

        user = self._users.get_by_email(request.email)
        if user is None or not verify_password(request.password, user.password):
            raise InvalidCredentialsError()

        if not user.is_active:
            raise PendingApprovalError()

        code = generate_otp()
        expiry = otp_expiry(self._clock(), self._settings.otp_ttl_minutes)
        self._users.update(user.user_id, {"otp": code, "otp_expiry": expiry})
        self._send_otp(user, code)

        return LoginChallenge(user_id=user.user_id)

    async def verify_otp(self, request: VerifyOTPRequest) -> SessionUser:
        """
        Check the one-time code and start a session.

        On success the code is consumed, so it cannot be replayed.

        Raises:
            InvalidInputError: If userId or otp is missing
            InvalidUserError: If no user has this id
            InvalidOTPError: If no code is pending or it doesn't match
            OTPExpiredError: If the code's validity window has passed
            PendingApprovalError: If the account was deactivated meanwhile
        """
        require_fields(userId=request.user_id, otp=request.otp)

        user = self._users.get_by_id(request.user_id)
        if user is None:
            raise InvalidUserError()

        if not user.otp or not otp_matches(request.otp, user.otp):
            raise InvalidOTPError()

        now = self._clock()
        if is_expired(user.otp_expiry, now):
            self._users.update(user.user_id, {"otp": None, "otp_expiry": None})
            raise OTPExpiredError()

        if not user.is_active:
            raise PendingApprovalError()

        token = self._start_session(user, now, clear_otp=True)
        public = user.model_copy(update={"last_login": now}).to_public()
        return SessionUser(**public.model_dump(), token=token)

    # -------------------------------------------------------------------------
    # Sessions
    # -------------------------------------------------------------------------

    async def validate_token(self, token: str) -> Optional[PublicUser]:
        """
        Resolve a bearer token to its user.

        An expired token is removed from its record before returning None.
        """
        if not token:
            return None

        user = self._users.get_by_token(token)
        if user is None:
            return None

        if is_expired(user.token_expiry, self._clock()):
            self._users.update(user.user_id, {"token": None, "token_expiry": None})
            logger.info(f"Revoked expired session for user {user.user_id}")
            return None

        return user.to_public()

    async def get_me(self, token: str) -> PublicUser:
        user = await self.validate_token(token)
        if user is None:
            raise InvalidTokenError()
        return user

    async def logout(self, token: str) -> OkResponse:
        """End the session for this token. Succeeds even if the token is invalid."""
        user = await self.validate_token(token)
        if user is not None:
            self._users.update(user.user_id, {"token": None, "token_expiry": None})
            logger.info(f"User {user.user_id} logged out")
        return OkResponse()

    # -------------------------------------------------------------------------
    # Google login
    # -------------------------------------------------------------------------

    def google_auth_url(self) -> str:
        if not self._settings.google_client_id:
            raise ConfigurationMissingError(
                "Google OAuth not configured. Set GOOGLE_CLIENT_ID."
            )
        return self._identity.authorization_url()

    async def google_callback(self, code: str) -> str:
        """
        Complete a Google login and return where to send the browser.

        Google sign-in skips the one-time code. Unknown emails get a new
        account (an active Admin if the store is empty, Pending otherwise).

        Returns:
            Front-end URL carrying either ?token=... or ?error=...

        Raises:
            ConfigurationMissingError: If Google client credentials are unset
        """
        if not self._settings.google_configured:
            raise ConfigurationMissingError()

        if not code:
            return self._frontend_redirect(error=GOOGLE_AUTH_FAILED)

        try:
            identity = await self._identity.exchange_code(code)
        except UpstreamAuthError as e:
            logger.warning(f"Google login failed: {e.message} ({e.details.get('original_error')})")
            return self._frontend_redirect(error=GOOGLE_AUTH_FAILED)

        try:
            return self._complete_google_login(identity)
        except Exception:
            logger.exception(f"Google login failed for {identity.email}")
            return self._frontend_redirect(error=GOOGLE_AUTH_FAILED)

    def _complete_google_login(self, identity: FederatedIdentity) -> str:
        user = self._users.get_by_email(identity.email)
        if user is None:
            try:
                user = self._users.create(
                    UserRecord(
                        email=identity.email,
                        name=identity.display_name,
                        password="",
                        google_id=identity.subject,
                        created_at=self._clock(),
                    ),
                    promote_first=True,
                )
                logger.info(f"Created Google user {user.user_id} as {user.role}")
            except DuplicateUserError:
                # Registered concurrently; continue with the stored account.
                user = self._users.get_by_email(identity.email)
                if user is None:
                    raise

        if not user.is_active:
            return self._frontend_redirect(error=PENDING_APPROVAL)

        token = self._start_session(user, self._clock())
        return self._frontend_redirect(token=token)

    # -------------------------------------------------------------------------
    # Admin user management
    # -------------------------------------------------------------------------

    async def list_users(self) -> list[PublicUser]:
        return [user.to_public() for user in self._users.list_all()]

    async def approve_user(self, user_id: str, role: Optional[str]) -> OkResponse:
        """Activate a pending account with the given role."""
        require_fields(role=role)
        self._users.update(user_id, {"role": role, "status": UserStatus.ACTIVE})
        logger.info(f"Approved user {user_id} as {role}")
        return OkResponse()

    async def update_user_role(self, user_id: str, role: Optional[str]) -> OkResponse:
        require_fields(role=role)
        self._users.update(user_id, {"role": role})
        logger.info(f"Changed role of user {user_id} to {role}")
        return OkResponse()

    async def delete_user(self, user_id: str) -> OkResponse:
        self._users.delete(user_id)
        logger.info(f"Deleted user {user_id}")
        return OkResponse()

    # -------------------------------------------------------------------------
    # Helpers
    # -------------------------------------------------------------------------

    def _start_session(self, user: UserRecord, now: datetime, clear_otp: bool = False) -> str:
        token = issue_session_token()
        changes = {
            "token": token,
            "token_expiry": session_expiry(now, self._settings.session_ttl_days),
            "last_login": now,
        }
        if clear_otp:
            changes.update(otp=None, otp_expiry=None)
        self._users.update(user.user_id, changes)
        return token

    def _send_otp(self, user: UserRecord, code: str) -> None:
        # Delivery is fire-and-forget: the code is already stored.
        try:
            self._notifier.notify(user.email, f"Your Protus login code is {code}")
        except Exception:
            logger.exception(f"Failed to deliver OTP to user {user.user_id}")

    def _frontend_redirect(self, **params: str) -> str:
        return f"{self._settings.frontend_url}?{urlencode(params)}"
