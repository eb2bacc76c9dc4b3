"""
Authentication API endpoints.

Registration, two-step login, session introspection/logout and the
Google OAuth redirect pair. Errors raised by the service are rendered by
the application's ProtusError handler.
"""

from fastapi import APIRouter, Depends, Query
from fastapi.responses import RedirectResponse

from api.dependencies import get_auth_service
from api.middleware.auth import get_bearer_token

from .interfaces import IAuthService
from .models import (
    LoginChallenge,
    LoginRequest,
    OkResponse,
    PublicUser,
    RegisterRequest,
    SessionUser,
    VerifyOTPRequest,
)

router = APIRouter()


@router.post("/register", response_model=PublicUser, status_code=201)
async def register(
    request: RegisterRequest,
    service: IAuthService = Depends(get_auth_service),
) -> PublicUser:
    """
    Create an account.

    The first account ever registered becomes an active Admin; later
    accounts stay pending until an admin approves them.
    """
    return await service.register(request)


@router.post("/login", response_model=LoginChallenge)
async def login(
    request: LoginRequest,
    service: IAuthService = Depends(get_auth_service),
) -> LoginChallenge:
    """Check credentials and email a one-time code (login step 1)."""
    return await service.login(request)


@router.post("/verify-otp", response_model=SessionUser)
async def verify_otp(
    request: VerifyOTPRequest,
    service: IAuthService = Depends(get_auth_service),
) -> SessionUser:
    """Exchange the one-time code for a session token (login step 2)."""
    return await service.verify_otp(request)


@router.get("/me", response_model=PublicUser)
async def get_me(
    token: str = Depends(get_bearer_token),
    service: IAuthService = Depends(get_auth_service),
) -> PublicUser:
    return await service.get_me(token)


@router.post("/logout", response_model=OkResponse)
async def logout(
    token: str = Depends(get_bearer_token),
    service: IAuthService = Depends(get_auth_service),
) -> OkResponse:
    """End the current session. Always succeeds."""
    return await service.logout(token)


@router.get("/google")
async def google_login(
    service: IAuthService = Depends(get_auth_service),
) -> RedirectResponse:
    """Send the browser to Google's consent screen."""
    return RedirectResponse(service.google_auth_url(), status_code=302)


@router.get("/google/callback")
async def google_callback(
    code: str = Query(default="", description="Authorization code from Google"),
    service: IAuthService = Depends(get_auth_service),
) -> RedirectResponse:
    """
    Finish a Google login.

    Redirects to the front end with ?token=... on success or
    ?error=google_auth_failed / ?error=pending_approval otherwise.
    """
    return RedirectResponse(await service.google_callback(code), status_code=302)
