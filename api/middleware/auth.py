"""
Session token authentication dependencies.

Extracts the bearer token from the Authorization header and resolves it
through the auth service.
"""

from typing import Optional
from fastapi import Depends
from fastapi.security import HTTPBearer, HTTPAuthorizationCredentials

from modules.auth.exceptions import AdminRequiredError
from modules.auth.interfaces import IAuthService
from modules.auth.models import ADMIN_ROLE, PublicUser

from ..dependencies import get_auth_service

# Bearer token extractor
bearer_scheme = HTTPBearer(auto_error=False)


def get_bearer_token(
    credentials: Optional[HTTPAuthorizationCredentials] = Depends(bearer_scheme),
) -> str:
    """The raw bearer token, or an empty string when none was sent."""
    if credentials is None:
        return ""
    return credentials.credentials


async def get_current_user(
    token: str = Depends(get_bearer_token),
    service: IAuthService = Depends(get_auth_service),
) -> PublicUser:
    """
    Dependency that requires a valid session.

    Raises InvalidTokenError (401) for a missing, unknown or expired token.

    Usage:
        @router.get("/protected")
        async def protected_route(user: PublicUser = Depends(get_current_user)):
            return {"user_id": user.user_id}
    """
    return await service.get_me(token)


async def require_admin(
    user: PublicUser = Depends(get_current_user),
) -> PublicUser:
    """Dependency that requires a valid session belonging to an Admin."""
    if user.role != ADMIN_ROLE:
        raise AdminRequiredError(user.role)
    return user


# Type aliases for cleaner route definitions
RequireAuth = Depends(get_current_user)
RequireAdmin = Depends(require_admin)
