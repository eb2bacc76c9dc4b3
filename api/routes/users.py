"""
User management endpoints.

Admin-only listing, approval, role changes and deletion of accounts.
"""

from fastapi import APIRouter, Depends

from modules.auth.interfaces import IAuthService
from modules.auth.models import OkResponse, PublicUser, RoleRequest

from ..dependencies import get_auth_service
from ..middleware.auth import RequireAdmin

router = APIRouter(dependencies=[RequireAdmin])


@router.get("", response_model=list[PublicUser])
async def list_users(
    service: IAuthService = Depends(get_auth_service),
) -> list[PublicUser]:
    """List every account, without credentials."""
    return await service.list_users()


@router.patch("/{user_id}/approve", response_model=OkResponse)
async def approve_user(
    user_id: str,
    request: RoleRequest,
    service: IAuthService = Depends(get_auth_service),
) -> OkResponse:
    """Activate a pending account and assign its role."""
    return await service.approve_user(user_id, request.role)


@router.patch("/{user_id}/role", response_model=OkResponse)
async def update_user_role(
    user_id: str,
    request: RoleRequest,
    service: IAuthService = Depends(get_auth_service),
) -> OkResponse:
    return await service.update_user_role(user_id, request.role)


@router.delete("/{user_id}", response_model=OkResponse)
async def delete_user(
    user_id: str,
    service: IAuthService = Depends(get_auth_service),
) -> OkResponse:
    return await service.delete_user(user_id)
