"""
Team roster API endpoints. Every endpoint requires a signed-in user.
"""

from fastapi import APIRouter, Depends

from api.dependencies import get_team_service
from api.middleware.auth import RequireAuth
from shared.models import OkResponse

from .interfaces import ITeamService
from .models import AddMemberRequest, TeamMember

router = APIRouter(dependencies=[RequireAuth])


@router.get("", response_model=list[TeamMember])
async def list_members(
    service: ITeamService = Depends(get_team_service),
) -> list[TeamMember]:
    return await service.list_members()


@router.post("", response_model=TeamMember, status_code=201)
async def add_member(
    request: AddMemberRequest,
    service: ITeamService = Depends(get_team_service),
) -> TeamMember:
    return await service.add_member(request)


@router.delete("/{member_id}", response_model=OkResponse)
async def remove_member(
    member_id: str,
    service: ITeamService = Depends(get_team_service),
) -> OkResponse:
    return await service.remove_member(member_id)
