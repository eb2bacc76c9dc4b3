"""
Team module interfaces.
"""

from typing import Protocol, runtime_checkable

from shared.models import OkResponse

from .models import AddMemberRequest, TeamMember


@runtime_checkable
class ITeamRepository(Protocol):
    def list_all(self) -> list[TeamMember]:
        ...

    def create(self, member: TeamMember) -> TeamMember:
        ...

    def delete(self, member_id: str) -> None:
        """
        Raises:
            MemberNotFoundError: If no member has this id
        """
        ...


@runtime_checkable
class ITeamService(Protocol):
    async def list_members(self) -> list[TeamMember]:
        ...

    async def add_member(self, request: AddMemberRequest) -> TeamMember:
        ...

    async def remove_member(self, member_id: str) -> OkResponse:
        ...
