"""
Team roster service.
"""

import logging
from datetime import datetime
from typing import Callable

from shared.exceptions import require_fields
from shared.models import OkResponse, utcnow

from .interfaces import ITeamRepository, ITeamService
from .models import DEFAULT_MEMBER_ROLE, AddMemberRequest, TeamMember

logger = logging.getLogger(__name__)


class TeamService(ITeamService):
    def __init__(
        self,
        members: ITeamRepository,
        clock: Callable[[], datetime] = utcnow,
    ) -> None:
        self._members = members
        self._clock = clock

    async def list_members(self) -> list[TeamMember]:
        return self._members.list_all()

    async def add_member(self, request: AddMemberRequest) -> TeamMember:
        """
        Add a member to the roster. Role defaults to Contributor.

        Raises:
            InvalidInputError: If name or email is missing
        """
        require_fields(name=request.name, email=request.email)
        member = self._members.create(
            TeamMember(
                name=request.name,
                email=request.email,
                role=request.role or DEFAULT_MEMBER_ROLE,
                created_at=self._clock(),
            )
        )
        logger.info(f"Added team member {member.member_id} as {member.role}")
        return member

    async def remove_member(self, member_id: str) -> OkResponse:
        self._members.delete(member_id)
        logger.info(f"Removed team member {member_id}")
        return OkResponse()
