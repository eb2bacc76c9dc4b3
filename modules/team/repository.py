"""
Team roster repositories.
"""

from supabase import Client

from shared.memory import InMemoryTable
from shared.repository import BaseRepository
from .exceptions import MemberNotFoundError
from .models import TeamMember

TEAM_TABLE = "team_members"


class SupabaseTeamRepository(BaseRepository[TeamMember]):
    def __init__(self, db: Client) -> None:
        super().__init__(db, TEAM_TABLE)

    def list_all(self) -> list[TeamMember]:
        result = self._db.table(self._table).select("*").order("created_at").execute()
        return [TeamMember.model_validate(row) for row in result.data]

    def create(self, member: TeamMember) -> TeamMember:
        result = self._db.table(self._table).insert(member.model_dump(mode="json")).execute()
        return TeamMember.model_validate(result.data[0])

    def delete(self, member_id: str) -> None:
        result = self._db.table(self._table).delete().eq("member_id", member_id).execute()
        if not result.data:
            raise MemberNotFoundError(member_id)


class InMemoryTeamRepository:
    def __init__(self) -> None:
        self._members: InMemoryTable[TeamMember] = InMemoryTable(lambda m: m.member_id)

    def list_all(self) -> list[TeamMember]:
        return self._members.all()

    def create(self, member: TeamMember) -> TeamMember:
        return self._members.put(member)

    def delete(self, member_id: str) -> None:
        if self._members.pop(member_id) is None:
            raise MemberNotFoundError(member_id)
