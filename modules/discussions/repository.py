"""
Discussion message repositories.
"""

from typing import Optional

from supabase import Client

from shared.memory import InMemoryTable
from shared.repository import BaseRepository
from .exceptions import MessageNotFoundError
from .models import Message

DISCUSSIONS_TABLE = "discussions"


class SupabaseMessageRepository(BaseRepository[Message]):
    def __init__(self, db: Client) -> None:
        super().__init__(db, DISCUSSIONS_TABLE)

    def list_messages(self, project_id: Optional[str] = None) -> list[Message]:
        query = self._db.table(self._table).select("*")
        if project_id:
            query = query.eq("project_id", project_id)
        result = query.execute()
        return [Message.model_validate(row) for row in result.data]

    def create(self, message: Message) -> Message:
        result = self._db.table(self._table).insert(message.model_dump(mode="json")).execute()
        return Message.model_validate(result.data[0])

    def delete(self, message_id: str) -> None:
        result = self._db.table(self._table).delete().eq("message_id", message_id).execute()
        if not result.data:
            raise MessageNotFoundError(message_id)


class InMemoryMessageRepository:
    def __init__(self) -> None:
        self._messages: InMemoryTable[Message] = InMemoryTable(lambda m: m.message_id)

    def list_messages(self, project_id: Optional[str] = None) -> list[Message]:
        messages = self._messages.all()
        if project_id:
            messages = [m for m in messages if m.project_id == project_id]
        return messages

    def create(self, message: Message) -> Message:
        return self._messages.put(message)

    def delete(self, message_id: str) -> None:
        if self._messages.pop(message_id) is None:
            raise MessageNotFoundError(message_id)
