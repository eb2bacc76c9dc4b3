"""
Discussions module interfaces.
"""

from typing import Optional, Protocol, runtime_checkable

from shared.models import OkResponse

from .models import Message, PostMessageRequest


@runtime_checkable
class IMessageRepository(Protocol):
    def list_messages(self, project_id: Optional[str] = None) -> list[Message]:
        """Messages for one project, or every message when project_id is None."""
        ...

    def create(self, message: Message) -> Message:
        ...

    def delete(self, message_id: str) -> None:
        """
        Raises:
            MessageNotFoundError: If no message has this id
        """
        ...


@runtime_checkable
class IDiscussionService(Protocol):
    async def list_messages(self, project_id: Optional[str] = None) -> list[Message]:
        """Newest first."""
        ...

    async def post_message(self, request: PostMessageRequest) -> Message:
        ...

    async def delete_message(self, message_id: str) -> OkResponse:
        ...
