"""
Discussion service.

Messages are either general or attached to a project. Listings are
sorted here, newest first, whatever order the store returns.
"""

import logging
from datetime import datetime
from typing import Callable, Optional

from shared.exceptions import require_fields
from shared.models import OkResponse, utcnow

from .interfaces import IDiscussionService, IMessageRepository
from .models import Message, PostMessageRequest

logger = logging.getLogger(__name__)


class DiscussionService(IDiscussionService):
    def __init__(
        self,
        messages: IMessageRepository,
        clock: Callable[[], datetime] = utcnow,
    ) -> None:
        self._messages = messages
        self._clock = clock

    async def list_messages(self, project_id: Optional[str] = None) -> list[Message]:
        messages = self._messages.list_messages(project_id or None)
        return sorted(messages, key=lambda m: m.created_at, reverse=True)

    async def post_message(self, request: PostMessageRequest) -> Message:
        """
        Post a message. An empty projectId makes it a general message.

        Raises:
            InvalidInputError: If content, userId or userName is missing
        """
        require_fields(
            content=request.content,
            userId=request.user_id,
            userName=request.user_name,
        )
        message = self._messages.create(
            Message(
                project_id=request.project_id or None,
                user_id=request.user_id,
                user_name=request.user_name,
                content=request.content,
                created_at=self._clock(),
            )
        )
        logger.info(f"User {message.user_id} posted message {message.message_id}")
        return message

    async def delete_message(self, message_id: str) -> OkResponse:
        self._messages.delete(message_id)
        logger.info(f"Deleted message {message_id}")
        return OkResponse()
