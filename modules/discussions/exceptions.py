"""
Discussions module exceptions.
"""

from shared.exceptions import NotFoundError


class MessageNotFoundError(NotFoundError):
    def __init__(self, message_id: str):
        super().__init__(
            "Message not found",
            code="MESSAGE_NOT_FOUND",
            details={"message_id": message_id},
        )
