"""
Discussions module.

General and per-project discussion messages.
"""

from .interfaces import IDiscussionService, IMessageRepository
from .models import Message
from .exceptions import MessageNotFoundError

__all__ = [
    "IDiscussionService",
    "IMessageRepository",
    "Message",
    "MessageNotFoundError",
]
