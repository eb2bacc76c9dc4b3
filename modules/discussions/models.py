"""
Discussion message data models.
"""

import uuid
from datetime import datetime
from typing import Optional
from pydantic import Field

from shared.models import ApiModel, utcnow


class Message(ApiModel):
    """A discussion message, either general (no project) or scoped to a project."""

    message_id: str = Field(default_factory=lambda: str(uuid.uuid4()))
    project_id: Optional[str] = None
    user_id: str
    user_name: str
    content: str
    created_at: datetime = Field(default_factory=utcnow)


class PostMessageRequest(ApiModel):
    content: Optional[str] = None
    user_id: Optional[str] = None
    user_name: Optional[str] = None
    project_id: Optional[str] = None
