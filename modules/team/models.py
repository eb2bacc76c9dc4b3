"""
Team member data models.
"""

import uuid
from datetime import datetime
from typing import Optional
from pydantic import Field

from shared.models import ApiModel, utcnow


DEFAULT_MEMBER_ROLE = "Contributor"


class TeamMember(ApiModel):
    """A person on the team roster. Independent of login accounts."""

    member_id: str = Field(default_factory=lambda: str(uuid.uuid4()))
    name: str
    email: str
    role: str = DEFAULT_MEMBER_ROLE
    created_at: datetime = Field(default_factory=utcnow)


class AddMemberRequest(ApiModel):
    name: Optional[str] = None
    email: Optional[str] = None
    role: Optional[str] = None
