"""
Team module.

The team roster: people working on projects, with a free-form role.
"""

from .interfaces import ITeamService, ITeamRepository
from .models import TeamMember
from .exceptions import MemberNotFoundError

__all__ = [
    "ITeamService",
    "ITeamRepository",
    "TeamMember",
    "MemberNotFoundError",
]
