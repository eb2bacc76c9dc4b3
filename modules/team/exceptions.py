"""
Team module exceptions.
"""

from shared.exceptions import NotFoundError


class MemberNotFoundError(NotFoundError):
    def __init__(self, member_id: str):
        super().__init__(
            "Team member not found",
            code="MEMBER_NOT_FOUND",
            details={"member_id": member_id},
        )
