"""
Discussion API endpoints. Every endpoint requires a signed-in user.
"""

from typing import Optional

from fastapi import APIRouter, Depends, Query

from api.dependencies import get_discussion_service
from api.middleware.auth import RequireAuth
from shared.models import OkResponse

from .interfaces import IDiscussionService
from .models import Message, PostMessageRequest

router = APIRouter(dependencies=[RequireAuth])


@router.get("", response_model=list[Message])
async def list_messages(
    project_id: Optional[str] = Query(default=None, alias="projectId"),
    service: IDiscussionService = Depends(get_discussion_service),
) -> list[Message]:
    """List messages newest first, optionally for a single project."""
    return await service.list_messages(project_id)


@router.post("", response_model=Message, status_code=201)
async def post_message(
    request: PostMessageRequest,
    service: IDiscussionService = Depends(get_discussion_service),
) -> Message:
    return await service.post_message(request)


@router.delete("/{message_id}", response_model=OkResponse)
async def delete_message(
    message_id: str,
    service: IDiscussionService = Depends(get_discussion_service),
) -> OkResponse:
    return await service.delete_message(message_id)
