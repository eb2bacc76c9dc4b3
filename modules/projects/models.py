"""
Project and task data models.

Stored rows and API bodies share one shape, serialized in camelCase.
Request bodies keep every field optional so that missing fields are
reported by the service with the usual INVALID_INPUT error.
"""

import uuid
from datetime import datetime
from typing import Optional
from pydantic import Field

from shared.models import ApiModel, utcnow


DEFAULT_PROJECT_STATUS = "active"
DEFAULT_TASK_STATUS = "todo"
DEFAULT_TASK_PRIORITY = "medium"
DONE = "done"
UNKNOWN_PROJECT_NAME = "Unknown Project"


class Project(ApiModel):
    project_id: str = Field(default_factory=lambda: str(uuid.uuid4()))
    name: str
    owner: Optional[str] = None
    status: str = DEFAULT_PROJECT_STATUS
    created_at: datetime = Field(default_factory=utcnow)
    updated_at: datetime = Field(default_factory=utcnow)


class Task(ApiModel):
    """A task belongs to exactly one project and is keyed by (project_id, task_id)."""

    project_id: str
    task_id: str = Field(default_factory=lambda: str(uuid.uuid4()))
    title: str
    status: str = DEFAULT_TASK_STATUS
    assignee: Optional[str] = None
    priority: str = DEFAULT_TASK_PRIORITY
    due_date: Optional[str] = Field(None, description="Free-form due date from the client")
    created_at: datetime = Field(default_factory=utcnow)
    updated_at: datetime = Field(default_factory=utcnow)

    @property
    def is_done(self) -> bool:
        return self.status == DONE


class CreateProjectRequest(ApiModel):
    name: Optional[str] = None
    owner: Optional[str] = None
    status: Optional[str] = None


class UpdateProjectRequest(ApiModel):
    """
    Partial project update.

    Empty name or status values are ignored. Owner is applied whenever the
    body contains it, so an explicit null clears it.
    """

    name: Optional[str] = None
    owner: Optional[str] = None
    status: Optional[str] = None


class CreateTaskRequest(ApiModel):
    project_id: Optional[str] = None
    title: Optional[str] = None
    status: Optional[str] = None
    assignee: Optional[str] = None
    priority: Optional[str] = None
    due_date: Optional[str] = None


class UpdateTaskRequest(ApiModel):
    """
    Partial task update.

    Empty title, status or priority values are ignored. Assignee and due
    date are applied whenever the body contains them.
    """

    title: Optional[str] = None
    status: Optional[str] = None
    assignee: Optional[str] = None
    priority: Optional[str] = None
    due_date: Optional[str] = None
