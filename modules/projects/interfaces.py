"""
Project module interfaces.

The service depends on the project and task stores defined here, and on
the auth module's IUserRepository and INotifier to reach administrators
when a project's last open task is finished.
"""

from typing import Any, Optional, Protocol, runtime_checkable

from shared.models import OkResponse

from .models import (
    CreateProjectRequest,
    CreateTaskRequest,
    Project,
    Task,
    UpdateProjectRequest,
    UpdateTaskRequest,
)


@runtime_checkable
class IProjectRepository(Protocol):
    def list_all(self) -> list[Project]:
        ...

    def get(self, project_id: str) -> Optional[Project]:
        ...

    def create(self, project: Project) -> Project:
        ...

    def update(self, project_id: str, changes: dict[str, Any]) -> None:
        """
        Raises:
            ProjectNotFoundError: If no project has this id
        """
        ...


@runtime_checkable
class ITaskRepository(Protocol):
    def list_by_project(self, project_id: str) -> list[Task]:
        ...

    def get(self, project_id: str, task_id: str) -> Optional[Task]:
        ...

    def create(self, task: Task) -> Task:
        ...

    def update(self, project_id: str, task_id: str, changes: dict[str, Any]) -> None:
        """
        Raises:
            TaskNotFoundError: If no task has this key
        """
        ...


@runtime_checkable
class IProjectService(Protocol):
    """Interface for project and task operations."""

    async def list_projects(self) -> list[Project]:
        ...

    async def get_project(self, project_id: str) -> Project:
        ...

    async def create_project(self, request: CreateProjectRequest) -> Project:
        ...

    async def update_project(
        self, project_id: str, request: UpdateProjectRequest
    ) -> OkResponse:
        ...

    async def list_tasks(self, project_id: str) -> list[Task]:
        ...

    async def create_task(self, request: CreateTaskRequest) -> Task:
        ...

    async def update_task(
        self, project_id: str, task_id: str, request: UpdateTaskRequest
    ) -> OkResponse:
        """
        Apply a partial update. Marking a task done when every other task
        in the project is done notifies all active administrators.
        """
        ...
