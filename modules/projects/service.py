"""
Project service implementation.

Projects and their tasks, plus the completion check that runs whenever a
task is marked done: once every task in a project is done, each active
administrator is notified through the auth module's notifier.
"""

import logging
from datetime import datetime
from typing import Callable

from modules.auth.interfaces import INotifier, IUserRepository
from modules.auth.models import ADMIN_ROLE, UserStatus
from shared.exceptions import require_fields
from shared.models import OkResponse, utcnow

from .exceptions import ProjectNotFoundError, TaskNotFoundError
from .interfaces import IProjectRepository, IProjectService, ITaskRepository
from .models import (
    DEFAULT_PROJECT_STATUS,
    DEFAULT_TASK_PRIORITY,
    DEFAULT_TASK_STATUS,
    DONE,
    UNKNOWN_PROJECT_NAME,
    CreateProjectRequest,
    CreateTaskRequest,
    Project,
    Task,
    UpdateProjectRequest,
    UpdateTaskRequest,
)

logger = logging.getLogger(__name__)


class ProjectService(IProjectService):
    """Implementation of project and task operations."""

    def __init__(
        self,
        projects: IProjectRepository,
        tasks: ITaskRepository,
        users: IUserRepository,
        notifier: INotifier,
        clock: Callable[[], datetime] = utcnow,
    ) -> None:
        self._projects = projects
        self._tasks = tasks
        self._users = users
        self._notifier = notifier
        self._clock = clock

    # -------------------------------------------------------------------------
    # Projects
    # -------------------------------------------------------------------------

    async def list_projects(self) -> list[Project]:
        return self._projects.list_all()

    async def get_project(self, project_id: str) -> Project:
        project = self._projects.get(project_id)
        if project is None:
            raise ProjectNotFoundError(project_id)
        return project

    async def create_project(self, request: CreateProjectRequest) -> Project:
        """
        Create a project.

        Raises:
            InvalidInputError: If name is missing
        """
        require_fields(name=request.name)
        now = self._clock()
        project = self._projects.create(
            Project(
                name=request.name,
                owner=request.owner,
                status=request.status or DEFAULT_PROJECT_STATUS,
                created_at=now,
                updated_at=now,
            )
        )
        logger.info(f"Created project {project.project_id} ({project.name})")
        return project

    async def update_project(
        self, project_id: str, request: UpdateProjectRequest
    ) -> OkResponse:
        changes = {"updated_at": self._clock()}
        if request.name:
            changes["name"] = request.name
        if request.status:
            changes["status"] = request.status
        if "owner" in request.model_fields_set:
            changes["owner"] = request.owner

        self._projects.update(project_id, changes)
        return OkResponse()

    # -------------------------------------------------------------------------
    # Tasks
    # -------------------------------------------------------------------------

    async def list_tasks(self, project_id: str) -> list[Task]:
        return self._tasks.list_by_project(project_id)

    async def create_task(self, request: CreateTaskRequest) -> Task:
        """
        Create a task in an existing project.

        Raises:
            InvalidInputError: If projectId or title is missing
            ProjectNotFoundError: If the project doesn't exist
        """
        require_fields(projectId=request.project_id, title=request.title)
        if self._projects.get(request.project_id) is None:
            raise ProjectNotFoundError(request.project_id)

        now = self._clock()
        task = self._tasks.create(
            Task(
                project_id=request.project_id,
                title=request.title,
                status=request.status or DEFAULT_TASK_STATUS,
                assignee=request.assignee,
                priority=request.priority or DEFAULT_TASK_PRIORITY,
                due_date=request.due_date,
                created_at=now,
                updated_at=now,
            )
        )
        logger.info(f"Created task {task.task_id} in project {task.project_id}")
        return task

    async def update_task(
        self, project_id: str, task_id: str, request: UpdateTaskRequest
    ) -> OkResponse:
        changes = {"updated_at": self._clock()}
        if request.title:
            changes["title"] = request.title
        if request.status:
            changes["status"] = request.status
        if request.priority:
            changes["priority"] = request.priority
        if "assignee" in request.model_fields_set:
            changes["assignee"] = request.assignee
        if "due_date" in request.model_fields_set:
            changes["due_date"] = request.due_date

        self._tasks.update(project_id, task_id, changes)

        if request.status == DONE and self._all_tasks_done(project_id):
            self._notify_project_complete(project_id)
        return OkResponse()

    # -------------------------------------------------------------------------
    # Completion notification
    # -------------------------------------------------------------------------

    def _all_tasks_done(self, project_id: str) -> bool:
        tasks = self._tasks.list_by_project(project_id)
        return bool(tasks) and all(task.is_done for task in tasks)

    def _notify_project_complete(self, project_id: str) -> None:
        project = self._projects.get(project_id)
        name = project.name if project is not None else UNKNOWN_PROJECT_NAME
        admins = self._users.list_by_role_status(ADMIN_ROLE, UserStatus.ACTIVE)
        logger.info(
            f"Project {project_id} ({name}) complete; notifying {len(admins)} admin(s)"
        )

        message = f'All tasks in "{name}" are done. You can now close the project.'
        for admin in admins:
            # Delivery is best-effort; the task update has already been stored.
            try:
                self._notifier.notify(admin.email, message)
            except Exception:
                logger.exception(f"Failed to notify admin {admin.user_id} about project {project_id}")
