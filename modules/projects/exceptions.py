"""
Project module exceptions.
"""

from shared.exceptions import NotFoundError


class ProjectNotFoundError(NotFoundError):
    """Raised when a project id doesn't exist."""

    def __init__(self, project_id: str):
        super().__init__(
            "Project not found",
            code="PROJECT_NOT_FOUND",
            details={"project_id": project_id},
        )


class TaskNotFoundError(NotFoundError):
    """Raised when no task has this (project_id, task_id) key."""

    def __init__(self, project_id: str, task_id: str):
        super().__init__(
            "Task not found",
            code="TASK_NOT_FOUND",
            details={"project_id": project_id, "task_id": task_id},
        )
