"""
Projects module.

Projects, their tasks, and the administrator notification sent when a
project's tasks are all done.

Public API:
- IProjectService: Interface for project and task operations
- IProjectRepository, ITaskRepository: Store interfaces
- Project / Task: Stored rows and API bodies
"""

from .interfaces import IProjectService, IProjectRepository, ITaskRepository
from .models import Project, Task
from .exceptions import ProjectNotFoundError, TaskNotFoundError

__all__ = [
    "IProjectService",
    "IProjectRepository",
    "ITaskRepository",
    "Project",
    "Task",
    "ProjectNotFoundError",
    "TaskNotFoundError",
]
