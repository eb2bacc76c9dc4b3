"""
Project and task repositories.

Supabase-backed implementations read and write the projects and tasks
tables created in migrations/002_create_projects.sql. In-memory
implementations serve DATA_STORE=memory and tests.
"""

from typing import Any, Optional

from supabase import Client

from shared.memory import InMemoryTable
from shared.repository import BaseRepository, to_column
from .exceptions import ProjectNotFoundError, TaskNotFoundError
from .models import Project, Task

PROJECTS_TABLE = "projects"
TASKS_TABLE = "tasks"


class SupabaseProjectRepository(BaseRepository[Project]):
    def __init__(self, db: Client) -> None:
        super().__init__(db, PROJECTS_TABLE)

    def list_all(self) -> list[Project]:
        result = self._db.table(self._table).select("*").execute()
        return [Project.model_validate(row) for row in result.data]

    def get(self, project_id: str) -> Optional[Project]:
        result = (
            self._db.table(self._table)
            .select("*")
            .eq("project_id", project_id)
            .limit(1)
            .execute()
        )
        if not result.data:
            return None
        return Project.model_validate(result.data[0])

    def create(self, project: Project) -> Project:
        row = project.model_dump(mode="json")
        result = self._db.table(self._table).insert(row).execute()
        return Project.model_validate(result.data[0])

    def update(self, project_id: str, changes: dict[str, Any]) -> None:
        data = {field: to_column(value) for field, value in changes.items()}
        result = self._db.table(self._table).update(data).eq("project_id", project_id).execute()
        if not result.data:
            raise ProjectNotFoundError(project_id)


class SupabaseTaskRepository(BaseRepository[Task]):
    """Tasks are keyed by (project_id, task_id); listings filter on project_id."""

    def __init__(self, db: Client) -> None:
        super().__init__(db, TASKS_TABLE)

    def list_by_project(self, project_id: str) -> list[Task]:
        result = (
            self._db.table(self._table)
            .select("*")
            .eq("project_id", project_id)
            .order("created_at")
            .execute()
        )
        return [Task.model_validate(row) for row in result.data]

    def get(self, project_id: str, task_id: str) -> Optional[Task]:
        result = (
            self._db.table(self._table)
            .select("*")
            .eq("project_id", project_id)
            .eq("task_id", task_id)
            .limit(1)
            .execute()
        )
        if not result.data:
            return None
        return Task.model_validate(result.data[0])

    def create(self, task: Task) -> Task:
        row = task.model_dump(mode="json")
        result = self._db.table(self._table).insert(row).execute()
        return Task.model_validate(result.data[0])

    def update(self, project_id: str, task_id: str, changes: dict[str, Any]) -> None:
        data = {field: to_column(value) for field, value in changes.items()}
        result = (
            self._db.table(self._table)
            .update(data)
            .eq("project_id", project_id)
            .eq("task_id", task_id)
            .execute()
        )
        if not result.data:
            raise TaskNotFoundError(project_id, task_id)


class InMemoryProjectRepository:
    def __init__(self) -> None:
        self._projects: InMemoryTable[Project] = InMemoryTable(lambda p: p.project_id)

    def list_all(self) -> list[Project]:
        return self._projects.all()

    def get(self, project_id: str) -> Optional[Project]:
        return self._projects.get(project_id)

    def create(self, project: Project) -> Project:
        return self._projects.put(project)

    def update(self, project_id: str, changes: dict[str, Any]) -> None:
        if self._projects.update(project_id, changes) is None:
            raise ProjectNotFoundError(project_id)


class InMemoryTaskRepository:
    def __init__(self) -> None:
        self._tasks: InMemoryTable[Task] = InMemoryTable(lambda t: (t.project_id, t.task_id))

    def list_by_project(self, project_id: str) -> list[Task]:
        return [t for t in self._tasks.all() if t.project_id == project_id]

    def get(self, project_id: str, task_id: str) -> Optional[Task]:
        return self._tasks.get((project_id, task_id))

    def create(self, task: Task) -> Task:
        return self._tasks.put(task)

    def update(self, project_id: str, task_id: str, changes: dict[str, Any]) -> None:
        if self._tasks.update((project_id, task_id), changes) is None:
            raise TaskNotFoundError(project_id, task_id)
