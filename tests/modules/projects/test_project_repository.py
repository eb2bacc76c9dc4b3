import pytest
from unittest.mock import MagicMock

from modules.projects.exceptions import ProjectNotFoundError, TaskNotFoundError
from modules.projects.interfaces import IProjectRepository, ITaskRepository
from modules.projects.models import Project, Task
from modules.projects.repository import (
    InMemoryProjectRepository,
    InMemoryTaskRepository,
    SupabaseProjectRepository,
    SupabaseTaskRepository,
)


def project_row(**overrides) -> dict:
    row = {
        "project_id": "project-1",
        "name": "Apollo",
        "owner": None,
        "status": "active",
        "created_at": "2026-01-15T12:00:00+00:00",
        "updated_at": "2026-01-15T12:00:00+00:00",
    }
    row.update(overrides)
    return row


def task_row(**overrides) -> dict:
    row = {
        "project_id": "project-1",
        "task_id": "task-1",
        "title": "Write docs",
        "status": "todo",
        "assignee": None,
        "priority": "medium",
        "due_date": None,
        "created_at": "2026-01-15T12:00:00+00:00",
        "updated_at": "2026-01-15T12:00:00+00:00",
    }
    row.update(overrides)
    return row


class TestInMemoryProjectRepository:
    def test_implements_protocol(self):
        assert isinstance(InMemoryProjectRepository(), IProjectRepository)

    def test_create_get_update(self):
        repo = InMemoryProjectRepository()
        project = repo.create(Project(name="Apollo"))

        repo.update(project.project_id, {"status": "closed"})

        assert repo.get(project.project_id).status == "closed"
        assert repo.get("missing") is None
        assert [p.name for p in repo.list_all()] == ["Apollo"]

    def test_update_unknown(self):
        with pytest.raises(ProjectNotFoundError):
            InMemoryProjectRepository().update("missing", {"name": "x"})


class TestInMemoryTaskRepository:
    def test_implements_protocol(self):
        assert isinstance(InMemoryTaskRepository(), ITaskRepository)

    def test_keyed_by_project_and_task(self):
        """The same task id in two projects names two different tasks."""
        repo = InMemoryTaskRepository()
        repo.create(Task(project_id="p1", task_id="t1", title="a"))
        repo.create(Task(project_id="p2", task_id="t1", title="b"))

        repo.update("p1", "t1", {"status": "done"})

        assert repo.get("p1", "t1").status == "done"
        assert repo.get("p2", "t1").status == "todo"
        assert [t.title for t in repo.list_by_project("p2")] == ["b"]

    def test_update_unknown(self):
        with pytest.raises(TaskNotFoundError):
            InMemoryTaskRepository().update("p1", "missing", {"status": "done"})


class TestSupabaseProjectRepository:
    @pytest.fixture
    def mock_db(self):
        return MagicMock()

    @pytest.fixture
    def repo(self, mock_db):
        return SupabaseProjectRepository(mock_db)

    def test_get(self, repo, mock_db):
        query = mock_db.table.return_value.select.return_value.eq.return_value.limit.return_value
        query.execute.return_value.data = [project_row()]

        project = repo.get("project-1")

        mock_db.table.assert_called_with("projects")
        mock_db.table.return_value.select.return_value.eq.assert_called_with("project_id", "project-1")
        assert project.name == "Apollo"

    def test_get_not_found(self, repo, mock_db):
        query = mock_db.table.return_value.select.return_value.eq.return_value.limit.return_value
        query.execute.return_value.data = []

        assert repo.get("missing") is None

    def test_create_inserts_snake_case_row(self, repo, mock_db):
        mock_db.table.return_value.insert.return_value.execute.return_value.data = [project_row()]

        repo.create(Project(project_id="project-1", name="Apollo"))

        row = mock_db.table.return_value.insert.call_args.args[0]
        assert row["project_id"] == "project-1"
        assert "projectId" not in row

    def test_update_unknown(self, repo, mock_db):
        query = mock_db.table.return_value.update.return_value.eq.return_value
        query.execute.return_value.data = []

        with pytest.raises(ProjectNotFoundError):
            repo.update("missing", {"name": "x"})


class TestSupabaseTaskRepository:
    @pytest.fixture
    def mock_db(self):
        return MagicMock()

    @pytest.fixture
    def repo(self, mock_db):
        return SupabaseTaskRepository(mock_db)

    def test_list_by_project(self, repo, mock_db):
        select = mock_db.table.return_value.select.return_value
        select.eq.return_value.order.return_value.execute.return_value.data = [task_row()]

        tasks = repo.list_by_project("project-1")

        mock_db.table.assert_called_with("tasks")
        select.eq.assert_called_once_with("project_id", "project-1")
        assert [t.task_id for t in tasks] == ["task-1"]

    def test_update_filters_on_both_keys(self, repo, mock_db):
        update = mock_db.table.return_value.update
        update.return_value.eq.return_value.eq.return_value.execute.return_value.data = [task_row()]

        repo.update("project-1", "task-1", {"status": "done"})

        update.assert_called_once_with({"status": "done"})
        update.return_value.eq.assert_called_once_with("project_id", "project-1")
        update.return_value.eq.return_value.eq.assert_called_once_with("task_id", "task-1")

    def test_update_unknown(self, repo, mock_db):
        update = mock_db.table.return_value.update
        update.return_value.eq.return_value.eq.return_value.execute.return_value.data = []

        with pytest.raises(TaskNotFoundError):
            repo.update("project-1", "missing", {"status": "done"})
