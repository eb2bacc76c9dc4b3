"""
Project and task API endpoints.

Every endpoint requires a signed-in user. Tasks are created and updated
under /tasks and listed under their project.
"""

from fastapi import APIRouter, Depends

from api.dependencies import get_project_service
from api.middleware.auth import RequireAuth
from shared.models import OkResponse

from .interfaces import IProjectService
from .models import (
    CreateProjectRequest,
    CreateTaskRequest,
    Project,
    Task,
    UpdateProjectRequest,
    UpdateTaskRequest,
)

router = APIRouter(dependencies=[RequireAuth])
tasks_router = APIRouter(dependencies=[RequireAuth])


@router.get("", response_model=list[Project])
async def list_projects(
    service: IProjectService = Depends(get_project_service),
) -> list[Project]:
    return await service.list_projects()


@router.post("", response_model=Project, status_code=201)
async def create_project(
    request: CreateProjectRequest,
    service: IProjectService = Depends(get_project_service),
) -> Project:
    """Create a project. Status defaults to "active"."""
    return await service.create_project(request)


@router.get("/{project_id}", response_model=Project)
async def get_project(
    project_id: str,
    service: IProjectService = Depends(get_project_service),
) -> Project:
    return await service.get_project(project_id)


@router.patch("/{project_id}", response_model=OkResponse)
async def update_project(
    project_id: str,
    request: UpdateProjectRequest,
    service: IProjectService = Depends(get_project_service),
) -> OkResponse:
    return await service.update_project(project_id, request)


@router.get("/{project_id}/tasks", response_model=list[Task])
async def list_tasks(
    project_id: str,
    service: IProjectService = Depends(get_project_service),
) -> list[Task]:
    return await service.list_tasks(project_id)


@tasks_router.post("", response_model=Task, status_code=201)
async def create_task(
    request: CreateTaskRequest,
    service: IProjectService = Depends(get_project_service),
) -> Task:
    return await service.create_task(request)


@tasks_router.patch("/{project_id}/{task_id}", response_model=OkResponse)
async def update_task(
    project_id: str,
    task_id: str,
    request: UpdateTaskRequest,
    service: IProjectService = Depends(get_project_service),
) -> OkResponse:
    """
    Update a task.

    Marking the last open task of a project done notifies every active
    administrator.
    """
    return await service.update_task(project_id, task_id, request)
