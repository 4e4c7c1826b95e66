"""
Project and task API endpoints.

WHAT: HTTP routes for project CRUD, project listing and the tasks nested
under a project.

WHY: Routes only marshal requests and responses; every rule (pagination
bounds, name uniqueness, date ordering, existence) lives in
ProjectService, and failures surface as AppException subclasses rendered
by the exception handlers.

HOW: FastAPI router with camelCase path and query parameters:
- GET    /project                                    list (paged when pageNumber given)
- GET    /project/{id}                               one project
- POST   /createProject                              create
- PUT    /project/{id}                               update
- DELETE /project/{id}                               delete
- POST   /project/{projectId}/createTask             add task
- DELETE /project/{projectId}/deleteTask/{taskId}    remove task
"""

from datetime import datetime
from typing import Optional
from fastapi import APIRouter, Depends, Path, Query, status
from sqlalchemy.ext.asyncio import AsyncSession

from task_storage.db.session import get_db
from task_storage.models.project import Project
from task_storage.schemas.common import MessageResponse
from task_storage.schemas.project import (
    ProjectCreate,
    ProjectIdResponse,
    ProjectPage,
    ProjectResponse,
)
from task_storage.schemas.task import TaskCreate, TaskResponse
from task_storage.services.project_service import ProjectPageResult, ProjectService


router = APIRouter(tags=["projects"])


def get_project_service(db: AsyncSession = Depends(get_db)) -> ProjectService:
    """Dependency building a ProjectService on the request's session."""
    return ProjectService(db)


def _project_to_response(project: Project) -> ProjectResponse:
    """
    Convert Project model to ProjectResponse schema.

    Args:
        project: Project model instance with tasks loaded

    Returns:
        ProjectResponse schema instance
    """
    return ProjectResponse(
        id=project.id,
        project_name=project.name,
        project_start_date=project.start_date,
        project_completion_date=project.completion_date,
        tasks=[TaskResponse(id=task.id, task_name=task.name) for task in project.tasks],
    )


def _page_to_response(page: ProjectPageResult) -> ProjectPage:
    """Convert a service page result to the ProjectPage schema."""
    return ProjectPage(
        content=[_project_to_response(project) for project in page.items],
        page_number=page.page_number,
        page_size=page.page_size,
        total_elements=page.total_elements,
        total_pages=page.total_pages,
        sort_field=page.sort_field,
        sort_direction=page.sort_direction,
        paged=page.paged,
    )


@router.get(
    "/project",
    response_model=ProjectPage,
    status_code=status.HTTP_200_OK,
    summary="List projects",
    description="List all projects, or one sorted page when pageNumber is given",
)
async def get_projects(
    page_number: Optional[int] = Query(
        default=None,
        alias="pageNumber",
        description="1-based page number; omit for all projects",
    ),
    page_size: Optional[int] = Query(
        default=None,
        alias="pageSize",
        description="Projects per page (>= 1)",
    ),
    sort_field: Optional[str] = Query(
        default=None,
        alias="sortField",
        description="id, projectName, projectStartDate or projectCompletionDate",
    ),
    sort_direction: Optional[str] = Query(
        default=None,
        alias="sortDirection",
        description="asc or desc",
    ),
    service: ProjectService = Depends(get_project_service),
) -> ProjectPage:
    """
    List projects.

    Raises:
        PaginationError (400): If pageNumber is given and any parameter is invalid
    """
    page = await service.find_all(
        page_number=page_number,
        page_size=page_size,
        sort_field=sort_field,
        sort_direction=sort_direction,
    )
    return _page_to_response(page)


@router.get(
    "/project/{id}",
    response_model=ProjectResponse,
    status_code=status.HTTP_200_OK,
    summary="Get project",
)
async def get_project(
    id: int = Path(..., description="Project ID"),
    service: ProjectService = Depends(get_project_service),
) -> ProjectResponse:
    """
    Get a project with its tasks.

    Raises:
        ProjectNotFoundError (404): If the project doesn't exist
    """
    project = await service.find_by_id(id)
    return _project_to_response(project)


@router.post(
    "/createProject",
    response_model=ProjectIdResponse,
    status_code=status.HTTP_201_CREATED,
    summary="Create project",
)
async def create_project(
    data: ProjectCreate,
    service: ProjectService = Depends(get_project_service),
) -> ProjectIdResponse:
    """
    Create a project.

    Raises:
        DuplicateProjectNameError (400): If the name is already used
        InvalidDateRangeError (400): If the start date is after the completion date
    """
    project = await service.create_project(
        name=data.project_name,
        start_date=data.project_start_date,
        completion_date=data.project_completion_date,
    )
    return ProjectIdResponse(id=project.id)


@router.put(
    "/project/{id}",
    response_model=ProjectIdResponse,
    status_code=status.HTTP_200_OK,
    summary="Update project",
)
async def change_project(
    data: ProjectCreate,
    id: int = Path(..., description="Project ID"),
    service: ProjectService = Depends(get_project_service),
) -> ProjectIdResponse:
    """
    Replace a project's name and dates; its id and tasks are kept.

    Raises:
        ProjectNotFoundError (404): If the project doesn't exist
        InvalidDateRangeError (400): If the start date is after the completion date
    """
    project = await service.change_project(
        id,
        name=data.project_name,
        start_date=data.project_start_date,
        completion_date=data.project_completion_date,
    )
    return ProjectIdResponse(id=project.id)


@router.delete(
    "/project/{id}",
    response_model=MessageResponse,
    status_code=status.HTTP_200_OK,
    summary="Delete project",
)
async def delete_project(
    id: int = Path(..., description="Project ID"),
    service: ProjectService = Depends(get_project_service),
) -> MessageResponse:
    """
    Delete a project and its tasks.

    Raises:
        ProjectNotFoundError (404): If the project doesn't exist
    """
    await service.delete_project(id)
    return MessageResponse(
        timestamp=datetime.now(),
        message="Project was successfully deleted",
    )


@router.post(
    "/project/{projectId}/createTask",
    response_model=MessageResponse,
    status_code=status.HTTP_201_CREATED,
    summary="Add task to project",
)
async def create_task(
    data: TaskCreate,
    project_id: int = Path(..., alias="projectId", description="Project ID"),
    service: ProjectService = Depends(get_project_service),
) -> MessageResponse:
    """
    Add a task to a project.

    Raises:
        ProjectNotFoundError (404): If the project doesn't exist
        DuplicateTaskNameError (400): If the project already has a task with this name
    """
    await service.add_task(project_id, data.task_name)
    return MessageResponse(
        timestamp=datetime.now(),
        message="Task was successfully added to the project",
    )


@router.delete(
    "/project/{projectId}/deleteTask/{taskId}",
    response_model=MessageResponse,
    response_model_exclude_none=True,
    status_code=status.HTTP_200_OK,
    summary="Delete task from project",
)
async def delete_task(
    project_id: int = Path(..., alias="projectId", description="Project ID"),
    task_id: int = Path(..., alias="taskId", description="Task ID"),
    service: ProjectService = Depends(get_project_service),
) -> MessageResponse:
    """
    Remove a task from a project.

    Raises:
        ProjectNotFoundError (404): If the project doesn't exist
        TaskNotInProjectError (400): If the project has no task with this id
    """
    await service.delete_task(project_id, task_id)
    return MessageResponse(message="Task was successfully deleted")
