"""
Pydantic schemas for project endpoints.

WHAT: Request/response schemas for the project API.

WHY: Schemas define the API contract:
1. Validate incoming request data (required fields, ISO dates, non-blank names)
2. Document the API for OpenAPI/Swagger
3. Control which fields are exposed in responses

HOW: Uses Pydantic v2. JSON field names are camelCase
(``projectName``, ``projectStartDate``, ``projectCompletionDate``);
snake_case field names are accepted on input as well. Business rules
(name uniqueness, date ordering) are enforced by ProjectService, not here.
"""

from datetime import date
from typing import Optional
from pydantic import BaseModel, ConfigDict, Field

from task_storage.schemas.task import TaskResponse


class ProjectCreate(BaseModel):
    """
    Project request body for create and update.

    WHAT: Name and date range of a project.

    WHY: Tasks are not part of the body; they are only added through
    the createTask endpoint.
    """

    model_config = ConfigDict(
        populate_by_name=True,
        str_strip_whitespace=True,
        json_schema_extra={
            "example": {
                "projectName": "Warehouse migration",
                "projectStartDate": "2024-03-01",
                "projectCompletionDate": "2024-06-30",
            }
        },
    )

    project_name: str = Field(
        ...,
        alias="projectName",
        min_length=1,
        max_length=255,
        description="Project name",
    )
    project_start_date: date = Field(
        ...,
        alias="projectStartDate",
        description="Planned start date (YYYY-MM-DD)",
    )
    project_completion_date: date = Field(
        ...,
        alias="projectCompletionDate",
        description="Planned completion date (YYYY-MM-DD), not before the start date",
    )


class ProjectResponse(BaseModel):
    """
    Project response schema.

    WHAT: A project with its tasks.
    """

    model_config = ConfigDict(
        populate_by_name=True,
        json_schema_extra={
            "example": {
                "id": 1,
                "projectName": "Warehouse migration",
                "projectStartDate": "2024-03-01",
                "projectCompletionDate": "2024-06-30",
                "tasks": [{"id": 3, "taskName": "Inventory audit"}],
            }
        },
    )

    id: int = Field(..., description="Project ID")
    project_name: str = Field(..., alias="projectName", description="Project name")
    project_start_date: date = Field(..., alias="projectStartDate", description="Start date")
    project_completion_date: date = Field(
        ..., alias="projectCompletionDate", description="Completion date"
    )
    tasks: list[TaskResponse] = Field(default_factory=list, description="Tasks of the project")


class ProjectIdResponse(BaseModel):
    """Id of a created or updated project."""

    id: int = Field(..., description="Project ID")


class ProjectPage(BaseModel):
    """
    Page of projects.

    WHAT: A bounded, sorted slice of all projects plus metadata.

    WHY: ``paged`` is False when no pageNumber was requested; the page then
    holds every project ordered by id and carries no sort information.
    """

    model_config = ConfigDict(
        populate_by_name=True,
        json_schema_extra={
            "example": {
                "content": [
                    {
                        "id": 1,
                        "projectName": "Warehouse migration",
                        "projectStartDate": "2024-03-01",
                        "projectCompletionDate": "2024-06-30",
                        "tasks": [],
                    }
                ],
                "pageNumber": 1,
                "pageSize": 10,
                "totalElements": 1,
                "totalPages": 1,
                "sortField": "projectName",
                "sortDirection": "asc",
                "paged": True,
            }
        },
    )

    content: list[ProjectResponse] = Field(..., description="Projects on this page")
    page_number: int = Field(..., alias="pageNumber", description="1-based page number")
    page_size: int = Field(..., alias="pageSize", description="Requested page size")
    total_elements: int = Field(..., alias="totalElements", description="Total number of projects")
    total_pages: int = Field(..., alias="totalPages", description="Total number of pages")
    sort_field: Optional[str] = Field(None, alias="sortField", description="Sort field")
    sort_direction: Optional[str] = Field(None, alias="sortDirection", description="asc or desc")
    paged: bool = Field(..., description="Whether pagination was requested")
