"""
Pydantic schemas for task endpoints.

WHAT: Request/response schemas for tasks nested under a project.

HOW: JSON uses camelCase (``taskName``); snake_case field names are also
accepted on input.
"""

from pydantic import BaseModel, ConfigDict, Field


class TaskCreate(BaseModel):
    """
    Task creation request schema.

    Only the name is supplied; the id is assigned and the project is
    taken from the URL.
    """

    model_config = ConfigDict(
        populate_by_name=True,
        str_strip_whitespace=True,
        json_schema_extra={"example": {"taskName": "Write acceptance tests"}},
    )

    task_name: str = Field(
        ...,
        alias="taskName",
        min_length=1,
        max_length=255,
        description="Task name, unique within the project",
    )


class TaskResponse(BaseModel):
    """Task as returned inside a project."""

    model_config = ConfigDict(populate_by_name=True)

    id: int = Field(..., description="Task ID")
    task_name: str = Field(..., alias="taskName", description="Task name")
