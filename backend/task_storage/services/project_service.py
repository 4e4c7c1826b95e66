"""
Project Service.

WHAT: Business logic for projects and their tasks.

WHY: The service layer:
1. Validates listing parameters (page number, page size, sort field, direction)
2. Enforces project rules (unique name on create, start <= completion)
3. Enforces task rules (unique name within a project)
4. Turns missing entities into 404s and rule violations into 400s

HOW: Delegates all persistence to ProjectDAO and raises the
application exception hierarchy; the API layer never checks rules itself.
"""

import logging
import math
from dataclasses import dataclass
from datetime import date
from typing import List, Optional
from sqlalchemy.exc import IntegrityError
from sqlalchemy.ext.asyncio import AsyncSession

from task_storage.dao.project import ProjectDAO
from task_storage.models.project import Project
from task_storage.models.task import Task
from task_storage.core.exceptions import (
    DuplicateProjectNameError,
    DuplicateTaskNameError,
    InvalidDateRangeError,
    PaginationError,
    ProjectNotFoundError,
    TaskNotInProjectError,
)

logger = logging.getLogger(__name__)


# API sort field -> Project column. Both the JSON names and the column
# names are accepted.
SORT_FIELDS = {
    "id": "id",
    "projectName": "name",
    "project_name": "name",
    "projectStartDate": "start_date",
    "project_start_date": "start_date",
    "projectCompletionDate": "completion_date",
    "project_completion_date": "completion_date",
}

SORT_DIRECTIONS = ("asc", "desc")

# Largest value an Integer (int4) column holds. Ids above it never exist and
# page parameters are capped at it so the OFFSET stays within 64 bits.
MAX_INT = 2**31 - 1


def _is_storable_id(value: int) -> bool:
    return 1 <= value <= MAX_INT


@dataclass
class ProjectPageResult:
    """
    One page of projects plus the metadata needed to render it.

    Fields:
    - items: Projects on the page
    - page_number: 1-based page number
    - page_size: Requested size (number of items when unpaged)
    - total_elements: Number of projects overall
    - sort_field / sort_direction: As requested, None when unpaged
    - paged: False when the caller asked for every project
    """

    items: List[Project]
    page_number: int
    page_size: int
    total_elements: int
    sort_field: Optional[str] = None
    sort_direction: Optional[str] = None
    paged: bool = True

    @property
    def total_pages(self) -> int:
        """Number of pages needed for all elements (0 when empty)."""
        if self.page_size < 1:
            return 0 if self.total_elements == 0 else 1
        return math.ceil(self.total_elements / self.page_size)


class ProjectService:
    """
    Service for project and task operations.

    WHAT: The business layer between the HTTP API and ProjectDAO.
    """

    def __init__(self, session: AsyncSession):
        """
        Initialize ProjectService.

        Args:
            session: Async database session
        """
        self.session = session
        self.project_dao = ProjectDAO(session)

    # ------------------------------------------------------------------
    # Projects
    # ------------------------------------------------------------------

    async def find_all(
        self,
        page_number: Optional[int] = None,
        page_size: Optional[int] = None,
        sort_field: Optional[str] = None,
        sort_direction: Optional[str] = None,
    ) -> ProjectPageResult:
        """
        List projects, paginated and sorted when a page number is given.

        WHAT: Without ``page_number`` every project is returned (ordered by
        id) and the other parameters are ignored. With it, all four
        parameters are validated and one page is returned.

        Args:
            page_number: 1-based page number, or None for no pagination
            page_size: Number of projects per page
            sort_field: Field to sort by (see SORT_FIELDS)
            sort_direction: "asc" or "desc"

        Returns:
            ProjectPageResult for the requested page

        Raises:
            PaginationError: If any parameter is invalid
        """
        if page_number is None:
            projects = await self.project_dao.get_all(limit=None)
            return ProjectPageResult(
                items=projects,
                page_number=1,
                page_size=len(projects),
                total_elements=len(projects),
                paged=False,
            )

        column = self._validate_page_request(page_number, page_size, sort_field, sort_direction)

        projects, total = await self.project_dao.get_sorted_page(
            sort_column=column,
            descending=sort_direction == "desc",
            skip=(page_number - 1) * page_size,
            limit=page_size,
        )
        return ProjectPageResult(
            items=projects,
            page_number=page_number,
            page_size=page_size,
            total_elements=total,
            sort_field=sort_field,
            sort_direction=sort_direction,
        )

    @staticmethod
    def _validate_page_request(
        page_number: int,
        page_size: Optional[int],
        sort_field: Optional[str],
        sort_direction: Optional[str],
    ) -> str:
        """
        Validate listing parameters, first failure wins.

        Returns:
            The Project column to sort by

        Raises:
            PaginationError: On the first invalid parameter
        """
        if page_number < 1:
            raise PaginationError(
                message="Page number must not be less than one!",
                page_number=page_number,
            )
        if page_number > MAX_INT:
            raise PaginationError(
                message=f"Page number must not be greater than {MAX_INT}",
                page_number=page_number,
            )
        if page_size is None or page_size < 1:
            raise PaginationError(
                message="Page size must not be less than one!",
                page_size=page_size,
            )
        if page_size > MAX_INT:
            raise PaginationError(
                message=f"Page size must not be greater than {MAX_INT}",
                page_size=page_size,
            )
        if not sort_field:
            raise PaginationError(message="Sort field must be provided")
        if sort_field not in SORT_FIELDS:
            raise PaginationError(
                message=f"Cannot sort by '{sort_field}'",
                sort_field=sort_field,
                allowed=sorted(k for k in SORT_FIELDS if "_" not in k),
            )
        if sort_direction not in SORT_DIRECTIONS:
            raise PaginationError(
                message="Sort direction must be either 'asc' or 'desc'",
                sort_direction=sort_direction,
            )
        return SORT_FIELDS[sort_field]

    async def find_by_id(self, project_id: int) -> Project:
        """
        Get a project with its tasks.

        Args:
            project_id: Project ID

        Returns:
            The project

        Raises:
            ProjectNotFoundError: If no project has this id
        """
        return await self._load(project_id)

    async def _load(self, project_id: int, for_update: bool = False) -> Project:
        """Load a project with its tasks or raise ProjectNotFoundError."""
        project = None
        if _is_storable_id(project_id):
            project = await self.project_dao.get_with_tasks(project_id, for_update=for_update)
        if project is None:
            raise ProjectNotFoundError.for_id(project_id)
        return project

    async def create_project(
        self,
        name: str,
        start_date: date,
        completion_date: date,
    ) -> Project:
        """
        Create a project.

        Args:
            name: Project name, must not be used by another project
            start_date: Planned start date
            completion_date: Planned completion date

        Returns:
            The persisted project with its id assigned

        Raises:
            DuplicateProjectNameError: If the name is already used
            InvalidDateRangeError: If start_date is after completion_date
        """
        if await self.project_dao.exists_by_name(name):
            logger.info(f"Project with the name {name} already exists")
            raise DuplicateProjectNameError(
                message=f"Project with the name '{name}' already exists",
                project_name=name,
            )
        self._check_date_range(start_date, completion_date)

        project = await self.project_dao.create_project(
            name=name,
            start_date=start_date,
            completion_date=completion_date,
        )
        logger.info(f"Created project {project.id} '{project.name}'")
        return project

    async def change_project(
        self,
        project_id: int,
        name: str,
        start_date: date,
        completion_date: date,
    ) -> Project:
        """
        Overwrite an existing project's name and dates.

        WHAT: The id stays the one from the path and the task list is kept.
        Name uniqueness is not checked on update.

        Args:
            project_id: Project ID
            name: New name
            start_date: New start date
            completion_date: New completion date

        Returns:
            The updated project

        Raises:
            ProjectNotFoundError: If no project has this id
            InvalidDateRangeError: If start_date is after completion_date
        """
        project = await self.find_by_id(project_id)
        self._check_date_range(start_date, completion_date)
        return await self.project_dao.update_details(
            project,
            name=name,
            start_date=start_date,
            completion_date=completion_date,
        )

    async def delete_project(self, project_id: int) -> None:
        """
        Delete a project and all of its tasks.

        Args:
            project_id: Project ID

        Raises:
            ProjectNotFoundError: If no project has this id
        """
        project = await self.find_by_id(project_id)
        await self.project_dao.delete_instance(project)
        logger.info(f"Deleted project {project_id}")

    @staticmethod
    def _check_date_range(start_date: date, completion_date: date) -> None:
        """Raise InvalidDateRangeError if the start is after the completion."""
        if start_date > completion_date:
            raise InvalidDateRangeError(
                start_date=start_date.isoformat(),
                completion_date=completion_date.isoformat(),
            )

    # ------------------------------------------------------------------
    # Tasks
    # ------------------------------------------------------------------

    async def add_task(self, project_id: int, task_name: str) -> Task:
        """
        Add a task to a project.

        WHAT: Load project (row-locked) -> reject duplicate name -> append.

        WHY: Two concurrent requests can both pass the name scan on
        databases without row locks; the (project_id, name) unique
        constraint then rejects the second insert, reported as the same
        duplicate error.

        Args:
            project_id: Project ID
            task_name: Name of the new task

        Returns:
            The persisted task

        Raises:
            ProjectNotFoundError: If no project has this id
            DuplicateTaskNameError: If the project already has a task with this name
        """
        project = await self._load(project_id, for_update=True)

        if project.find_task_by_name(task_name) is not None:
            raise self._duplicate_task(project_id, task_name)

        try:
            task = await self.project_dao.add_task(project, task_name)
        except IntegrityError as exc:
            logger.warning(f"Concurrent insert of task '{task_name}' into project {project_id}: {exc}")
            raise self._duplicate_task(project_id, task_name) from exc

        logger.info(f"Added task {task.id} '{task.name}' to project {project_id}")
        return task

    @staticmethod
    def _duplicate_task(project_id: int, task_name: str) -> DuplicateTaskNameError:
        return DuplicateTaskNameError(
            message=f"Task with the name '{task_name}' is already in the project's task list",
            project_id=project_id,
            task_name=task_name,
        )

    async def delete_task(self, project_id: int, task_id: int) -> None:
        """
        Remove a task from a project.

        Args:
            project_id: Project ID
            task_id: ID of a task in this project

        Raises:
            ProjectNotFoundError: If no project has this id
            TaskNotInProjectError: If the project has no task with this id
        """
        project = await self._load(project_id, for_update=True)

        task = project.find_task_by_id(task_id) if _is_storable_id(task_id) else None
        if task is None:
            logger.info(f"Task {task_id} was not found in project {project_id}")
            raise TaskNotInProjectError(
                message=f"There is no task with ID {task_id}",
                project_id=project_id,
                task_id=task_id,
            )

        await self.project_dao.remove_task(project, task)
        logger.info(f"Deleted task {task_id} from project {project_id}")
