"""
Project Data Access Object (DAO).

WHAT: Database operations for the Project aggregate (projects and their tasks).

WHY: Tasks are only reachable through their project, so task persistence
lives here too: a task is inserted by appending it to ``project.tasks`` and
deleted by removing it from that collection (delete-orphan cascade).

HOW: Extends BaseDAO with project-specific queries:
- Name existence check
- Project with tasks, optionally row-locked
- Sorted pages
"""

import logging
from datetime import date
from typing import List, Optional, Tuple
from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy.orm import selectinload

from task_storage.dao.base import BaseDAO
from task_storage.models.project import Project
from task_storage.models.task import Task

logger = logging.getLogger(__name__)


class ProjectDAO(BaseDAO[Project]):
    """
    Data Access Object for Project model.

    WHAT: Provides CRUD and query operations for projects and their tasks.
    """

    # Attribute names a page of projects may be sorted by
    SORTABLE_COLUMNS = ("id", "name", "start_date", "completion_date")

    def __init__(self, session: AsyncSession):
        """
        Initialize ProjectDAO.

        Args:
            session: Async database session
        """
        super().__init__(Project, session)

    async def create_project(
        self,
        name: str,
        start_date: date,
        completion_date: date,
    ) -> Project:
        """
        Insert a project with an empty task list.

        Args:
            name: Project name
            start_date: Planned start date
            completion_date: Planned completion date

        Returns:
            The persisted project with its id assigned
        """
        return await self.create(
            name=name,
            start_date=start_date,
            completion_date=completion_date,
            tasks=[],
        )

    async def exists_by_name(self, name: str) -> bool:
        """
        Check whether any project already uses this exact name.

        Args:
            name: Project name

        Returns:
            True if a project with the name exists
        """
        return await self.exists(name=name)

    async def get_with_tasks(
        self,
        project_id: int,
        for_update: bool = False,
    ) -> Optional[Project]:
        """
        Get a project with its tasks loaded.

        WHAT: Fetch project with related tasks in one round trip.

        WHY: ``for_update`` takes a row lock on databases that support
        ``SELECT ... FOR UPDATE`` so a read-modify-write of the task list
        is serialized per project. SQLite ignores the clause.

        Args:
            project_id: Project ID
            for_update: Lock the project row until the transaction ends

        Returns:
            Project with tasks loaded, or None if not found
        """
        query = (
            select(Project)
            .options(selectinload(Project.tasks))
            .where(Project.id == project_id)
        )
        if for_update:
            query = query.with_for_update().execution_options(populate_existing=True)

        result = await self.session.execute(query)
        return result.scalar_one_or_none()

    async def get_sorted_page(
        self,
        sort_column: str,
        descending: bool,
        skip: int,
        limit: int,
    ) -> Tuple[List[Project], int]:
        """
        Get one page of projects ordered by a column.

        WHAT: Offset/limit page plus total count.

        WHY: Ties on the sort column are broken by id so page boundaries
        are stable between requests.

        Args:
            sort_column: One of SORTABLE_COLUMNS
            descending: Sort descending instead of ascending
            skip: Number of projects to skip
            limit: Page size

        Returns:
            Tuple of (projects on the page, total number of projects)

        Raises:
            ValueError: If sort_column is not sortable
        """
        if sort_column not in self.SORTABLE_COLUMNS:
            raise ValueError(f"Projects cannot be sorted by '{sort_column}'")

        column = getattr(Project, sort_column)
        primary = column.desc() if descending else column.asc()
        order_by = (primary,) if sort_column == "id" else (primary, Project.id.asc())

        return await self.get_page(skip=skip, limit=limit, order_by=order_by)

    async def update_details(
        self,
        project: Project,
        name: str,
        start_date: date,
        completion_date: date,
    ) -> Project:
        """
        Overwrite a project's name and dates, leaving id and tasks unchanged.

        Args:
            project: Loaded project
            name: New project name
            start_date: New start date
            completion_date: New completion date

        Returns:
            The updated project
        """
        project.name = name
        project.start_date = start_date
        project.completion_date = completion_date
        await self.session.flush()
        return project

    async def add_task(self, project: Project, name: str) -> Task:
        """
        Append a new task to a project's task list.

        Args:
            project: Project loaded with its tasks
            name: Task name

        Returns:
            The persisted task with its id assigned

        Raises:
            IntegrityError: If the project already has a task with this name
        """
        task = Task(name=name)
        project.tasks.append(task)
        await self.session.flush()
        logger.debug(f"Inserted task {task.id} into project {project.id}")
        return task

    async def remove_task(self, project: Project, task: Task) -> None:
        """
        Remove a task from a project's task list, deleting its row.

        Args:
            project: Project loaded with its tasks
            task: One of ``project.tasks``
        """
        project.tasks.remove(task)
        await self.session.flush()
