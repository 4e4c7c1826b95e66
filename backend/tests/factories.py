"""
Test factories for creating test data.

WHY: Factories provide a consistent, reusable way to create test objects
through the same DAO the application uses.
"""

from datetime import date
from typing import Optional, Sequence
from sqlalchemy.ext.asyncio import AsyncSession

from task_storage.dao.project import ProjectDAO
from task_storage.models.project import Project


class ProjectFactory:
    """
    Factory for creating Project test instances.
    """

    @staticmethod
    async def create(
        session: AsyncSession,
        name: str = "Test Project",
        start_date: Optional[date] = None,
        completion_date: Optional[date] = None,
        task_names: Sequence[str] = (),
    ) -> Project:
        """
        Create a project, optionally with tasks.

        Args:
            session: Database session
            name: Project name
            start_date: Start date (defaults to 2024-01-01)
            completion_date: Completion date (defaults to 2024-12-31)
            task_names: Names of tasks to add, in order

        Returns:
            Created Project instance with tasks loaded
        """
        project_dao = ProjectDAO(session)
        project = await project_dao.create_project(
            name=name,
            start_date=start_date or date(2024, 1, 1),
            completion_date=completion_date or date(2024, 12, 31),
        )
        for task_name in task_names:
            await project_dao.add_task(project, task_name)
        return project

    @staticmethod
    async def create_batch(
        session: AsyncSession,
        names: Sequence[str],
    ) -> list[Project]:
        """
        Create several projects with default dates.

        Args:
            session: Database session
            names: Project names, created in this order

        Returns:
            Created projects in creation order
        """
        return [await ProjectFactory.create(session, name=name) for name in names]
