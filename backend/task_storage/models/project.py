"""
Project model.

WHAT: SQLAlchemy model for a project with a date range and owned tasks.

WHY: Projects are the aggregate root of the service. Tasks never exist
outside a project: they are added and removed only through the project's
``tasks`` collection, and deleting a project deletes its tasks.

HOW: Uses SQLAlchemy 2.0 with:
- ``cascade="all, delete-orphan"`` on ``tasks`` so removing a task from the
  collection deletes its row
- ``lazy="selectin"`` so the task list is loaded with the project, which
  async sessions require (no implicit lazy IO)
- Timestamps for audit trail
"""

from datetime import date
from typing import TYPE_CHECKING
from sqlalchemy import Date, Integer, String
from sqlalchemy.orm import Mapped, mapped_column, relationship

from task_storage.models.base import Base, TimestampMixin

if TYPE_CHECKING:
    from task_storage.models.task import Task


class Project(TimestampMixin, Base):
    """
    Project model.

    Attributes:
        id: Primary key
        name: Project name, unique across projects at creation time
        start_date: Planned start date
        completion_date: Planned completion date (never before start_date)
        tasks: Tasks owned by this project, ordered by id
        created_at: Record creation timestamp
        updated_at: Last modification timestamp
    """

    __tablename__ = "projects"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, index=True)

    # Not a unique constraint: uniqueness is checked on create only,
    # updates may reuse an existing name.
    name: Mapped[str] = mapped_column(
        String(255),
        nullable=False,
        index=True,
        comment="Project name",
    )
    start_date: Mapped[date] = mapped_column(
        Date,
        nullable=False,
        comment="Planned start date",
    )
    completion_date: Mapped[date] = mapped_column(
        Date,
        nullable=False,
        comment="Planned completion date",
    )

    tasks: Mapped[list["Task"]] = relationship(
        "Task",
        back_populates="project",
        cascade="all, delete-orphan",
        order_by="Task.id",
        lazy="selectin",
    )

    def __repr__(self) -> str:
        """String representation for debugging."""
        return f"<Project(id={self.id}, name={self.name})>"

    def find_task_by_name(self, name: str) -> "Task | None":
        """Return the task with exactly this name, or None."""
        for task in self.tasks:
            if task.name == name:
                return task
        return None

    def find_task_by_id(self, task_id: int) -> "Task | None":
        """Return the task with this id, or None."""
        for task in self.tasks:
            if task.id == task_id:
                return task
        return None
