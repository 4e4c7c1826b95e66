"""
Task model.

WHAT: A named unit of work belonging to exactly one project.

WHY: Task names are unique within their project. The service checks the
loaded task list first; the ``(project_id, name)`` unique constraint catches
a concurrent insert that slipped past that check.
"""

from datetime import datetime
from typing import TYPE_CHECKING
from sqlalchemy import DateTime, ForeignKey, Integer, String, UniqueConstraint, func
from sqlalchemy.orm import Mapped, mapped_column, relationship

from task_storage.models.base import Base, utcnow

if TYPE_CHECKING:
    from task_storage.models.project import Project


class Task(Base):
    """
    Task model.

    Attributes:
        id: Primary key
        name: Task name, unique within the owning project
        project_id: Owning project
        created_at: Record creation timestamp
    """

    __tablename__ = "tasks"
    __table_args__ = (
        UniqueConstraint("project_id", "name", name="uq_tasks_project_id_name"),
    )

    id: Mapped[int] = mapped_column(Integer, primary_key=True, index=True)
    name: Mapped[str] = mapped_column(
        String(255),
        nullable=False,
        comment="Task name",
    )
    project_id: Mapped[int] = mapped_column(
        Integer,
        ForeignKey("projects.id", ondelete="CASCADE"),
        nullable=False,
        index=True,
        comment="Project that owns this task",
    )
    created_at: Mapped[datetime] = mapped_column(
        DateTime,
        nullable=False,
        default=utcnow,
        server_default=func.now(),
        comment="Record creation timestamp",
    )

    project: Mapped["Project"] = relationship(
        "Project",
        back_populates="tasks",
    )

    def __repr__(self) -> str:
        """String representation for debugging."""
        return f"<Task(id={self.id}, name={self.name}, project_id={self.project_id})>"
