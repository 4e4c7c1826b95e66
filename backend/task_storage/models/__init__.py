"""
Database models package.

WHY: Centralizing model imports ensures Alembic can discover all models
for migration generation and makes it easier to import models elsewhere.
"""

from task_storage.models.base import Base, TimestampMixin
from task_storage.models.project import Project
from task_storage.models.task import Task

__all__ = [
    "Base",
    "TimestampMixin",
    "Project",
    "Task",
]
