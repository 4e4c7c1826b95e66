"""
Data Access Object (DAO) package.

WHY: DAOs provide a clean separation between database operations and business logic,
making the codebase more testable and maintainable.
"""

from task_storage.dao.base import BaseDAO
from task_storage.dao.project import ProjectDAO

__all__ = [
    "BaseDAO",
    "ProjectDAO",
]
