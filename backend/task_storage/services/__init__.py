"""
Business logic services package.

WHY: Services contain business logic separated from API routes and data access,
following the three-layer architecture (API → Service → DAO).
"""

from task_storage.services.project_service import ProjectPageResult, ProjectService

__all__ = ["ProjectPageResult", "ProjectService"]
