"""
Custom exception hierarchy for structured error handling.

WHY: Every failure the API reports is either a bad request (validation,
uniqueness, ordering) or a missing entity. Raising these from the service
layer keeps HTTP status mapping in one place (see exception_handlers).

IMPORTANT: Services never raise bare Exception or HTTPException.
"""

from typing import Any, Dict, Optional


class AppException(Exception):
    """
    Base exception class for all application exceptions.

    All custom exceptions should inherit from this class.
    """

    status_code: int = 500
    default_message: str = "An unexpected error occurred"

    def __init__(
        self,
        message: Optional[str] = None,
        status_code: Optional[int] = None,
        **context: Any,
    ):
        """
        Initialize exception with message and context.

        Args:
            message: Human-readable error message
            status_code: HTTP status code (overrides class default)
            **context: Additional context for debugging (filtered in to_dict)
        """
        self.message = message or self.default_message
        if status_code is not None:
            self.status_code = status_code
        self.context = context
        super().__init__(self.message)

    def to_dict(self) -> Dict[str, Any]:
        """
        Serialize exception to dictionary for JSON response.

        Returns:
            Dictionary with error details (sensitive fields filtered out)
        """
        sensitive_fields = {"password", "token", "secret", "key", "api_key"}
        filtered_context = {
            k: v for k, v in self.context.items() if k.lower() not in sensitive_fields
        }

        return {
            "error": self.__class__.__name__,
            "message": self.message,
            "status_code": self.status_code,
            "details": filtered_context if filtered_context else None,
        }


# ============================================================================
# Validation & Input Exceptions
# ============================================================================


class ValidationError(AppException):
    """
    Raised when input validation fails.

    HTTP Status: 400 Bad Request
    """

    status_code = 400
    default_message = "Validation failed"


class PaginationError(ValidationError):
    """
    Raised when listing parameters are out of range.

    Covers page number, page size, sort field and sort direction.

    HTTP Status: 400 Bad Request
    """

    default_message = "Invalid pagination parameters"


class DuplicateProjectNameError(ValidationError):
    """
    Raised when a project is created with a name that is already taken.

    HTTP Status: 400 Bad Request
    """

    default_message = "Project with this name already exists"


class InvalidDateRangeError(ValidationError):
    """
    Raised when a project's start date is after its completion date.

    HTTP Status: 400 Bad Request
    """

    default_message = "Start date can not be after Completion date"


class DuplicateTaskNameError(ValidationError):
    """
    Raised when a task name is already present in the project's task list.

    HTTP Status: 400 Bad Request
    """

    default_message = "The task is in the task list already"


class TaskNotInProjectError(ValidationError):
    """
    Raised when deleting a task id the project does not contain.

    The project itself exists, so the request is malformed rather than
    pointing at a missing resource.

    HTTP Status: 400 Bad Request
    """

    default_message = "Task not found in project"


# ============================================================================
# Resource Exceptions
# ============================================================================


class ResourceNotFoundError(AppException):
    """
    Raised when a requested resource doesn't exist.

    HTTP Status: 404 Not Found
    """

    status_code = 404
    default_message = "Resource not found"


class ProjectNotFoundError(ResourceNotFoundError):
    """Raised when a project doesn't exist."""

    default_message = "Project not found"

    @classmethod
    def for_id(cls, project_id: int) -> "ProjectNotFoundError":
        """Build the standard message for a missing project id."""
        return cls(
            message=f"Project with the ID {project_id} was not found",
            project_id=project_id,
        )
