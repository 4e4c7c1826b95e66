"""
Tests for custom exception hierarchy.

WHY: Every API failure is rendered from these exceptions, so their status
codes, messages and serialized shape are the error contract.
"""

import pytest
from fastapi import FastAPI, Query
from fastapi.exceptions import RequestValidationError
from fastapi.testclient import TestClient

from task_storage.core.exceptions import (
    AppException,
    ValidationError,
    PaginationError,
    DuplicateProjectNameError,
    InvalidDateRangeError,
    DuplicateTaskNameError,
    TaskNotInProjectError,
    ResourceNotFoundError,
    ProjectNotFoundError,
)
from task_storage.core.exception_handlers import (
    app_exception_handler,
    generic_exception_handler,
    validation_exception_handler,
)


class TestAppException:
    """Test base AppException class."""

    def test_default_message(self):
        """Verify default message is used when none provided."""
        exc = AppException()
        assert exc.message == "An unexpected error occurred"
        assert exc.status_code == 500

    def test_custom_message(self):
        """Verify custom message overrides default."""
        exc = AppException(message="Custom error message")
        assert exc.message == "Custom error message"
        assert str(exc) == "Custom error message"

    def test_custom_status_code(self):
        """Verify custom status code overrides class default."""
        exc = AppException(status_code=418)
        assert exc.status_code == 418

    def test_to_dict_basic(self):
        """Verify exception serializes to dict correctly."""
        exc = AppException(message="Test error", project_id=7)
        result = exc.to_dict()

        assert result == {
            "error": "AppException",
            "message": "Test error",
            "status_code": 500,
            "details": {"project_id": 7},
        }

    def test_to_dict_filters_sensitive_data(self):
        """Verify sensitive fields are filtered from dict."""
        exc = AppException(message="Test error", project_id=7, token="abc123")
        result = exc.to_dict()

        assert "token" not in result["details"]
        assert result["details"]["project_id"] == 7

    def test_to_dict_no_context(self):
        """Verify to_dict works with no context data."""
        assert AppException(message="Test error").to_dict()["details"] is None


class TestBadRequestExceptions:
    """Every rule violation maps to 400."""

    @pytest.mark.parametrize(
        "exc_class",
        [
            ValidationError,
            PaginationError,
            DuplicateProjectNameError,
            InvalidDateRangeError,
            DuplicateTaskNameError,
            TaskNotInProjectError,
        ],
    )
    def test_status_code_is_400(self, exc_class):
        exc = exc_class()
        assert exc.status_code == 400
        assert isinstance(exc, ValidationError)

    def test_invalid_date_range_default_message(self):
        assert InvalidDateRangeError().message == "Start date can not be after Completion date"


class TestNotFoundExceptions:
    """Missing entities map to 404."""

    def test_resource_not_found_status_code(self):
        assert ResourceNotFoundError().status_code == 404

    def test_project_not_found_for_id(self):
        """Verify the id-specific message and context."""
        exc = ProjectNotFoundError.for_id(42)

        assert exc.status_code == 404
        assert exc.message == "Project with the ID 42 was not found"
        assert exc.to_dict()["details"] == {"project_id": 42}


class TestExceptionHandlerIntegration:
    """Test exception handler integration with FastAPI."""

    @pytest.fixture
    def app(self):
        """Create test FastAPI app with exception handlers."""
        app = FastAPI()
        app.add_exception_handler(AppException, app_exception_handler)
        app.add_exception_handler(RequestValidationError, validation_exception_handler)
        app.add_exception_handler(Exception, generic_exception_handler)

        @app.get("/missing")
        async def missing():
            raise ProjectNotFoundError.for_id(5)

        @app.get("/typed")
        async def typed(number: int = Query(...)):
            return {"number": number}

        @app.get("/boom")
        async def boom():
            raise RuntimeError("database exploded")

        return app

    @pytest.fixture
    def client(self, app):
        """Create test client."""
        return TestClient(app, raise_server_exceptions=False)

    def test_app_exception_returns_json(self, client):
        response = client.get("/missing")

        assert response.status_code == 404
        assert response.headers["content-type"] == "application/json"
        data = response.json()
        assert data["error"] == "ProjectNotFoundError"
        assert data["message"] == "Project with the ID 5 was not found"
        assert data["details"] == {"project_id": 5}

    def test_request_validation_error_is_400(self, client):
        """Verify a non-integer query parameter becomes a 400, not 422."""
        response = client.get("/typed", params={"number": "abc"})

        assert response.status_code == 400
        data = response.json()
        assert data["error"] == "ValidationError"
        assert data["details"]["errors"][0]["field"] == "query.number"

    def test_unexpected_error_is_generic_500(self, client):
        """Verify internal error text is not leaked."""
        response = client.get("/boom")

        assert response.status_code == 500
        assert response.json()["message"] == "An unexpected error occurred"
        assert "exploded" not in response.text
