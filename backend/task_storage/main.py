"""
Main FastAPI application.

WHY: This is the entry point for the application. It configures logging,
middleware, routes and exception handlers.
"""

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from fastapi.exceptions import RequestValidationError
from starlette.exceptions import HTTPException as StarletteHTTPException

from task_storage.core.config import settings
from task_storage.core.exceptions import AppException
from task_storage.core.exception_handlers import (
    app_exception_handler,
    validation_exception_handler,
    http_exception_handler,
    generic_exception_handler,
)
from task_storage.core.logging_config import setup_logging
from task_storage.middleware import RequestContextMiddleware
from task_storage.api import projects


def create_app() -> FastAPI:
    """
    Create and configure FastAPI application.

    WHY: Factory pattern allows easier testing with different configurations.

    Returns:
        Configured FastAPI application instance
    """
    setup_logging(settings.LOG_LEVEL, settings.LOG_FILE)

    app = FastAPI(
        title=settings.PROJECT_NAME,
        description="Projects and their tasks",
        version=settings.VERSION,
        docs_url="/api/docs",
        redoc_url="/api/redoc",
        openapi_url="/api/openapi.json",
    )

    # Every error body has the same shape; request validation errors are 400
    app.add_exception_handler(AppException, app_exception_handler)
    app.add_exception_handler(RequestValidationError, validation_exception_handler)
    app.add_exception_handler(StarletteHTTPException, http_exception_handler)
    app.add_exception_handler(Exception, generic_exception_handler)

    app.add_middleware(RequestContextMiddleware)

    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.CORS_ORIGINS,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    @app.get("/health", tags=["health"])
    async def health_check() -> dict:
        """Liveness check; does not touch the database."""
        return {
            "status": "healthy",
            "version": settings.VERSION,
        }

    @app.get("/", tags=["root"])
    async def root() -> dict:
        """Root endpoint with API information."""
        return {
            "name": settings.PROJECT_NAME,
            "version": settings.VERSION,
            "docs": "/api/docs",
        }

    app.include_router(projects.router)

    return app


app = create_app()


if __name__ == "__main__":
    import uvicorn

    # Development only; in production run `uvicorn task_storage.main:app`
    uvicorn.run(
        "task_storage.main:app",
        host="0.0.0.0",
        port=8000,
        reload=settings.DEBUG,
        log_level="info" if settings.DEBUG else "warning",
    )
