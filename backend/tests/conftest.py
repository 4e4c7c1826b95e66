"""
Pytest configuration and fixtures.

WHY: Fixtures provide reusable test setup/teardown logic, reducing
duplication and ensuring consistent test environments.
"""

import pytest
import pytest_asyncio
from datetime import date
from typing import AsyncGenerator
from httpx import ASGITransport, AsyncClient
from sqlalchemy.ext.asyncio import AsyncSession, create_async_engine, async_sessionmaker
from sqlalchemy.pool import StaticPool

from task_storage.main import app
from task_storage.models import Base
from task_storage.db.session import get_db


# In-memory SQLite keeps tests free of an external database. StaticPool
# makes every checkout reuse the one connection that holds the schema.
TEST_ASYNC_DATABASE_URL = "sqlite+aiosqlite:///:memory:"


@pytest_asyncio.fixture(scope="function")
async def db_engine():
    """
    Create a test database engine.

    WHY: Function scope gives each test a fresh database.
    """
    engine = create_async_engine(
        TEST_ASYNC_DATABASE_URL,
        echo=False,
        poolclass=StaticPool,
        connect_args={"check_same_thread": False},
    )

    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)

    yield engine

    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.drop_all)

    await engine.dispose()


@pytest_asyncio.fixture
async def db_session(db_engine) -> AsyncGenerator[AsyncSession, None]:
    """
    Create a test database session.

    Yields:
        AsyncSession: Database session for the test, rolled back afterwards
    """
    async_session = async_sessionmaker(
        db_engine,
        class_=AsyncSession,
        expire_on_commit=False,
    )

    async with async_session() as session:
        yield session
        await session.rollback()


@pytest_asyncio.fixture
async def client(db_session: AsyncSession) -> AsyncGenerator[AsyncClient, None]:
    """
    Create a test HTTP client.

    WHY: AsyncClient over ASGITransport exercises the full app (middleware,
    routing, exception handlers) without running a server. Requests share
    the test's session so assertions can read what the API wrote.

    Yields:
        AsyncClient: HTTP client for making test requests
    """

    async def override_get_db():
        """Override database dependency with test session."""
        yield db_session

    app.dependency_overrides[get_db] = override_get_db

    async with AsyncClient(transport=ASGITransport(app=app), base_url="http://test") as ac:
        yield ac

    app.dependency_overrides.clear()


@pytest.fixture
def sample_project_data() -> dict:
    """
    Sample createProject body.

    WHY: Centralizing test data keeps request bodies consistent across tests.
    """
    return {
        "projectName": "Warehouse migration",
        "projectStartDate": "2024-03-01",
        "projectCompletionDate": "2024-06-30",
    }


@pytest.fixture
def sample_dates() -> tuple:
    """Valid (start, completion) pair."""
    return date(2024, 3, 1), date(2024, 6, 30)
