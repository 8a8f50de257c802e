"""Integration test fixtures for database and HTTP client operations.

Each test gets a fresh in-memory SQLite database (foreign keys enforced)
shared by the test's own session and by the application under test.
"""

from collections.abc import AsyncGenerator

import pytest
from fastapi import FastAPI
from httpx import ASGITransport, AsyncClient
from sqlalchemy.ext.asyncio import AsyncEngine, AsyncSession
from sqlalchemy.pool import StaticPool
from sqlmodel import SQLModel

from src.taskboard.api.dependencies import get_db_session
from src.taskboard.core import db
from src.taskboard.core import redis as redis_core
from src.taskboard.core.db import create_engine_from_url, get_session, session_factory
from src.taskboard.core.health import reset_health_cache
from src.taskboard.main import create_app
from src.taskboard.models import User
from tests.helpers import auth_headers, create_user


@pytest.fixture(autouse=True)
async def _reset_redis_between_tests() -> AsyncGenerator[None]:
    """Reset Redis state between tests to prevent event loop issues.

    Redis clients hold references to their event loop. This fixture
    ensures Redis is properly closed after each test.
    """
    redis_core.reset_redis_state()
    yield
    await redis_core.close_redis()


@pytest.fixture
async def engine() -> AsyncGenerator[AsyncEngine]:
    """Create a fresh in-memory database with all tables."""
    await db.dispose_engine()

    test_engine = create_engine_from_url("sqlite+aiosqlite:///:memory:", poolclass=StaticPool)
    async with test_engine.begin() as connection:
        await connection.run_sync(SQLModel.metadata.create_all)

    yield test_engine
    await test_engine.dispose()
    await db.dispose_engine()


@pytest.fixture
async def db_session(engine: AsyncEngine) -> AsyncGenerator[AsyncSession]:
    """Provide an async session for arranging and inspecting data.

    Tests must call `await session.commit()` to make changes visible
    to the application.
    """
    async with session_factory(engine)() as session:
        yield session


@pytest.fixture
def app(engine: AsyncEngine) -> FastAPI:
    """Application wired to the test database."""
    reset_health_cache()
    application = create_app()

    async def _get_test_session() -> AsyncGenerator[AsyncSession]:
        async with get_session(engine) as session:
            yield session

    application.dependency_overrides[get_db_session] = _get_test_session
    return application


@pytest.fixture
async def client(app: FastAPI) -> AsyncGenerator[AsyncClient]:
    async with AsyncClient(transport=ASGITransport(app=app), base_url="http://test") as c:
        yield c


@pytest.fixture
async def owner(db_session: AsyncSession) -> User:
    """User A - owns the projects created in a test."""
    return await create_user(db_session, email="owner@example.com", full_name="Owner A")


@pytest.fixture
async def other_user(db_session: AsyncSession) -> User:
    """User B - has no access to owner's projects."""
    return await create_user(db_session, email="other@example.com", full_name="Other B")


@pytest.fixture
def owner_headers(owner: User) -> dict[str, str]:
    return auth_headers(owner)


@pytest.fixture
def other_headers(other_user: User) -> dict[str, str]:
    return auth_headers(other_user)
