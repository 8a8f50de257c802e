"""Root test fixtures shared across all test types.

This conftest contains fixtures that can be used by both unit and integration tests.
Database-specific fixtures are in tests/integration/conftest.py.
"""

import os

# Settings are read at import time - configure the test environment first
os.environ.setdefault("APP_ENV", "testing")
os.environ.setdefault("DATABASE_URL", "sqlite+aiosqlite:///:memory:")
os.environ.setdefault("JWT_SECRET_KEY", "test-secret-key-that-is-long-enough-for-hs256")
os.environ.pop("REDIS_URL", None)
os.environ.pop("RESEND_API_KEY", None)

# ruff: noqa: E402 - Imports must be after env var setup
from collections.abc import AsyncGenerator, Generator

import pytest
from fakeredis import aioredis as fakeredis_aio
from redis.asyncio import Redis

from src.taskboard.core import redis as redis_core
from src.taskboard.core.cache import get_memory_backend
from src.taskboard.core.config import get_settings

# Clear settings cache to ensure test environment variables are picked up
get_settings.cache_clear()


@pytest.fixture(autouse=True)
def _clear_memory_cache() -> Generator[None]:
    """Start every test with an empty in-process listing cache."""
    get_memory_backend().clear()
    yield
    get_memory_backend().clear()


# --- Redis Test Fixtures (shared) ---


@pytest.fixture
async def fake_redis() -> AsyncGenerator[Redis]:
    """Provides a fakeredis client for testing.

    Returns an in-memory Redis implementation that behaves like
    a real Redis server but doesn't require external dependencies.
    """
    client = fakeredis_aio.FakeRedis(decode_responses=True)
    yield client
    await client.aclose()


@pytest.fixture
async def mock_redis(fake_redis: Redis, monkeypatch: pytest.MonkeyPatch) -> AsyncGenerator[Redis]:
    """Patches get_redis() to return fakeredis client.

    Patches both src.taskboard.core.redis and src.taskboard.core.cache
    modules to ensure the fake redis is used everywhere.
    """
    redis_core.reset_redis_state()

    async def _get_fake_redis() -> Redis:
        return fake_redis

    # Patch in both modules that import get_redis
    monkeypatch.setattr("src.taskboard.core.redis.get_redis", _get_fake_redis)
    monkeypatch.setattr("src.taskboard.core.cache.get_redis", _get_fake_redis)
    yield fake_redis
    redis_core.reset_redis_state()


@pytest.fixture
async def mock_redis_unavailable(monkeypatch: pytest.MonkeyPatch) -> AsyncGenerator[None]:
    """Patches get_redis() to return None (simulates Redis unavailable)."""
    redis_core.reset_redis_state()

    async def _get_none() -> None:
        return None

    monkeypatch.setattr("src.taskboard.core.redis.get_redis", _get_none)
    monkeypatch.setattr("src.taskboard.core.cache.get_redis", _get_none)
    yield
    redis_core.reset_redis_state()


@pytest.fixture
def cache_disabled(monkeypatch: pytest.MonkeyPatch) -> Generator[None]:
    """Run with CACHE_ENABLED=false."""
    monkeypatch.setenv("CACHE_ENABLED", "false")
    get_settings.cache_clear()
    yield
    monkeypatch.delenv("CACHE_ENABLED")
    get_settings.cache_clear()


@pytest.fixture
def short_redis_timeout(monkeypatch: pytest.MonkeyPatch) -> Generator[None]:
    """Give up on Redis calls after 50 ms."""
    monkeypatch.setenv("REDIS_SOCKET_TIMEOUT_SECONDS", "0.05")
    get_settings.cache_clear()
    yield
    monkeypatch.delenv("REDIS_SOCKET_TIMEOUT_SECONDS")
    get_settings.cache_clear()
