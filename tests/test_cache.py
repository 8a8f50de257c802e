"""Tests for the task listing cache (src/taskboard/core/cache.py)."""

import asyncio
from datetime import datetime
from uuid import uuid4

import pytest
from pydantic import BaseModel
from redis.asyncio import Redis

from src.taskboard.core.cache import (
    InMemoryCacheBackend,
    RedisCacheBackend,
    TaskListCache,
    build_task_list_cache_key,
    get_memory_backend,
    get_task_list_cache,
)
from src.taskboard.core.config import get_settings


class Listing(BaseModel):
    titles: list[str]


class CountingBuilder:
    """Builder that records how often the cache had to recompute."""

    def __init__(self, titles: list[str]):
        self.titles = titles
        self.calls = 0

    async def __call__(self) -> Listing:
        self.calls += 1
        return Listing(titles=list(self.titles))


class BrokenBackend:
    """Backend whose every operation fails."""

    async def get(self, key: str) -> str | None:
        raise ConnectionError("cache down")

    async def set(self, key: str, value: str, ttl: int) -> None:
        raise ConnectionError("cache down")


class StalledBackend:
    """Backend that never answers, like a Redis server that stopped responding."""

    async def get(self, key: str) -> str | None:
        await asyncio.sleep(30)
        return None

    async def set(self, key: str, value: str, ttl: int) -> None:
        await asyncio.sleep(30)


class FakeClock:
    def __init__(self) -> None:
        self.now = 1000.0

    def __call__(self) -> float:
        return self.now


class TestBuildTaskListCacheKey:
    """Tests for build_task_list_cache_key()."""

    def test_key_layout(self) -> None:
        project_id, user_id = uuid4(), uuid4()
        stamp = datetime(2024, 5, 1, 12, 30, 0, 123456)

        key = build_task_list_cache_key(project_id, user_id, stamp, {"page": "1"})

        prefix = (
            f"tasks:project:{project_id}:user:{user_id}"
            ":updated:2024-05-01T12:30:00.123456:"
        )
        assert key.startswith(prefix)
        assert len(key.removeprefix(prefix)) == 64  # sha256 hex digest

    def test_missing_timestamp_uses_zero_sentinel(self) -> None:
        project_id, user_id = uuid4(), uuid4()

        key = build_task_list_cache_key(project_id, user_id, None, {})

        assert ":updated:0:" in key

    def test_param_order_does_not_matter(self) -> None:
        project_id, user_id = uuid4(), uuid4()

        key1 = build_task_list_cache_key(
            project_id, user_id, None, {"status": "done", "page": "2"}
        )
        key2 = build_task_list_cache_key(
            project_id, user_id, None, {"page": "2", "status": "done"}
        )

        assert key1 == key2

    def test_timestamps_within_one_second_give_distinct_keys(self) -> None:
        """Sub-second mutations must still retire cached listings."""
        project_id, user_id = uuid4(), uuid4()
        first = datetime(2024, 5, 1, 12, 30, 0, 1)
        second = datetime(2024, 5, 1, 12, 30, 0, 2)

        assert build_task_list_cache_key(
            project_id, user_id, first, {}
        ) != build_task_list_cache_key(project_id, user_id, second, {})

    def test_users_do_not_share_keys(self) -> None:
        project_id = uuid4()

        assert build_task_list_cache_key(
            project_id, uuid4(), None, {}
        ) != build_task_list_cache_key(project_id, uuid4(), None, {})


class TestInMemoryCacheBackend:
    """Tests for InMemoryCacheBackend."""

    async def test_get_returns_stored_value(self) -> None:
        backend = InMemoryCacheBackend()

        await backend.set("k", "v", 60)

        assert await backend.get("k") == "v"

    async def test_get_missing_key_returns_none(self) -> None:
        assert await InMemoryCacheBackend().get("missing") is None

    async def test_entries_expire_after_ttl(self) -> None:
        clock = FakeClock()
        backend = InMemoryCacheBackend(clock=clock)
        await backend.set("k", "v", 60)

        clock.now += 59
        assert await backend.get("k") == "v"

        clock.now += 1
        assert await backend.get("k") is None
        assert len(backend) == 0

    async def test_oldest_entry_evicted_at_capacity(self) -> None:
        backend = InMemoryCacheBackend(max_entries=2)

        await backend.set("a", "1", 60)
        await backend.set("b", "2", 60)
        await backend.set("c", "3", 60)

        assert await backend.get("a") is None
        assert await backend.get("b") == "2"
        assert await backend.get("c") == "3"


class TestRedisCacheBackend:
    """Tests for RedisCacheBackend."""

    async def test_set_stores_value_with_ttl(self, fake_redis: Redis) -> None:
        backend = RedisCacheBackend(fake_redis)

        await backend.set("tasks:key", "payload", 60)

        assert await fake_redis.get("tasks:key") == "payload"
        ttl = await fake_redis.ttl("tasks:key")
        assert 0 < ttl <= 60

    async def test_get_round_trips(self, fake_redis: Redis) -> None:
        backend = RedisCacheBackend(fake_redis)
        await backend.set("tasks:key", "payload", 60)

        assert await backend.get("tasks:key") == "payload"


class TestTaskListCache:
    """Tests for TaskListCache.get_or_build()."""

    async def test_second_call_is_served_from_cache(self) -> None:
        cache = TaskListCache(InMemoryCacheBackend(), ttl_seconds=60)
        builder = CountingBuilder(["a", "b"])

        first = await cache.get_or_build("key", builder, Listing)
        second = await cache.get_or_build("key", builder, Listing)

        assert first == second == Listing(titles=["a", "b"])
        assert builder.calls == 1

    async def test_different_keys_are_built_separately(self) -> None:
        cache = TaskListCache(InMemoryCacheBackend(), ttl_seconds=60)
        builder = CountingBuilder(["a"])

        await cache.get_or_build("key-1", builder, Listing)
        await cache.get_or_build("key-2", builder, Listing)

        assert builder.calls == 2

    async def test_entry_recomputed_after_ttl(self) -> None:
        clock = FakeClock()
        cache = TaskListCache(InMemoryCacheBackend(clock=clock), ttl_seconds=60)
        builder = CountingBuilder(["a"])

        await cache.get_or_build("key", builder, Listing)
        clock.now += 61
        await cache.get_or_build("key", builder, Listing)

        assert builder.calls == 2

    async def test_backend_failures_fall_through_to_builder(self) -> None:
        """Read and write errors are swallowed and the listing is still returned."""
        cache = TaskListCache(BrokenBackend(), ttl_seconds=60)
        builder = CountingBuilder(["a"])

        first = await cache.get_or_build("key", builder, Listing)
        second = await cache.get_or_build("key", builder, Listing)

        assert first == second == Listing(titles=["a"])
        assert builder.calls == 2

    async def test_stalled_backend_is_abandoned_after_timeout(self) -> None:
        cache = TaskListCache(StalledBackend(), ttl_seconds=60, timeout_seconds=0.05)
        builder = CountingBuilder(["a"])

        async with asyncio.timeout(5):
            result = await cache.get_or_build("key", builder, Listing)

        assert result == Listing(titles=["a"])
        assert builder.calls == 1

    async def test_undecodable_entry_is_rebuilt(self) -> None:
        backend = InMemoryCacheBackend()
        await backend.set("key", "not json", 60)
        cache = TaskListCache(backend, ttl_seconds=60)
        builder = CountingBuilder(["a"])

        result = await cache.get_or_build("key", builder, Listing)

        assert result == Listing(titles=["a"])
        assert builder.calls == 1
        assert await backend.get("key") == Listing(titles=["a"]).model_dump_json()

    async def test_no_backend_always_builds(self) -> None:
        cache = TaskListCache(None, ttl_seconds=60)
        builder = CountingBuilder(["a"])

        await cache.get_or_build("key", builder, Listing)
        await cache.get_or_build("key", builder, Listing)

        assert builder.calls == 2

    async def test_entries_written_to_redis_with_configured_ttl(self, fake_redis: Redis) -> None:
        cache = TaskListCache(RedisCacheBackend(fake_redis), ttl_seconds=60)

        await cache.get_or_build("tasks:key", CountingBuilder(["a"]), Listing)

        assert await fake_redis.exists("tasks:key") == 1
        assert 0 < await fake_redis.ttl("tasks:key") <= 60


class TestGetTaskListCache:
    """Tests for get_task_list_cache() backend selection."""

    async def test_uses_redis_when_available(self, mock_redis: Redis) -> None:
        cache = await get_task_list_cache()

        assert isinstance(cache.backend, RedisCacheBackend)
        assert cache.backend.redis is mock_redis
        assert cache.ttl_seconds == 60
        assert cache.timeout_seconds == get_settings().redis_socket_timeout_seconds

    async def test_falls_back_to_memory_when_redis_unavailable(
        self, mock_redis_unavailable: None
    ) -> None:
        cache = await get_task_list_cache()

        assert cache.backend is get_memory_backend()

    @pytest.mark.usefixtures("cache_disabled")
    async def test_disabled_cache_has_no_backend(self) -> None:
        cache = await get_task_list_cache()

        assert cache.backend is None
