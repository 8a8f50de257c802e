"""Task listing cache with Redis backend and graceful fallback.

Listings are keyed by the parent project's tasks_last_updated_at, so any
successful task mutation moves readers onto a fresh key and stale entries
simply age out. When Redis is unavailable the cache falls back to a
process-local backend; backend errors never reach the caller.
"""

import asyncio
import hashlib
import json
import time
from collections.abc import Awaitable, Callable, Mapping
from datetime import datetime
from typing import Any, Protocol
from uuid import UUID

from pydantic import BaseModel
from redis.asyncio import Redis

from src.taskboard.core.config import get_settings
from src.taskboard.core.logging import get_logger
from src.taskboard.core.redis import get_redis

logger = get_logger(__name__)

PREFIX_TASK_LIST = "tasks"
NO_TIMESTAMP_SENTINEL = "0"
IN_MEMORY_MAX_ENTRIES = 1024
BACKEND_TIMEOUT_SECONDS = 1.0


class CacheBackend(Protocol):
    """Minimal key/value store with per-entry expiry."""

    async def get(self, key: str) -> str | None: ...

    async def set(self, key: str, value: str, ttl: int) -> None: ...


class RedisCacheBackend:
    """Cache backend on top of the shared redis.asyncio client."""

    def __init__(self, redis: Redis) -> None:
        self.redis = redis

    async def get(self, key: str) -> str | None:
        return await self.redis.get(key)

    async def set(self, key: str, value: str, ttl: int) -> None:
        await self.redis.setex(key, ttl, value)


class InMemoryCacheBackend:
    """Process-local cache backend used when Redis is not available.

    Entries are evicted lazily on read, and the oldest entry is dropped
    once max_entries is reached.
    """

    def __init__(
        self,
        max_entries: int = IN_MEMORY_MAX_ENTRIES,
        clock: Callable[[], float] = time.monotonic,
    ) -> None:
        self.max_entries = max_entries
        self._clock = clock
        self._entries: dict[str, tuple[float, str]] = {}

    async def get(self, key: str) -> str | None:
        entry = self._entries.get(key)
        if entry is None:
            return None
        expires_at, value = entry
        if expires_at <= self._clock():
            del self._entries[key]
            return None
        return value

    async def set(self, key: str, value: str, ttl: int) -> None:
        self._entries.pop(key, None)
        while len(self._entries) >= self.max_entries:
            oldest = next(iter(self._entries))
            del self._entries[oldest]
        self._entries[key] = (self._clock() + ttl, value)

    def clear(self) -> None:
        self._entries.clear()

    def __len__(self) -> int:
        return len(self._entries)


def _params_digest(params: Mapping[str, Any]) -> str:
    canonical = json.dumps(dict(params), sort_keys=True, separators=(",", ":"), default=str)
    return hashlib.sha256(canonical.encode()).hexdigest()


def build_task_list_cache_key(
    project_id: UUID,
    user_id: UUID,
    tasks_last_updated_at: datetime | None,
    params: Mapping[str, Any],
) -> str:
    """Build the cache key for one user's view of a project's task listing.

    Args:
        project_id: Project whose tasks are listed.
        user_id: Requesting user.
        tasks_last_updated_at: The project's last task mutation time, or None.
        params: All query parameters supplied with the request.

    Returns:
        tasks:project:{project}:user:{user}:updated:{stamp}:{digest}
    """
    if tasks_last_updated_at is None:
        stamp = NO_TIMESTAMP_SENTINEL
    else:
        stamp = tasks_last_updated_at.isoformat(timespec="microseconds")
    return (
        f"{PREFIX_TASK_LIST}:project:{project_id}:user:{user_id}"
        f":updated:{stamp}:{_params_digest(params)}"
    )


class TaskListCache:
    """Memoizes serialized task listings for a fixed TTL."""

    def __init__(
        self,
        backend: CacheBackend | None,
        ttl_seconds: int,
        timeout_seconds: float = BACKEND_TIMEOUT_SECONDS,
    ) -> None:
        self.backend = backend
        self.ttl_seconds = ttl_seconds
        self.timeout_seconds = timeout_seconds

    async def get_or_build[ModelT: BaseModel](
        self,
        key: str,
        builder: Callable[[], Awaitable[ModelT]],
        model: type[ModelT],
    ) -> ModelT:
        """Return the cached listing for key, or build, store and return it.

        Backend failures on read or write, including calls that outlast
        timeout_seconds, are logged and treated as a miss.
        """
        if self.backend is None:
            return await builder()

        cached: str | None = None
        try:
            async with asyncio.timeout(self.timeout_seconds):
                cached = await self.backend.get(key)
        except Exception as e:
            logger.warning("Task list cache read failed", key=key, error=repr(e))

        if cached is not None:
            try:
                result = model.model_validate_json(cached)
            except ValueError as e:
                logger.warning("Discarding undecodable cache entry", key=key, error=str(e))
            else:
                logger.debug("Task list cache hit", key=key)
                return result

        logger.debug("Task list cache miss", key=key)
        result = await builder()

        try:
            async with asyncio.timeout(self.timeout_seconds):
                await self.backend.set(key, result.model_dump_json(), self.ttl_seconds)
        except Exception as e:
            logger.warning("Task list cache write failed", key=key, error=repr(e))

        return result


_memory_backend = InMemoryCacheBackend()


def get_memory_backend() -> InMemoryCacheBackend:
    """Return the process-wide fallback backend."""
    return _memory_backend


async def get_task_list_cache() -> TaskListCache:
    """Build a TaskListCache on the best available backend.

    Returns a pass-through cache when CACHE_ENABLED is false.
    """
    settings = get_settings()
    if not settings.cache_enabled:
        return TaskListCache(None, settings.task_list_cache_ttl_seconds)

    redis = await get_redis()
    backend: CacheBackend
    if redis is not None:
        backend = RedisCacheBackend(redis)
    else:
        backend = _memory_backend
    return TaskListCache(
        backend,
        settings.task_list_cache_ttl_seconds,
        timeout_seconds=settings.redis_socket_timeout_seconds,
    )
