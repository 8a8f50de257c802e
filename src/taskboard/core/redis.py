"""Shared redis.asyncio client.

Redis is optional. get_redis() returns None when REDIS_URL is unset or the
server cannot be reached, and callers degrade: the task listing cache falls
back to process memory.
"""

from redis.asyncio import ConnectionPool, Redis

from src.taskboard.core.config import Settings, get_settings
from src.taskboard.core.logging import get_logger

logger = get_logger(__name__)

_client: Redis | None = None
_attempted: bool = False


def is_redis_configured() -> bool:
    return bool(get_settings().redis_url)


async def _connect(url: str, settings: Settings) -> Redis:
    pool = ConnectionPool.from_url(
        url,
        max_connections=settings.redis_pool_size,
        socket_connect_timeout=settings.redis_connect_timeout_seconds,
        socket_timeout=settings.redis_socket_timeout_seconds,
        decode_responses=True,
    )
    client = Redis(connection_pool=pool)
    try:
        await client.ping()  # type: ignore[misc]
    except Exception:
        await client.aclose(close_connection_pool=True)
        raise
    return client


async def get_redis() -> Redis | None:
    """Return the shared client, connecting on first use.

    A failed attempt is remembered, and no reconnect happens until
    close_redis() or reset_redis_state() is called.
    """
    global _client, _attempted

    if _client is not None or _attempted:
        return _client
    _attempted = True

    settings = get_settings()
    if not settings.redis_url:
        logger.info("Redis not configured, task listings use the in-process cache")
        return None

    try:
        _client = await _connect(settings.redis_url, settings)
    except Exception as e:
        logger.warning(
            "Redis connection failed, task listings use the in-process cache", error=str(e)
        )
        return None

    logger.info("Redis connected")
    return _client


async def close_redis() -> None:
    """Close the client and its pool. Called on application shutdown."""
    if _client is not None:
        await _client.aclose(close_connection_pool=True)
        logger.info("Redis connection closed")
    reset_redis_state()


def reset_redis_state() -> None:
    """Forget the client and the failed-attempt flag."""
    global _client, _attempted
    _client = None
    _attempted = False
