"""Health check and Prometheus metrics endpoints."""

import secrets
import time
from typing import Any

from fastapi import Depends, FastAPI, HTTPException, status
from fastapi.responses import JSONResponse
from fastapi.security import APIKeyHeader
from prometheus_fastapi_instrumentator import Instrumentator
from sqlalchemy import text

from src.taskboard.core.config import get_settings
from src.taskboard.core.db import get_session
from src.taskboard.core.redis import get_redis, is_redis_configured

HEALTH_CACHE_TTL = 10  # seconds

HEALTHY = "healthy"
DEGRADED = "degraded"
UNHEALTHY = "unhealthy"

_last_report: dict[str, Any] | None = None
_last_report_at: float = 0


def reset_health_cache() -> None:
    global _last_report, _last_report_at
    _last_report = None
    _last_report_at = 0


async def _check_database() -> str:
    try:
        async with get_session() as session:
            await session.execute(text("SELECT 1"))
    except Exception as e:
        return f"{UNHEALTHY}: {e!s}"
    return HEALTHY


async def _check_redis() -> str:
    if not is_redis_configured():
        return "not_configured"
    redis = await get_redis()
    if redis is None:
        return "unavailable"
    try:
        await redis.ping()  # type: ignore[misc]
    except Exception as e:
        return f"{UNHEALTHY}: {e!s}"
    return HEALTHY


def _overall_status(database: str, redis: str) -> str:
    # Redis only backs the task listing cache
    if database != HEALTHY:
        return UNHEALTHY
    if redis in (HEALTHY, "not_configured"):
        return HEALTHY
    return DEGRADED


def _respond(report: dict[str, Any]) -> JSONResponse:
    code = status.HTTP_503_SERVICE_UNAVAILABLE if report["status"] == UNHEALTHY else 200
    return JSONResponse(content=report, status_code=code)


def setup_health_endpoint(app: FastAPI) -> None:
    """Register GET /health. Results are reused for HEALTH_CACHE_TTL seconds."""

    @app.get("/health", tags=["health"])
    async def health() -> JSONResponse:
        global _last_report, _last_report_at

        now = time.time()
        age = now - _last_report_at
        if _last_report is not None and age < HEALTH_CACHE_TTL:
            return _respond({**_last_report, "cached": True, "cache_age_seconds": round(age, 1)})

        database = await _check_database()
        redis = await _check_redis()
        report = {
            "status": _overall_status(database, redis),
            "database": database,
            "redis": redis,
            "cached": False,
            "timestamp": now,
        }

        _last_report, _last_report_at = report, now
        return _respond(report)


def setup_metrics(app: FastAPI) -> None:
    """Expose Prometheus metrics at /metrics, behind X-Metrics-Key when configured."""
    settings = get_settings()
    instrumentator = Instrumentator().instrument(app)

    if not settings.metrics_api_key:
        instrumentator.expose(app, endpoint="/metrics")
        return

    expected_key = settings.metrics_api_key
    metrics_key_header = APIKeyHeader(name="X-Metrics-Key", auto_error=False)

    async def require_metrics_key(api_key: str | None = Depends(metrics_key_header)) -> None:
        if api_key is None or not secrets.compare_digest(api_key, expected_key):
            raise HTTPException(
                status_code=status.HTTP_401_UNAUTHORIZED,
                detail="Invalid or missing metrics API key",
            )

    instrumentator.expose(app, endpoint="/metrics", dependencies=[Depends(require_metrics_key)])
