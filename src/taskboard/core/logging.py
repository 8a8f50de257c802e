"""structlog configuration and request-scoped log context."""

import logging
import sys
from uuid import UUID

import structlog
from structlog.contextvars import bind_contextvars, clear_contextvars, merge_contextvars
from structlog.typing import Processor

from src.taskboard.core.config import get_settings

NOISY_LOGGERS = ("sqlalchemy.engine", "httpx", "httpcore")


def _renderers(debug: bool) -> list[Processor]:
    if debug:
        return [structlog.dev.ConsoleRenderer(colors=True)]
    return [structlog.processors.format_exc_info, structlog.processors.JSONRenderer()]


def setup_logging(debug: bool = False) -> None:
    """Route structlog through the stdlib root logger on stdout.

    Debug mode renders coloured console lines, otherwise one JSON object
    per line.
    """
    logging.basicConfig(
        format="%(message)s",
        stream=sys.stdout,
        level=logging.DEBUG if debug else logging.INFO,
    )

    structlog.configure(
        processors=[
            merge_contextvars,
            structlog.processors.add_log_level,
            structlog.processors.TimeStamper(fmt="iso", utc=True),
            structlog.processors.StackInfoRenderer(),
            structlog.processors.UnicodeDecoder(),
            *_renderers(debug),
        ],
        wrapper_class=structlog.stdlib.BoundLogger,
        context_class=dict,
        logger_factory=structlog.stdlib.LoggerFactory(),
        cache_logger_on_first_use=True,
    )

    for name in NOISY_LOGGERS:
        logging.getLogger(name).setLevel(logging.WARNING)


def get_logger(name: str | None = None) -> structlog.stdlib.BoundLogger:
    return structlog.get_logger(name)


def bind_request_context(
    request_id: str | None,
    method: str | None = None,
    path: str | None = None,
) -> None:
    """Attach the correlation id (and the route, when given) to later log lines."""
    context: dict[str, str] = {}
    if request_id:
        context["request_id"] = request_id
    if method:
        context["method"] = method
    if path:
        context["path"] = path
    if context:
        bind_contextvars(**context)


def bind_user_context(user_id: UUID, email: str | None = None) -> None:
    """Attach the authenticated user to later log lines.

    The email is only bound when LOG_USER_EMAILS is enabled.
    """
    context = {"user_id": str(user_id)}
    if email and get_settings().log_user_emails:
        context["user_email"] = email
    bind_contextvars(**context)


def clear_request_context() -> None:
    clear_contextvars()
