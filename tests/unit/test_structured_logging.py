"""Tests for structured logging context."""

from uuid import uuid4

import pytest
import structlog
from structlog.testing import CapturingLogger

from src.taskboard.core.config import get_settings
from src.taskboard.core.logging import (
    bind_request_context,
    bind_user_context,
    clear_request_context,
)

pytestmark = pytest.mark.unit


@pytest.fixture
def capturing_logger():
    """Create a capturing logger for tests."""
    cap_logger = CapturingLogger()

    # Save original configuration to restore later
    old_config = structlog.get_config()

    structlog.configure(
        processors=[structlog.contextvars.merge_contextvars],
        wrapper_class=structlog.stdlib.BoundLogger,
        context_class=dict,
        logger_factory=lambda *args, **kwargs: cap_logger,
        cache_logger_on_first_use=False,
    )

    clear_request_context()
    yield cap_logger
    clear_request_context()
    structlog.configure(**old_config)


def test_bind_request_context(capturing_logger):
    """Test binding request_id to log context."""
    request_id = "test-request-123"

    bind_request_context(request_id)
    logger = structlog.get_logger()
    logger.info("test message")

    entries = capturing_logger.calls
    assert len(entries) == 1
    assert entries[0].kwargs["request_id"] == request_id


def test_bind_request_context_with_none(capturing_logger):
    """Test that None request_id is not bound."""
    bind_request_context(None)
    logger = structlog.get_logger()
    logger.info("test message")

    entries = capturing_logger.calls
    assert len(entries) == 1
    assert "request_id" not in entries[0].kwargs


def test_bind_user_context_omits_email_by_default(capturing_logger):
    """Emails stay out of logs unless LOG_USER_EMAILS is enabled."""
    user_id = uuid4()

    bind_user_context(user_id, "user@example.com")
    structlog.get_logger().info("test message")

    kwargs = capturing_logger.calls[0].kwargs
    assert kwargs["user_id"] == str(user_id)
    assert "user_email" not in kwargs


def test_bind_user_context_includes_email_when_enabled(capturing_logger, monkeypatch):
    monkeypatch.setenv("LOG_USER_EMAILS", "true")
    get_settings.cache_clear()
    try:
        bind_user_context(uuid4(), "user@example.com")
        structlog.get_logger().info("test message")
    finally:
        monkeypatch.delenv("LOG_USER_EMAILS")
        get_settings.cache_clear()

    assert capturing_logger.calls[0].kwargs["user_email"] == "user@example.com"


def test_clear_request_context(capturing_logger):
    """Test that clear_request_context removes all bound context."""
    bind_request_context("req-1")
    bind_user_context(uuid4())

    clear_request_context()
    structlog.get_logger().info("test message")

    kwargs = capturing_logger.calls[0].kwargs
    assert "request_id" not in kwargs
    assert "user_id" not in kwargs


def test_authorization_denial_is_logged(capturing_logger):
    """Denied checks are logged with the action and resource."""
    from src.taskboard.core.exceptions import ForbiddenError
    from src.taskboard.policies import Action, authorize
    from tests.factories import ProjectFactory, UserFactory

    owner, intruder = UserFactory.build(), UserFactory.build()
    project = ProjectFactory.build(owner_id=owner.id)

    with pytest.raises(ForbiddenError):
        authorize(intruder, Action.DELETE, project)

    entry = capturing_logger.calls[0]
    assert entry.kwargs["event"] == "Authorization denied"
    assert entry.kwargs["action"] == "delete"
    assert entry.kwargs["resource"] == "Project"
    assert entry.kwargs["resource_id"] == str(project.id)
    assert entry.kwargs["actor_id"] == str(intruder.id)


def test_bind_request_context_with_route(capturing_logger):
    bind_request_context("req-7", "PATCH", "/api/v1/projects/1")
    structlog.get_logger().info("test message")

    kwargs = capturing_logger.calls[0].kwargs
    assert kwargs["request_id"] == "req-7"
    assert kwargs["method"] == "PATCH"
    assert kwargs["path"] == "/api/v1/projects/1"
