"""Database engine and sessions."""

from src.taskboard.core.db.engine import create_engine_from_url, dispose_engine, get_engine
from src.taskboard.core.db.session import get_session, session_factory

__all__ = [
    "create_engine_from_url",
    "dispose_engine",
    "get_engine",
    "get_session",
    "session_factory",
]
