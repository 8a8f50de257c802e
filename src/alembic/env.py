"""Alembic environment for the taskboard schema.

Migrations run on a synchronous engine. The async driver in DATABASE_URL is
swapped for the backend's default sync driver (psycopg2 for PostgreSQL).
"""

import os
from logging.config import fileConfig

from sqlalchemy import create_engine, make_url, pool
from sqlmodel import SQLModel

from alembic import context
from src.taskboard.core.config import get_settings
from src.taskboard.models import Comment, Project, Task, User  # noqa: F401

config = context.config

if config.config_file_name is not None and os.path.exists(config.config_file_name):
    fileConfig(config.config_file_name)

target_metadata = SQLModel.metadata


def sync_database_url() -> str:
    url = make_url(get_settings().database_url)
    return url.set(drivername=url.get_backend_name()).render_as_string(hide_password=False)


def run_migrations_offline() -> None:
    """Emit SQL to stdout without a database connection."""
    context.configure(
        url=sync_database_url(),
        target_metadata=target_metadata,
        literal_binds=True,
        dialect_opts={"paramstyle": "named"},
    )
    with context.begin_transaction():
        context.run_migrations()


def run_migrations_online() -> None:
    engine = create_engine(sync_database_url(), poolclass=pool.NullPool)
    try:
        with engine.connect() as connection:
            context.configure(
                connection=connection,
                target_metadata=target_metadata,
                compare_type=True,
                render_as_batch=connection.dialect.name == "sqlite",
            )
            with context.begin_transaction():
                context.run_migrations()
    finally:
        engine.dispose()


if context.is_offline_mode():
    run_migrations_offline()
else:
    run_migrations_online()
