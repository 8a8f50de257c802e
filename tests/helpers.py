"""Test helper functions for common data creation patterns."""

from datetime import timedelta

from sqlalchemy.ext.asyncio import AsyncSession

from src.taskboard.core.security import create_access_token
from src.taskboard.models import Project, Task, User
from tests.factories import ProjectFactory, TaskFactory, UserFactory


def auth_headers(user: User) -> dict[str, str]:
    """Build an Authorization header carrying a fresh access token for user."""
    return {"Authorization": f"Bearer {create_access_token(user.id)}"}


def expired_auth_headers(user: User) -> dict[str, str]:
    token = create_access_token(user.id, expires_delta=timedelta(minutes=-1))
    return {"Authorization": f"Bearer {token}"}


async def create_user(session: AsyncSession, **kwargs) -> User:
    user = UserFactory.build(**kwargs)
    session.add(user)
    await session.commit()
    return user


async def create_project(session: AsyncSession, owner: User, **kwargs) -> Project:
    project = ProjectFactory.build(owner_id=owner.id, **kwargs)
    session.add(project)
    await session.commit()
    return project


async def create_tasks(
    session: AsyncSession, project: Project, titles: list[str], **kwargs
) -> list[Task]:
    """Create one task per title, in order, with strictly increasing created_at."""
    tasks = []
    base = TaskFactory.build().created_at
    for offset, title in enumerate(titles):
        created_at = base + timedelta(microseconds=offset)
        task = TaskFactory.build(
            project_id=project.id, title=title, created_at=created_at, **kwargs
        )
        session.add(task)
        tasks.append(task)
    await session.commit()
    return tasks
