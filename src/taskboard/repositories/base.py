"""Base repository with common CRUD operations."""

from collections.abc import Mapping
from dataclasses import dataclass
from typing import Any
from uuid import UUID

from sqlalchemy import delete, func, update
from sqlalchemy.ext.asyncio import AsyncSession
from sqlmodel import SQLModel, select

from src.taskboard.models.base import utc_now


@dataclass
class Page[ItemType]:
    """One page of an ordered result set."""

    items: list[ItemType]
    total: int
    page: int
    per_page: int

    @property
    def pages(self) -> int:
        if self.total == 0:
            return 0
        return (self.total + self.per_page - 1) // self.per_page


class BaseRepository[ModelType: SQLModel]:
    """Base repository providing common database operations.

    Repositories handle data access only. They perform no existence or
    permission checks, and transaction control (commit) is done in the
    service layer. Store errors propagate unchanged.
    """

    model: type[ModelType]

    def __init__(self, session: AsyncSession):
        self.session = session

    async def get_by_id(self, id: UUID) -> ModelType | None:
        """Get a record by its primary key."""
        result = await self.session.execute(
            select(self.model).where(self.model.id == id)  # type: ignore[attr-defined]
        )
        return result.scalar_one_or_none()

    async def create(self, entity: ModelType) -> ModelType:
        """Insert entity and flush so constraint violations surface here."""
        self.session.add(entity)
        await self.session.flush()
        return entity

    async def update(self, entity: ModelType, fields: Mapping[str, Any]) -> bool:
        """Apply fields to entity with a single UPDATE statement.

        updated_at is refreshed alongside the given fields. The in-session
        entity is synchronized with the new values.

        Returns:
            True if a row was affected. An empty field set is a no-op
            returning False.
        """
        if not fields:
            return False

        values = dict(fields)
        values["updated_at"] = utc_now()
        result = await self.session.execute(
            update(self.model)
            .where(self.model.id == entity.id)  # type: ignore[attr-defined]
            .values(**values)
        )
        return result.rowcount > 0  # type: ignore[attr-defined, no-any-return]

    async def delete(self, entity: ModelType) -> bool:
        """Remove entity with a single DELETE statement.

        Returns:
            True if a row was removed.
        """
        result = await self.session.execute(
            delete(self.model).where(self.model.id == entity.id)  # type: ignore[attr-defined]
        )
        return result.rowcount > 0  # type: ignore[attr-defined, no-any-return]

    async def paginate(
        self,
        query: Any,  # SelectOfScalar or Select - SQLModel/SQLAlchemy query
        page: int,
        per_page: int,
        order_by: tuple[Any, ...],
    ) -> Page[ModelType]:
        """Execute page-number pagination on a query.

        Args:
            query: The base SQLAlchemy query to paginate (filters applied)
            page: 1-based page number. Pages past the end are empty.
            per_page: Page size
            order_by: Columns giving a deterministic total order

        Returns:
            Page with the items for this page and the unpaginated total
        """
        page = max(page, 1)

        count_query = select(func.count()).select_from(query.order_by(None).subquery())
        total = (await self.session.execute(count_query)).scalar_one()

        result = await self.session.execute(
            query.order_by(*order_by).offset((page - 1) * per_page).limit(per_page)
        )
        items = list(result.scalars().all())
        return Page(items=items, total=total, page=page, per_page=per_page)
