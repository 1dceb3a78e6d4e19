"""Generic table repository: select/insert/update/delete/count keyed by id."""

from __future__ import annotations

import uuid
from typing import Any, Generic, Optional, Sequence, Type, TypeVar

import structlog
from sqlalchemy import delete, func, select, update
from sqlalchemy.ext.asyncio import AsyncSession

from constructpro.models.base import Base, utcnow

logger = structlog.get_logger()

ModelT = TypeVar("ModelT", bound=Base)


class TableRepository(Generic[ModelT]):
    """Simple equality-filter queries against one table.

    Subclasses set ``model``. Methods flush but never commit; the caller
    owns the transaction.
    """

    model: Type[ModelT]

    def __init__(self, db: AsyncSession):
        self.db = db

    async def select_rows(
        self,
        filters: Optional[dict[str, Any]] = None,
        order_by: str = "created_at",
        descending: bool = True,
        limit: Optional[int] = None,
    ) -> Sequence[ModelT]:
        """Fetch rows matching all ``filters`` (column == value).

        Args:
            filters: Column name to required value
            order_by: Column to sort on
            descending: Newest/highest first when True
            limit: Max rows, or all rows when None

        Returns:
            Matching model instances
        """
        stmt = select(self.model)
        for column, value in (filters or {}).items():
            stmt = stmt.where(getattr(self.model, column) == value)

        order_column = getattr(self.model, order_by)
        stmt = stmt.order_by(order_column.desc() if descending else order_column.asc())

        if limit is not None:
            stmt = stmt.limit(limit)

        result = await self.db.execute(stmt)
        return result.scalars().all()

    async def get(self, row_id: uuid.UUID) -> Optional[ModelT]:
        result = await self.db.execute(
            select(self.model).where(self.model.id == row_id)
        )
        return result.scalar_one_or_none()

    async def insert(self, values: dict[str, Any]) -> ModelT:
        row = self.model(**values)
        self.db.add(row)
        await self.db.flush()

        logger.info("row_inserted", table=self.model.__tablename__, row_id=str(row.id))
        return row

    async def update(self, row_id: uuid.UUID, values: dict[str, Any]) -> bool:
        """Update a single row. Returns False when no row has that id."""
        result = await self.db.execute(
            update(self.model)
            .where(self.model.id == row_id)
            .values(**values, updated_at=utcnow())
        )
        return result.rowcount > 0

    async def delete(self, row_id: uuid.UUID) -> bool:
        result = await self.db.execute(
            delete(self.model).where(self.model.id == row_id)
        )
        return result.rowcount > 0

    async def count(self) -> int:
        result = await self.db.execute(
            select(func.count()).select_from(self.model)
        )
        return result.scalar_one()
