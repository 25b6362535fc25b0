"""
Base repository with common CRUD operations.

Provides generic database operations that can be inherited by specific repositories.
"""
from typing import Any, Dict, Generic, List, Optional, Type, TypeVar

from sqlalchemy import delete, func, select
from sqlalchemy.ext.asyncio import AsyncSession

ModelType = TypeVar("ModelType")


class BaseRepository(Generic[ModelType]):
    """
    Base repository with common CRUD operations.

    Records are addressed by their natural primary key, so writes are
    idempotent upserts: the last write for a key wins.
    """

    def __init__(self, model: Type[ModelType], session: AsyncSession):
        """
        Initialize repository.

        Args:
            model: SQLAlchemy model class
            session: Async database session
        """
        self.model = model
        self.session = session

    def _filtered(self, stmt, filters: Optional[Dict] = None):
        if filters:
            for field, value in filters.items():
                if hasattr(self.model, field):
                    stmt = stmt.where(getattr(self.model, field) == value)
        return stmt

    async def get_by_pk(self, pk: Any) -> Optional[ModelType]:
        """
        Get record by primary key.

        Args:
            pk: Primary key value, or a tuple for composite keys

        Returns:
            Model instance if found, None otherwise
        """
        return await self.session.get(self.model, pk)

    async def get_all(
        self, skip: int = 0, limit: Optional[int] = 100, filters: Optional[Dict] = None
    ) -> List[ModelType]:
        """
        Get all records with optional filtering.

        Args:
            skip: Number of records to skip
            limit: Maximum number of records to return, None for no limit
            filters: Optional dict of field:value filters

        Returns:
            List of model instances
        """
        stmt = self._filtered(select(self.model), filters).offset(skip)
        if limit is not None:
            stmt = stmt.limit(limit)
        result = await self.session.execute(stmt)
        return list(result.scalars().all())

    async def upsert(self, **data: Any) -> ModelType:
        """
        Insert a record, or overwrite the one with the same primary key.

        Args:
            **data: Field values, including the primary key

        Returns:
            The persistent model instance
        """
        instance = await self.session.merge(self.model(**data))
        await self.session.flush()
        return instance

    async def delete_all(self) -> int:
        """
        Delete every record of this model.

        Returns:
            Number of rows deleted
        """
        result = await self.session.execute(delete(self.model))
        await self.session.flush()
        return result.rowcount

    async def count(self, filters: Optional[Dict] = None) -> int:
        """
        Count records with optional filtering.

        Args:
            filters: Optional dict of field:value filters

        Returns:
            Number of matching records
        """
        stmt = self._filtered(select(func.count()).select_from(self.model), filters)
        result = await self.session.execute(stmt)
        return result.scalar_one()

    async def bulk_create(self, items: List[Dict[str, Any]]) -> List[ModelType]:
        """
        Create multiple records in bulk.

        Args:
            items: List of dicts containing field values

        Returns:
            List of created model instances
        """
        instances = [self.model(**item) for item in items]
        self.session.add_all(instances)
        await self.session.flush()
        return instances
