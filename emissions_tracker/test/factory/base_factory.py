"""
Base factory for async SQLAlchemy models.
"""
import asyncio
import inspect
from typing import Any

import factory
from factory.alchemy import SQLAlchemyOptions


class AsyncSQLAlchemyFactory(factory.Factory):
    """
    Factory whose instances are persisted through the Database session maker.

    Calling a factory returns an awaitable; awaiting it yields the committed
    instance. SubFactory values are awaited before the parent is saved.
    """

    _options_class = SQLAlchemyOptions

    class Meta:
        abstract = True

    @classmethod
    async def create(cls, **kwargs) -> Any:
        """
        Create and commit an instance asynchronously.

        Args:
            **kwargs: Attributes to set on the instance

        Returns:
            Created model instance
        """
        return await super().create(**kwargs)

    @classmethod
    def _create(cls, model_class, *args, **kwargs):
        async def maker_coroutine():
            for key, value in kwargs.items():
                if inspect.isawaitable(value):
                    kwargs[key] = await value
            return await cls._save(model_class, *args, **kwargs)

        # A Task can be awaited multiple times, unlike a coroutine
        return asyncio.create_task(maker_coroutine())

    @classmethod
    async def _save(cls, model_class, *args, **kwargs) -> Any:
        async with cls._meta.sqlalchemy_session() as session:
            obj = model_class(*args, **kwargs)
            session.add(obj)
            await session.commit()
            return obj

    @classmethod
    async def create_batch(cls, size: int, **kwargs) -> list[Any]:
        """
        Create multiple instances one after another.

        Args:
            size: Number of instances to create
            **kwargs: Attributes to set on all instances

        Returns:
            List of created instances
        """
        return [await cls.create(**kwargs) for _ in range(size)]
