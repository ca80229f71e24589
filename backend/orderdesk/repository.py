from __future__ import annotations

from typing import Collection, Generic, List, Optional, Type, TypeVar

from sqlalchemy import delete, select
from sqlalchemy.ext.asyncio import async_sessionmaker

T = TypeVar("T")


class Repository(Generic[T]):
    """Async CRUD over one mapped table.

    Every call opens its own session, so two calls awaited side by side
    run on separate connections.
    """

    model: Type[T]

    def __init__(self, session_factory: async_sessionmaker) -> None:
        self._session_factory = session_factory

    async def add(self, entity: T) -> T:
        async with self._session_factory() as session:
            session.add(entity)
            await session.flush()
            await session.commit()
            return entity

    async def get(self, entity_id: int) -> Optional[T]:
        async with self._session_factory() as session:
            return await session.get(self.model, entity_id)

    async def list_all(self) -> List[T]:
        async with self._session_factory() as session:
            result = await session.execute(select(self.model).order_by(self.model.id))
            return list(result.scalars().all())

    async def find_many(self, ids: Collection[int]) -> List[T]:
        # An empty IN () is never sent to the database
        if not ids:
            return []
        async with self._session_factory() as session:
            stmt = select(self.model).where(self.model.id.in_(sorted(ids))).order_by(self.model.id)
            result = await session.execute(stmt)
            return list(result.scalars().all())

    async def save(self, entity: T) -> T:
        async with self._session_factory() as session:
            merged = await session.merge(entity)
            await session.commit()
            return merged

    async def delete_by_id(self, entity_id: int) -> bool:
        async with self._session_factory() as session:
            result = await session.execute(delete(self.model).where(self.model.id == entity_id))
            await session.commit()
            return result.rowcount > 0
