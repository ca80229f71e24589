from __future__ import annotations

from typing import List, Optional

from sqlalchemy import and_, delete, select
from sqlalchemy.ext.asyncio import async_sessionmaker

from orderdesk.models import OrderRow
from orderdesk.orders.filters import (
    And,
    Clause,
    IssuedOnOrAfter,
    IssuedOnOrBefore,
    MatchNone,
    NoFilter,
    OrderFilter,
    OwnerEquals,
)
from orderdesk.orders.models import Order


def _to_condition(clause: Clause):
    if isinstance(clause, OwnerEquals):
        return OrderRow.order_owner == clause.owner_id
    if isinstance(clause, IssuedOnOrAfter):
        return OrderRow.issue_date >= clause.moment
    if isinstance(clause, IssuedOnOrBefore):
        return OrderRow.issue_date <= clause.moment
    raise TypeError(f"Unsupported order filter clause: {clause!r}")


class OrdersRepository:
    """Order persistence; rows are converted to ``Order`` on the way out."""

    def __init__(self, session_factory: async_sessionmaker) -> None:
        self._session_factory = session_factory

    async def add(self, order: Order) -> Order:
        async with self._session_factory() as session:
            row = order.to_row()
            session.add(row)
            await session.flush()
            await session.commit()
            return Order.from_row(row)

    async def get(self, order_id: int) -> Optional[Order]:
        async with self._session_factory() as session:
            row = await session.get(OrderRow, order_id)
            return Order.from_row(row) if row is not None else None

    async def list_all(self) -> List[Order]:
        return await self._select(select(OrderRow))

    async def find_by_owner(self, owner_id: int) -> List[Order]:
        return await self._select(select(OrderRow).where(OrderRow.order_owner == owner_id))

    async def find_by_filter(self, order_filter: OrderFilter) -> List[Order]:
        if isinstance(order_filter, MatchNone):
            return []
        if isinstance(order_filter, NoFilter):
            return await self.list_all()
        if isinstance(order_filter, And):
            conditions = [_to_condition(c) for c in order_filter.clauses]
            return await self._select(select(OrderRow).where(and_(*conditions)))
        raise TypeError(f"Unsupported order filter: {order_filter!r}")

    async def save(self, order: Order) -> Order:
        async with self._session_factory() as session:
            row = await session.merge(order.to_row())
            await session.commit()
            return Order.from_row(row)

    async def delete_by_id(self, order_id: int) -> bool:
        async with self._session_factory() as session:
            result = await session.execute(delete(OrderRow).where(OrderRow.id == order_id))
            await session.commit()
            return result.rowcount > 0

    async def _select(self, stmt) -> List[Order]:
        async with self._session_factory() as session:
            result = await session.execute(stmt.order_by(OrderRow.id))
            return [Order.from_row(row) for row in result.scalars().all()]
