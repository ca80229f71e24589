from __future__ import annotations

import logging
from datetime import date
from typing import List, Optional

from orderdesk.api.schemas import CreateOrderDto, OrderView, UpdateOrderDto
from orderdesk.errors import NotFoundError
from orderdesk.mappers import apply_order_update, order_create_to_entity, order_to_view
from orderdesk.orders.enrichment import enrich_orders
from orderdesk.orders.filters import MatchNone, build_order_filter

logger = logging.getLogger(__name__)


class OrdersService:
    """Order CRUD; the read operations return enriched views."""

    def __init__(self, orders_repo, products_repo, users_repo) -> None:
        self._orders = orders_repo
        self._products = products_repo
        self._users = users_repo

    async def create(self, dto: CreateOrderDto) -> OrderView:
        order = await self._orders.add(order_create_to_entity(dto))
        logger.info("Created order %s for owner %s", order.id, order.owner_id)
        return order_to_view(order)

    async def list_all(self) -> List[OrderView]:
        orders = await self._orders.list_all()
        return await enrich_orders(orders, self._products, self._users)

    async def list_by_owner(self, owner_id: int) -> List[OrderView]:
        orders = await self._orders.find_by_owner(owner_id)
        return await enrich_orders(orders, self._products, self._users)

    async def list_by_date_range(
        self,
        owner_id: Optional[int] = None,
        start_date: Optional[date] = None,
        end_date: Optional[date] = None,
    ) -> List[OrderView]:
        order_filter = build_order_filter(owner_id, start_date, end_date)
        if isinstance(order_filter, MatchNone):
            logger.debug("Start date %s is after end date %s, nothing to query", start_date, end_date)
            return []
        orders = await self._orders.find_by_filter(order_filter)
        return await enrich_orders(orders, self._products, self._users)

    async def get_one(self, order_id: int) -> OrderView:
        order = await self._orders.get(order_id)
        if order is None:
            logger.warning("Order %s not found", order_id)
            raise NotFoundError("Order", order_id)
        views = await enrich_orders([order], self._products, self._users)
        return views[0]

    async def update(self, dto: UpdateOrderDto) -> OrderView:
        order = await self._orders.get(dto.id)
        if order is None:
            logger.warning("Order %s not found for update", dto.id)
            raise NotFoundError("Order", dto.id)
        apply_order_update(order, dto)
        saved = await self._orders.save(order)
        logger.info("Updated order %s", saved.id)
        return order_to_view(saved)

    async def delete(self, order_id: int) -> None:
        if not await self._orders.delete_by_id(order_id):
            logger.warning("Order %s not found for delete", order_id)
            raise NotFoundError("Order", order_id)
        logger.info("Deleted order %s", order_id)
