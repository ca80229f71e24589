"""Order enrichment: resolve owner and product ids into detail objects.

One batch of orders costs two queries however many orders it holds: the
referenced ids are collected across the batch, products and owners are
fetched side by side, and the results are joined in memory through
id-keyed lookup maps.
"""

from __future__ import annotations

import asyncio
import logging
from typing import Callable, Dict, Iterable, List, Optional, Protocol, Sequence, Set, Tuple, TypeVar

from orderdesk.api.schemas import OrderView, ProductDto, UserDto
from orderdesk.mappers import order_to_view, product_to_dto, user_to_dto
from orderdesk.models import Product, User
from orderdesk.orders.models import Order

logger = logging.getLogger(__name__)

E = TypeVar("E")
D = TypeVar("D")


class FindsMany(Protocol):
    async def find_many(self, ids: Set[int]) -> list: ...


def collect_referenced_ids(orders: Iterable[Order]) -> Tuple[Set[int], Set[int]]:
    """Distinct product ids and owner ids across ``orders``; unset owners are skipped."""
    product_ids: Set[int] = set()
    owner_ids: Set[int] = set()
    for order in orders:
        product_ids.update(order.product_ids)
        if order.owner_id is not None:
            owner_ids.add(order.owner_id)
    return product_ids, owner_ids


async def fetch_details(
    product_ids: Set[int],
    owner_ids: Set[int],
    products_repo: FindsMany,
    users_repo: FindsMany,
) -> Tuple[List[Product], List[User]]:
    """Fetch products and owners concurrently.

    Both queries are started before either is awaited. The first failure
    cancels the other fetch and is re-raised as is; cancelling the caller
    cancels both.
    """
    products_task = asyncio.ensure_future(products_repo.find_many(product_ids))
    owners_task = asyncio.ensure_future(users_repo.find_many(owner_ids))
    try:
        products, owners = await asyncio.gather(products_task, owners_task)
    except BaseException:
        for task in (products_task, owners_task):
            task.cancel()
        raise
    return products, owners


def build_lookup(entities: Iterable[E], to_dto: Callable[[E], D]) -> Dict[int, D]:
    return {entity.id: to_dto(entity) for entity in entities}


def _assemble_with(
    order: Order,
    products_by_id: Dict[int, ProductDto],
    owners_by_id: Dict[int, UserDto],
) -> OrderView:
    # Stale product ids drop out; order and repeats of the rest are kept
    products = [products_by_id[pid] for pid in order.product_ids if pid in products_by_id]
    owner: Optional[UserDto] = owners_by_id.get(order.owner_id) if order.owner_id is not None else None
    return order_to_view(order, owner=owner, products=products)


def assemble(order: Order, products: Sequence[Product], owners: Sequence[User]) -> OrderView:
    return _assemble_with(order, build_lookup(products, product_to_dto), build_lookup(owners, user_to_dto))


def assemble_all(
    orders: Sequence[Order],
    products: Sequence[Product],
    owners: Sequence[User],
) -> List[OrderView]:
    products_by_id = build_lookup(products, product_to_dto)
    owners_by_id = build_lookup(owners, user_to_dto)
    return [_assemble_with(order, products_by_id, owners_by_id) for order in orders]


async def enrich_orders(
    orders: Sequence[Order],
    products_repo: FindsMany,
    users_repo: FindsMany,
) -> List[OrderView]:
    if not orders:
        return []
    product_ids, owner_ids = collect_referenced_ids(orders)
    logger.debug(
        "Enriching %d orders (%d distinct products, %d distinct owners)",
        len(orders), len(product_ids), len(owner_ids),
    )
    products, owners = await fetch_details(product_ids, owner_ids, products_repo, users_repo)
    return assemble_all(orders, products, owners)
