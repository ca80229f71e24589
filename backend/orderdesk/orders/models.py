from __future__ import annotations

import json
from dataclasses import dataclass, field
from datetime import datetime, timezone
from typing import Iterable, List, Optional

from orderdesk.models import OrderRow, utcnow


def serialize_product_ids(product_ids: Iterable[int]) -> str:
    return json.dumps([int(pid) for pid in product_ids])


def deserialize_product_ids(raw: Optional[str]) -> List[int]:
    if not raw:
        return []
    data = json.loads(raw)
    if not isinstance(data, list):
        raise ValueError(f"order_products must be a JSON array, got {type(data).__name__}")
    return [int(pid) for pid in data]


def as_utc(value: datetime) -> datetime:
    # sqlite hands back naive datetimes; everything is stored in UTC
    if value.tzinfo is None:
        return value.replace(tzinfo=timezone.utc)
    return value.astimezone(timezone.utc)


@dataclass(eq=False)
class Order:
    id: Optional[int] = None
    owner_id: Optional[int] = None
    product_ids: List[int] = field(default_factory=list)
    issue_date: datetime = field(default_factory=utcnow)

    def __eq__(self, other: object) -> bool:
        if self is other:
            return True
        if not isinstance(other, Order):
            return False
        return self.id is not None and self.id == other.id

    def __hash__(self) -> int:
        return hash(self.id) if self.id is not None else 31

    @classmethod
    def from_row(cls, row: OrderRow) -> "Order":
        return cls(
            id=row.id,
            owner_id=row.order_owner,
            product_ids=deserialize_product_ids(row.order_products),
            issue_date=as_utc(row.issue_date),
        )

    def to_row(self) -> OrderRow:
        row = OrderRow(
            order_owner=self.owner_id,
            order_products=serialize_product_ids(self.product_ids),
            issue_date=as_utc(self.issue_date),
        )
        if self.id is not None:
            row.id = self.id
        return row
