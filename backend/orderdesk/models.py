from __future__ import annotations

from datetime import datetime, timezone
from typing import Optional

from sqlalchemy import DateTime, Float, Integer, String, Text
from sqlalchemy.orm import Mapped, mapped_column

from orderdesk.db import Base


def utcnow() -> datetime:
    return datetime.now(timezone.utc)


class IdentityMixin:
    """Rows are equal when they share a class and a non-null id; an unsaved row equals only itself."""

    def __eq__(self, other: object) -> bool:
        if self is other:
            return True
        if type(self) is not type(other):
            return False
        return self.id is not None and self.id == other.id

    def __hash__(self) -> int:
        return hash(self.id) if self.id is not None else 31


class Product(IdentityMixin, Base):
    __tablename__ = "products"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    name: Mapped[Optional[str]] = mapped_column("name", String(255))
    type: Mapped[Optional[int]] = mapped_column("type", Integer)
    price: Mapped[Optional[float]] = mapped_column("price", Float)
    quantity: Mapped[Optional[int]] = mapped_column("quantity", Integer)

    def __repr__(self) -> str:
        return f"<Product(id={self.id}, name={self.name!r})>"


class User(IdentityMixin, Base):
    __tablename__ = "users"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    first_name: Mapped[Optional[str]] = mapped_column("firstname", String(120))
    last_name: Mapped[Optional[str]] = mapped_column("lastname", String(120))
    email: Mapped[Optional[str]] = mapped_column("emailaddress", String(255), index=True)
    password: Mapped[Optional[str]] = mapped_column("password", String(128))

    def __repr__(self) -> str:
        return f"<User(id={self.id}, email={self.email!r})>"


class Address(IdentityMixin, Base):
    __tablename__ = "addresses"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    # The only link between a user and their delivery address; weak, at most one address per user
    user_id: Mapped[Optional[int]] = mapped_column("user_id", Integer, index=True, unique=True)
    street: Mapped[Optional[str]] = mapped_column("street", String(255))
    house_number: Mapped[Optional[str]] = mapped_column("house_number", String(32))
    city: Mapped[Optional[str]] = mapped_column("city", String(120))
    state: Mapped[Optional[str]] = mapped_column("state", String(120))
    zip: Mapped[Optional[str]] = mapped_column("zip_code", String(32))
    country: Mapped[Optional[str]] = mapped_column("country", String(64), index=True)

    def __repr__(self) -> str:
        return f"<Address(id={self.id}, city={self.city!r})>"


class OrderRow(IdentityMixin, Base):
    """Persisted shape of an order; see orderdesk.orders.models.Order for the in-memory one."""

    __tablename__ = "orders"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    order_owner: Mapped[Optional[int]] = mapped_column("order_owner", Integer, index=True)
    order_products: Mapped[str] = mapped_column("order_products", Text, nullable=False, default="[]")
    issue_date: Mapped[datetime] = mapped_column(
        "issue_date", DateTime(timezone=True), nullable=False, default=utcnow, index=True
    )

    def __repr__(self) -> str:
        return f"<OrderRow(id={self.id}, order_owner={self.order_owner})>"
