"""Shared fixtures: a throwaway sqlite database per test and an API client bound to it."""

from __future__ import annotations

import asyncio

import pytest
from fastapi.testclient import TestClient
from sqlalchemy.pool import NullPool

from orderdesk.addresses.repo import AddressesRepository
from orderdesk.db import get_session_factory, init_db, make_engine, make_session_factory
from orderdesk.main import app
from orderdesk.orders.repo import OrdersRepository
from orderdesk.products.repo import ProductsRepository
from orderdesk.users.repo import UsersRepository


@pytest.fixture
def session_factory(tmp_path):
    """Temp-file sqlite database; NullPool so every event loop opens its own connections."""
    engine = make_engine(f"sqlite+aiosqlite:///{tmp_path / 'orderdesk.db'}", poolclass=NullPool)
    asyncio.run(init_db(engine))
    yield make_session_factory(engine)
    asyncio.run(engine.dispose())


@pytest.fixture
def orders_repo(session_factory) -> OrdersRepository:
    return OrdersRepository(session_factory)


@pytest.fixture
def products_repo(session_factory) -> ProductsRepository:
    return ProductsRepository(session_factory)


@pytest.fixture
def users_repo(session_factory) -> UsersRepository:
    return UsersRepository(session_factory)


@pytest.fixture
def addresses_repo(session_factory) -> AddressesRepository:
    return AddressesRepository(session_factory)


@pytest.fixture
def client(session_factory):
    app.dependency_overrides[get_session_factory] = lambda: session_factory
    try:
        yield TestClient(app)
    finally:
        app.dependency_overrides.clear()
