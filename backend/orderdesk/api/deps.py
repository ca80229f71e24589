from fastapi import Depends
from sqlalchemy.ext.asyncio import async_sessionmaker

from orderdesk.addresses.repo import AddressesRepository
from orderdesk.addresses.service import AddressesService
from orderdesk.db import get_session_factory
from orderdesk.orders.repo import OrdersRepository
from orderdesk.orders.service import OrdersService
from orderdesk.products.repo import ProductsRepository
from orderdesk.products.service import ProductsService
from orderdesk.users.repo import UsersRepository
from orderdesk.users.service import UsersService


def get_orders_service(factory: async_sessionmaker = Depends(get_session_factory)) -> OrdersService:
    return OrdersService(
        OrdersRepository(factory),
        ProductsRepository(factory),
        UsersRepository(factory),
    )


def get_products_service(factory: async_sessionmaker = Depends(get_session_factory)) -> ProductsService:
    return ProductsService(ProductsRepository(factory))


def get_users_service(factory: async_sessionmaker = Depends(get_session_factory)) -> UsersService:
    return UsersService(UsersRepository(factory))


def get_addresses_service(factory: async_sessionmaker = Depends(get_session_factory)) -> AddressesService:
    return AddressesService(AddressesRepository(factory))
