"""Pure conversions between request/response DTOs and entities.

Update DTOs are applied null-coalescing: only fields that are set on the
DTO overwrite the entity. Text fields that are null on the entity are
rendered as empty strings in responses.
"""

from __future__ import annotations

from typing import Optional

from orderdesk.api.schemas import (
    AddressDto,
    CreateAddressDto,
    CreateOrderDto,
    CreateProductDto,
    CreateUserDto,
    OrderView,
    ProductDto,
    UpdateAddressDto,
    UpdateOrderDto,
    UpdateProductDto,
    UpdateUserDto,
    UserDto,
)
from orderdesk.models import Address, Product, User
from orderdesk.orders.models import Order


# Products

def product_create_to_entity(dto: CreateProductDto) -> Product:
    return Product(
        name=dto.product_name,
        type=dto.product_type,
        price=dto.product_price,
        quantity=dto.product_qnt,
    )


def apply_product_update(entity: Product, dto: UpdateProductDto) -> None:
    if dto.product_name is not None:
        entity.name = dto.product_name
    if dto.product_type is not None:
        entity.type = dto.product_type
    if dto.product_price is not None:
        entity.price = dto.product_price
    if dto.product_qnt is not None:
        entity.quantity = dto.product_qnt


def product_to_dto(entity: Product) -> ProductDto:
    return ProductDto(
        id=entity.id,
        product_name=entity.name or "",
        product_type=entity.type or 0,
        product_price=entity.price or 0.0,
        product_qnt=entity.quantity or 0,
    )


# Users

def user_create_to_entity(dto: CreateUserDto) -> User:
    # The password is hashed by the service, never here
    return User(
        first_name=dto.first_name,
        last_name=dto.last_name,
        email=str(dto.email),
    )


def apply_user_update(entity: User, dto: UpdateUserDto) -> None:
    if dto.first_name is not None:
        entity.first_name = dto.first_name
    if dto.last_name is not None:
        entity.last_name = dto.last_name
    if dto.email is not None:
        entity.email = str(dto.email)


def user_to_dto(entity: User) -> UserDto:
    return UserDto(
        id=entity.id,
        first_name=entity.first_name or "",
        last_name=entity.last_name or "",
        email=entity.email or "",
    )


# Addresses

def address_create_to_entity(dto: CreateAddressDto) -> Address:
    return Address(
        user_id=dto.user_id,
        street=dto.street,
        house_number=dto.house_number,
        city=dto.city,
        state=dto.state,
        zip=dto.zip,
        country=dto.country,
    )


def apply_address_update(entity: Address, dto: UpdateAddressDto) -> None:
    for name in ("user_id", "street", "house_number", "city", "state", "zip", "country"):
        value = getattr(dto, name)
        if value is not None:
            setattr(entity, name, value)


def address_to_dto(entity: Address) -> AddressDto:
    return AddressDto(
        id=entity.id,
        user_id=entity.user_id,
        street=entity.street or "",
        house_number=entity.house_number or "",
        city=entity.city or "",
        state=entity.state or "",
        zip=entity.zip or "",
        country=entity.country or "",
    )


# Orders

def order_create_to_entity(dto: CreateOrderDto) -> Order:
    return Order(owner_id=dto.order_owner, product_ids=list(dto.order_products))


def apply_order_update(entity: Order, dto: UpdateOrderDto) -> None:
    entity.owner_id = dto.order_owner
    entity.product_ids = list(dto.order_products)


def order_to_view(
    entity: Order,
    owner: Optional[UserDto] = None,
    products: Optional[list] = None,
) -> OrderView:
    return OrderView(
        id=entity.id,
        order_owner=owner,
        order_products=list(products or []),
        issue_date=entity.issue_date,
    )
