"""Tests for UsersService, ProductsService and AddressesService."""

from __future__ import annotations

import asyncio

import pytest

from orderdesk.addresses.service import AddressesService
from orderdesk.api.schemas import (
    CreateAddressDto,
    CreateProductDto,
    CreateUserDto,
    UpdateAddressDto,
    UpdateProductDto,
    UpdateUserDto,
)
from orderdesk.errors import DuplicateAddressError, DuplicateEmailError, NotFoundError
from orderdesk.models import Address, User
from orderdesk.products.service import ProductsService
from orderdesk.security.passwords import hash_password
from orderdesk.users.service import UsersService

from tests.fakes import RecordingRepo


def create_user_dto(email: str = "ada@example.com") -> CreateUserDto:
    return CreateUserDto(
        first_name="Ada",
        last_name="Lovelace",
        email=email,
        raw_password="correct horse",
    )


class TestUsersService:
    def test_duplicate_email_is_rejected_without_write(self) -> None:
        repo = RecordingRepo([User(id=1, first_name="Ada", last_name="L", email="ada@example.com")])
        service = UsersService(repo)

        with pytest.raises(DuplicateEmailError) as info:
            asyncio.run(service.create(create_user_dto()))

        assert info.value.email == "ada@example.com"
        assert repo.count("add") == 0

    def test_create_hashes_password(self) -> None:
        repo = RecordingRepo()
        dto = asyncio.run(UsersService(repo).create(create_user_dto()))

        stored = repo.entities[dto.id]
        assert stored.password == hash_password("correct horse")
        assert stored.password != "correct horse"
        assert stored.password != hash_password("correct horsE")

    def test_response_has_no_password(self) -> None:
        dto = asyncio.run(UsersService(RecordingRepo()).create(create_user_dto()))
        assert "password" not in dto.model_dump()
        assert "raw_password" not in dto.model_dump()

    def test_update_is_partial_and_keeps_password(self, users_repo) -> None:
        service = UsersService(users_repo)
        created = asyncio.run(service.create(create_user_dto()))

        updated = asyncio.run(service.update(UpdateUserDto(id=created.id, last_name="Byron")))

        assert updated.first_name == "Ada"
        assert updated.last_name == "Byron"
        stored = asyncio.run(users_repo.get(created.id))
        assert stored.password == hash_password("correct horse")

    def test_update_to_taken_email_is_rejected(self, users_repo) -> None:
        service = UsersService(users_repo)
        asyncio.run(service.create(create_user_dto("ada@example.com")))
        grace = asyncio.run(service.create(create_user_dto("grace@example.com")))

        with pytest.raises(DuplicateEmailError):
            asyncio.run(service.update(UpdateUserDto(id=grace.id, email="ada@example.com")))

    def test_update_missing_user_raises(self) -> None:
        with pytest.raises(NotFoundError):
            asyncio.run(UsersService(RecordingRepo()).update(UpdateUserDto(id=5, first_name="X")))

    def test_get_and_delete_missing_user_raise(self) -> None:
        service = UsersService(RecordingRepo())
        with pytest.raises(NotFoundError):
            asyncio.run(service.get_one(5))
        with pytest.raises(NotFoundError):
            asyncio.run(service.delete(5))


class TestProductsService:
    def test_crud_cycle(self, products_repo) -> None:
        service = ProductsService(products_repo)
        created = asyncio.run(service.create(
            CreateProductDto(product_name="Kettle", product_type=2, product_price=19.5, product_qnt=4)
        ))

        updated = asyncio.run(service.update(UpdateProductDto(id=created.id, product_qnt=3)))
        assert updated.product_name == "Kettle"
        assert updated.product_qnt == 3
        assert asyncio.run(service.get_one(created.id)) == updated
        assert [p.id for p in asyncio.run(service.list_by_type(2))] == [created.id]

        asyncio.run(service.delete(created.id))
        with pytest.raises(NotFoundError):
            asyncio.run(service.get_one(created.id))

    def test_update_missing_product_raises(self, products_repo) -> None:
        with pytest.raises(NotFoundError):
            asyncio.run(ProductsService(products_repo).update(UpdateProductDto(id=42, product_name="x")))


class TestAddressesService:
    def test_crud_cycle(self, addresses_repo) -> None:
        service = AddressesService(addresses_repo)
        created = asyncio.run(service.create(CreateAddressDto(
            user_id=1, street="Hauptstrasse", house_number="12a", city="Cologne", zip="50667", country="DE",
        )))
        assert created.state == ""

        updated = asyncio.run(service.update(UpdateAddressDto(id=created.id, city="Bonn")))
        assert updated.city == "Bonn"
        assert updated.street == "Hauptstrasse"
        assert [a.id for a in asyncio.run(service.list_by_country("DE"))] == [created.id]
        assert asyncio.run(service.list_by_country("FR")) == []

        asyncio.run(service.delete(created.id))
        with pytest.raises(NotFoundError):
            asyncio.run(service.delete(created.id))

    def test_second_address_for_same_user_is_rejected_without_write(self) -> None:
        repo = RecordingRepo([Address(id=1, user_id=7, street="Old", city="Bonn")])
        service = AddressesService(repo)

        with pytest.raises(DuplicateAddressError) as info:
            asyncio.run(service.create(CreateAddressDto(
                user_id=7, street="New", house_number="1", city="Cologne", zip="50667", country="DE",
            )))

        assert info.value.user_id == 7
        assert repo.count("add") == 0

    def test_moving_address_to_user_with_one_is_rejected(self) -> None:
        repo = RecordingRepo([Address(id=1, user_id=7), Address(id=2, user_id=8)])

        with pytest.raises(DuplicateAddressError):
            asyncio.run(AddressesService(repo).update(UpdateAddressDto(id=2, user_id=7)))

        assert repo.count("save") == 0
        assert repo.entities[2].user_id == 8

    def test_update_keeping_same_user_is_allowed(self) -> None:
        repo = RecordingRepo([Address(id=1, user_id=7, city="Bonn")])
        updated = asyncio.run(AddressesService(repo).update(UpdateAddressDto(id=1, user_id=7, city="Cologne")))
        assert updated.city == "Cologne"
        assert updated.user_id == 7

    def test_get_for_user(self, addresses_repo) -> None:
        service = AddressesService(addresses_repo)
        created = asyncio.run(service.create(CreateAddressDto(
            user_id=3, street="Hauptstrasse", house_number="1", city="Cologne", zip="50667", country="DE",
        )))

        assert asyncio.run(service.get_for_user(3)) == created
        with pytest.raises(NotFoundError):
            asyncio.run(service.get_for_user(4))
