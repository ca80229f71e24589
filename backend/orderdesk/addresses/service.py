import logging
from typing import List

from orderdesk.api.schemas import AddressDto, CreateAddressDto, UpdateAddressDto
from orderdesk.errors import DuplicateAddressError, NotFoundError
from orderdesk.mappers import address_create_to_entity, address_to_dto, apply_address_update

logger = logging.getLogger(__name__)


class AddressesService:
    """CRUD over delivery addresses.

    A user's delivery address is the address whose ``user_id`` points at
    them, so each user may hold at most one.
    """

    def __init__(self, addresses_repo) -> None:
        self._addresses = addresses_repo

    async def create(self, dto: CreateAddressDto) -> AddressDto:
        await self._ensure_user_is_free(dto.user_id)
        address = await self._addresses.add(address_create_to_entity(dto))
        logger.info("Created address %s for user %s", address.id, address.user_id)
        return address_to_dto(address)

    async def list_all(self) -> List[AddressDto]:
        return [address_to_dto(a) for a in await self._addresses.list_all()]

    async def list_by_country(self, country: str) -> List[AddressDto]:
        return [address_to_dto(a) for a in await self._addresses.find_by_country(country)]

    async def get_one(self, address_id: int) -> AddressDto:
        address = await self._addresses.get(address_id)
        if address is None:
            raise NotFoundError("Address", address_id)
        return address_to_dto(address)

    async def get_for_user(self, user_id: int) -> AddressDto:
        address = await self._addresses.find_by_user(user_id)
        if address is None:
            raise NotFoundError("Address for user", user_id)
        return address_to_dto(address)

    async def update(self, dto: UpdateAddressDto) -> AddressDto:
        address = await self._addresses.get(dto.id)
        if address is None:
            raise NotFoundError("Address", dto.id)
        if dto.user_id is not None and dto.user_id != address.user_id:
            await self._ensure_user_is_free(dto.user_id)
        apply_address_update(address, dto)
        saved = await self._addresses.save(address)
        logger.info("Updated address %s", saved.id)
        return address_to_dto(saved)

    async def delete(self, address_id: int) -> None:
        if not await self._addresses.delete_by_id(address_id):
            raise NotFoundError("Address", address_id)
        logger.info("Deleted address %s", address_id)

    async def _ensure_user_is_free(self, user_id: int) -> None:
        if await self._addresses.find_by_user(user_id) is not None:
            logger.warning("Rejected address: user %s already has one", user_id)
            raise DuplicateAddressError(user_id)
