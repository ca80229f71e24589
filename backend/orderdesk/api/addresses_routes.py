from typing import List

from fastapi import APIRouter, Depends, Response, status

from orderdesk.addresses.service import AddressesService
from orderdesk.api.deps import get_addresses_service
from orderdesk.api.schemas import AddressDto, CreateAddressDto, UpdateAddressDto

router = APIRouter(prefix="/api/addresses", tags=["addresses"])


@router.get("/list", response_model=List[AddressDto])
async def addresses_list(service: AddressesService = Depends(get_addresses_service)):
    return await service.list_all()


@router.get("/country/{country}", response_model=List[AddressDto])
async def addresses_by_country(country: str, service: AddressesService = Depends(get_addresses_service)):
    return await service.list_by_country(country)


@router.get("/user/{user_id}", response_model=AddressDto)
async def address_for_user(user_id: int, service: AddressesService = Depends(get_addresses_service)):
    return await service.get_for_user(user_id)


@router.get("/show/{address_id}", response_model=AddressDto)
async def address_detail(address_id: int, service: AddressesService = Depends(get_addresses_service)):
    return await service.get_one(address_id)


@router.post("/add", response_model=AddressDto, status_code=status.HTTP_201_CREATED)
async def address_add(dto: CreateAddressDto, response: Response, service: AddressesService = Depends(get_addresses_service)):
    created = await service.create(dto)
    response.headers["Location"] = f"/api/addresses/show/{created.id}"
    return created


@router.put("/edit", response_model=AddressDto)
async def address_edit(dto: UpdateAddressDto, service: AddressesService = Depends(get_addresses_service)):
    return await service.update(dto)


@router.delete("/delete/{address_id}", status_code=status.HTTP_204_NO_CONTENT)
async def address_delete(address_id: int, service: AddressesService = Depends(get_addresses_service)):
    await service.delete(address_id)
    return Response(status_code=status.HTTP_204_NO_CONTENT)
