from typing import List

from fastapi import APIRouter, Depends, Response, status

from orderdesk.api.deps import get_users_service
from orderdesk.api.schemas import CreateUserDto, UpdateUserDto, UserDto
from orderdesk.users.service import UsersService

router = APIRouter(prefix="/api/users", tags=["users"])


@router.get("/list", response_model=List[UserDto])
async def users_list(service: UsersService = Depends(get_users_service)):
    return await service.list_all()


@router.get("/show/{user_id}", response_model=UserDto)
async def user_detail(user_id: int, service: UsersService = Depends(get_users_service)):
    return await service.get_one(user_id)


@router.post("/add", response_model=UserDto, status_code=status.HTTP_201_CREATED)
async def user_add(dto: CreateUserDto, response: Response, service: UsersService = Depends(get_users_service)):
    # 409 if the email is already taken (see DuplicateEmailError handler)
    created = await service.create(dto)
    response.headers["Location"] = f"/api/users/show/{created.id}"
    return created


@router.put("/edit", response_model=UserDto)
async def user_edit(dto: UpdateUserDto, service: UsersService = Depends(get_users_service)):
    return await service.update(dto)


@router.delete("/delete/{user_id}", status_code=status.HTTP_204_NO_CONTENT)
async def user_delete(user_id: int, service: UsersService = Depends(get_users_service)):
    await service.delete(user_id)
    return Response(status_code=status.HTTP_204_NO_CONTENT)
