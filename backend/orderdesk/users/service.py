import logging
from typing import List

from orderdesk.api.schemas import CreateUserDto, UpdateUserDto, UserDto
from orderdesk.errors import DuplicateEmailError, NotFoundError
from orderdesk.mappers import apply_user_update, user_create_to_entity, user_to_dto
from orderdesk.security.passwords import hash_password

logger = logging.getLogger(__name__)


class UsersService:
    def __init__(self, users_repo) -> None:
        self._users = users_repo

    async def create(self, dto: CreateUserDto) -> UserDto:
        """Create a user unless the email is taken.

        Uniqueness is checked here rather than by a database constraint, so a
        duplicate is rejected before anything is written.
        """
        email = str(dto.email)
        if await self._users.find_by_email(email) is not None:
            logger.warning("Rejected new user: email %s already in use", email)
            raise DuplicateEmailError(email)

        user = user_create_to_entity(dto)
        user.password = hash_password(dto.raw_password)
        user = await self._users.add(user)
        logger.info("Created user %s", user.id)
        return user_to_dto(user)

    async def list_all(self) -> List[UserDto]:
        return [user_to_dto(u) for u in await self._users.list_all()]

    async def get_one(self, user_id: int) -> UserDto:
        user = await self._users.get(user_id)
        if user is None:
            raise NotFoundError("User", user_id)
        return user_to_dto(user)

    async def update(self, dto: UpdateUserDto) -> UserDto:
        # The password is never changed through an update
        user = await self._users.get(dto.id)
        if user is None:
            logger.warning("User %s not found for update", dto.id)
            raise NotFoundError("User", dto.id)

        if dto.email is not None and str(dto.email) != user.email:
            holder = await self._users.find_by_email(str(dto.email))
            if holder is not None and holder.id != user.id:
                logger.warning("Rejected update of user %s: email %s already in use", user.id, dto.email)
                raise DuplicateEmailError(str(dto.email))

        apply_user_update(user, dto)
        saved = await self._users.save(user)
        logger.info("Updated user %s", saved.id)
        return user_to_dto(saved)

    async def delete(self, user_id: int) -> None:
        if not await self._users.delete_by_id(user_id):
            logger.warning("User %s not found for delete", user_id)
            raise NotFoundError("User", user_id)
        logger.info("Deleted user %s", user_id)
