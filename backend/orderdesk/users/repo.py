from typing import Optional

from sqlalchemy import select

from orderdesk.models import User
from orderdesk.repository import Repository


class UsersRepository(Repository[User]):
    model = User

    async def find_by_email(self, email: str) -> Optional[User]:
        async with self._session_factory() as session:
            stmt = select(User).where(User.email == email).limit(1)
            result = await session.execute(stmt)
            return result.scalars().first()
