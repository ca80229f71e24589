from typing import List, Optional

from sqlalchemy import select

from orderdesk.models import Address
from orderdesk.repository import Repository


class AddressesRepository(Repository[Address]):
    model = Address

    async def find_by_country(self, country: str) -> List[Address]:
        async with self._session_factory() as session:
            stmt = select(Address).where(Address.country == country).order_by(Address.id)
            result = await session.execute(stmt)
            return list(result.scalars().all())

    async def find_by_user(self, user_id: int) -> Optional[Address]:
        async with self._session_factory() as session:
            stmt = select(Address).where(Address.user_id == user_id).limit(1)
            result = await session.execute(stmt)
            return result.scalars().first()
