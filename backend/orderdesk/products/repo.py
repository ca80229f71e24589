from typing import List

from sqlalchemy import select

from orderdesk.models import Product
from orderdesk.repository import Repository


class ProductsRepository(Repository[Product]):
    model = Product

    async def find_by_type(self, product_type: int) -> List[Product]:
        async with self._session_factory() as session:
            stmt = select(Product).where(Product.type == product_type).order_by(Product.id)
            result = await session.execute(stmt)
            return list(result.scalars().all())
