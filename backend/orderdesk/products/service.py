import logging
from typing import List

from orderdesk.api.schemas import CreateProductDto, ProductDto, UpdateProductDto
from orderdesk.errors import NotFoundError
from orderdesk.mappers import apply_product_update, product_create_to_entity, product_to_dto

logger = logging.getLogger(__name__)


class ProductsService:
    def __init__(self, products_repo) -> None:
        self._products = products_repo

    async def create(self, dto: CreateProductDto) -> ProductDto:
        product = await self._products.add(product_create_to_entity(dto))
        logger.info("Created product %s", product.id)
        return product_to_dto(product)

    async def list_all(self) -> List[ProductDto]:
        return [product_to_dto(p) for p in await self._products.list_all()]

    async def list_by_type(self, product_type: int) -> List[ProductDto]:
        return [product_to_dto(p) for p in await self._products.find_by_type(product_type)]

    async def get_one(self, product_id: int) -> ProductDto:
        product = await self._products.get(product_id)
        if product is None:
            raise NotFoundError("Product", product_id)
        return product_to_dto(product)

    async def update(self, dto: UpdateProductDto) -> ProductDto:
        product = await self._products.get(dto.id)
        if product is None:
            logger.warning("Product %s not found for update", dto.id)
            raise NotFoundError("Product", dto.id)
        apply_product_update(product, dto)
        saved = await self._products.save(product)
        logger.info("Updated product %s", saved.id)
        return product_to_dto(saved)

    async def delete(self, product_id: int) -> None:
        if not await self._products.delete_by_id(product_id):
            logger.warning("Product %s not found for delete", product_id)
            raise NotFoundError("Product", product_id)
        logger.info("Deleted product %s", product_id)
