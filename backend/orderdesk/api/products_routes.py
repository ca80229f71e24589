from typing import List

from fastapi import APIRouter, Depends, Response, status

from orderdesk.api.deps import get_products_service
from orderdesk.api.schemas import CreateProductDto, ProductDto, UpdateProductDto
from orderdesk.products.service import ProductsService

router = APIRouter(prefix="/api/products", tags=["products"])


@router.get("/list", response_model=List[ProductDto])
async def products_list(service: ProductsService = Depends(get_products_service)):
    return await service.list_all()


@router.get("/type/{product_type}", response_model=List[ProductDto])
async def products_by_type(product_type: int, service: ProductsService = Depends(get_products_service)):
    return await service.list_by_type(product_type)


@router.get("/show/{product_id}", response_model=ProductDto)
async def product_detail(product_id: int, service: ProductsService = Depends(get_products_service)):
    return await service.get_one(product_id)


@router.post("/add", response_model=ProductDto, status_code=status.HTTP_201_CREATED)
async def product_add(dto: CreateProductDto, response: Response, service: ProductsService = Depends(get_products_service)):
    created = await service.create(dto)
    response.headers["Location"] = f"/api/products/show/{created.id}"
    return created


@router.put("/edit", response_model=ProductDto)
async def product_edit(dto: UpdateProductDto, service: ProductsService = Depends(get_products_service)):
    return await service.update(dto)


@router.delete("/delete/{product_id}", status_code=status.HTTP_204_NO_CONTENT)
async def product_delete(product_id: int, service: ProductsService = Depends(get_products_service)):
    await service.delete(product_id)
    return Response(status_code=status.HTTP_204_NO_CONTENT)
