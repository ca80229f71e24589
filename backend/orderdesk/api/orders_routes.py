from datetime import date
from typing import List, Optional

from fastapi import APIRouter, Depends, Response, status

from orderdesk.api.deps import get_orders_service
from orderdesk.api.schemas import CreateOrderDto, OrderView, UpdateOrderDto
from orderdesk.orders.service import OrdersService

router = APIRouter(prefix="/api/orders", tags=["orders"])


@router.get("/list", response_model=List[OrderView])
async def orders_list(service: OrdersService = Depends(get_orders_service)):
    return await service.list_all()


@router.get("/show/{order_id}", response_model=OrderView)
async def order_detail(order_id: int, service: OrdersService = Depends(get_orders_service)):
    return await service.get_one(order_id)


@router.get("/owner/{owner_id}", response_model=List[OrderView])
async def orders_by_owner(owner_id: int, service: OrdersService = Depends(get_orders_service)):
    return await service.list_by_owner(owner_id)


@router.get("/search", response_model=List[OrderView])
async def orders_search(
    owner: Optional[int] = None,
    start_date: Optional[date] = None,
    end_date: Optional[date] = None,
    service: OrdersService = Depends(get_orders_service),
):
    """
    Orders issued between start_date and end_date (both inclusive, UTC days),
    optionally for one owner. Any parameter may be left out; a start date after
    the end date yields an empty list.
    """
    return await service.list_by_date_range(owner, start_date, end_date)


@router.post("/add", response_model=OrderView, status_code=status.HTTP_201_CREATED)
async def order_add(dto: CreateOrderDto, response: Response, service: OrdersService = Depends(get_orders_service)):
    created = await service.create(dto)
    response.headers["Location"] = f"/api/orders/show/{created.id}"
    return created


@router.put("/edit", response_model=OrderView)
async def order_edit(dto: UpdateOrderDto, service: OrdersService = Depends(get_orders_service)):
    return await service.update(dto)


@router.delete("/delete/{order_id}", status_code=status.HTTP_204_NO_CONTENT)
async def order_delete(order_id: int, service: OrdersService = Depends(get_orders_service)):
    await service.delete(order_id)
    return Response(status_code=status.HTTP_204_NO_CONTENT)
