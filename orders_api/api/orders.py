import uuid
from typing import List

from fastapi import APIRouter, Depends, Request, Response, status

from orders_api.core.errors import BadRequestError
from orders_api.domain.order import Order
from orders_api.repositories.base import OrderRepository
from orders_api.services.order import OrderService
from orders_api.schemas.order import CreateOrderRequest, CreateOrderResponse, ErrorResponse, UpdateStatusRequest

router = APIRouter(prefix="/orders", tags=["orders"])


def get_repository(request: Request) -> OrderRepository:
    return request.app.state.repository


def get_order_service(repository: OrderRepository = Depends(get_repository)) -> OrderService:
    return OrderService(repository)


def parse_order_id(order_id: str) -> uuid.UUID:
    try:
        return uuid.UUID(order_id)
    except ValueError as e:
        raise BadRequestError(f"invalid order id: {order_id}") from e


@router.post(
    "",
    response_model=CreateOrderResponse,
    status_code=status.HTTP_201_CREATED,
    responses={400: {"model": ErrorResponse}, 500: {"model": ErrorResponse}}
)
async def create_order(
    order_data: CreateOrderRequest,
    service: OrderService = Depends(get_order_service)
) -> CreateOrderResponse:
    order = await service.create_order(order_data.customer_name, order_data.email, order_data.items)
    return CreateOrderResponse.from_order(order)


@router.get("", response_model=List[Order], responses={500: {"model": ErrorResponse}})
async def list_orders(service: OrderService = Depends(get_order_service)) -> List[Order]:
    return await service.list_orders()


@router.get(
    "/{order_id}",
    response_model=Order,
    responses={400: {"model": ErrorResponse}, 404: {"model": ErrorResponse}}
)
async def get_order(
    order_id: str,
    service: OrderService = Depends(get_order_service)
) -> Order:
    return await service.get_order(parse_order_id(order_id))


@router.patch(
    "/{order_id}/status",
    response_model=Order,
    responses={400: {"model": ErrorResponse}, 404: {"model": ErrorResponse}}
)
async def update_order_status(
    order_id: str,
    update: UpdateStatusRequest,
    service: OrderService = Depends(get_order_service)
) -> Order:
    return await service.update_status(parse_order_id(order_id), update.status)


@router.delete(
    "/{order_id}",
    status_code=status.HTTP_204_NO_CONTENT,
    response_class=Response,
    responses={400: {"model": ErrorResponse}, 404: {"model": ErrorResponse}}
)
async def delete_order(
    order_id: str,
    service: OrderService = Depends(get_order_service)
) -> Response:
    await service.delete_order(parse_order_id(order_id))
    return Response(status_code=status.HTTP_204_NO_CONTENT)
