from typing import List
from pydantic import BaseModel

from orders_api.domain.order import Order, OrderItem, OrderStatus


class CreateOrderRequest(BaseModel):
    customer_name: str
    email: str
    items: List[OrderItem]


class CreateOrderResponse(BaseModel):
    id: str
    status: OrderStatus

    @classmethod
    def from_order(cls, order: Order) -> "CreateOrderResponse":
        return cls(id=str(order.id), status=order.status)


class UpdateStatusRequest(BaseModel):
    status: OrderStatus


class ErrorResponse(BaseModel):
    error: str
