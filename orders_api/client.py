"""Async HTTP client for the orders API.

    async with OrdersClient("http://localhost:3000") as client:
        created = await client.create_order("Alice", "a@b.com", [OrderItem(name="Widget", qty=2, unit_price_cents=500)])
        order = await client.get_order(created.id)

Any non-2xx response raises httpx.HTTPStatusError.
"""
import uuid
from typing import Dict, List, Optional, Sequence, Union

import httpx

from orders_api.domain.order import Order, OrderItem, OrderStatus
from orders_api.schemas.order import CreateOrderRequest, CreateOrderResponse, UpdateStatusRequest

OrderId = Union[str, uuid.UUID]


class OrdersClient:
    def __init__(
        self,
        base_url: str,
        *,
        timeout: Optional[float] = None,
        headers: Optional[Dict[str, str]] = None,
        client: Optional[httpx.AsyncClient] = None
    ) -> None:
        if client is not None:
            self.client = client
            self._owns_client = False
        else:
            self.client = httpx.AsyncClient(
                base_url=base_url,
                headers=headers,
                timeout=timeout if timeout is not None else httpx.Timeout(5.0)
            )
            self._owns_client = True

    async def __aenter__(self) -> "OrdersClient":
        return self

    async def __aexit__(self, *exc_info: object) -> None:
        await self.aclose()

    async def aclose(self) -> None:
        if self._owns_client:
            await self.client.aclose()

    async def create_order(self, customer_name: str, email: str, items: Sequence[OrderItem]) -> CreateOrderResponse:
        body = CreateOrderRequest(customer_name=customer_name, email=email, items=list(items))
        response = await self.client.post("/orders", json=body.model_dump(mode="json"))
        response.raise_for_status()
        return CreateOrderResponse.model_validate(response.json())

    async def get_order(self, order_id: OrderId) -> Order:
        response = await self.client.get(f"/orders/{order_id}")
        response.raise_for_status()
        return Order.model_validate(response.json())

    async def list_orders(self) -> List[Order]:
        response = await self.client.get("/orders")
        response.raise_for_status()
        return [Order.model_validate(item) for item in response.json()]

    async def update_status(self, order_id: OrderId, status: OrderStatus) -> Order:
        body = UpdateStatusRequest(status=status)
        response = await self.client.patch(f"/orders/{order_id}/status", json=body.model_dump(mode="json"))
        response.raise_for_status()
        return Order.model_validate(response.json())

    async def delete_order(self, order_id: OrderId) -> None:
        response = await self.client.delete(f"/orders/{order_id}")
        response.raise_for_status()
