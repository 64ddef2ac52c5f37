import threading
import uuid
from typing import Dict, List, Optional

from orders_api.domain.order import Order, OrderStatus
from orders_api.repositories.base import OrderAlreadyExistsError, OrderRepository


class InMemoryOrderRepository(OrderRepository):
    """Process-lifetime order store split into independently locked shards.

    A given id always lands in the same shard, so reads and writes of one
    order are serialised while different orders rarely share a lock. Orders
    are copied on the way in and out.
    """

    def __init__(self, shard_count: int = 16) -> None:
        if shard_count < 1:
            raise ValueError("shard_count must be positive")
        self._shards: List[Dict[uuid.UUID, Order]] = [{} for _ in range(shard_count)]
        self._locks = [threading.Lock() for _ in range(shard_count)]

    def _shard(self, order_id: uuid.UUID) -> int:
        return order_id.int % len(self._shards)

    async def create(self, order: Order) -> Order:
        index = self._shard(order.id)
        with self._locks[index]:
            shard = self._shards[index]
            if order.id in shard:
                raise OrderAlreadyExistsError(order.id)
            shard[order.id] = order.model_copy(deep=True)
        return order

    async def get(self, order_id: uuid.UUID) -> Optional[Order]:
        index = self._shard(order_id)
        with self._locks[index]:
            order = self._shards[index].get(order_id)
            return order.model_copy(deep=True) if order else None

    async def list(self) -> List[Order]:
        orders: List[Order] = []
        for shard, lock in zip(self._shards, self._locks):
            with lock:
                orders.extend(order.model_copy(deep=True) for order in shard.values())
        return orders

    async def update_status(self, order_id: uuid.UUID, status: OrderStatus) -> Optional[Order]:
        index = self._shard(order_id)
        with self._locks[index]:
            order = self._shards[index].get(order_id)
            if order is None:
                return None
            order.update_status(status)
            return order.model_copy(deep=True)

    async def delete(self, order_id: uuid.UUID) -> bool:
        index = self._shard(order_id)
        with self._locks[index]:
            return self._shards[index].pop(order_id, None) is not None
