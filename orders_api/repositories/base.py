"""Storage port for orders.

Adapters implement OrderRepository. Absence is reported in return values
(None or False); RepositoryError is the only failure an adapter raises.
"""
import uuid
from abc import ABC, abstractmethod
from typing import List, Optional

from orders_api.domain.order import Order, OrderStatus


class RepositoryError(Exception):
    pass


class OrderAlreadyExistsError(RepositoryError):
    def __init__(self, order_id: uuid.UUID) -> None:
        super().__init__(f"order {order_id} already exists")
        self.order_id = order_id


class OrderRepository(ABC):

    @abstractmethod
    async def create(self, order: Order) -> Order:
        """Persist a fully formed order.

        Raises OrderAlreadyExistsError when the id is already stored.
        """

    @abstractmethod
    async def get(self, order_id: uuid.UUID) -> Optional[Order]:
        """Return the stored order, or None."""

    @abstractmethod
    async def list(self) -> List[Order]:
        """Return every stored order, in no particular order."""

    @abstractmethod
    async def update_status(self, order_id: uuid.UUID, status: OrderStatus) -> Optional[Order]:
        """Apply and persist a status change; None when the order is absent."""

    @abstractmethod
    async def delete(self, order_id: uuid.UUID) -> bool:
        """Remove the order; False when it was not stored."""

    async def close(self) -> None:
        return None
