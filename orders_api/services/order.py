import logging
import uuid
from typing import List, Sequence

from orders_api.core.errors import BadRequestError, InternalError, NotFoundError
from orders_api.domain.order import Order, OrderItem, OrderStatus, OrderValidationError
from orders_api.repositories.base import OrderRepository, RepositoryError

logger = logging.getLogger(__name__)


class OrderService:
    """Business rules for orders on top of any OrderRepository.

    Each method makes a single repository call and turns its outcome into
    either a value or one of BadRequestError, NotFoundError, InternalError.
    """

    def __init__(self, repository: OrderRepository) -> None:
        self.repository = repository

    async def create_order(self, customer_name: str, email: str, items: Sequence[OrderItem]) -> Order:
        try:
            order = Order.create(customer_name, email, items)
        except OrderValidationError as e:
            raise BadRequestError(str(e)) from e

        try:
            await self.repository.create(order)
        except RepositoryError as e:
            logger.error(f"Failed to persist order {order.id}: {e}", exc_info=True)
            raise InternalError(str(e)) from e

        logger.info(f"Order created: {order.id}, total_cents: {order.total_cents}")
        return order

    async def get_order(self, order_id: uuid.UUID) -> Order:
        try:
            order = await self.repository.get(order_id)
        except RepositoryError as e:
            logger.error(f"Failed to load order {order_id}: {e}", exc_info=True)
            raise InternalError(str(e)) from e

        if order is None:
            raise NotFoundError(f"order {order_id}")
        return order

    async def list_orders(self) -> List[Order]:
        try:
            return await self.repository.list()
        except RepositoryError as e:
            logger.error(f"Failed to list orders: {e}", exc_info=True)
            raise InternalError(str(e)) from e

    async def update_status(self, order_id: uuid.UUID, status: OrderStatus) -> Order:
        try:
            order = await self.repository.update_status(order_id, status)
        except RepositoryError as e:
            logger.error(f"Failed to update order {order_id}: {e}", exc_info=True)
            raise InternalError(str(e)) from e

        if order is None:
            raise NotFoundError(f"order {order_id}")

        logger.info(f"Order updated: {order.id}, status: {order.status.value}")
        return order

    async def delete_order(self, order_id: uuid.UUID) -> None:
        try:
            deleted = await self.repository.delete(order_id)
        except RepositoryError as e:
            logger.error(f"Failed to delete order {order_id}: {e}", exc_info=True)
            raise InternalError(str(e)) from e

        if not deleted:
            raise NotFoundError(f"order {order_id}")

        logger.info(f"Order deleted: {order_id}")
