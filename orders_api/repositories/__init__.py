import logging
from typing import Optional

from orders_api.repositories.base import OrderAlreadyExistsError, OrderRepository, RepositoryError
from orders_api.repositories.memory import InMemoryOrderRepository
from orders_api.repositories.sql import SqlOrderRepository

logger = logging.getLogger(__name__)


async def build_repository(database_url: Optional[str]) -> OrderRepository:
    """Select the storage adapter: in-memory without a URL, SQLite otherwise."""
    if not database_url:
        logger.info("Using in-memory order repository")
        return InMemoryOrderRepository()
    return await SqlOrderRepository.open(database_url)


__all__ = [
    "InMemoryOrderRepository",
    "OrderAlreadyExistsError",
    "OrderRepository",
    "RepositoryError",
    "SqlOrderRepository",
    "build_repository",
]
