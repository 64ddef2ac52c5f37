import uuid
from typing import List, Optional

import pytest
import pytest_asyncio
from httpx import AsyncClient, ASGITransport

from orders_api.main import app
from orders_api.api.orders import get_repository
from orders_api.domain.order import Order, OrderItem, OrderStatus
from orders_api.repositories import InMemoryOrderRepository, OrderRepository, RepositoryError, SqlOrderRepository


class FailingOrderRepository(OrderRepository):
    """Adapter whose storage is permanently broken."""

    def __init__(self) -> None:
        self.calls: List[str] = []

    async def create(self, order: Order) -> Order:
        self.calls.append("create")
        raise RepositoryError("disk I/O error")

    async def get(self, order_id: uuid.UUID) -> Optional[Order]:
        self.calls.append("get")
        raise RepositoryError("disk I/O error")

    async def list(self) -> List[Order]:
        self.calls.append("list")
        raise RepositoryError("disk I/O error")

    async def update_status(self, order_id: uuid.UUID, status: OrderStatus) -> Optional[Order]:
        self.calls.append("update_status")
        raise RepositoryError("disk I/O error")

    async def delete(self, order_id: uuid.UUID) -> bool:
        self.calls.append("delete")
        raise RepositoryError("disk I/O error")


def sqlite_url(tmp_path) -> str:
    return f"sqlite+aiosqlite:///{tmp_path / 'data' / 'orders.db'}"


@pytest.fixture
def widget_items() -> List[OrderItem]:
    return [OrderItem(name="Widget", qty=2, unit_price_cents=500)]


@pytest_asyncio.fixture
async def memory_repository():
    repository = InMemoryOrderRepository()
    yield repository
    await repository.close()


@pytest_asyncio.fixture
async def sql_repository(tmp_path):
    repository = await SqlOrderRepository.open(sqlite_url(tmp_path))
    yield repository
    await repository.close()


@pytest_asyncio.fixture(params=["memory", "sqlite"])
async def repository(request, tmp_path):
    if request.param == "memory":
        repository = InMemoryOrderRepository()
    else:
        repository = await SqlOrderRepository.open(sqlite_url(tmp_path))
    yield repository
    await repository.close()


@pytest.fixture
def failing_repository() -> FailingOrderRepository:
    return FailingOrderRepository()


@pytest_asyncio.fixture
async def client(memory_repository):
    app.dependency_overrides[get_repository] = lambda: memory_repository

    async with AsyncClient(
        transport=ASGITransport(app=app),
        base_url="http://test"
    ) as ac:
        yield ac

    app.dependency_overrides.clear()


@pytest_asyncio.fixture
async def failing_client(failing_repository):
    app.dependency_overrides[get_repository] = lambda: failing_repository

    async with AsyncClient(
        transport=ASGITransport(app=app),
        base_url="http://test"
    ) as ac:
        yield ac

    app.dependency_overrides.clear()


@pytest.fixture
def database_url(tmp_path) -> str:
    return sqlite_url(tmp_path)
