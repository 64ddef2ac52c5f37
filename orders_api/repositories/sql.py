import logging
import uuid
from typing import List, Optional

from sqlalchemy import delete, select
from sqlalchemy.exc import IntegrityError, SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncEngine, AsyncSession, async_sessionmaker

from orders_api.core.database import Base, create_engine, create_session_maker, ensure_database_directory
from orders_api.domain.order import Order, OrderStatus
from orders_api.models.order import OrderRecord
from orders_api.repositories.base import OrderAlreadyExistsError, OrderRepository, RepositoryError

logger = logging.getLogger(__name__)


class SqlOrderRepository(OrderRepository):
    """Durable adapter over a single-file SQLite database.

    Every operation runs in its own session and transaction.
    """

    def __init__(
        self,
        session_maker: async_sessionmaker[AsyncSession],
        engine: Optional[AsyncEngine] = None
    ) -> None:
        self.session_maker = session_maker
        self.engine = engine

    @classmethod
    async def open(cls, database_url: str) -> "SqlOrderRepository":
        try:
            ensure_database_directory(database_url)
            engine = create_engine(database_url)
            async with engine.begin() as conn:
                await conn.run_sync(Base.metadata.create_all)
        except (OSError, SQLAlchemyError) as e:
            raise RepositoryError(f"failed to open {database_url}: {e}") from e

        logger.info(f"Opened order database {engine.url.render_as_string(hide_password=True)}")
        return cls(create_session_maker(engine), engine)

    async def close(self) -> None:
        if self.engine is not None:
            await self.engine.dispose()
            logger.info("Closed order database")

    async def create(self, order: Order) -> Order:
        try:
            async with self.session_maker() as session:
                async with session.begin():
                    session.add(OrderRecord.from_domain(order))
        except IntegrityError as e:
            if "UNIQUE constraint failed" in str(e.orig):
                raise OrderAlreadyExistsError(order.id) from e
            raise RepositoryError(str(e)) from e
        except SQLAlchemyError as e:
            raise RepositoryError(str(e)) from e
        return order

    async def get(self, order_id: uuid.UUID) -> Optional[Order]:
        try:
            async with self.session_maker() as session:
                record = await session.get(OrderRecord, str(order_id))
                return record.to_domain() if record else None
        except SQLAlchemyError as e:
            raise RepositoryError(str(e)) from e

    async def list(self) -> List[Order]:
        try:
            async with self.session_maker() as session:
                result = await session.execute(select(OrderRecord))
                return [record.to_domain() for record in result.scalars().all()]
        except SQLAlchemyError as e:
            raise RepositoryError(str(e)) from e

    async def update_status(self, order_id: uuid.UUID, status: OrderStatus) -> Optional[Order]:
        try:
            async with self.session_maker() as session:
                async with session.begin():
                    result = await session.execute(
                        select(OrderRecord)
                        .where(OrderRecord.id == str(order_id))
                    )
                    record = result.scalar_one_or_none()
                    if record is None:
                        return None

                    order = record.to_domain()
                    order.update_status(status)
                    record.status = order.status.value
                    record.updated_at = order.updated_at
                return order
        except SQLAlchemyError as e:
            raise RepositoryError(str(e)) from e

    async def delete(self, order_id: uuid.UUID) -> bool:
        try:
            async with self.session_maker() as session:
                async with session.begin():
                    result = await session.execute(
                        delete(OrderRecord).where(OrderRecord.id == str(order_id))
                    )
                return result.rowcount > 0
        except SQLAlchemyError as e:
            raise RepositoryError(str(e)) from e
