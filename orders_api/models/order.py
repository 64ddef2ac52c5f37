from datetime import datetime, timezone
from typing import Any, Optional

from sqlalchemy import String, BigInteger, DateTime, JSON, TypeDecorator
from sqlalchemy.orm import Mapped, mapped_column

from orders_api.core.database import Base
from orders_api.domain.order import Order, OrderStatus


class UTCDateTime(TypeDecorator):
    """Stores naive UTC and hands back aware UTC datetimes."""

    impl = DateTime
    cache_ok = True

    def process_bind_param(self, value: Optional[datetime], dialect: Any) -> Optional[datetime]:
        if value is None:
            return None
        if value.tzinfo is not None:
            value = value.astimezone(timezone.utc).replace(tzinfo=None)
        return value

    def process_result_value(self, value: Optional[datetime], dialect: Any) -> Optional[datetime]:
        if value is None:
            return None
        return value.replace(tzinfo=timezone.utc)


class OrderRecord(Base):
    __tablename__ = "orders"

    id: Mapped[str] = mapped_column(String(36), primary_key=True)
    customer_name: Mapped[str] = mapped_column(String, nullable=False)
    email: Mapped[str] = mapped_column(String, nullable=False)
    items: Mapped[list] = mapped_column(JSON, nullable=False)
    total_cents: Mapped[int] = mapped_column(BigInteger, nullable=False)
    status: Mapped[str] = mapped_column(String(20), nullable=False, default=OrderStatus.PENDING.value, index=True)
    created_at: Mapped[datetime] = mapped_column(UTCDateTime, nullable=False, index=True)
    updated_at: Mapped[datetime] = mapped_column(UTCDateTime, nullable=False)

    @classmethod
    def from_domain(cls, order: Order) -> "OrderRecord":
        return cls(
            id=str(order.id),
            customer_name=order.customer_name,
            email=order.email,
            items=[item.model_dump() for item in order.items],
            total_cents=order.total_cents,
            status=order.status.value,
            created_at=order.created_at,
            updated_at=order.updated_at
        )

    def to_domain(self) -> Order:
        return Order(
            id=self.id,
            customer_name=self.customer_name,
            email=self.email,
            items=self.items,
            total_cents=self.total_cents,
            status=OrderStatus(self.status),
            created_at=self.created_at,
            updated_at=self.updated_at
        )
