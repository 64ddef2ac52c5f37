import uuid
from datetime import datetime, timedelta, timezone
from enum import Enum
from typing import List, Sequence

from pydantic import BaseModel, Field


def utc_now() -> datetime:
    return datetime.now(timezone.utc)


class OrderValidationError(ValueError):
    pass


class OrderStatus(str, Enum):
    PENDING = "Pending"
    CONFIRMED = "Confirmed"
    SHIPPED = "Shipped"
    CANCELLED = "Cancelled"
    COMPLETED = "Completed"


class OrderItem(BaseModel):
    name: str
    qty: int = Field(ge=0)
    unit_price_cents: int


class Order(BaseModel):
    id: uuid.UUID
    customer_name: str
    email: str
    items: List[OrderItem]
    total_cents: int
    status: OrderStatus = OrderStatus.PENDING
    created_at: datetime
    updated_at: datetime

    @classmethod
    def create(cls, customer_name: str, email: str, items: Sequence[OrderItem]) -> "Order":
        """Build a new pending order, or raise OrderValidationError.

        The total is computed here once; items are never changed afterwards.
        """
        if not customer_name.strip():
            raise OrderValidationError("customer_name empty")
        if "@" not in email:
            raise OrderValidationError("invalid email")
        if not items:
            raise OrderValidationError("items empty")
        for item in items:
            if item.qty == 0:
                raise OrderValidationError("item qty must be > 0")

        total_cents = sum(item.qty * item.unit_price_cents for item in items)
        now = utc_now()

        return cls(
            id=uuid.uuid4(),
            customer_name=customer_name,
            email=email,
            items=[item.model_copy() for item in items],
            total_cents=total_cents,
            status=OrderStatus.PENDING,
            created_at=now,
            updated_at=now
        )

    def update_status(self, status: OrderStatus) -> None:
        now = utc_now()
        # updated_at must move forward even on a coarse clock
        if now <= self.updated_at:
            now = self.updated_at + timedelta(microseconds=1)

        self.status = status
        self.updated_at = now
