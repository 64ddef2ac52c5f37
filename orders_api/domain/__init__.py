from orders_api.domain.order import Order, OrderItem, OrderStatus, OrderValidationError

__all__ = ["Order", "OrderItem", "OrderStatus", "OrderValidationError"]
