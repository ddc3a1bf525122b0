"""
Orders Domain Entities
"""

from printflow.domains.orders.domain.entities.order import (
    SIZE_LABELS,
    CustomerRef,
    LineItem,
    Order,
    OrderId,
    OrderSummary,
    SizeQuantity,
)

__all__ = [
    "SIZE_LABELS",
    "CustomerRef",
    "LineItem",
    "Order",
    "OrderId",
    "OrderSummary",
    "SizeQuantity",
]
