"""
Orders Domain Layer

This module contains:
- Entities: Order, LineItem, OrderSummary
- Value Objects: workflow catalog, status changes, display categories
"""

from printflow.domains.orders.domain.entities import LineItem, Order, OrderSummary, SizeQuantity
from printflow.domains.orders.domain.value_objects import (
    WORKFLOW_CATALOG,
    StatusCategory,
    StatusChange,
    WorkflowPhase,
    WorkflowStatus,
    classify,
    resolve_status,
)

__all__ = [
    "LineItem",
    "Order",
    "OrderSummary",
    "SizeQuantity",
    "WORKFLOW_CATALOG",
    "StatusCategory",
    "StatusChange",
    "WorkflowPhase",
    "WorkflowStatus",
    "classify",
    "resolve_status",
]
