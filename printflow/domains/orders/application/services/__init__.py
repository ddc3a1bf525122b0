"""
Orders Application Services
"""

from printflow.domains.orders.application.services.order_aggregator import (
    OrderAggregator,
    OrderPage,
    size_breakdown,
)
from printflow.domains.orders.application.services.workflow_engine import OrderWorkflowEngine, SystemClock

__all__ = [
    "OrderAggregator",
    "OrderPage",
    "OrderWorkflowEngine",
    "SystemClock",
    "size_breakdown",
]
