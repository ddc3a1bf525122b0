"""
Orders Application Ports

Interface definitions (ports) for the Orders domain.
Uses Protocol for structural typing.
"""

from datetime import datetime
from typing import Any, Protocol, runtime_checkable

from printflow.models.order_api import BackendOrder, BackendOrdersPage


@runtime_checkable
class IOrderStatusWriter(Protocol):
    """
    Interface for persisting status changes.

    Any exception raised means the backend did not accept the change.
    """

    async def update_order_status(self, order_id: int | str, status: str) -> dict[str, Any]:
        """Persist a new status for an order"""
        ...


@runtime_checkable
class IOrderSource(Protocol):
    """Interface for reading raw orders from the backend."""

    async def get_order(self, order_id: int | str) -> BackendOrder | None:
        """Get one order, or None if it does not exist"""
        ...

    async def list_orders(
        self,
        status: str | None = None,
        search: str | None = None,
        page: int | None = None,
        limit: int | None = None,
    ) -> BackendOrdersPage:
        """Get a page of orders"""
        ...


@runtime_checkable
class Clock(Protocol):
    """Time source for audit timestamps."""

    def now(self) -> datetime:
        """Current time (timezone-aware)"""
        ...


__all__ = [
    "IOrderStatusWriter",
    "IOrderSource",
    "Clock",
]
