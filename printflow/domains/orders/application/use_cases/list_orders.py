"""
List Orders Use Case
"""

import logging
from dataclasses import dataclass, field

from printflow.clients.order_api_client import OrderApiError
from printflow.core.domain import IntegrationException
from printflow.domains.orders.application.services import OrderAggregator
from printflow.domains.orders.domain.entities import OrderSummary
from printflow.domains.orders.domain.value_objects import WorkflowPhase, group_by_phase

logger = logging.getLogger(__name__)


@dataclass
class ListOrdersRequest:
    """Backend-side filters."""

    status: str | None = None
    search: str | None = None
    page: int | None = None
    limit: int | None = None


@dataclass
class ListOrdersResponse:
    total: int = 0
    page: int = 1
    limit: int = 0
    orders: list[OrderSummary] = field(default_factory=list)

    @property
    def by_phase(self) -> dict[WorkflowPhase, list[OrderSummary]]:
        """Orders grouped for production boards."""
        return group_by_phase(self.orders)


class ListOrdersUseCase:
    """
    Use Case: List Orders

    Pages through backend orders as summaries.
    """

    def __init__(self, aggregator: OrderAggregator):
        self.aggregator = aggregator

    async def execute(self, request: ListOrdersRequest) -> ListOrdersResponse:
        try:
            page = await self.aggregator.fetch_orders(
                status=request.status,
                search=request.search,
                page=request.page,
                limit=request.limit,
            )
        except OrderApiError as e:
            logger.error(f"Error listing orders: {e}")
            raise IntegrationException("order_api", "Could not list orders", e) from e

        return ListOrdersResponse(total=page.total, page=page.page, limit=page.limit, orders=page.orders)
