"""
Get Order Detail Use Case
"""

import logging
from dataclasses import dataclass

from printflow.clients.order_api_client import OrderApiError
from printflow.core.domain import EntityNotFoundException, IntegrationException
from printflow.domains.orders.application.services import OrderAggregator
from printflow.domains.orders.domain.entities import Order, OrderId

logger = logging.getLogger(__name__)


@dataclass
class GetOrderDetailRequest:
    order_id: OrderId


class GetOrderDetailUseCase:
    """
    Use Case: Get Order Detail

    Loads one order with line items and status history.
    """

    def __init__(self, aggregator: OrderAggregator):
        self.aggregator = aggregator

    async def execute(self, request: GetOrderDetailRequest) -> Order:
        """
        Raises:
            EntityNotFoundException: Order unknown to the backend
            IntegrationException: Backend unreachable or answered garbage
        """
        try:
            order = await self.aggregator.fetch(request.order_id)
        except OrderApiError as e:
            logger.error(f"Error loading order {request.order_id}: {e}")
            raise IntegrationException("order_api", f"Could not load order {request.order_id}", e) from e

        if order is None:
            raise EntityNotFoundException("Order", request.order_id)
        return order
