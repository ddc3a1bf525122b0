"""
Dependency Injection Container

Centralized container for creating and managing application dependencies.
Wires the HTTP clients to the ports the pricing and orders domains declare.
"""

import logging

from printflow.clients.order_api_client import OrderApiClient
from printflow.clients.pricing_api_client import PricingApiClient
from printflow.config.settings import Settings, get_settings
from printflow.domains.orders.application.services import OrderAggregator, OrderWorkflowEngine
from printflow.domains.orders.application.use_cases import (
    ChangeOrderStatusUseCase,
    GetOrderDetailUseCase,
    GetWorkflowCatalogUseCase,
    ListOrdersUseCase,
)
from printflow.domains.pricing.application.services import PricingCalculator, PricingQuoteSession
from printflow.domains.pricing.application.use_cases import (
    CalculateQuoteUseCase,
    CheckPricingHealthUseCase,
    GetDecorationOptionsUseCase,
)
from printflow.domains.pricing.domain.services import FallbackPricingService

logger = logging.getLogger(__name__)


class DependencyContainer:
    """
    Dependency Injection Container.

    Single Responsibility: Create and wire all application dependencies
    Singletons: HTTP clients (connection pools) and the workflow engine
    (per-order ordering of status changes)
    """

    def __init__(self, settings: Settings | None = None):
        """
        Initialize container.

        Args:
            settings: Optional settings override
        """
        self.settings = settings or get_settings()

        self._pricing_client: PricingApiClient | None = None
        self._order_client: OrderApiClient | None = None
        self._workflow_engine: OrderWorkflowEngine | None = None

        logger.info("DependencyContainer initialized")

    # ============================================================
    # CLIENTS
    # ============================================================

    def get_pricing_client(self) -> PricingApiClient:
        if self._pricing_client is None:
            self._pricing_client = PricingApiClient(
                base_url=self.settings.PRICING_API_URL,
                timeout=self.settings.PRICING_API_TIMEOUT,
            )
        return self._pricing_client

    def get_order_client(self) -> OrderApiClient:
        if self._order_client is None:
            self._order_client = OrderApiClient(
                base_url=self.settings.ORDER_API_URL,
                timeout=self.settings.ORDER_API_TIMEOUT,
            )
        return self._order_client

    async def close(self) -> None:
        """Release HTTP connection pools."""
        if self._pricing_client is not None:
            await self._pricing_client.close()
        if self._order_client is not None:
            await self._order_client.close()
        logger.info("DependencyContainer closed")

    # ============================================================
    # PRICING
    # ============================================================

    def create_fallback_pricing(self) -> FallbackPricingService:
        return FallbackPricingService(
            margin_pct=self.settings.FALLBACK_MARGIN_PCT,
            currency=self.settings.CURRENCY,
        )

    def create_pricing_calculator(self) -> PricingCalculator:
        return PricingCalculator(
            gateway=self.get_pricing_client(),
            fallback=self.create_fallback_pricing(),
            currency=self.settings.CURRENCY,
        )

    def create_quote_session(self) -> PricingQuoteSession:
        """New editing session; sessions are not shared between users."""
        return PricingQuoteSession(
            calculator=self.create_pricing_calculator(),
            debounce_seconds=self.settings.pricing_debounce_seconds,
            health_probe=self.get_pricing_client().health_check,
        )

    def create_calculate_quote_use_case(self) -> CalculateQuoteUseCase:
        return CalculateQuoteUseCase(calculator=self.create_pricing_calculator())

    def create_check_pricing_health_use_case(self) -> CheckPricingHealthUseCase:
        return CheckPricingHealthUseCase(gateway=self.get_pricing_client())

    def create_get_decoration_options_use_case(self) -> GetDecorationOptionsUseCase:
        return GetDecorationOptionsUseCase()

    # ============================================================
    # ORDERS
    # ============================================================

    def get_workflow_engine(self) -> OrderWorkflowEngine:
        if self._workflow_engine is None:
            self._workflow_engine = OrderWorkflowEngine(writer=self.get_order_client())
        return self._workflow_engine

    def create_order_aggregator(self) -> OrderAggregator:
        return OrderAggregator(source=self.get_order_client())

    def create_get_order_detail_use_case(self) -> GetOrderDetailUseCase:
        return GetOrderDetailUseCase(aggregator=self.create_order_aggregator())

    def create_list_orders_use_case(self) -> ListOrdersUseCase:
        return ListOrdersUseCase(aggregator=self.create_order_aggregator())

    def create_change_order_status_use_case(self) -> ChangeOrderStatusUseCase:
        return ChangeOrderStatusUseCase(
            get_order=self.create_get_order_detail_use_case(),
            engine=self.get_workflow_engine(),
        )

    def create_get_workflow_catalog_use_case(self) -> GetWorkflowCatalogUseCase:
        return GetWorkflowCatalogUseCase()


_container: DependencyContainer | None = None


def get_container() -> DependencyContainer:
    """Get the process-wide container."""
    global _container
    if _container is None:
        _container = DependencyContainer()
    return _container


def reset_container() -> None:
    """Drop the process-wide container (tests)."""
    global _container
    _container = None
