"""
Pricing Calculator

Remote-first quote computation with a deterministic local fallback.
"""

import time
from decimal import Decimal

from printflow.clients.pricing_api_client import PricingTransportError
from printflow.core.domain import MalformedInputException, ValidationException
from printflow.core.shared import get_service_logger
from printflow.domains.pricing.application.ports import IPricingGateway
from printflow.domains.pricing.domain.services import FallbackPricingService, normalize_request
from printflow.domains.pricing.domain.value_objects import (
    CanonicalPricingRequest,
    DecorationRequest,
    PricingBreakdown,
    PricingLineItem,
    PricingResult,
    PricingSource,
)
from printflow.models.pricing_api import PricingApiResponse

logger = get_service_logger("pricing_calculator")


class PricingCalculator:
    """
    Turns decoration requests into quotes.

    The remote service is tried once. Any transport failure, non-2xx answer
    or response that does not form a valid quote falls back to the local
    rule table, so `calculate` always returns a `PricingResult` and never
    raises. A non-positive quantity short-circuits to an empty quote without
    touching either pricing path.

    Example:
        ```python
        calculator = PricingCalculator(gateway=PricingApiClient())
        result = await calculator.calculate(
            DecorationRequest(method="screen-printing", quantity=100, color_count=2)
        )
        result.source  # PricingSource.REMOTE or PricingSource.FALLBACK
        ```
    """

    def __init__(
        self,
        gateway: IPricingGateway,
        fallback: FallbackPricingService | None = None,
        currency: str = "USD",
    ):
        """
        Initialize calculator.

        Args:
            gateway: Remote pricing service
            fallback: Local rule table (defaults to the standard table)
            currency: ISO currency for produced quotes
        """
        self.gateway = gateway
        self.currency = currency
        self.fallback = fallback or FallbackPricingService(currency=currency)

    async def calculate(self, request: DecorationRequest) -> PricingResult:
        """
        Quote a decoration request.

        Args:
            request: Client-facing decoration request

        Returns:
            Remote quote, fallback quote, or an empty quote for a
            non-positive quantity
        """
        try:
            canonical = normalize_request(request)
        except MalformedInputException:
            logger.debug(f"Skipping pricing for quantity {request.quantity}")
            return PricingResult.empty(currency=self.currency)

        try:
            return await self._calculate_remote(canonical)
        except PricingTransportError as e:
            cause = e.error_code
        except ValidationException as e:
            cause = e.code
        except Exception as e:
            logger.exception(f"Unexpected pricing failure: {e}")
            cause = type(e).__name__

        logger.with_context(
            method=canonical.method.value,
            quantity=canonical.quantity,
            cause=cause,
        ).warning("Pricing service unavailable, using fallback pricing")
        return self.fallback.quote(canonical)

    async def _calculate_remote(self, request: CanonicalPricingRequest) -> PricingResult:
        started = time.perf_counter()
        response = await self.gateway.calculate(request.to_payload())
        result = self._to_result(response, request.quantity)
        logger.debug(
            f"Remote quote: total={result.total_price} "
            f"({(time.perf_counter() - started) * 1000:.0f} ms round trip)"
        )
        return result

    def _to_result(self, response: PricingApiResponse, quantity: int) -> PricingResult:
        """
        Build a quote from a service response.

        Raises:
            ValidationException: If the response violates quote invariants
        """
        breakdown = response.breakdown
        return PricingResult(
            unit_price=response.total_price / Decimal(quantity),
            total_price=response.total_price,
            subtotal=response.subtotal,
            margin_pct=response.margin_pct,
            breakdown=PricingBreakdown(
                base_cost=breakdown.base_cost,
                location_surcharges=breakdown.location_surcharges,
                color_adjustments=breakdown.color_adjustments,
                volume_discounts=breakdown.volume_discounts,
                margin_amount=breakdown.margin_amount,
            ),
            line_items=tuple(
                PricingLineItem(
                    description=item.description,
                    unit_cost=item.unit_cost,
                    qty=item.qty,
                    total=item.total,
                    discount=item.discount,
                )
                for item in response.line_items
            ),
            calculation_time_ms=response.calculation_time_ms,
            rules_applied=tuple(response.rules_applied),
            source=PricingSource.REMOTE,
            currency=self.currency,
        )

    async def check_health(self) -> bool:
        """True when the remote service reports itself healthy."""
        try:
            return await self.gateway.health_check()
        except Exception as e:
            logger.warning(f"Pricing health check failed: {e}")
            return False
