"""
Fallback Pricing Service

Deterministic, offline quote computation used whenever the remote pricing
service cannot answer. Quotes are intentionally simple: a per-unit base price
plus a per-color charge, marked up by a fixed margin.
"""

from decimal import Decimal

from printflow.core.domain import Percentage, round_money

from ..value_objects.decoration import CanonicalPricingRequest, DecorationMethod
from ..value_objects.pricing_result import (
    PricingBreakdown,
    PricingLineItem,
    PricingResult,
    PricingSource,
)

DEFAULT_BASE_PRICE = Decimal("8")
DEFAULT_PER_COLOR_PRICE = Decimal("0")
DEFAULT_MARGIN_PCT = Decimal("35")

BASE_PRICES: dict[DecorationMethod, Decimal] = {
    DecorationMethod.SCREEN: Decimal("8"),
    DecorationMethod.EMBROIDERY: Decimal("12"),
    DecorationMethod.DTG: Decimal("15"),
    DecorationMethod.HEAT_TRANSFER: Decimal("10"),
    DecorationMethod.DTF: Decimal("12"),
    DecorationMethod.SUBLIMATION: Decimal("18"),
    DecorationMethod.VINYL: Decimal("8"),
}

PER_COLOR_PRICES: dict[DecorationMethod, Decimal] = {
    DecorationMethod.SCREEN: Decimal("1.5"),
    DecorationMethod.EMBROIDERY: Decimal("2"),
    DecorationMethod.DTG: Decimal("0"),
    DecorationMethod.HEAT_TRANSFER: Decimal("0"),
    DecorationMethod.DTF: Decimal("0"),
    DecorationMethod.SUBLIMATION: Decimal("0"),
    DecorationMethod.VINYL: Decimal("0"),
}


class FallbackPricingService:
    """
    Domain service computing fallback quotes from a fixed rule table.

    Example:
        ```python
        service = FallbackPricingService()
        result = service.quote(request)  # screen, 100 pcs, 2 colors
        result.subtotal     # Decimal("1100.00")
        result.total_price  # Decimal("1485.00")
        ```
    """

    def __init__(
        self,
        margin_pct: Decimal | float = DEFAULT_MARGIN_PCT,
        currency: str = "USD",
        base_prices: dict[DecorationMethod, Decimal] | None = None,
        per_color_prices: dict[DecorationMethod, Decimal] | None = None,
    ):
        self.margin = Percentage(Decimal(str(margin_pct)))
        self.currency = currency
        self.base_prices = base_prices if base_prices is not None else BASE_PRICES
        self.per_color_prices = per_color_prices if per_color_prices is not None else PER_COLOR_PRICES

    def base_price(self, method: DecorationMethod) -> Decimal:
        return self.base_prices.get(method, DEFAULT_BASE_PRICE)

    def per_color_price(self, method: DecorationMethod) -> Decimal:
        return self.per_color_prices.get(method, DEFAULT_PER_COLOR_PRICE)

    def quote(self, request: CanonicalPricingRequest) -> PricingResult:
        """
        Compute a fallback quote.

        Args:
            request: Canonical request (quantity is positive)

        Returns:
            PricingResult with source=fallback
        """
        quantity = Decimal(request.quantity)
        base_price = self.base_price(request.method)
        color_charge = request.color_count * self.per_color_price(request.method)

        unit_price_before_margin = base_price + color_charge
        subtotal = round_money(unit_price_before_margin * quantity)
        total_price = round_money(subtotal * self.margin.as_multiplier())

        breakdown = PricingBreakdown(
            base_cost=subtotal,
            color_adjustments=color_charge * quantity,
            margin_amount=total_price - subtotal,
        )

        return PricingResult(
            unit_price=total_price / quantity,
            total_price=total_price,
            subtotal=subtotal,
            margin_pct=self.margin.value,
            breakdown=breakdown,
            line_items=(
                PricingLineItem(
                    description=f"{request.method.value} x{request.quantity}",
                    unit_cost=unit_price_before_margin,
                    qty=request.quantity,
                    total=subtotal,
                ),
            ),
            calculation_time_ms=0,
            source=PricingSource.FALLBACK,
            currency=self.currency,
        )


__all__ = [
    "FallbackPricingService",
    "BASE_PRICES",
    "PER_COLOR_PRICES",
    "DEFAULT_BASE_PRICE",
    "DEFAULT_PER_COLOR_PRICE",
    "DEFAULT_MARGIN_PCT",
]
