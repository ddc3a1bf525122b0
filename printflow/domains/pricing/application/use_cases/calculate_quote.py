"""
Calculate Quote Use Case

Entry point for pricing a decoration request.
"""

import logging
from dataclasses import dataclass

from printflow.domains.pricing.application.ports import IPricingCalculator
from printflow.domains.pricing.domain.value_objects import DecorationRequest, PricingResult

logger = logging.getLogger(__name__)


@dataclass
class CalculateQuoteRequest:
    """Request for a decoration quote."""

    decoration: DecorationRequest


@dataclass
class CalculateQuoteResponse:
    """Response with the quote, or no quote for a non-positive quantity."""

    result: PricingResult | None = None

    @property
    def using_fallback(self) -> bool:
        return self.result is not None and self.result.is_fallback


class CalculateQuoteUseCase:
    """
    Use Case: Calculate Quote

    Responsibilities:
    - Short-circuit requests with nothing to price
    - Delegate to the never-raising calculator
    """

    def __init__(self, calculator: IPricingCalculator):
        self.calculator = calculator

    async def execute(self, request: CalculateQuoteRequest) -> CalculateQuoteResponse:
        decoration = request.decoration
        if not decoration.is_priceable:
            logger.debug(f"No quote for quantity {decoration.quantity}")
            return CalculateQuoteResponse(result=None)

        result = await self.calculator.calculate(decoration)
        return CalculateQuoteResponse(result=result)
