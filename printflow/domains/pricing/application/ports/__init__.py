"""
Pricing Application Ports

Interface definitions (ports) for the Pricing domain.
Uses Protocol for structural typing.
"""

from typing import Any, Protocol, runtime_checkable

from printflow.domains.pricing.domain.value_objects import DecorationRequest, PricingResult
from printflow.models.pricing_api import PricingApiResponse


@runtime_checkable
class IPricingGateway(Protocol):
    """
    Interface for the remote pricing service.

    Implementations raise PricingTransportError subclasses on failure.
    """

    async def calculate(self, payload: dict[str, Any]) -> PricingApiResponse:
        """Price a canonical request payload"""
        ...

    async def health_check(self) -> bool:
        """Check service availability"""
        ...


@runtime_checkable
class IPricingCalculator(Protocol):
    """
    Interface for anything that turns a decoration request into a quote.

    Implementations never raise.
    """

    async def calculate(self, request: DecorationRequest) -> PricingResult:
        """Quote a decoration request"""
        ...


__all__ = [
    "IPricingGateway",
    "IPricingCalculator",
]
