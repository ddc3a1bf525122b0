"""
Pricing Domain Value Objects
"""

from printflow.domains.pricing.domain.value_objects.decoration import (
    DEFAULT_LOCATION,
    CanonicalPricingRequest,
    CustomerType,
    DecorationMethod,
    DecorationOption,
    DecorationRequest,
    GarmentType,
    LocationId,
)
from printflow.domains.pricing.domain.value_objects.pricing_result import (
    UNIT_PRICE_PRECISION,
    PricingBreakdown,
    PricingLineItem,
    PricingResult,
    PricingSource,
)

__all__ = [
    "DEFAULT_LOCATION",
    "CanonicalPricingRequest",
    "CustomerType",
    "DecorationMethod",
    "DecorationOption",
    "DecorationRequest",
    "GarmentType",
    "LocationId",
    "UNIT_PRICE_PRECISION",
    "PricingBreakdown",
    "PricingLineItem",
    "PricingResult",
    "PricingSource",
]
