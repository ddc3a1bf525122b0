"""
Pricing Domain Layer

This module contains:
- Value Objects: decoration vocabulary, requests and quote results
- Domain Services: vocabulary mapping and fallback pricing
"""

from printflow.domains.pricing.domain.services import (
    FallbackPricingService,
    map_location,
    map_method,
    normalize_request,
)
from printflow.domains.pricing.domain.value_objects import (
    CanonicalPricingRequest,
    CustomerType,
    DecorationMethod,
    DecorationRequest,
    GarmentType,
    PricingBreakdown,
    PricingLineItem,
    PricingResult,
    PricingSource,
)

__all__ = [
    "FallbackPricingService",
    "map_location",
    "map_method",
    "normalize_request",
    "CanonicalPricingRequest",
    "CustomerType",
    "DecorationMethod",
    "DecorationRequest",
    "GarmentType",
    "PricingBreakdown",
    "PricingLineItem",
    "PricingResult",
    "PricingSource",
]
