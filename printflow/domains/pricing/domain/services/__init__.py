"""
Pricing Domain Services
"""

from printflow.domains.pricing.domain.services.fallback_pricing import FallbackPricingService
from printflow.domains.pricing.domain.services.vocabulary_mapper import (
    available_locations,
    available_methods,
    map_location,
    map_locations,
    map_method,
    normalize_request,
)

__all__ = [
    "FallbackPricingService",
    "available_locations",
    "available_methods",
    "map_location",
    "map_locations",
    "map_method",
    "normalize_request",
]
