"""
Pricing Application Services
"""

from printflow.domains.pricing.application.services.pricing_calculator import PricingCalculator
from printflow.domains.pricing.application.services.quote_session import (
    DEFAULT_DEBOUNCE_SECONDS,
    PricingQuoteSession,
)

__all__ = [
    "PricingCalculator",
    "PricingQuoteSession",
    "DEFAULT_DEBOUNCE_SECONDS",
]
