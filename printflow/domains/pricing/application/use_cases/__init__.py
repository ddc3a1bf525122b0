"""
Pricing Use Cases
"""

from printflow.domains.pricing.application.use_cases.calculate_quote import (
    CalculateQuoteRequest,
    CalculateQuoteResponse,
    CalculateQuoteUseCase,
)
from printflow.domains.pricing.application.use_cases.check_pricing_health import (
    CheckPricingHealthResponse,
    CheckPricingHealthUseCase,
)
from printflow.domains.pricing.application.use_cases.get_decoration_options import (
    DecorationOptionsResponse,
    GetDecorationOptionsUseCase,
)

__all__ = [
    "CalculateQuoteRequest",
    "CalculateQuoteResponse",
    "CalculateQuoteUseCase",
    "CheckPricingHealthResponse",
    "CheckPricingHealthUseCase",
    "DecorationOptionsResponse",
    "GetDecorationOptionsUseCase",
]
