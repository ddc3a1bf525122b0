"""
Pricing API Dependencies

FastAPI dependencies for the pricing domain.
"""

from fastapi import Depends

from printflow.api.dependencies import get_app_container
from printflow.core.container import DependencyContainer
from printflow.domains.pricing.application.use_cases import (
    CalculateQuoteUseCase,
    CheckPricingHealthUseCase,
    GetDecorationOptionsUseCase,
)


def get_calculate_quote_use_case(
    container: DependencyContainer = Depends(get_app_container),
) -> CalculateQuoteUseCase:
    """Get CalculateQuoteUseCase instance."""
    return container.create_calculate_quote_use_case()


def get_check_pricing_health_use_case(
    container: DependencyContainer = Depends(get_app_container),
) -> CheckPricingHealthUseCase:
    """Get CheckPricingHealthUseCase instance."""
    return container.create_check_pricing_health_use_case()


def get_decoration_options_use_case(
    container: DependencyContainer = Depends(get_app_container),
) -> GetDecorationOptionsUseCase:
    """Get GetDecorationOptionsUseCase instance."""
    return container.create_get_decoration_options_use_case()


__all__ = [
    "get_calculate_quote_use_case",
    "get_check_pricing_health_use_case",
    "get_decoration_options_use_case",
]
