"""
Pricing API Routes

FastAPI router for decoration pricing endpoints.
"""

from fastapi import APIRouter, Depends

from printflow.domains.pricing.api.dependencies import (
    get_calculate_quote_use_case,
    get_check_pricing_health_use_case,
    get_decoration_options_use_case,
)
from printflow.domains.pricing.api.schemas import (
    DecorationOptionResponse,
    PricingHealthResponse,
    QuoteRequest,
    QuoteResponse,
)
from printflow.domains.pricing.application.use_cases import (
    CalculateQuoteRequest,
    CalculateQuoteUseCase,
    CheckPricingHealthUseCase,
    GetDecorationOptionsUseCase,
)

router = APIRouter(prefix="/pricing", tags=["Pricing"])


@router.get("/methods", response_model=list[DecorationOptionResponse])
async def list_methods(
    use_case: GetDecorationOptionsUseCase = Depends(get_decoration_options_use_case),
):
    """Selectable decoration methods."""
    return [DecorationOptionResponse.model_validate(option) for option in use_case.execute().methods]


@router.get("/locations", response_model=list[DecorationOptionResponse])
async def list_locations(
    use_case: GetDecorationOptionsUseCase = Depends(get_decoration_options_use_case),
):
    """Selectable print locations."""
    return [DecorationOptionResponse.model_validate(option) for option in use_case.execute().locations]


@router.get("/health", response_model=PricingHealthResponse)
async def pricing_health(
    use_case: CheckPricingHealthUseCase = Depends(get_check_pricing_health_use_case),
):
    """Remote pricing availability."""
    result = await use_case.execute()
    return PricingHealthResponse(healthy=result.healthy, using_fallback=result.using_fallback)


@router.post("/quote", response_model=QuoteResponse | None)
async def calculate_quote(
    request: QuoteRequest,
    use_case: CalculateQuoteUseCase = Depends(get_calculate_quote_use_case),
):
    """Quote a decoration request. Returns null when the quantity is not positive."""
    response = await use_case.execute(CalculateQuoteRequest(decoration=request.to_domain()))
    if response.result is None:
        return None
    return QuoteResponse.from_result(response.result)
