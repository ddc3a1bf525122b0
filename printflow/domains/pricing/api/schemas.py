"""
Pricing API Schemas

Pydantic schemas for API request/response validation.
"""

from pydantic import BaseModel, ConfigDict, Field

from printflow.domains.pricing.domain.value_objects import (
    DEFAULT_LOCATION,
    CustomerType,
    DecorationRequest,
    GarmentType,
    PricingResult,
)


class QuoteRequest(BaseModel):
    """Decoration quote request schema (client-facing vocabulary)."""

    model_config = ConfigDict(populate_by_name=True)

    method: str = Field(..., min_length=1, examples=["screen-printing"])
    quantity: int = Field(..., description="Pieces to decorate; 0 or less yields no quote")
    color_count: int = Field(default=1, ge=1, alias="colors")
    locations: list[str] = Field(default_factory=lambda: [DEFAULT_LOCATION], min_length=1)
    garment_type: GarmentType | None = None
    customer_type: CustomerType | None = None
    rush: bool = False
    setup_new: bool = False
    stitch_count: int | None = Field(default=None, ge=0)

    def to_domain(self) -> DecorationRequest:
        return DecorationRequest(
            method=self.method,
            quantity=self.quantity,
            color_count=self.color_count,
            locations=tuple(self.locations),
            garment_type=self.garment_type,
            customer_type=self.customer_type,
            rush=self.rush,
            setup_new=self.setup_new,
            stitch_count=self.stitch_count,
        )


class BreakdownResponse(BaseModel):
    base_cost: float
    location_surcharges: float
    color_adjustments: float
    volume_discounts: float
    margin_amount: float


class LineItemResponse(BaseModel):
    description: str
    total: float
    unit_cost: float | None = None
    qty: int | None = None
    discount: float | None = None


class QuoteResponse(BaseModel):
    """Quote response schema."""

    unit_price: float
    total_price: float
    subtotal: float
    margin_pct: float
    breakdown: BreakdownResponse
    line_items: list[LineItemResponse]
    calculation_time_ms: int
    rules_applied: list[str]
    source: str
    currency: str

    @classmethod
    def from_result(cls, result: PricingResult) -> "QuoteResponse":
        return cls.model_validate(result.to_dict())


class DecorationOptionResponse(BaseModel):
    value: str
    label: str

    model_config = ConfigDict(from_attributes=True)


class PricingHealthResponse(BaseModel):
    healthy: bool
    using_fallback: bool
