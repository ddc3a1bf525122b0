"""
Pricing service wire models
Responsibility: validate `POST /pricing/calculate` responses
"""

from decimal import Decimal

from pydantic import BaseModel, ConfigDict, Field, field_validator


class PricingApiBaseModel(BaseModel):
    """Base model for pricing service payloads"""

    model_config = ConfigDict(extra="ignore", populate_by_name=True)


class PricingApiBreakdown(PricingApiBaseModel):
    """Cost components as reported by the service"""

    base_cost: Decimal = Decimal("0")
    location_surcharges: Decimal = Decimal("0")
    color_adjustments: Decimal = Decimal("0")
    volume_discounts: Decimal = Decimal("0")
    margin_amount: Decimal = Decimal("0")

    @field_validator("*", mode="before")
    @classmethod
    def none_as_zero(cls, v):
        return 0 if v is None else v


class PricingApiLineItem(PricingApiBaseModel):
    """Quote line"""

    description: str = ""
    unit_cost: Decimal | None = None
    qty: int | None = None
    total: Decimal = Decimal("0")
    discount: Decimal | None = None


class PricingApiResponse(PricingApiBaseModel):
    """Body of a successful pricing calculation"""

    line_items: list[PricingApiLineItem] = Field(default_factory=list)
    subtotal: Decimal = Field(..., ge=0)
    margin_pct: Decimal = Decimal("0")
    total_price: Decimal = Field(..., ge=0)
    breakdown: PricingApiBreakdown = Field(default_factory=PricingApiBreakdown)
    rules_applied: list[str] = Field(default_factory=list)
    calculation_time_ms: int = Field(default=0, ge=0)

    @field_validator("line_items", "rules_applied", mode="before")
    @classmethod
    def none_as_empty(cls, v):
        return [] if v is None else v

    @field_validator("calculation_time_ms", mode="before")
    @classmethod
    def round_time(cls, v):
        """The service reports fractional milliseconds"""
        if v is None:
            return 0
        if isinstance(v, float):
            return int(round(v))
        return v


class PricingApiErrorBody(PricingApiBaseModel):
    """Error body returned with non-2xx responses"""

    message: str | None = None
    error: str | None = None
