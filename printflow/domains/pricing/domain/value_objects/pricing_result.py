"""
Pricing Result Value Objects

Uniform quote representation regardless of whether it was produced by the
remote pricing service or by the built-in fallback table.
"""

from dataclasses import dataclass, field
from decimal import ROUND_HALF_UP, Decimal
from typing import Any

from printflow.core.domain import StatusEnum, ValidationException, ValueObject, round_money

# Unit prices are a derived rate, kept finer than the minor unit so that
# unit_price * quantity reconciles with the rounded total.
UNIT_PRICE_PRECISION = Decimal("0.000001")


class PricingSource(StatusEnum):
    """Where a quote came from."""

    REMOTE = "remote"
    FALLBACK = "fallback"


@dataclass(frozen=True)
class PricingBreakdown(ValueObject):
    """
    Cost components of a quote.

    For remote quotes base_cost + location_surcharges + color_adjustments
    - volume_discounts + margin_amount reconciles with the quote total (within
    rounding). Fallback quotes report the whole pre-margin subtotal as
    base_cost, so color_adjustments there is a share of base_cost.
    """

    base_cost: Decimal = Decimal("0")
    location_surcharges: Decimal = Decimal("0")
    color_adjustments: Decimal = Decimal("0")
    volume_discounts: Decimal = Decimal("0")
    margin_amount: Decimal = Decimal("0")

    def _validate(self) -> None:
        for name in (
            "base_cost",
            "location_surcharges",
            "color_adjustments",
            "volume_discounts",
            "margin_amount",
        ):
            object.__setattr__(self, name, round_money(getattr(self, name)))

    @property
    def reconciled_total(self) -> Decimal:
        return (
            self.base_cost
            + self.location_surcharges
            + self.color_adjustments
            - self.volume_discounts
            + self.margin_amount
        )

    def to_dict(self) -> dict[str, float]:
        return {
            "base_cost": float(self.base_cost),
            "location_surcharges": float(self.location_surcharges),
            "color_adjustments": float(self.color_adjustments),
            "volume_discounts": float(self.volume_discounts),
            "margin_amount": float(self.margin_amount),
        }


@dataclass(frozen=True)
class PricingLineItem(ValueObject):
    """One line of a quote."""

    description: str
    total: Decimal
    unit_cost: Decimal | None = None
    qty: int | None = None
    discount: Decimal | None = None

    def _validate(self) -> None:
        object.__setattr__(self, "total", round_money(self.total))
        if self.unit_cost is not None:
            object.__setattr__(self, "unit_cost", round_money(self.unit_cost))
        if self.discount is not None:
            object.__setattr__(self, "discount", round_money(self.discount))

    def to_dict(self) -> dict[str, Any]:
        data: dict[str, Any] = {"description": self.description, "total": float(self.total)}
        if self.unit_cost is not None:
            data["unit_cost"] = float(self.unit_cost)
        if self.qty is not None:
            data["qty"] = self.qty
        if self.discount is not None:
            data["discount"] = float(self.discount)
        return data


@dataclass(frozen=True)
class PricingResult(ValueObject):
    """
    A decoration quote.

    Invariant: total_price >= subtotal >= 0. Money amounts are rounded to the
    currency minor unit; `unit_price` is total_price / quantity.
    """

    unit_price: Decimal
    total_price: Decimal
    subtotal: Decimal
    margin_pct: Decimal
    breakdown: PricingBreakdown
    source: PricingSource
    line_items: tuple[PricingLineItem, ...] = ()
    calculation_time_ms: int = 0
    rules_applied: tuple[str, ...] = field(default=())
    currency: str = "USD"

    def _validate(self) -> None:
        object.__setattr__(self, "total_price", round_money(self.total_price))
        object.__setattr__(self, "subtotal", round_money(self.subtotal))
        object.__setattr__(
            self, "unit_price", Decimal(str(self.unit_price)).quantize(UNIT_PRICE_PRECISION, ROUND_HALF_UP)
        )
        object.__setattr__(self, "margin_pct", Decimal(str(self.margin_pct)))
        object.__setattr__(self, "source", PricingSource(self.source))
        object.__setattr__(self, "line_items", tuple(self.line_items))
        object.__setattr__(self, "rules_applied", tuple(self.rules_applied))

        if self.subtotal < 0:
            raise ValidationException("Subtotal cannot be negative", field="subtotal")
        if self.total_price < self.subtotal:
            raise ValidationException(
                f"Total price {self.total_price} is below subtotal {self.subtotal}",
                field="total_price",
            )
        if self.unit_price < 0:
            raise ValidationException("Unit price cannot be negative", field="unit_price")
        if self.calculation_time_ms < 0:
            raise ValidationException("Calculation time cannot be negative", field="calculation_time_ms")

    @property
    def is_fallback(self) -> bool:
        return self.source is PricingSource.FALLBACK

    @classmethod
    def empty(cls, source: PricingSource = PricingSource.FALLBACK, currency: str = "USD") -> "PricingResult":
        """Zero quote, used when there is nothing to price."""
        zero = Decimal("0")
        return cls(
            unit_price=zero,
            total_price=zero,
            subtotal=zero,
            margin_pct=zero,
            breakdown=PricingBreakdown(),
            source=source,
            currency=currency,
        )

    def to_dict(self) -> dict[str, Any]:
        """Serialize for API responses."""
        return {
            "unit_price": float(self.unit_price),
            "total_price": float(self.total_price),
            "subtotal": float(self.subtotal),
            "margin_pct": float(self.margin_pct),
            "breakdown": self.breakdown.to_dict(),
            "line_items": [item.to_dict() for item in self.line_items],
            "calculation_time_ms": self.calculation_time_ms,
            "rules_applied": list(self.rules_applied),
            "source": self.source.value,
            "currency": self.currency,
        }
