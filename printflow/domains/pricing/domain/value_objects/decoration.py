"""
Decoration Value Objects for the Pricing Domain

Canonical decoration vocabulary (as understood by the pricing service)
and the client-facing decoration request.
"""

from dataclasses import dataclass
from typing import Any

from printflow.core.domain import StatusEnum, ValidationException, ValueObject

# Print locations are opaque identifiers; the service knows a fixed set but
# unknown placements are forwarded untouched.
LocationId = str

DEFAULT_LOCATION: LocationId = "front-center"


class DecorationMethod(StatusEnum):
    """Decoration techniques in the pricing service's canonical taxonomy."""

    SCREEN = "screen"
    EMBROIDERY = "embroidery"
    HEAT_TRANSFER = "heat-transfer"
    DTF = "dtf"
    VINYL = "vinyl"
    SUBLIMATION = "sublimation"
    DTG = "dtg"

    def is_color_priced(self) -> bool:
        """Whether the number of ink/thread colors changes the price."""
        return self in (DecorationMethod.SCREEN, DecorationMethod.EMBROIDERY)

    def uses_stitch_count(self) -> bool:
        return self is DecorationMethod.EMBROIDERY


class GarmentType(StatusEnum):
    """Garment fabric/color family."""

    LIGHT = "light"
    DARK = "dark"
    POLY = "poly"


class CustomerType(StatusEnum):
    """New vs. returning customer."""

    NEW = "new"
    REPEAT = "repeat"

    @property
    def api_value(self) -> str:
        """Value expected by the pricing service."""
        return "repeat_customer" if self is CustomerType.REPEAT else "new"


@dataclass(frozen=True)
class DecorationRequest(ValueObject):
    """
    A decoration quote request as entered by a sales rep.

    `method` and `locations` hold client-facing identifiers
    (e.g. "screen-printing", "front-left-chest"); they are translated to the
    service vocabulary before pricing. `locations` is an ordered set: duplicates
    are dropped, first occurrence wins.

    Quantity is not rejected here: a non-positive quantity is a legitimate
    transient UI state and short-circuits to an empty quote downstream.
    """

    method: DecorationMethod | str
    quantity: int
    color_count: int = 1
    locations: tuple[LocationId, ...] = (DEFAULT_LOCATION,)
    garment_type: GarmentType | None = None
    customer_type: CustomerType | None = None
    rush: bool = False
    setup_new: bool = False
    stitch_count: int | None = None

    def _validate(self) -> None:
        if isinstance(self.quantity, bool) or not isinstance(self.quantity, int):
            raise ValidationException("Quantity must be an integer", field="quantity")
        if self.color_count < 1:
            raise ValidationException("Color count must be at least 1", field="color_count")
        if self.stitch_count is not None and self.stitch_count < 0:
            raise ValidationException("Stitch count cannot be negative", field="stitch_count")

        locations = tuple(dict.fromkeys(self.locations))
        if not locations:
            raise ValidationException("At least one print location is required", field="locations")
        object.__setattr__(self, "locations", locations)

    @property
    def is_priceable(self) -> bool:
        """True when the quantity allows a price to be computed."""
        return self.quantity > 0

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "DecorationRequest":
        """Build a request from loosely-typed UI input (camelCase or snake_case)."""
        garment = data.get("garment_type") or data.get("garmentType")
        customer = data.get("customer_type") or data.get("customerType")
        locations = data.get("locations") or (DEFAULT_LOCATION,)
        colors = data.get("color_count", data.get("colors"))
        return cls(
            method=data.get("method", DecorationMethod.SCREEN),
            quantity=int(data.get("quantity", 0)),
            color_count=int(colors) if colors else 1,
            locations=tuple(locations),
            garment_type=GarmentType.from_string(garment) if garment else None,
            customer_type=CustomerType.from_string(customer) if customer else None,
            rush=bool(data.get("rush", False)),
            setup_new=bool(data.get("setup_new", data.get("setupNew", False))),
            stitch_count=data.get("stitch_count", data.get("stitchCount")),
        )


@dataclass(frozen=True)
class CanonicalPricingRequest(ValueObject):
    """
    Request in the pricing service's vocabulary.

    Produced by the vocabulary mapper; quantity is guaranteed positive.
    """

    method: DecorationMethod
    quantity: int
    color_count: int
    locations: tuple[LocationId, ...]
    garment_type: GarmentType | None = None
    customer_type: CustomerType | None = None
    rush: bool = False
    setup_new: bool = False
    stitch_count: int | None = None

    def to_payload(self) -> dict[str, Any]:
        """Serialize to the `POST /pricing/calculate` body."""
        payload: dict[str, Any] = {
            "quantity": self.quantity,
            "service": self.method.value,
            "print_locations": list(self.locations),
            "color_count": self.color_count,
        }
        if self.stitch_count is not None:
            payload["stitch_count"] = self.stitch_count
        if self.garment_type is not None:
            payload["garment_type"] = self.garment_type.value
        if self.customer_type is not None:
            payload["customer_type"] = self.customer_type.api_value
        if self.rush:
            payload["rush"] = True
        if self.setup_new:
            payload["setup_new"] = True
        return payload


@dataclass(frozen=True)
class DecorationOption:
    """Selectable value with its display label."""

    value: str
    label: str
