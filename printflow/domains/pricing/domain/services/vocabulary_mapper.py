"""
Vocabulary Mapper

Translates client-facing decoration identifiers into the canonical
vocabulary of the pricing service. Every function here is pure and total:
unknown input never raises, it maps to a documented default.
"""

from printflow.core.domain import MalformedInputException

from ..value_objects.decoration import (
    CanonicalPricingRequest,
    DecorationMethod,
    DecorationOption,
    DecorationRequest,
    LocationId,
)

# Unrecognized methods are priced as screen printing
DEFAULT_METHOD = DecorationMethod.SCREEN

# Keys are lower-case; lookups are case-insensitive
METHOD_ALIASES: dict[str, DecorationMethod] = {
    "screen-printing": DecorationMethod.SCREEN,
    "screenprint": DecorationMethod.SCREEN,
    "screen": DecorationMethod.SCREEN,
    "embroidery": DecorationMethod.EMBROIDERY,
    "heat-transfer": DecorationMethod.HEAT_TRANSFER,
    "dtf": DecorationMethod.DTF,
    "dtg": DecorationMethod.DTG,
    "vinyl": DecorationMethod.VINYL,
    "sublimation": DecorationMethod.SUBLIMATION,
}

# Case-sensitive; unknown locations pass through unchanged
LOCATION_ALIASES: dict[str, LocationId] = {
    "front-center": "front",
    "front-left-chest": "left-chest",
    "front-right-chest": "chest",
    "full-front": "front",
    "back-center": "back",
    "back-neck": "back-neck",
    "full-back": "full-back",
    "left-sleeve": "sleeve",
    "right-sleeve": "sleeve",
}

METHOD_OPTIONS: tuple[DecorationOption, ...] = (
    DecorationOption("screen-printing", "Screen Printing"),
    DecorationOption("embroidery", "Embroidery"),
    DecorationOption("dtg", "DTG (Direct to Garment)"),
    DecorationOption("heat-transfer", "Heat Transfer"),
    DecorationOption("dtf", "DTF (Direct to Film)"),
    DecorationOption("sublimation", "Sublimation"),
    DecorationOption("vinyl", "Vinyl"),
)

LOCATION_OPTIONS: tuple[DecorationOption, ...] = (
    DecorationOption("front-center", "Front Center"),
    DecorationOption("front-left-chest", "Left Chest"),
    DecorationOption("front-right-chest", "Right Chest"),
    DecorationOption("full-front", "Full Front"),
    DecorationOption("back-center", "Back Center"),
    DecorationOption("back-neck", "Back Neck"),
    DecorationOption("full-back", "Full Back"),
    DecorationOption("left-sleeve", "Left Sleeve"),
    DecorationOption("right-sleeve", "Right Sleeve"),
)


def map_method(value: DecorationMethod | str) -> DecorationMethod:
    """Map a client-facing method name to the service taxonomy (default: screen)."""
    if isinstance(value, DecorationMethod):
        return value
    return METHOD_ALIASES.get(str(value).strip().lower(), DEFAULT_METHOD)


def map_location(value: str) -> LocationId:
    """Map a client-facing print location to the service name (default: unchanged)."""
    return LOCATION_ALIASES.get(value, value)


def map_locations(values: tuple[str, ...] | list[str]) -> tuple[LocationId, ...]:
    """Map every location, keeping order and dropping duplicates after mapping."""
    return tuple(dict.fromkeys(map_location(value) for value in values))


def available_methods() -> list[DecorationOption]:
    return list(METHOD_OPTIONS)


def available_locations() -> list[DecorationOption]:
    return list(LOCATION_OPTIONS)


def normalize_request(request: DecorationRequest) -> CanonicalPricingRequest:
    """
    Translate a decoration request into the pricing service's request shape.

    Color count is only meaningful for color-priced methods; other methods
    send the neutral count of 1. Stitch count is only sent for embroidery.

    Raises:
        MalformedInputException: If the quantity is not positive
    """
    if not request.is_priceable:
        raise MalformedInputException(request.quantity)

    method = map_method(request.method)
    return CanonicalPricingRequest(
        method=method,
        quantity=request.quantity,
        color_count=request.color_count if method.is_color_priced() else 1,
        locations=map_locations(request.locations),
        garment_type=request.garment_type,
        customer_type=request.customer_type,
        rush=request.rush,
        setup_new=request.setup_new,
        stitch_count=request.stitch_count if method.uses_stitch_count() else None,
    )


__all__ = [
    "DEFAULT_METHOD",
    "METHOD_ALIASES",
    "LOCATION_ALIASES",
    "map_method",
    "map_location",
    "map_locations",
    "available_methods",
    "available_locations",
    "normalize_request",
]
