"""Unit tests for the decoration vocabulary mapper.

Client-facing method and location names must always translate to the
pricing service vocabulary, with documented defaults for unknown input.
"""

import pytest

from printflow.core.domain import MalformedInputException, ValidationException
from printflow.domains.pricing.domain.services import (
    available_locations,
    available_methods,
    map_location,
    map_locations,
    map_method,
    normalize_request,
)
from printflow.domains.pricing.domain.value_objects import (
    CustomerType,
    DecorationMethod,
    DecorationRequest,
    GarmentType,
)


class TestMapMethod:
    """Tests for map_method."""

    @pytest.mark.parametrize(
        ("value", "expected"),
        [
            ("screen-printing", DecorationMethod.SCREEN),
            ("screenprint", DecorationMethod.SCREEN),
            ("screen", DecorationMethod.SCREEN),
            ("embroidery", DecorationMethod.EMBROIDERY),
            ("heat-transfer", DecorationMethod.HEAT_TRANSFER),
            ("dtf", DecorationMethod.DTF),
            ("dtg", DecorationMethod.DTG),
            ("vinyl", DecorationMethod.VINYL),
            ("sublimation", DecorationMethod.SUBLIMATION),
        ],
    )
    def test_known_methods(self, value: str, expected: DecorationMethod) -> None:
        """Should map every known client name."""
        assert map_method(value) is expected

    def test_is_case_insensitive(self) -> None:
        """Should ignore case and surrounding whitespace."""
        assert map_method("Screen-Printing") is DecorationMethod.SCREEN
        assert map_method("  EMBROIDERY ") is DecorationMethod.EMBROIDERY

    @pytest.mark.parametrize("value", ["", "laser-etch", "???", "screen printing"])
    def test_unknown_defaults_to_screen(self, value: str) -> None:
        """Should never raise; unknown methods are priced as screen printing."""
        assert map_method(value) is DecorationMethod.SCREEN

    def test_passes_enum_through(self) -> None:
        """Should accept an already canonical method."""
        assert map_method(DecorationMethod.DTG) is DecorationMethod.DTG


class TestMapLocation:
    """Tests for map_location."""

    @pytest.mark.parametrize(
        ("value", "expected"),
        [
            ("front-center", "front"),
            ("front-left-chest", "left-chest"),
            ("front-right-chest", "chest"),
            ("full-front", "front"),
            ("back-center", "back"),
            ("back-neck", "back-neck"),
            ("full-back", "full-back"),
            ("left-sleeve", "sleeve"),
            ("right-sleeve", "sleeve"),
        ],
    )
    def test_known_locations(self, value: str, expected: str) -> None:
        assert map_location(value) == expected

    def test_unknown_passes_through(self) -> None:
        """Should forward unknown placements unchanged."""
        assert map_location("hood") == "hood"
        assert map_location("") == ""

    def test_is_case_sensitive(self) -> None:
        """Should only translate exact keys."""
        assert map_location("Front-Center") == "Front-Center"

    def test_map_locations_dedupes_after_mapping(self) -> None:
        """Should keep first occurrence order and drop duplicates."""
        assert map_locations(["front-center", "full-front", "left-sleeve", "right-sleeve"]) == (
            "front",
            "sleeve",
        )


class TestNormalizeRequest:
    """Tests for normalize_request."""

    def test_builds_canonical_request(self) -> None:
        request = DecorationRequest(
            method="screen-printing",
            quantity=100,
            color_count=2,
            locations=("front-center", "back-center"),
            garment_type=GarmentType.DARK,
            customer_type=CustomerType.REPEAT,
            rush=True,
        )

        canonical = normalize_request(request)

        assert canonical.method is DecorationMethod.SCREEN
        assert canonical.quantity == 100
        assert canonical.color_count == 2
        assert canonical.locations == ("front", "back")
        assert canonical.to_payload() == {
            "quantity": 100,
            "service": "screen",
            "print_locations": ["front", "back"],
            "color_count": 2,
            "garment_type": "dark",
            "customer_type": "repeat_customer",
            "rush": True,
        }

    def test_color_count_ignored_for_non_color_methods(self) -> None:
        """Should send the neutral color count for DTG and friends."""
        canonical = normalize_request(DecorationRequest(method="dtg", quantity=10, color_count=6))
        assert canonical.color_count == 1

    def test_stitch_count_only_for_embroidery(self) -> None:
        emb = normalize_request(DecorationRequest(method="embroidery", quantity=10, stitch_count=8000))
        dtf = normalize_request(DecorationRequest(method="dtf", quantity=10, stitch_count=8000))

        assert emb.to_payload()["stitch_count"] == 8000
        assert "stitch_count" not in dtf.to_payload()

    @pytest.mark.parametrize("quantity", [0, -5])
    def test_non_positive_quantity_is_malformed(self, quantity: int) -> None:
        with pytest.raises(MalformedInputException) as exc_info:
            normalize_request(DecorationRequest(method="screen", quantity=quantity))
        assert exc_info.value.code == "MALFORMED_INPUT"


class TestDecorationRequest:
    """Tests for DecorationRequest validation."""

    def test_rejects_zero_colors(self) -> None:
        with pytest.raises(ValidationException):
            DecorationRequest(method="screen", quantity=10, color_count=0)

    def test_rejects_empty_locations(self) -> None:
        with pytest.raises(ValidationException):
            DecorationRequest(method="screen", quantity=10, locations=())

    def test_dedupes_locations(self) -> None:
        request = DecorationRequest(method="screen", quantity=10, locations=("back-center", "back-center"))
        assert request.locations == ("back-center",)

    def test_from_dict_accepts_ui_field_names(self) -> None:
        request = DecorationRequest.from_dict(
            {"method": "embroidery", "quantity": "24", "colors": 3, "stitchCount": 6000, "garmentType": "poly"}
        )
        assert request.quantity == 24
        assert request.color_count == 3
        assert request.stitch_count == 6000
        assert request.garment_type is GarmentType.POLY


class TestCatalogListing:
    """Tests for selectable methods and locations."""

    def test_methods_in_display_order(self) -> None:
        assert [option.value for option in available_methods()] == [
            "screen-printing",
            "embroidery",
            "dtg",
            "heat-transfer",
            "dtf",
            "sublimation",
            "vinyl",
        ]

    def test_every_listed_option_maps(self) -> None:
        """Should translate every selectable option without falling back."""
        for option in available_methods():
            if option.value != "screen-printing":
                assert map_method(option.value) is not DecorationMethod.SCREEN
        assert [map_location(option.value) for option in available_locations()][0] == "front"
