"""
Get Decoration Options Use Case

Selectable decoration methods and print locations, in display order.
"""

from dataclasses import dataclass, field

from printflow.domains.pricing.domain.services import available_locations, available_methods
from printflow.domains.pricing.domain.value_objects import DecorationOption


@dataclass
class DecorationOptionsResponse:
    methods: list[DecorationOption] = field(default_factory=list)
    locations: list[DecorationOption] = field(default_factory=list)


class GetDecorationOptionsUseCase:
    """Use Case: list client-facing decoration choices."""

    def execute(self) -> DecorationOptionsResponse:
        return DecorationOptionsResponse(
            methods=available_methods(),
            locations=available_locations(),
        )
