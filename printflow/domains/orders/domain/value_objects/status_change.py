"""
Status Change Value Object

One immutable row of an order's status audit trail.
"""

from dataclasses import dataclass
from datetime import datetime
from typing import Any

from printflow.core.domain import ValidationException, ValueObject

# Actors are opaque identifiers issued by the authentication layer
ActorId = str


@dataclass(frozen=True)
class StatusChange(ValueObject):
    """
    A status transition: who moved the order from which status to which, and when.

    `from_status` and `to_status` are plain strings so that history loaded
    from the backend can carry legacy statuses outside the current catalog.
    """

    from_status: str
    to_status: str
    changed_at: datetime
    changed_by: ActorId

    def _validate(self) -> None:
        if not self.to_status:
            raise ValidationException("Status change requires a target status", field="to_status")

    def to_dict(self) -> dict[str, Any]:
        return {
            "from": self.from_status,
            "to": self.to_status,
            "changed_at": self.changed_at.isoformat(),
            "changed_by": self.changed_by,
        }
