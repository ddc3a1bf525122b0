"""
Workflow Status Value Objects

The fixed production workflow: ordered phases, each owning an ordered set of
statuses. Statuses are globally unique across phases. The catalog does not
encode a transition graph; any status may follow any other.
"""

from collections.abc import Iterable
from typing import Protocol, TypeVar

from printflow.core.domain import StatusEnum, UnknownStatusException


class WorkflowPhase(StatusEnum):
    """Production stages, in workflow order."""

    QUOTES = "Quotes"
    ART = "Art & Design"
    SCREEN_PRINT = "Screen Print"
    EMBROIDERY = "Embroidery"
    DTG = "DTG"
    FULFILLMENT = "Fulfillment"
    COMPLETION = "Completion"

    @property
    def label(self) -> str:
        """Heading shown above the phase's statuses."""
        if self is WorkflowPhase.DTG:
            return "DTG / Direct to Garment"
        return self.value


class WorkflowStatus(StatusEnum):
    """Every status an order can be in."""

    # Quotes
    QUOTE = "QUOTE"
    QUOTE_PENDING_APPROVAL = "QUOTE - Pending Approval"
    QUOTE_SENT = "QUOTE - Sent"
    QUOTE_APPROVED = "QUOTE - Approved"
    QUOTE_REJECTED = "QUOTE - Rejected"

    # Art & Design
    ART_WAITING = "ART - Waiting for Art"
    ART_IN_PROGRESS = "ART - In Progress"
    ART_READY_FOR_REVIEW = "ART - Ready for Review"
    ART_APPROVED = "ART - Approved"
    ART_REVISIONS_NEEDED = "ART - Revisions Needed"

    # Screen Print
    SP_WAITING_FOR_SCREENS = "SP - Waiting for Screens"
    SP_SCREENS_READY = "SP - Screens Ready"
    SP_IN_PRODUCTION = "SP - In Production"
    SP_ON_PRESS = "SP - On Press"
    SP_PRINTING_COMPLETE = "SP - Printing Complete"

    # Embroidery
    EMB_DIGITIZING = "EMB - Digitizing"
    EMB_READY_TO_STITCH = "EMB - Ready to Stitch"
    EMB_IN_PRODUCTION = "EMB - In Production"
    EMB_COMPLETE = "EMB - Complete"

    # DTG
    DTG_QUEUE = "DTG - Queue"
    DTG_PRINTING = "DTG - Printing"
    DTG_COMPLETE = "DTG - Complete"

    # Fulfillment
    SUPA_READY_FOR_FULFILLMENT = "SUPA - Ready for Fulfillment"
    SUPA_PACKING = "SUPA - Packing"
    SUPA_READY_FOR_PICKUP = "SUPA - Ready for Pickup"
    SUPA_SHIPPED = "SUPA - Shipped"

    # Completion
    COMPLETE = "COMPLETE"
    COMPLETE_PICKED_UP = "COMPLETE - Picked Up"
    COMPLETE_DELIVERED = "COMPLETE - Delivered"
    INVOICE_PAID = "INVOICE PAID"
    CANCELLED = "CANCELLED"

    @property
    def phase(self) -> WorkflowPhase:
        return _PHASE_BY_STATUS[self]


DEFAULT_STATUS = WorkflowStatus.QUOTE

WORKFLOW_CATALOG: dict[WorkflowPhase, tuple[WorkflowStatus, ...]] = {
    WorkflowPhase.QUOTES: (
        WorkflowStatus.QUOTE,
        WorkflowStatus.QUOTE_PENDING_APPROVAL,
        WorkflowStatus.QUOTE_SENT,
        WorkflowStatus.QUOTE_APPROVED,
        WorkflowStatus.QUOTE_REJECTED,
    ),
    WorkflowPhase.ART: (
        WorkflowStatus.ART_WAITING,
        WorkflowStatus.ART_IN_PROGRESS,
        WorkflowStatus.ART_READY_FOR_REVIEW,
        WorkflowStatus.ART_APPROVED,
        WorkflowStatus.ART_REVISIONS_NEEDED,
    ),
    WorkflowPhase.SCREEN_PRINT: (
        WorkflowStatus.SP_WAITING_FOR_SCREENS,
        WorkflowStatus.SP_SCREENS_READY,
        WorkflowStatus.SP_IN_PRODUCTION,
        WorkflowStatus.SP_ON_PRESS,
        WorkflowStatus.SP_PRINTING_COMPLETE,
    ),
    WorkflowPhase.EMBROIDERY: (
        WorkflowStatus.EMB_DIGITIZING,
        WorkflowStatus.EMB_READY_TO_STITCH,
        WorkflowStatus.EMB_IN_PRODUCTION,
        WorkflowStatus.EMB_COMPLETE,
    ),
    WorkflowPhase.DTG: (
        WorkflowStatus.DTG_QUEUE,
        WorkflowStatus.DTG_PRINTING,
        WorkflowStatus.DTG_COMPLETE,
    ),
    WorkflowPhase.FULFILLMENT: (
        WorkflowStatus.SUPA_READY_FOR_FULFILLMENT,
        WorkflowStatus.SUPA_PACKING,
        WorkflowStatus.SUPA_READY_FOR_PICKUP,
        WorkflowStatus.SUPA_SHIPPED,
    ),
    WorkflowPhase.COMPLETION: (
        WorkflowStatus.COMPLETE,
        WorkflowStatus.COMPLETE_PICKED_UP,
        WorkflowStatus.COMPLETE_DELIVERED,
        WorkflowStatus.INVOICE_PAID,
        WorkflowStatus.CANCELLED,
    ),
}

_PHASE_BY_STATUS: dict[WorkflowStatus, WorkflowPhase] = {
    status: phase for phase, statuses in WORKFLOW_CATALOG.items() for status in statuses
}


def is_known_status(value: str) -> bool:
    """True if `value` is exactly a catalog status."""
    return value in WorkflowStatus._value2member_map_


def resolve_status(value: "WorkflowStatus | str") -> WorkflowStatus:
    """
    Resolve a status name against the catalog.

    Exact matches win; otherwise matching is case-insensitive.

    Raises:
        UnknownStatusException: If the name is not in the catalog
    """
    if isinstance(value, WorkflowStatus):
        return value
    if is_known_status(value):
        return WorkflowStatus(value)
    try:
        return WorkflowStatus.from_string(str(value).strip())
    except ValueError as e:
        raise UnknownStatusException(str(value)) from e


def phase_of(status: "WorkflowStatus | str") -> WorkflowPhase:
    """Phase owning a catalog status."""
    return resolve_status(status).phase


class StatusCategory(StatusEnum):
    """Display grouping derived from a status name."""

    QUOTES = "quotes"
    ART = "art"
    SCREEN_PRINT = "screen_print"
    EMBROIDERY = "embroidery"
    DTG = "dtg"
    FULFILLMENT = "fulfillment"
    COMPLETION = "completion"
    CANCELLED = "cancelled"
    OTHER = "other"

    @property
    def color(self) -> str:
        """Badge color token."""
        return _CATEGORY_COLORS[self]


_CATEGORY_COLORS: dict[StatusCategory, str] = {
    StatusCategory.QUOTES: "yellow",
    StatusCategory.ART: "purple",
    StatusCategory.SCREEN_PRINT: "blue",
    StatusCategory.EMBROIDERY: "pink",
    StatusCategory.DTG: "indigo",
    StatusCategory.FULFILLMENT: "cyan",
    StatusCategory.COMPLETION: "green",
    StatusCategory.CANCELLED: "red",
    StatusCategory.OTHER: "gray",
}

# Checked in order, first match wins
CATEGORY_FRAGMENTS: tuple[tuple[StatusCategory, tuple[str, ...]], ...] = (
    (StatusCategory.QUOTES, ("quote",)),
    (StatusCategory.ART, ("art",)),
    (StatusCategory.SCREEN_PRINT, ("sp ", "screen")),
    (StatusCategory.EMBROIDERY, ("emb",)),
    (StatusCategory.DTG, ("dtg",)),
    (StatusCategory.FULFILLMENT, ("supa", "fulfillment")),
    (StatusCategory.COMPLETION, ("complete", "paid")),
    (StatusCategory.CANCELLED, ("cancel",)),
)


def classify(status: "WorkflowStatus | str") -> StatusCategory:
    """
    Display category of any status string, catalog member or not.

    Example:
        classify("SP - Printing Complete")  # StatusCategory.SCREEN_PRINT
        classify("On Hold")                 # StatusCategory.OTHER
    """
    lowered = (status.value if isinstance(status, WorkflowStatus) else str(status)).lower()
    for category, fragments in CATEGORY_FRAGMENTS:
        if any(fragment in lowered for fragment in fragments):
            return category
    return StatusCategory.OTHER


class _HasStatus(Protocol):
    status: str


T = TypeVar("T", bound=_HasStatus)


def group_by_phase(items: Iterable[T]) -> dict[WorkflowPhase, list[T]]:
    """
    Group anything carrying a catalog `status` by workflow phase.

    Every phase is present, in workflow order; items with a status outside
    the catalog are skipped.
    """
    groups: dict[WorkflowPhase, list[T]] = {phase: [] for phase in WorkflowPhase}
    for item in items:
        if is_known_status(item.status):
            groups[WorkflowStatus(item.status).phase].append(item)
    return groups
