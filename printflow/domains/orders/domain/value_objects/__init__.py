"""
Orders Domain Value Objects
"""

from printflow.domains.orders.domain.value_objects.status_change import ActorId, StatusChange
from printflow.domains.orders.domain.value_objects.workflow_status import (
    CATEGORY_FRAGMENTS,
    DEFAULT_STATUS,
    WORKFLOW_CATALOG,
    StatusCategory,
    WorkflowPhase,
    WorkflowStatus,
    classify,
    group_by_phase,
    is_known_status,
    phase_of,
    resolve_status,
)

__all__ = [
    "ActorId",
    "StatusChange",
    "CATEGORY_FRAGMENTS",
    "DEFAULT_STATUS",
    "WORKFLOW_CATALOG",
    "StatusCategory",
    "WorkflowPhase",
    "WorkflowStatus",
    "classify",
    "group_by_phase",
    "is_known_status",
    "phase_of",
    "resolve_status",
]
