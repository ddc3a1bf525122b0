"""
Get Workflow Catalog Use Case
"""

from dataclasses import dataclass, field

from printflow.domains.orders.domain.value_objects import WORKFLOW_CATALOG, WorkflowPhase, classify


@dataclass
class WorkflowPhaseView:
    phase: WorkflowPhase
    label: str
    statuses: list[str] = field(default_factory=list)
    color: str = "gray"


class GetWorkflowCatalogUseCase:
    """Use Case: ordered phases with their statuses, for status pickers."""

    def execute(self) -> list[WorkflowPhaseView]:
        return [
            WorkflowPhaseView(
                phase=phase,
                label=phase.label,
                statuses=[status.value for status in statuses],
                color=classify(statuses[0]).color,
            )
            for phase, statuses in WORKFLOW_CATALOG.items()
        ]
