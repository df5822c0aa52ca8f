"""
Proposal Document - Single Source of Truth

This module defines the versioned aggregate that every other component reads
and writes. The document is immutable: edits produce a new document through
`model_copy(update=...)`, never in-place mutation.

Sections:
- BlufObjectives: bottom line up front, objectives and notes
- ICPItem: one line of the ideal customer profile outline
- BudgetAssumptions / BudgetScenario / BudgetChannel: the budget model
- KPISettings: targets and sales capacity
- Task, RAIDBoard, Decision, Milestone: delivery tracking

The wire form (storage, links, exported files) uses camelCase keys; Python
code uses snake_case attribute names. Both are accepted on input.
"""

from enum import Enum
from typing import Any, Mapping, Optional, Tuple

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel

# Bumping this is a breaking boundary: older documents are rejected, not migrated.
CURRENT_VERSION = 1


class ProposalModel(BaseModel):
    """Base for all document sections: frozen, camelCase on the wire."""
    model_config = ConfigDict(
        frozen=True,
        alias_generator=to_camel,
        populate_by_name=True,
        extra="ignore"
    )


# =============================================================================
# Narrative Sections
# =============================================================================

class BlufObjectives(ProposalModel):
    """Bottom line up front plus objectives, one entry per line."""
    bluf: str = ""
    objectives: str = ""
    notes: str = ""


class ICPItem(ProposalModel):
    """A labelled line of the ideal customer profile outline."""
    id: str
    label: str = ""
    details: str = ""


# =============================================================================
# Budget Model
# =============================================================================

class BudgetAssumptions(ProposalModel):
    """
    Unit economics shared by every scenario.

    Percentages are expressed 0-100. CPL min/max are display targets only;
    no ordering between them is enforced.
    """
    avg_ticket: float = Field(default=0.0, description="Average ticket (currency)")
    gross_margin: float = Field(default=0.0, description="Gross margin percent 0-100")
    close_rate: float = Field(default=0.0, description="Lead close rate percent 0-100")
    target_cpl_min: float = Field(default=0.0, alias="targetCPLMin")
    target_cpl_max: float = Field(default=0.0, alias="targetCPLMax")
    target_cac: float = Field(default=0.0, alias="targetCAC")


class BudgetChannel(ProposalModel):
    """One spend line item; `amount` is user-adjustable within [min, max]."""
    id: str
    name: str = ""
    amount: float = 0.0
    min: float = 0.0
    max: float = 0.0
    step: Optional[float] = None


class BudgetScenario(ProposalModel):
    """
    A named budget allocation plan.

    `base_budget` and `base_lead_range` form the calibration point: the
    expected lead volume at a fixed reference spend. `base_budget` is never
    recomputed from the channels.
    """
    id: str
    name: str = ""
    headline: str = ""
    description: str = ""
    channels: Tuple[BudgetChannel, ...] = ()
    base_lead_range: Tuple[float, float] = (0.0, 0.0)
    base_budget: float = 0.0

    @property
    def total_budget(self) -> float:
        """Sum of channel amounts."""
        return sum(channel.amount for channel in self.channels)


# =============================================================================
# KPIs and Delivery Tracking
# =============================================================================

class KPISettings(ProposalModel):
    """Monthly targets and sales team capacity."""
    closed_jobs_target: float = 0.0
    cpl_target: float = 0.0
    cac_target: float = 0.0
    reviews_target: float = 0.0
    capacity_note: str = ""
    sales_team_size: int = 0


class TaskStatus(str, Enum):
    """Delivery status of a task."""
    ON_TRACK = "On Track"
    AT_RISK = "At Risk"
    CLIENT_NEEDED = "Client Needed"
    BACKLOG = "Backlog"


class Task(ProposalModel):
    id: str
    owner: str = ""
    description: str = ""
    status: TaskStatus = TaskStatus.BACKLOG


class RAIDBoard(ProposalModel):
    """Risks, assumptions, issues and dependencies."""
    risks: Tuple[str, ...] = ()
    assumptions: Tuple[str, ...] = ()
    issues: Tuple[str, ...] = ()
    dependencies: Tuple[str, ...] = ()


class Decision(ProposalModel):
    id: str
    summary: str = ""
    decider: str = ""
    date: str = ""


class MilestoneStatus(str, Enum):
    NOT_STARTED = "Not Started"
    IN_PROGRESS = "In Progress"
    COMPLETE = "Complete"


class Milestone(ProposalModel):
    id: str
    name: str = ""
    target_date: str = ""
    status: MilestoneStatus = MilestoneStatus.NOT_STARTED
    notes: Optional[str] = None


# =============================================================================
# The Document
# =============================================================================

class ProposalDocument(ProposalModel):
    """
    The whole proposal state.

    `selected_scenario_id` is a non-owning reference into `budget_scenarios`;
    it may dangle after a scenario is removed, which means "no active
    scenario" rather than an error.
    """
    version: int = CURRENT_VERSION
    date: str = ""
    bluf_objectives: BlufObjectives = Field(default_factory=BlufObjectives)
    icp_outline: Tuple[ICPItem, ...] = ()
    budget_assumptions: BudgetAssumptions = Field(default_factory=BudgetAssumptions)
    budget_scenarios: Tuple[BudgetScenario, ...] = ()
    selected_scenario_id: str = ""
    kpis: KPISettings = Field(default_factory=KPISettings)
    tasks: Tuple[Task, ...] = ()
    raid: RAIDBoard = Field(default_factory=RAIDBoard)
    decisions: Tuple[Decision, ...] = ()
    milestones: Tuple[Milestone, ...] = ()

    def to_payload(self) -> dict:
        """Convert to a JSON-ready dictionary with wire (camelCase) keys."""
        return self.model_dump(mode="json", by_alias=True, exclude_none=True)

    @classmethod
    def from_payload(cls, data: Mapping[str, Any]) -> "ProposalDocument":
        """
        Create a document from a wire dictionary.

        Raises pydantic.ValidationError on structural mismatch. The version
        is not checked here; see `is_compatible`.
        """
        return cls.model_validate(data)


def is_compatible(document: Any) -> bool:
    """
    Check whether a document (or a raw payload mapping) carries the
    supported schema version.
    """
    if isinstance(document, ProposalDocument):
        version = document.version
    elif isinstance(document, Mapping):
        version = document.get("version")
    else:
        return False

    if isinstance(version, bool) or not isinstance(version, (int, float)):
        return False
    return version == CURRENT_VERSION
