"""
Core document model for the GTM proposal.

The ProposalDocument is the single versioned aggregate. It is created once
(from the default template, a shared link, or a stored/imported snapshot)
and thereafter only replaced wholesale.
"""

from .document import (
    CURRENT_VERSION,
    BlufObjectives,
    BudgetAssumptions,
    BudgetChannel,
    BudgetScenario,
    Decision,
    ICPItem,
    KPISettings,
    Milestone,
    MilestoneStatus,
    ProposalDocument,
    RAIDBoard,
    Task,
    TaskStatus,
    is_compatible
)
from .defaults import create_default_document
from .errors import ProposalError, FormatError, VersionError
from .updates import (
    new_item_id,
    selected_scenario,
    select_scenario,
    replace_scenario,
    remove_scenario,
    set_channel_amount,
    update_assumptions
)

__all__ = [
    "CURRENT_VERSION",
    "BlufObjectives",
    "BudgetAssumptions",
    "BudgetChannel",
    "BudgetScenario",
    "Decision",
    "ICPItem",
    "KPISettings",
    "Milestone",
    "MilestoneStatus",
    "ProposalDocument",
    "RAIDBoard",
    "Task",
    "TaskStatus",
    "is_compatible",
    "create_default_document",
    "ProposalError",
    "FormatError",
    "VersionError",
    "new_item_id",
    "selected_scenario",
    "select_scenario",
    "replace_scenario",
    "remove_scenario",
    "set_channel_amount",
    "update_assumptions"
]
