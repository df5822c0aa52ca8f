"""
Immutable document updates.

The application shell applies every edit through these helpers. Each returns
a new ProposalDocument; the input document is left untouched.
"""

from typing import Optional
from uuid import uuid4

from .document import BudgetAssumptions, BudgetChannel, BudgetScenario, ProposalDocument


def new_item_id() -> str:
    """Short random identifier for user-created rows."""
    return uuid4().hex[:7]


def selected_scenario(document: ProposalDocument) -> Optional[BudgetScenario]:
    """Return the selected scenario, or None when the selection dangles."""
    return next(
        (s for s in document.budget_scenarios if s.id == document.selected_scenario_id),
        None
    )


def select_scenario(document: ProposalDocument, scenario_id: str) -> ProposalDocument:
    """Point the selection at `scenario_id` (which need not exist)."""
    return document.model_copy(update={"selected_scenario_id": scenario_id})


def replace_scenario(document: ProposalDocument, scenario: BudgetScenario) -> ProposalDocument:
    """Swap in an edited scenario with the same id."""
    if not any(s.id == scenario.id for s in document.budget_scenarios):
        raise ValueError(f"Scenario not found: {scenario.id}")

    scenarios = tuple(
        scenario if s.id == scenario.id else s
        for s in document.budget_scenarios
    )
    return document.model_copy(update={"budget_scenarios": scenarios})


def remove_scenario(document: ProposalDocument, scenario_id: str) -> ProposalDocument:
    """
    Drop a scenario. The selection is left as is, so removing the selected
    scenario leaves no active scenario.
    """
    scenarios = tuple(s for s in document.budget_scenarios if s.id != scenario_id)
    return document.model_copy(update={"budget_scenarios": scenarios})


def set_channel_amount(
    document: ProposalDocument,
    scenario_id: str,
    channel_id: str,
    amount: float
) -> ProposalDocument:
    """
    Set a channel's spend, clamped into the channel's [min, max].

    The amount is validated like any wire value, so numeric text is coerced
    and anything else raises pydantic.ValidationError.
    """
    scenario = next((s for s in document.budget_scenarios if s.id == scenario_id), None)
    if scenario is None:
        raise ValueError(f"Scenario not found: {scenario_id}")

    channels = []
    found = False
    for channel in scenario.channels:
        if channel.id == channel_id:
            found = True
            edited = BudgetChannel.model_validate({**channel.model_dump(), "amount": amount})
            clamped = min(max(edited.amount, channel.min), channel.max)
            channel = edited.model_copy(update={"amount": clamped})
        channels.append(channel)

    if not found:
        raise ValueError(f"Channel not found: {channel_id}")

    return replace_scenario(
        document,
        scenario.model_copy(update={"channels": tuple(channels)})
    )


def update_assumptions(document: ProposalDocument, **changes) -> ProposalDocument:
    """
    Apply field changes (snake_case names) to the budget assumptions.

    Values go through model validation; invalid ones raise
    pydantic.ValidationError.
    """
    unknown = set(changes) - set(BudgetAssumptions.model_fields)
    if unknown:
        raise ValueError(f"Unknown assumption fields: {sorted(unknown)}")

    assumptions = BudgetAssumptions.model_validate(
        {**document.budget_assumptions.model_dump(), **changes}
    )
    return document.model_copy(update={"budget_assumptions": assumptions})
