"""
Scenario Metrics Engine

Turns a scenario's channel allocation into expected outcome ranges by linear
extrapolation from the scenario's calibration point (base budget, base lead
range):

- Leads: total budget x leads-per-dollar at the low and high calibration ends
- Closed deals: leads x close rate
- CPL / CAC: total budget / leads (or closed deals), inversely paired
- Margin: average closed deals x average ticket x gross margin

The engine is total: degenerate input (zero base budget, zero leads) maps to
defined finite values instead of NaN or infinity.
"""

import math
from dataclasses import dataclass
from typing import Optional

from ..core.document import BudgetAssumptions, BudgetScenario, ProposalDocument
from ..core.updates import selected_scenario


@dataclass(frozen=True)
class ScenarioMetrics:
    """Derived projections for one scenario."""
    total_budget: float = 0.0
    leads_range: tuple[float, float] = (0.0, 0.0)
    closed_range: tuple[float, float] = (0.0, 0.0)
    cpl_range: tuple[float, float] = (0.0, 0.0)
    cac_range: tuple[float, float] = (0.0, 0.0)
    margin_dollars: float = 0.0


def _finite_or_zero(value: float) -> float:
    if math.isfinite(value):
        return value
    return 0.0


def _rate(numerator: float, denominator: float) -> float:
    """Leads per dollar; a zero base budget yields no rate at all."""
    if denominator == 0:
        return 0.0
    return _finite_or_zero(numerator / denominator)


def _cost_per(total_budget: float, volume: float) -> float:
    # Zero volume means the whole spend is the cost of nothing: saturate at spend.
    if volume > 0:
        return _finite_or_zero(total_budget / volume)
    return total_budget


def calculate_scenario_metrics(
    scenario: BudgetScenario,
    assumptions: BudgetAssumptions
) -> ScenarioMetrics:
    """
    Compute the metrics for a scenario.

    CPL and CAC are inversely related to volume, so the low cost bound comes
    from the high volume bound and vice versa.
    """
    total_budget = _finite_or_zero(sum(channel.amount for channel in scenario.channels))

    base_min, base_max = scenario.base_lead_range
    lead_min_factor = _rate(base_min, scenario.base_budget)
    lead_max_factor = _rate(base_max, scenario.base_budget)

    leads_min = _finite_or_zero(total_budget * lead_min_factor)
    leads_max = _finite_or_zero(total_budget * lead_max_factor)

    close_rate = assumptions.close_rate / 100
    closed_min = _finite_or_zero(leads_min * close_rate)
    closed_max = _finite_or_zero(leads_max * close_rate)

    cpl_min = _cost_per(total_budget, leads_max)
    cpl_max = _cost_per(total_budget, leads_min)

    cac_min = _cost_per(total_budget, closed_max)
    cac_max = _cost_per(total_budget, closed_min)

    closed_avg = (closed_min + closed_max) / 2
    margin_dollars = _finite_or_zero(
        closed_avg * assumptions.avg_ticket * (assumptions.gross_margin / 100)
    )

    return ScenarioMetrics(
        total_budget=total_budget,
        leads_range=(leads_min, leads_max),
        closed_range=(closed_min, closed_max),
        cpl_range=(cpl_min, cpl_max),
        cac_range=(cac_min, cac_max),
        margin_dollars=margin_dollars
    )


def active_scenario_metrics(document: ProposalDocument) -> Optional[ScenarioMetrics]:
    """Metrics for the selected scenario, or None when nothing is selected."""
    scenario = selected_scenario(document)
    if scenario is None:
        return None
    return calculate_scenario_metrics(scenario, document.budget_assumptions)
