"""
Target Alerts

Compares a scenario's projections against the proposal's targets and flags
plans that would overrun sales capacity or miss acquisition cost goals.
"""

from dataclasses import dataclass
from enum import Enum
from typing import Callable

from ..core.document import BudgetAssumptions, KPISettings
from .scenario import ScenarioMetrics


class AlertSeverity(Enum):
    """Alert severity levels."""
    INFO = "info"
    WARNING = "warning"


@dataclass
class TargetAlert:
    """A breached target."""
    rule_name: str = ""
    metric_name: str = ""
    severity: AlertSeverity = AlertSeverity.WARNING
    message: str = ""
    current_value: float = 0.0
    threshold: float = 0.0


@dataclass
class TargetRule:
    """
    Definition of a target rule.

    `value` picks the compared projection out of the metrics; `threshold`
    picks the target out of the assumptions and KPIs. A rule fires when the
    projection exceeds a positive target.
    """
    name: str = ""
    metric_name: str = ""
    value: Callable[[ScenarioMetrics], float] = None
    threshold: Callable[[BudgetAssumptions, KPISettings], float] = None
    severity: AlertSeverity = AlertSeverity.WARNING
    message: str = ""


DEFAULT_RULES = [
    TargetRule(
        name="Sales Capacity",
        metric_name="closed_range",
        value=lambda m: m.closed_range[1],
        threshold=lambda a, k: k.closed_jobs_target,
        severity=AlertSeverity.WARNING,
        message=(
            "Selected plan projects up to {value:,.1f} closed jobs/mo which exceeds "
            "the target of {threshold:,.0f}. Confirm staffing or stage the rollout."
        ),
    ),
    TargetRule(
        name="CAC Above Target",
        metric_name="cac_range",
        value=lambda m: m.cac_range[0],
        threshold=lambda a, k: a.target_cac,
        severity=AlertSeverity.WARNING,
        message="Best-case CAC of ${value:,.0f} is above the ${threshold:,.0f} target.",
    ),
    TargetRule(
        name="CPL Above Target",
        metric_name="cpl_range",
        value=lambda m: m.cpl_range[0],
        threshold=lambda a, k: a.target_cpl_max,
        severity=AlertSeverity.INFO,
        message="Best-case CPL of ${value:,.0f} is above the ${threshold:,.0f} ceiling.",
    ),
]


def evaluate_alerts(
    metrics: ScenarioMetrics,
    assumptions: BudgetAssumptions,
    kpis: KPISettings,
    rules: list[TargetRule] = None
) -> list[TargetAlert]:
    """Evaluate target rules against a scenario's metrics."""
    alerts = []

    for rule in rules if rules is not None else DEFAULT_RULES:
        threshold = rule.threshold(assumptions, kpis)
        if threshold <= 0:
            continue

        value = rule.value(metrics)
        if value > threshold:
            alerts.append(TargetAlert(
                rule_name=rule.name,
                metric_name=rule.metric_name,
                severity=rule.severity,
                message=rule.message.format(value=value, threshold=threshold),
                current_value=value,
                threshold=threshold
            ))

    return alerts
