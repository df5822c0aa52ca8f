"""
Metrics and Projections

This module provides:
- Scenario metrics (leads, closed deals, CPL, CAC, margin)
- Target and capacity alerts
- Display formatting for ranges and currency
- The printable proposal summary
"""

from .scenario import ScenarioMetrics, calculate_scenario_metrics, active_scenario_metrics
from .alerts import AlertSeverity, TargetAlert, TargetRule, DEFAULT_RULES, evaluate_alerts
from .formatting import format_currency, format_number, format_range, metrics_summary
from .report import STATUS_MARKERS, bullet_list, render_proposal_summary

__all__ = [
    "ScenarioMetrics",
    "calculate_scenario_metrics",
    "active_scenario_metrics",
    "AlertSeverity",
    "TargetAlert",
    "TargetRule",
    "DEFAULT_RULES",
    "evaluate_alerts",
    "format_currency",
    "format_number",
    "format_range",
    "metrics_summary",
    "STATUS_MARKERS",
    "bullet_list",
    "render_proposal_summary"
]
