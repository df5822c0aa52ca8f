"""
Printable Proposal

Renders the whole document as a Markdown summary, section by section:
BLUF and objectives, ICP, the selected budget scenario with its projections,
KPI targets, tasks, RAID, decisions and milestones.

A dangling scenario selection is shown as "No active scenario." instead of
being an error.
"""

from ..core.document import ProposalDocument, TaskStatus
from ..core.updates import selected_scenario
from .formatting import format_currency, format_number, format_range
from .scenario import calculate_scenario_metrics

REPORT_TITLE = "Go-To-Market Proposal"
NO_ACTIVE_SCENARIO = "No active scenario."
NONE_RECORDED = "None recorded."

STATUS_MARKERS = {
    TaskStatus.ON_TRACK: "🟢",
    TaskStatus.AT_RISK: "🟡",
    TaskStatus.CLIENT_NEEDED: "🟠",
    TaskStatus.BACKLOG: "⚪",
}


def bullet_list(text: str) -> list[str]:
    """Split multi-line text into trimmed, non-blank items."""
    return [item.strip() for item in text.split("\n") if item.strip()]


def _cell(value: str) -> str:
    # Table cells are single-line and pipe-free
    return " ".join(str(value).split()).replace("|", "\\|")


def _bullets(items) -> list[str]:
    if not items:
        return [f"- {NONE_RECORDED}"]
    return [f"- {item}" for item in items]


def _scenario_section(document: ProposalDocument) -> list[str]:
    lines = ["## Selected Budget Scenario", ""]

    scenario = selected_scenario(document)
    if scenario is None:
        return lines + [NO_ACTIVE_SCENARIO]

    metrics = calculate_scenario_metrics(scenario, document.budget_assumptions)
    lines.append(f"**{scenario.name}**")
    if scenario.description:
        lines += ["", scenario.description]
    lines += [
        "",
        f"- Monthly Budget: {format_currency(metrics.total_budget)}",
        f"- Expected Leads: {format_range(metrics.leads_range)}",
        f"- Closed Jobs: {format_range(metrics.closed_range)}",
        f"- Est. CAC: {format_range(metrics.cac_range, currency=True)}",
        "",
        "| Channel | Monthly Allocation |",
        "|---|---:|",
    ]
    lines += [
        f"| {_cell(channel.name)} | {format_currency(channel.amount)} |"
        for channel in scenario.channels
    ]
    return lines


def render_proposal_summary(document: ProposalDocument) -> str:
    """Render the document as a printable Markdown proposal."""
    kpis = document.kpis
    raid = document.raid

    lines = [f"# {REPORT_TITLE}", "", f"Date: {document.date}", ""]

    lines += ["## BLUF", ""]
    lines += _bullets(bullet_list(document.bluf_objectives.bluf))
    lines += ["", "## Objectives", ""]
    lines += _bullets(bullet_list(document.bluf_objectives.objectives))

    lines += ["", "## ICP Summary"]
    for item in document.icp_outline:
        lines += ["", f"### {item.label}", "", item.details]

    lines.append("")
    lines += _scenario_section(document)

    lines += [
        "",
        "## KPI Targets & Capacity",
        "",
        f"- Closed Jobs / mo: {format_number(kpis.closed_jobs_target)}",
        f"- Target CPL: {format_currency(kpis.cpl_target)}",
        f"- Target CAC: {format_currency(kpis.cac_target)}",
        f"- Reviews (90d): {format_number(kpis.reviews_target)}",
    ]
    if kpis.capacity_note:
        lines += ["", kpis.capacity_note]

    lines += ["", "## Tasks & Owners", "", "| Owner | Deliverable | Status |", "|---|---|---|"]
    lines += [
        f"| {_cell(task.owner)} | {_cell(task.description)} | "
        f"{STATUS_MARKERS[task.status]} {task.status.value} |"
        for task in document.tasks
    ]

    lines += ["", "## Risks & Assumptions"]
    for label, values in (
        ("Risks", raid.risks),
        ("Assumptions", raid.assumptions),
        ("Issues", raid.issues),
        ("Dependencies", raid.dependencies),
    ):
        lines += ["", f"### {label}", ""]
        lines += _bullets(values)

    lines += ["", "## Decisions", ""]
    lines += _bullets([
        f"**{decision.id.upper()}** ({decision.date}) {decision.summary}. Decider: {decision.decider}"
        for decision in document.decisions
    ])

    lines += ["", "## Milestones", ""]
    milestones = []
    for milestone in document.milestones:
        entry = f"{milestone.target_date}: {milestone.name} [{milestone.status.value}]"
        if milestone.notes:
            entry += f". {milestone.notes}"
        milestones.append(entry)
    lines += _bullets(milestones)

    return "\n".join(lines) + "\n"
