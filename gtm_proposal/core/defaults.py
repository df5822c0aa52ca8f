"""
Default proposal template.

Used whenever no valid shared link or stored snapshot exists. Construction is
deterministic apart from the document date and must never fail.
"""

from datetime import date
from typing import Optional

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
)


def _default_scenarios() -> tuple[BudgetScenario, ...]:
    return (
        BudgetScenario(
            id="scenario-a",
            name="Scenario A — $2k/mo",
            headline="Entry point to validate channels",
            description="Lean budget to test LSA, Nextdoor, and compounding SEO content.",
            base_lead_range=(8, 12),
            base_budget=2000,
            channels=(
                BudgetChannel(id="a-lsa", name="LSA", amount=1000, min=0, max=5000),
                BudgetChannel(id="a-nextdoor", name="Nextdoor", amount=500, min=0, max=4000),
                BudgetChannel(id="a-seo", name="SEO / Content", amount=500, min=0, max=4000),
            )
        ),
        BudgetScenario(
            id="scenario-b",
            name="Scenario B — $5k/mo",
            headline="Aggressive omni-channel mix",
            description="Adds PPC scale and EDDM to accelerate lead flow.",
            base_lead_range=(20, 25),
            base_budget=5000,
            channels=(
                BudgetChannel(id="b-lsa", name="LSA", amount=2000, min=0, max=8000),
                BudgetChannel(id="b-ppc", name="PPC", amount=1500, min=0, max=8000),
                BudgetChannel(id="b-nextdoor", name="Nextdoor", amount=500, min=0, max=4000),
                BudgetChannel(id="b-eddm", name="EDDM", amount=1000, min=0, max=6000),
            )
        ),
        BudgetScenario(
            id="scenario-c",
            name="Scenario C — $8k/mo",
            headline="Full-funnel acceleration",
            description="Adds paid social to saturate the market while direct mail sustains recall.",
            base_lead_range=(35, 45),
            base_budget=8000,
            channels=(
                BudgetChannel(id="c-lsa", name="LSA", amount=3000, min=0, max=10000),
                BudgetChannel(id="c-ppc", name="PPC", amount=2500, min=0, max=10000),
                BudgetChannel(id="c-nextdoor", name="Nextdoor", amount=1000, min=0, max=5000),
                BudgetChannel(id="c-social", name="Paid Social", amount=1000, min=0, max=5000),
                BudgetChannel(id="c-eddm", name="EDDM", amount=500, min=0, max=5000),
            )
        ),
    )


def _default_icp() -> tuple[ICPItem, ...]:
    outline = [
        ("Demographics", "Homeowners 35–65, HHI $100k+, long-term residents"),
        ("Geos", "Sugar Land, Sienna, Missouri City; ZIPs 77479, 77459, 77478, 77498"),
        ("Property", "1995–2010 builds; 2.5–4k sq ft; asphalt shingles"),
        ("Triggers", "Aging roof, storm exposure, premium hikes/denials, resale prep"),
        ("Financial", "Retail/cash friendly; open to financing"),
        ("Behavior", "Google/Nextdoor heavy; needs 30+ 5⭐ reviews; education-led content"),
        ("Exclusions", "Renters, repair-only, out-of-area (>30 min)"),
    ]
    return tuple(
        ICPItem(id=f"icp-{i}", label=label, details=details)
        for i, (label, details) in enumerate(outline, 1)
    )


def _default_tasks() -> tuple[Task, ...]:
    return (
        Task(
            id="task-1",
            owner="Imran (Strategy)",
            description="Phase 0 recap + ICP; Budget model; EDDM scope",
            status=TaskStatus.ON_TRACK
        ),
        Task(
            id="task-2",
            owner="Shabir (Sales)",
            description="Competitor scan (3–5 local roofers)",
            status=TaskStatus.ON_TRACK
        ),
        Task(
            id="task-3",
            owner="Ammar (Content)",
            description=(
                "10 post ideas, 3 blog angles, TikTok/IG reel concepts; "
                "quick reel “3 signs you need a new roof”"
            ),
            status=TaskStatus.AT_RISK
        ),
        Task(
            id="task-4",
            owner="Sean & Zach (Client)",
            description=(
                "Avg ticket, margin targets, close rate, CRM status; approve budget "
                "tier & primary offer; review contact fuel"
            ),
            status=TaskStatus.CLIENT_NEEDED
        ),
    )


def _default_milestones(today: str) -> tuple[Milestone, ...]:
    names = [
        ("Discovery Complete", MilestoneStatus.IN_PROGRESS),
        ("Proposal Delivered", MilestoneStatus.NOT_STARTED),
        ("Mailer 1–3", MilestoneStatus.NOT_STARTED),
        ("Pilot Live", MilestoneStatus.NOT_STARTED),
        ("Channel CAC Report", MilestoneStatus.NOT_STARTED),
    ]
    return tuple(
        Milestone(id=f"milestone-{i}", name=name, target_date=today, status=status)
        for i, (name, status) in enumerate(names, 1)
    )


def create_default_document(today: Optional[str] = None) -> ProposalDocument:
    """
    Build the template proposal.

    Args:
        today: ISO date used for the document, decision and milestone dates.
            Defaults to the current date.
    """
    today = today or date.today().isoformat()
    scenarios = _default_scenarios()

    return ProposalDocument(
        version=CURRENT_VERSION,
        date=today,
        bluf_objectives=BlufObjectives(
            bluf=(
                "Win 2–3 full-roof installs monthly at ≤ $400 CAC\n"
                "Build compounding demand in Fort Bend with social proof"
            ),
            objectives=(
                "Stand up Auxilium GTM rhythm in 30 days\n"
                "Hit 40 public reviews within 90 days\n"
                "Validate paid + organic mix to fuel 2025 scale"
            ),
            notes=(
                "Primary offer: full-roof replacement with financing CTA. "
                "Add upsell path for gutters & insulation."
            )
        ),
        icp_outline=_default_icp(),
        budget_assumptions=BudgetAssumptions(
            avg_ticket=15000,
            gross_margin=35,
            close_rate=20,
            target_cpl_min=200,
            target_cpl_max=250,
            target_cac=400
        ),
        budget_scenarios=scenarios,
        # Middle tier is the recommended plan
        selected_scenario_id=scenarios[1].id,
        kpis=KPISettings(
            closed_jobs_target=5,
            cpl_target=250,
            cac_target=400,
            reviews_target=40,
            capacity_note=(
                "Current 2-person sales team. Add overflow plan if closed jobs "
                "exceed 5 per month or stagger spend."
            ),
            sales_team_size=2
        ),
        tasks=_default_tasks(),
        raid=RAIDBoard(
            risks=(
                "Lead over-influx vs 2-person team",
                "Budget burn before CAC known",
                "Duplicate review wording flagged",
            ),
            assumptions=("4–5 jobs/mo manageable", "90-day ROI test"),
            issues=(),
            dependencies=("Ops data from client",)
        ),
        decisions=(
            Decision(
                id="D001",
                summary="Proceed with phased discovery",
                decider="Sean",
                date=today
            ),
        ),
        milestones=_default_milestones(today)
    )
