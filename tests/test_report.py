"""
Unit Tests for the printable proposal summary.

Tests:
1. Bullet splitting of multi-line text
2. Every section rendered from the default template
3. Dangling scenario selection and empty sections
"""

import pytest

from gtm_proposal.core import (
    BlufObjectives,
    Milestone,
    MilestoneStatus,
    RAIDBoard,
    Task,
    TaskStatus,
    remove_scenario,
)
from gtm_proposal.metrics import STATUS_MARKERS, bullet_list, render_proposal_summary


# =============================================================================
# TEST: BULLETS
# =============================================================================

class TestBulletList:

    @pytest.mark.parametrize("text,expected", [
        ("one\ntwo", ["one", "two"]),
        ("  padded  \n\n   \nnext ", ["padded", "next"]),
        ("", []),
        ("\n\n", []),
    ])
    def test_bullet_list(self, text, expected):
        assert bullet_list(text) == expected

    def test_every_status_has_a_marker(self):
        assert set(STATUS_MARKERS) == set(TaskStatus)


# =============================================================================
# TEST: FULL SUMMARY
# =============================================================================

class TestRenderProposalSummary:

    @pytest.fixture
    def summary(self, default_document):
        return render_proposal_summary(default_document)

    def test_header(self, summary):
        assert summary.startswith("# Go-To-Market Proposal\n\nDate: 2026-01-15\n")

    def test_bluf_and_objectives_bullets(self, summary):
        assert "- Build compounding demand in Fort Bend with social proof" in summary
        assert "- Hit 40 public reviews within 90 days" in summary

    def test_icp_items(self, summary, default_document):
        for item in default_document.icp_outline:
            assert f"### {item.label}" in summary

    def test_selected_scenario_metrics(self, summary):
        assert "**Scenario B — $5k/mo**" in summary
        assert "- Monthly Budget: $5,000" in summary
        assert "- Expected Leads: 20 – 25" in summary
        assert "- Closed Jobs: 4 – 5" in summary
        assert "- Est. CAC: $1,000 – $1,250" in summary
        assert "| EDDM | $1,000 |" in summary

    def test_kpis(self, summary):
        assert "- Closed Jobs / mo: 5" in summary
        assert "- Target CAC: $400" in summary
        assert "Current 2-person sales team." in summary

    def test_tasks_with_status_markers(self, summary):
        assert "| Imran (Strategy) | Phase 0 recap + ICP; Budget model; EDDM scope | 🟢 On Track |" in summary
        assert "🟡 At Risk |" in summary

    def test_raid_empty_group(self, summary):
        issues = summary.split("### Issues\n\n", 1)[1]
        assert issues.startswith("- None recorded.")
        assert "- Lead over-influx vs 2-person team" in summary

    def test_decisions_and_milestones(self, summary):
        assert "- **D001** (2026-01-15) Proceed with phased discovery. Decider: Sean" in summary
        assert "- 2026-01-15: Discovery Complete [In Progress]" in summary


# =============================================================================
# TEST: EDGE CASES
# =============================================================================

class TestSummaryEdgeCases:

    def test_dangling_selection(self, default_document):
        document = remove_scenario(default_document, default_document.selected_scenario_id)
        summary = render_proposal_summary(document)

        assert "## Selected Budget Scenario\n\nNo active scenario.\n" in summary
        assert "Monthly Budget" not in summary
        assert "## KPI Targets & Capacity" in summary

    def test_empty_sections(self, default_document):
        document = default_document.model_copy(update={
            "bluf_objectives": BlufObjectives(),
            "raid": RAIDBoard(),
            "decisions": (),
            "milestones": (),
        })
        summary = render_proposal_summary(document)

        assert summary.count("- None recorded.") == 8

    def test_table_cells_are_escaped(self, default_document):
        document = default_document.model_copy(update={
            "tasks": (Task(id="t", owner="A|B", description="line one\nline two"),),
        })
        summary = render_proposal_summary(document)

        assert "| A\\|B | line one line two | ⚪ Backlog |" in summary

    def test_milestone_notes(self, default_document):
        document = default_document.model_copy(update={
            "milestones": (
                Milestone(
                    id="m",
                    name="Pilot Live",
                    target_date="2026-03-01",
                    status=MilestoneStatus.COMPLETE,
                    notes="Two crews booked"
                ),
            ),
        })
        summary = render_proposal_summary(document)

        assert "- 2026-03-01: Pilot Live [Complete]. Two crews booked" in summary
