"""
Unit Tests for the Document Model.

Tests:
1. Default template construction and version stamping
2. Version compatibility predicate
3. Immutability and the update helpers
"""

import pytest
from pydantic import ValidationError

from gtm_proposal.core import (
    CURRENT_VERSION,
    BudgetScenario,
    ProposalDocument,
    TaskStatus,
    create_default_document,
    is_compatible,
    new_item_id,
    remove_scenario,
    replace_scenario,
    select_scenario,
    selected_scenario,
    set_channel_amount,
    update_assumptions,
)
from gtm_proposal.metrics import active_scenario_metrics
from gtm_proposal.sharing import decode_token, encode_document


# =============================================================================
# TEST: DEFAULT TEMPLATE
# =============================================================================

class TestDefaultDocument:

    def test_stamped_with_current_version(self):
        assert create_default_document().version == CURRENT_VERSION

    def test_deterministic_for_a_given_date(self):
        assert create_default_document("2026-03-01") == create_default_document("2026-03-01")

    def test_dates_follow_today(self, default_document):
        assert default_document.date == "2026-01-15"
        assert default_document.decisions[0].date == "2026-01-15"
        assert all(m.target_date == "2026-01-15" for m in default_document.milestones)

    def test_three_scenarios_with_middle_selected(self, default_document):
        ids = [s.id for s in default_document.budget_scenarios]
        assert ids == ["scenario-a", "scenario-b", "scenario-c"]
        assert default_document.selected_scenario_id == "scenario-b"

    def test_calibration_points(self, default_document):
        calibration = [(s.base_budget, s.base_lead_range) for s in default_document.budget_scenarios]
        assert calibration == [(2000, (8, 12)), (5000, (20, 25)), (8000, (35, 45))]

    def test_channel_totals_match_tier(self, default_document):
        totals = [s.total_budget for s in default_document.budget_scenarios]
        assert totals == [2000, 5000, 8000]

    def test_seed_sections(self, default_document):
        assert len(default_document.icp_outline) == 7
        assert default_document.tasks[2].status == TaskStatus.AT_RISK
        assert default_document.raid.issues == ()
        assert len(default_document.milestones) == 5

    def test_unique_ids(self, default_document):
        ids = [c.id for s in default_document.budget_scenarios for c in s.channels]
        ids += [i.id for i in default_document.icp_outline]
        ids += [t.id for t in default_document.tasks]
        assert len(ids) == len(set(ids))


# =============================================================================
# TEST: VERSION GATE
# =============================================================================

class TestCompatibility:

    def test_document(self, default_document):
        assert is_compatible(default_document)
        assert not is_compatible(default_document.model_copy(update={"version": CURRENT_VERSION + 1}))

    @pytest.mark.parametrize("payload,expected", [
        ({"version": CURRENT_VERSION}, True),
        ({"version": float(CURRENT_VERSION)}, True),
        ({"version": CURRENT_VERSION + 1}, False),
        ({"version": str(CURRENT_VERSION)}, False),
        ({"version": True}, False),
        ({}, False),
        ([CURRENT_VERSION], False),
        (None, False),
    ])
    def test_payload(self, payload, expected):
        assert is_compatible(payload) is expected


# =============================================================================
# TEST: IMMUTABILITY AND UPDATES
# =============================================================================

class TestUpdates:

    def test_document_is_frozen(self, default_document):
        with pytest.raises(ValidationError):
            default_document.date = "2030-01-01"

    def test_wire_keys_are_camel_case(self, default_document):
        payload = default_document.to_payload()
        assert "budgetAssumptions" in payload
        assert "selectedScenarioId" in payload
        assert set(payload["budgetAssumptions"]) == {
            "avgTicket", "grossMargin", "closeRate", "targetCPLMin", "targetCPLMax", "targetCAC"
        }
        assert "baseLeadRange" in payload["budgetScenarios"][0]

    def test_snake_case_input_accepted(self, default_document):
        payload = default_document.model_dump()
        assert ProposalDocument.from_payload(payload) == default_document

    def test_set_channel_amount_returns_new_document(self, default_document):
        updated = set_channel_amount(default_document, "scenario-a", "a-lsa", 1500)

        assert updated.budget_scenarios[0].channels[0].amount == 1500
        assert default_document.budget_scenarios[0].channels[0].amount == 1000
        assert updated.budget_scenarios[1] == default_document.budget_scenarios[1]

    @pytest.mark.parametrize("amount,expected", [(-50, 0), (99999, 5000), (2500, 2500)])
    def test_set_channel_amount_clamps(self, default_document, amount, expected):
        updated = set_channel_amount(default_document, "scenario-a", "a-lsa", amount)
        assert updated.budget_scenarios[0].channels[0].amount == expected

    def test_set_channel_amount_unknown_ids(self, default_document):
        with pytest.raises(ValueError):
            set_channel_amount(default_document, "missing", "a-lsa", 10)
        with pytest.raises(ValueError):
            set_channel_amount(default_document, "scenario-a", "missing", 10)

    def test_replace_scenario(self, default_document):
        edited = default_document.budget_scenarios[2].model_copy(update={"headline": "Saturate"})
        updated = replace_scenario(default_document, edited)
        assert updated.budget_scenarios[2].headline == "Saturate"

    def test_replace_unknown_scenario(self, default_document):
        with pytest.raises(ValueError):
            replace_scenario(default_document, BudgetScenario(id="nope"))

    def test_removing_selected_scenario_leaves_no_selection(self, default_document):
        updated = remove_scenario(default_document, "scenario-b")

        assert len(updated.budget_scenarios) == 2
        assert updated.selected_scenario_id == "scenario-b"
        assert selected_scenario(updated) is None

    def test_select_scenario(self, default_document):
        updated = select_scenario(default_document, "scenario-c")
        assert selected_scenario(updated).id == "scenario-c"

    def test_update_assumptions(self, default_document):
        updated = update_assumptions(default_document, close_rate=25, target_cac=500)

        assert updated.budget_assumptions.close_rate == 25
        assert updated.budget_assumptions.target_cac == 500
        assert default_document.budget_assumptions.close_rate == 20

    def test_update_assumptions_unknown_field(self, default_document):
        with pytest.raises(ValueError):
            update_assumptions(default_document, closeRate=25)

    def test_new_item_id(self):
        first, second = new_item_id(), new_item_id()
        assert len(first) == 7
        assert first != second

    def test_update_assumptions_coerces_numeric_text(self, default_document):
        updated = update_assumptions(default_document, close_rate="25")

        assert updated.budget_assumptions.close_rate == 25.0
        assert isinstance(updated.budget_assumptions.close_rate, float)
        assert active_scenario_metrics(updated).closed_range == pytest.approx((5.0, 6.25))
        assert decode_token(encode_document(updated)) == updated

    def test_update_assumptions_rejects_invalid_value(self, default_document):
        with pytest.raises(ValidationError):
            update_assumptions(default_document, close_rate="twenty")

    def test_set_channel_amount_coerces_numeric_text(self, default_document):
        updated = set_channel_amount(default_document, "scenario-b", "b-lsa", "2500")

        assert updated.budget_scenarios[1].channels[0].amount == 2500.0
        assert active_scenario_metrics(updated).total_budget == 5500
        assert decode_token(encode_document(updated)) == updated

    def test_set_channel_amount_rejects_invalid_value(self, default_document):
        with pytest.raises(ValidationError):
            set_channel_amount(default_document, "scenario-b", "b-lsa", "lots")
