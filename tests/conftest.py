"""Shared test fixtures for the proposal workspace tests."""
import pytest

from gtm_proposal.config.settings import ExportConfig, Settings, SharingConfig, StorageConfig
from gtm_proposal.core import (
    BudgetAssumptions,
    BudgetChannel,
    BudgetScenario,
    create_default_document,
)
from gtm_proposal.sharing import MemorySnapshotStore, ProposalPersistence


TODAY = "2026-01-15"


@pytest.fixture
def default_document():
    """The default template with a fixed date."""
    return create_default_document(today=TODAY)


@pytest.fixture
def settings():
    """Settings isolated from the environment defaults under test."""
    return Settings(
        storage=StorageConfig(key="test-proposal-state"),
        sharing=SharingConfig(base_url="https://proposals.example.com/xore/", fragment_key="state"),
        export=ExportConfig(filename=None)
    )


@pytest.fixture
def memory_store():
    return MemorySnapshotStore()


@pytest.fixture
def persistence(memory_store, settings):
    return ProposalPersistence(store=memory_store, config=settings.storage)


@pytest.fixture
def calibration_scenario():
    """$2k calibration at 8-12 leads, channels summing to $4k."""
    return BudgetScenario(
        id="scenario-test",
        name="Test",
        base_budget=2000,
        base_lead_range=(8, 12),
        channels=(
            BudgetChannel(id="lsa", name="LSA", amount=2500, min=0, max=5000),
            BudgetChannel(id="ppc", name="PPC", amount=1500, min=0, max=5000),
        )
    )


@pytest.fixture
def assumptions():
    return BudgetAssumptions(
        avg_ticket=15000,
        gross_margin=35,
        close_rate=20,
        target_cpl_min=200,
        target_cpl_max=250,
        target_cac=400
    )
