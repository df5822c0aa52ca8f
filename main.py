#!/usr/bin/env python3
"""
GTM Proposal Workspace - Main Demo

This script walks through the proposal core end to end:
1. Load the initial document (link -> snapshot -> default)
2. Compare the budget scenarios
3. Apply an edit and persist it
4. Share the proposal as a link and reload from it
5. Export and re-import the JSON snapshot
"""

import tempfile

from gtm_proposal.config import get_settings, configure_logging
from gtm_proposal.core import FormatError, VersionError, set_channel_amount, select_scenario
from gtm_proposal.metrics import (
    calculate_scenario_metrics,
    format_currency,
    format_range,
    metrics_summary
)
from gtm_proposal.sharing import FileSnapshotStore, ProposalPersistence
from gtm_proposal.use_cases import ProposalWorkspaceUseCase


def run_scenario_demo(document):
    """Print the projections for every budget scenario."""
    print("=" * 60)
    print("BUDGET SCENARIOS")
    print("=" * 60)
    print()
    print(f"{'Scenario':<24} {'Budget':<9} {'Leads':<10} {'CPL':<14} {'CAC':<16}")
    print("-" * 75)

    for scenario in document.budget_scenarios:
        metrics = calculate_scenario_metrics(scenario, document.budget_assumptions)
        marker = "*" if scenario.id == document.selected_scenario_id else " "
        print(
            f"{marker}{scenario.name[:23]:<23} "
            f"{format_currency(metrics.total_budget):<9} "
            f"{format_range(metrics.leads_range):<10} "
            f"{format_range(metrics.cpl_range, currency=True):<14} "
            f"{format_range(metrics.cac_range, currency=True):<16}"
        )
    print()


def run_distribution_demo(workspace, document):
    """Edit, persist, share, export and import."""
    print("=" * 60)
    print("DISTRIBUTION")
    print("=" * 60)
    print()

    edited = set_channel_amount(select_scenario(document, "scenario-a"), "scenario-a", "a-lsa", 1500)
    workspace.persist_on_change(edited)
    print("Edit applied: Scenario A LSA spend -> $1,500")
    print(f"  {metrics_summary(workspace.active_metrics(edited))}")
    for alert in workspace.alerts(edited):
        print(f"  [{alert.severity.value.upper()}] {alert.message}")
    print()

    url = workspace.share_link(edited)
    print(f"Share link ({len(url)} chars): {url[:72]}...")
    reloaded = workspace.load_initial_document(url)
    print(f"  Reloaded from link matches: {reloaded == edited}")
    print()

    snapshot = workspace.download_snapshot(edited)
    print(f"Export: {snapshot.filename} ({snapshot.media_type}, {len(snapshot.content)} bytes)")
    imported = workspace.import_snapshot(snapshot.content)
    print(f"  Re-imported matches: {imported == edited}")

    for label, payload in [
        ("garbage file", b"not json"),
        ("future version", snapshot.content.replace(b'"version": 1', b'"version": 2', 1)),
    ]:
        try:
            workspace.import_snapshot(payload)
        except (FormatError, VersionError) as e:
            print(f"  Import of {label} rejected: {type(e).__name__}")
    print()


def main():
    """Main entry point."""
    settings = get_settings()
    configure_logging(settings)

    print()
    print("+" + "=" * 58 + "+")
    print("|            GTM PROPOSAL WORKSPACE DEMONSTRATION          |")
    print("+" + "=" * 58 + "+")
    print()

    with tempfile.TemporaryDirectory() as storage_dir:
        persistence = ProposalPersistence(
            store=FileSnapshotStore(storage_dir),
            config=settings.storage
        )
        workspace = ProposalWorkspaceUseCase(persistence=persistence, settings=settings)

        document = workspace.load_initial_document()
        print(f"Proposal dated {document.date}, schema version {document.version}")
        print()

        run_scenario_demo(document)
        run_distribution_demo(workspace, document)

        restored = workspace.load_initial_document()
        print(f"Snapshot restored on next start: {restored.selected_scenario_id}")

        print()
        print("=" * 60)
        print("PRINTABLE PROPOSAL")
        print("=" * 60)
        print()
        print(workspace.printable_summary(restored))

    print()
    print("=" * 60)
    print("DEMONSTRATION COMPLETE")
    print("=" * 60)
    print()


if __name__ == "__main__":
    main()
