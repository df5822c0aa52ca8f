"""
Proposal Workspace

The boundary the editing shell calls into. The shell owns the single live
ProposalDocument and passes it explicitly to every call; nothing here holds
document state between calls.

Load priority on startup:
1. Shared link (`#state=<token>` in the page location)
2. Stored local snapshot
3. Default template (never fails)
"""

import logging
from dataclasses import dataclass
from typing import Optional, Union

from ..config.settings import Settings, get_settings
from ..core.defaults import create_default_document
from ..core.document import ProposalDocument
from ..metrics.alerts import TargetAlert, evaluate_alerts
from ..metrics.report import render_proposal_summary
from ..metrics.scenario import ScenarioMetrics, active_scenario_metrics
from ..sharing.file_transfer import (
    EXPORT_FILENAME,
    EXPORT_MEDIA_TYPE,
    export_document,
    import_document
)
from ..sharing.link_codec import build_share_url, decode_token, token_from_location
from ..sharing.persistence import ProposalPersistence

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class ExportedSnapshot:
    """A downloadable export file."""
    filename: str
    media_type: str
    content: bytes


class ProposalWorkspaceUseCase:
    """
    Orchestrates document initialization and distribution.

    Flow:
    1. Initialize the document (link -> snapshot -> default)
    2. Mirror every edit to the local snapshot
    3. On demand, produce a share link or an export file
    4. Import an uploaded export (errors surface to the user)
    """

    def __init__(
        self,
        persistence: ProposalPersistence = None,
        settings: Settings = None
    ):
        self._settings = settings or get_settings()
        self._persistence = persistence or ProposalPersistence(config=self._settings.storage)

    def load_initial_document(self, location: Optional[str] = None) -> ProposalDocument:
        """
        Pick the starting document.

        Args:
            location: Page URL or fragment; a `state=` fragment takes priority
                over the stored snapshot.
        """
        token = token_from_location(location, self._settings.sharing.fragment_key)
        if token:
            shared = decode_token(token)
            if shared is not None:
                logger.info("Loaded proposal from shared link")
                return shared

        stored = self._persistence.load()
        if stored is not None:
            logger.info("Loaded proposal from local snapshot")
            return stored

        logger.info("Starting from the default proposal template")
        return create_default_document()

    def persist_on_change(self, document: ProposalDocument) -> None:
        """Mirror the latest document to the local snapshot."""
        self._persistence.save(document)

    def share_link(self, document: ProposalDocument) -> str:
        """Build a URL that embeds the whole document."""
        return build_share_url(
            self._settings.sharing.base_url,
            document,
            self._settings.sharing.fragment_key
        )

    def download_snapshot(self, document: ProposalDocument) -> ExportedSnapshot:
        """Produce the export file for a document."""
        return ExportedSnapshot(
            filename=self._settings.export.filename or EXPORT_FILENAME,
            media_type=EXPORT_MEDIA_TYPE,
            content=export_document(document)
        )

    def import_snapshot(self, data: Union[bytes, str]) -> ProposalDocument:
        """
        Parse an uploaded export.

        Raises:
            FormatError: the content is not a proposal document.
            VersionError: the document has an incompatible schema version.
        """
        return import_document(data)

    def reset_to_default(self) -> ProposalDocument:
        """Discard the stored snapshot and start over from the template."""
        self._persistence.clear()
        return create_default_document()

    def active_metrics(self, document: ProposalDocument) -> Optional[ScenarioMetrics]:
        """Metrics for the selected scenario, None when nothing is selected."""
        return active_scenario_metrics(document)

    def alerts(self, document: ProposalDocument) -> list[TargetAlert]:
        """Target and capacity alerts for the selected scenario."""
        metrics = active_scenario_metrics(document)
        if metrics is None:
            return []
        return evaluate_alerts(metrics, document.budget_assumptions, document.kpis)

    def printable_summary(self, document: ProposalDocument) -> str:
        """Markdown rendering of the whole proposal."""
        return render_proposal_summary(document)
