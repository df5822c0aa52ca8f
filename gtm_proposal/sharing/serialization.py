"""
Canonical text form of a ProposalDocument.

Every distribution channel (local snapshot, share link, exported file) uses
the same JSON payload: camelCase keys, non-ASCII characters kept as-is.
"""

import json
import logging
from typing import Optional, Union

from pydantic import ValidationError

from ..core.document import CURRENT_VERSION, ProposalDocument, is_compatible
from ..core.errors import FormatError, ProposalError, VersionError

logger = logging.getLogger(__name__)


def dumps_canonical(document: ProposalDocument) -> str:
    """Compact single-line JSON."""
    return json.dumps(document.to_payload(), ensure_ascii=False, separators=(",", ":"))


def dumps_pretty(document: ProposalDocument) -> str:
    """Indented JSON for files meant to be read by people."""
    return json.dumps(document.to_payload(), ensure_ascii=False, indent=2)


def parse_document(text: Union[str, bytes]) -> ProposalDocument:
    """
    Parse and validate a document.

    Raises:
        FormatError: not JSON, not an object, or not a valid document.
        VersionError: a JSON object whose version is not CURRENT_VERSION.
    """
    try:
        payload = json.loads(text)
    except (ValueError, RecursionError) as e:
        raise FormatError("Unable to parse JSON document.") from e

    if not isinstance(payload, dict):
        raise FormatError(f"Expected a JSON object, got {type(payload).__name__}.")

    # Version is checked before structure: a future schema is a version
    # problem even when its shape also changed.
    if not is_compatible(payload):
        raise VersionError(payload.get("version"), CURRENT_VERSION)

    try:
        return ProposalDocument.from_payload(payload)
    except ValidationError as e:
        raise FormatError(f"Invalid proposal document: {e.error_count()} field error(s).") from e


def parse_document_or_none(text: Union[str, bytes], source: str) -> Optional[ProposalDocument]:
    """Parse a document, logging and returning None on any failure."""
    try:
        return parse_document(text)
    except VersionError as e:
        logger.info(f"Ignoring {source} document: {e}")
    except ProposalError as e:
        logger.warning(f"Failed to parse {source} document: {e}")
    return None
