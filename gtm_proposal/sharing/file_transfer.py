"""
File Transfer

Export writes a pretty-printed UTF-8 JSON snapshot; import reads one back.
Unlike links and local snapshots, an import is an explicit user action, so
failures are raised to the caller instead of being silently defaulted:

- FormatError: not UTF-8 text, not JSON, or not a valid proposal document
- VersionError: a JSON document with another schema version

The filename is fixed; the `version` field inside the payload is
authoritative.
"""

import logging
from pathlib import Path
from typing import Union

from ..core.document import ProposalDocument
from ..core.errors import FormatError
from .serialization import dumps_pretty, parse_document

logger = logging.getLogger(__name__)

EXPORT_FILENAME = "gtm-proposal.json"
EXPORT_MEDIA_TYPE = "application/json"


def export_document(document: ProposalDocument) -> bytes:
    """Serialize a document to the bytes of an export file."""
    return dumps_pretty(document).encode("utf-8")


def import_document(data: Union[bytes, str]) -> ProposalDocument:
    """
    Parse the content of an uploaded export file.

    All-or-nothing: either a complete document is returned or an error is
    raised.
    """
    if isinstance(data, bytes):
        try:
            # utf-8-sig tolerates a byte order mark added by editors
            text = data.decode("utf-8-sig")
        except UnicodeDecodeError as e:
            raise FormatError("File is not UTF-8 text.") from e
    else:
        text = data

    document = parse_document(text)
    logger.info(f"Imported proposal dated {document.date or 'n/a'} "
                f"with {len(document.budget_scenarios)} scenario(s)")
    return document


def write_export(
    document: ProposalDocument,
    directory: Union[str, Path],
    filename: str = None
) -> Path:
    """Write the export file into `directory` and return its path."""
    directory = Path(directory)
    directory.mkdir(parents=True, exist_ok=True)
    path = directory / (filename or EXPORT_FILENAME)
    path.write_bytes(export_document(document))
    logger.info(f"Exported proposal to: {path}")
    return path


def read_import(path: Union[str, Path]) -> ProposalDocument:
    """Import a document from a file on disk."""
    return import_document(Path(path).read_bytes())
