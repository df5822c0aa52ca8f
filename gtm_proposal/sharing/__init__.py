"""
Document Distribution

Three channels that round-trip the same ProposalDocument:
- Local persistence (silent fallback on failure)
- Shareable link token (silent fallback on failure)
- File export/import (failures raised to the user)
"""

from .serialization import dumps_canonical, dumps_pretty, parse_document
from .link_codec import (
    FRAGMENT_KEY,
    encode_document,
    decode_token,
    build_share_url,
    token_from_location
)
from .persistence import (
    SnapshotStore,
    MemorySnapshotStore,
    FileSnapshotStore,
    ProposalPersistence
)
from .file_transfer import (
    EXPORT_FILENAME,
    EXPORT_MEDIA_TYPE,
    export_document,
    import_document,
    write_export,
    read_import
)

__all__ = [
    "dumps_canonical",
    "dumps_pretty",
    "parse_document",
    "FRAGMENT_KEY",
    "encode_document",
    "decode_token",
    "build_share_url",
    "token_from_location",
    "SnapshotStore",
    "MemorySnapshotStore",
    "FileSnapshotStore",
    "ProposalPersistence",
    "EXPORT_FILENAME",
    "EXPORT_MEDIA_TYPE",
    "export_document",
    "import_document",
    "write_export",
    "read_import"
]
