"""
Persistence Adapter

Mirrors the current document into a key-value snapshot store, one entry, no
history. Saving is called after every edit and must never break the caller;
loading returns None for anything that is missing, corrupt or from another
schema version so the caller can fall back to the default template.
"""

import logging
from pathlib import Path
from typing import Optional, Protocol, Union

from ..config.settings import StorageConfig, get_settings
from ..core.document import ProposalDocument
from .serialization import dumps_canonical, parse_document_or_none

logger = logging.getLogger(__name__)


class SnapshotStore(Protocol):
    """Minimal key-value store holding text snapshots."""

    def read(self, key: str) -> Optional[str]:
        ...

    def write(self, key: str, text: str) -> None:
        ...

    def delete(self, key: str) -> None:
        ...


class MemorySnapshotStore:
    """In-process store, used for tests and demos."""

    def __init__(self):
        self._entries: dict[str, str] = {}

    def read(self, key: str) -> Optional[str]:
        return self._entries.get(key)

    def write(self, key: str, text: str) -> None:
        self._entries[key] = text

    def delete(self, key: str) -> None:
        self._entries.pop(key, None)

    def __len__(self) -> int:
        return len(self._entries)


class FileSnapshotStore:
    """Stores each key as `<directory>/<key>.json` (UTF-8)."""

    def __init__(self, directory: Union[str, Path]):
        self.directory = Path(directory)

    def _path(self, key: str) -> Path:
        return self.directory / f"{key}.json"

    def read(self, key: str) -> Optional[str]:
        path = self._path(key)
        if not path.exists():
            return None
        return path.read_text(encoding="utf-8")

    def write(self, key: str, text: str) -> None:
        self.directory.mkdir(parents=True, exist_ok=True)
        path = self._path(key)
        # Atomic replace; readers never see a partial snapshot
        tmp_path = path.with_suffix(".json.tmp")
        tmp_path.write_text(text, encoding="utf-8")
        tmp_path.replace(path)

    def delete(self, key: str) -> None:
        self._path(key).unlink(missing_ok=True)


class ProposalPersistence:
    """Saves and restores the single document snapshot."""

    def __init__(self, store: SnapshotStore = None, config: StorageConfig = None):
        self.config = config or get_settings().storage
        self._store = store if store is not None else FileSnapshotStore(self.config.directory)

    @property
    def key(self) -> str:
        return self.config.key

    def save(self, document: ProposalDocument) -> None:
        """Overwrite the snapshot. Store failures are logged, not raised."""
        try:
            self._store.write(self.key, dumps_canonical(document))
        except Exception as e:
            logger.warning(f"Failed to persist proposal snapshot '{self.key}': {e}")

    def load(self) -> Optional[ProposalDocument]:
        """Return the stored document, or None if absent or unusable."""
        try:
            text = self._store.read(self.key)
        except Exception as e:
            logger.warning(f"Failed to read proposal snapshot '{self.key}': {e}")
            return None

        if text is None:
            return None
        return parse_document_or_none(text, source="stored")

    def clear(self) -> None:
        """Remove the snapshot. Failures are logged, not raised."""
        try:
            self._store.delete(self.key)
        except Exception as e:
            logger.warning(f"Failed to clear proposal snapshot '{self.key}': {e}")
