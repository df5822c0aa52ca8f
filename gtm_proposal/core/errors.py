"""
Error taxonomy for document distribution.

Only explicit user actions (file import) raise these; link and storage
problems fall back silently to the next document source.
"""

from typing import Any


class ProposalError(Exception):
    """Base class for proposal document errors."""


class FormatError(ProposalError):
    """Content is not a parseable proposal document."""


class VersionError(ProposalError):
    """Content parsed but carries an incompatible schema version."""

    def __init__(self, found: Any, expected: int):
        self.found = found
        self.expected = expected
        super().__init__(
            f"Version mismatch: document has version {found!r}, "
            f"expected {expected}. Please use a compatible export."
        )
