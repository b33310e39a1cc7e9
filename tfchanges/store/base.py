"""Revision File Store contract.

The classifier depends only on this protocol.  ``GitRevisionStore`` is the
production implementation; tests substitute mocks or in-memory stores.
"""

from __future__ import annotations

from typing import Protocol

# Git ref names cannot contain ':' so this never collides with a revision.
WORKING_TREE = ":working-tree"


class RevisionStoreError(Exception):
    """Raised when a revision store call fails for a reason other than absence."""

    def __init__(self, operation: str, detail: str) -> None:
        super().__init__(f"{operation} failed: {detail}")
        self.operation = operation
        self.detail = detail


class RevisionStore(Protocol):
    """Read-only access to files at revisions of one repository."""

    def list_changed_files(self, from_revision: str, to_revision: str, directory: str) -> list[str]:
        """Paths under *directory* that differ between the two revisions.

        Returns an empty list (after logging a warning) when the range
        cannot be resolved.
        """
        ...

    def list_untracked_files(self, directory: str) -> list[str]:
        """Untracked, non-ignored working-tree paths under *directory*."""
        ...

    def read_file_at(self, path: str, revision: str) -> str | None:
        """Full content of *path* at *revision*, or None when it does not exist there.

        Raises RevisionStoreError on any other failure.
        """
        ...

    def unified_diff(self, path: str, from_revision: str, to_revision: str) -> str:
        """Unified diff text of *path* between the two revisions.

        Raises RevisionStoreError on failure.
        """
        ...
