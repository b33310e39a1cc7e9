"""Shared helpers for tfchanges unit tests.

``make_store`` builds a MagicMock that satisfies the RevisionStore protocol
from plain dictionaries, so classifier tests never touch git.
"""

from __future__ import annotations

from unittest.mock import MagicMock

from tfchanges.store.base import RevisionStoreError

SOURCE = "feature"
TARGET = "main"


def make_store(
    contents: dict[tuple[str, str], str | None] | None = None,
    changed: list[str] | None = None,
    untracked: list[str] | None = None,
    diffs: dict[str, str] | None = None,
    failing_reads: set[tuple[str, str]] | None = None,
    failing_diffs: set[str] | None = None,
) -> MagicMock:
    """Build a mock store.

    ``contents`` maps (path, revision) to file text; a missing key reads as
    absent.  Keys in ``failing_reads`` / ``failing_diffs`` raise
    RevisionStoreError.
    """
    contents = contents or {}
    diffs = diffs or {}
    failing_reads = failing_reads or set()
    failing_diffs = failing_diffs or set()

    def _read(path: str, revision: str) -> str | None:
        if (path, revision) in failing_reads:
            raise RevisionStoreError("read_file_at", f"{revision}:{path}: fatal: bad object")
        return contents.get((path, revision))

    def _diff(path: str, from_revision: str, to_revision: str) -> str:
        if path in failing_diffs:
            raise RevisionStoreError("unified_diff", "fatal: bad revision")
        return diffs.get(path, "")

    store = MagicMock()
    store.list_changed_files.return_value = list(changed or [])
    store.list_untracked_files.return_value = list(untracked or [])
    store.read_file_at.side_effect = _read
    store.unified_diff.side_effect = _diff
    return store


def make_diff(path: str, removed: list[str], added: list[str], context: list[str] | None = None) -> str:
    """Build a single-hunk unified diff for *path*."""
    context = context or []
    lines = [
        f"diff --git a/{path} b/{path}",
        "index 1111111..2222222 100644",
        f"--- a/{path}",
        f"+++ b/{path}",
        f"@@ -1,{len(context) + len(removed)} +1,{len(context) + len(added)} @@",
    ]
    lines += [f" {line}" for line in context]
    lines += [f"-{line}" for line in removed]
    lines += [f"+{line}" for line in added]
    return "\n".join(lines) + "\n"
