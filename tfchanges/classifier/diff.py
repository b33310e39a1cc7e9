"""Unified-diff helpers for declaration-line modification checks."""

from __future__ import annotations

from collections.abc import Iterator

from tfchanges.extractor.lines import ModuleDecl, ResourceDecl, classify_line
from tfchanges.models.entities import EntityIdentity


def changed_lines(diff_text: str) -> Iterator[str]:
    """Yield the body of every added or removed line inside a hunk.

    File headers, hunk headers and context lines are skipped.  A line is in
    a hunk from its ``@@`` header until the next ``diff `` file header.
    """
    in_hunk = False
    for raw in diff_text.splitlines():
        if raw.startswith("diff "):
            in_hunk = False
        elif raw.startswith("@@"):
            in_hunk = True
        elif in_hunk and raw.startswith(("+", "-")):
            yield raw[1:]


def changed_declarations(diff_text: str | None) -> set[EntityIdentity]:
    """Identities whose declaration header appears on a changed line."""
    if not diff_text:
        return set()
    found: set[EntityIdentity] = set()
    for line in changed_lines(diff_text):
        decl = classify_line(line)
        if isinstance(decl, (ResourceDecl, ModuleDecl)):
            found.add(decl.identity)
    return found
