"""Change Classifier.

Submodules:
    base          -- ClassificationStrategy ABC and the shared retrieval-failure policy.
    diff          -- changed_declarations: declaration identities on changed diff lines.
    paired        -- PairedRevisionStrategy (added / removed / modified between two revisions).
    working_tree  -- WorkingTreeStrategy (create-only catalogue of working-tree files).
"""

from __future__ import annotations

from tfchanges.classifier.base import ClassificationStrategy
from tfchanges.classifier.diff import changed_declarations, changed_lines
from tfchanges.classifier.paired import PairedRevisionStrategy, classify_pair
from tfchanges.classifier.working_tree import WorkingTreeStrategy
from tfchanges.models.config import AnalysisConfig
from tfchanges.store.base import RevisionStore

__all__ = [
    "ClassificationStrategy",
    "PairedRevisionStrategy",
    "WorkingTreeStrategy",
    "changed_declarations",
    "changed_lines",
    "classify_pair",
    "resolve_mode",
    "select_strategy",
]


def resolve_mode(config: AnalysisConfig) -> str:
    """Return ``paired`` or ``working-tree`` for *config*.

    ``auto`` resolves to paired when a source revision is configured, since
    only then is two-sided content available.
    """
    if config.mode == "auto":
        return "paired" if config.source_branch else "working-tree"
    return config.mode


def select_strategy(config: AnalysisConfig, store: RevisionStore) -> ClassificationStrategy:
    """Build the strategy *config* asks for.

    Raises:
        ValueError: the mode is unknown, or paired mode lacks a revision.
    """
    mode = resolve_mode(config)
    if mode == "paired":
        if not config.source_branch or not config.target_branch:
            raise ValueError("paired mode requires both source_branch and target_branch")
        return PairedRevisionStrategy(
            store,
            source_branch=config.source_branch,
            target_branch=config.target_branch,
            directory=config.directory,
            include_modules=config.include_modules,
        )
    if mode == "working-tree":
        return WorkingTreeStrategy(
            store,
            target_branch=config.target_branch or "HEAD",
            directory=config.directory,
            include_modules=config.include_modules,
        )
    raise ValueError(f"Unknown mode: {config.mode}")
