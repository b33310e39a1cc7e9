"""Configuration data structures."""

from __future__ import annotations

from dataclasses import dataclass, field


@dataclass
class AnalysisConfig:
    """Which revisions and directory to compare, and how."""

    source_branch: str = ""
    target_branch: str = ""
    directory: str = "."
    mode: str = "auto"  # auto | paired | working-tree
    include_modules: bool = True
    repo_path: str = "."


@dataclass
class OutputConfig:
    """Where report artifacts are written."""

    changes_file: str = "changes.json"
    metrics_file: str = ""


@dataclass
class LogConfig:
    """Logging configuration."""

    level: str = "info"


@dataclass
class TFChangesConfig:
    """Top-level tfchanges configuration."""

    analysis: AnalysisConfig = field(default_factory=AnalysisConfig)
    output: OutputConfig = field(default_factory=OutputConfig)
    log: LogConfig = field(default_factory=LogConfig)
