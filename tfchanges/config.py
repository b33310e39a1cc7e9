"""Configuration loading from environment variables.

Step parameters arrive the way CI runners pass action inputs
(``INPUT_<NAME>``); process-level settings use the ``TFCHANGES_`` prefix.
"""

from __future__ import annotations

import os

from tfchanges.models.config import AnalysisConfig, LogConfig, OutputConfig, TFChangesConfig

_VALID_MODES = ("auto", "paired", "working-tree")


def _input(key: str, default: str = "") -> str:
    return os.environ.get(f"INPUT_{key}", default).strip() or default


def _input_bool(key: str, default: bool = False) -> bool:
    val = _input(key, str(default).lower())
    return val.lower() in ("true", "1", "yes")


def _env(key: str, default: str = "") -> str:
    return os.environ.get(f"TFCHANGES_{key}", default).strip() or default


def _validate_mode(value: str) -> str:
    mode = value.lower()
    if mode not in _VALID_MODES:
        raise ValueError(f"Invalid mode: {value}. Must be one of {_VALID_MODES}")
    return mode


def _validate_log_level(value: str) -> str:
    valid = {"debug", "info", "warning", "error"}
    if value.lower() not in valid:
        raise ValueError(f"Invalid log level: {value}. Must be one of {valid}")
    return value.lower()


def validate_analysis(analysis: AnalysisConfig) -> AnalysisConfig:
    """Check cross-field rules shared by the env loader and the CLI.

    Raises:
        ValueError: paired mode without both revisions.
    """
    if analysis.mode == "paired" and not (analysis.source_branch and analysis.target_branch):
        raise ValueError("paired mode requires both source_branch and target_branch")
    if analysis.mode == "auto" and analysis.source_branch and not analysis.target_branch:
        raise ValueError("target_branch is required when source_branch is set")
    return analysis


def load_config() -> TFChangesConfig:
    """Load configuration from INPUT_* and TFCHANGES_* environment variables."""
    analysis = AnalysisConfig(
        source_branch=_input("SOURCE_BRANCH"),
        target_branch=_input("TARGET_BRANCH"),
        directory=_input("DIRECTORY", "."),
        mode=_validate_mode(_input("MODE", "auto")),
        include_modules=_input_bool("INCLUDE_MODULES", True),
        repo_path=_env("REPO_PATH", "."),
    )
    return TFChangesConfig(
        analysis=validate_analysis(analysis),
        output=OutputConfig(
            changes_file=_input("OUTPUT_FILE", "changes.json"),
            metrics_file=_env("METRICS_FILE", ""),
        ),
        log=LogConfig(
            level=_validate_log_level(_env("LOG_LEVEL", "info")),
        ),
    )
