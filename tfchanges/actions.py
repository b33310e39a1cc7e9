"""CI runner input/output channel.

Implements the file- and stdout-based protocol GitHub-compatible runners
use for step outputs, job summaries and workflow commands.  Outside a
runner (no ``GITHUB_OUTPUT``) outputs are printed as ``name=value`` lines.
"""

from __future__ import annotations

import os
import sys
from uuid import uuid4

import structlog

_log = structlog.get_logger(component="actions")


def _escape_data(value: str) -> str:
    return value.replace("%", "%25").replace("\r", "%0D").replace("\n", "%0A")


def _issue_command(command: str, message: str) -> None:
    sys.stdout.write(f"::{command}::{_escape_data(message)}\n")
    sys.stdout.flush()


def set_output(name: str, value: str) -> None:
    """Publish a step output.

    Values are written with a random heredoc delimiter so multi-line JSON
    cannot terminate the record early.
    """
    output_path = os.environ.get("GITHUB_OUTPUT", "")
    if not output_path:
        sys.stdout.write(f"{name}={value}\n")
        return
    delimiter = f"ghadelimiter_{uuid4()}"
    with open(output_path, "a", encoding="utf-8") as fh:
        fh.write(f"{name}<<{delimiter}\n{value}\n{delimiter}\n")
    _log.debug("output_set", name=name, size=len(value))


def set_outputs(outputs: dict[str, str]) -> None:
    for name, value in outputs.items():
        set_output(name, value)


def append_summary(markdown: str) -> bool:
    """Append *markdown* to the job summary page.

    Returns False when the runner provides no summary file.
    """
    summary_path = os.environ.get("GITHUB_STEP_SUMMARY", "")
    if not summary_path:
        return False
    with open(summary_path, "a", encoding="utf-8") as fh:
        fh.write(markdown)
    return True


def warning(message: str) -> None:
    """Emit a ``::warning::`` annotation."""
    _issue_command("warning", message)


def error(message: str) -> None:
    """Emit an ``::error::`` annotation."""
    _issue_command("error", message)


def set_failed(message: str) -> None:
    """Report *message* as the run's failure reason.

    The caller is responsible for exiting non-zero afterwards.
    """
    error(message)
