"""Report serialization and human-readable summaries.

Two JSON shapes, one per classification mode:

    paired:        {"added": [...], "removed": [...], "modified": [...]}
                   each element {"type", "name", "file"}
    working-tree:  [{"name", "type", "action", "path"}, ...]
"""

from __future__ import annotations

import json
from pathlib import Path
from typing import Any

import structlog

from tfchanges.models.entities import ChangeRecord, ChangeReport

_log = structlog.get_logger(component="report")

_PAIRED_SECTIONS = (
    ("added", "Added Resources"),
    ("removed", "Removed Resources"),
    ("modified", "Modified Resources"),
)
_CREATE_HEADING = "Resources To Create"
_EMPTY_LINE = "No resource changes detected."


def to_payload(report: ChangeReport) -> dict[str, list[dict[str, str]]] | list[dict[str, str]]:
    """Return the JSON-serializable form of *report* for its mode."""
    if report.mode == "working-tree":
        return [change.to_dict() for change in report.created]
    return {
        "added": [r.to_dict() for r in report.added],
        "removed": [r.to_dict() for r in report.removed],
        "modified": [r.to_dict() for r in report.modified],
    }


def to_json(report: ChangeReport, indent: int | None = None) -> str:
    """Serialize *report*; compact unless *indent* is given."""
    separators = (",", ":") if indent is None else None
    return json.dumps(to_payload(report), indent=indent, separators=separators)


def step_outputs(report: ChangeReport) -> dict[str, str]:
    """Named step outputs published for downstream steps."""
    outputs = {"changes": to_json(report), "has_changes": str(not report.is_empty).lower()}
    if report.mode == "working-tree":
        outputs["count"] = str(len(report.created))
    else:
        outputs["added_count"] = str(len(report.added))
        outputs["removed_count"] = str(len(report.removed))
        outputs["modified_count"] = str(len(report.modified))
    return outputs


def render_summary(report: ChangeReport) -> str:
    """Plain-text summary printed to the console."""
    lines = ["", "Resource Changes Analysis:", "------------------------"]
    if report.is_empty:
        lines += ["", _EMPTY_LINE]
        return "\n".join(lines)

    if report.mode == "working-tree":
        lines += ["", f"{_CREATE_HEADING}:"]
        lines += [f"- {c.type}/{c.name} in {c.path}" for c in report.created]
        return "\n".join(lines)

    for attr, heading in _PAIRED_SECTIONS:
        records: list[ChangeRecord] = getattr(report, attr)
        if records:
            lines += ["", f"{heading}:"]
            lines += [_bullet(r) for r in records]
    return "\n".join(lines)


def render_markdown(report: ChangeReport) -> str:
    """Markdown summary for the CI job summary page."""
    lines = ["## Resource Changes", ""]
    if report.is_empty:
        lines.append(_EMPTY_LINE)
        return "\n".join(lines) + "\n"

    if report.mode == "working-tree":
        lines += [f"### {_CREATE_HEADING} ({len(report.created)})", ""]
        lines += [f"- `{c.type}/{c.name}` in `{c.path}`" for c in report.created]
        return "\n".join(lines) + "\n"

    for attr, heading in _PAIRED_SECTIONS:
        records = getattr(report, attr)
        if records:
            lines += [f"### {heading} ({len(records)})", ""]
            lines += [f"- `{r.entity.type_label}/{r.entity.name}` in `{r.file}`" for r in records]
            lines.append("")
    return "\n".join(lines)


def write_changes_file(report: ChangeReport, path: str | Path) -> Path:
    """Persist the report as an indented JSON artifact and return its path."""
    target = Path(path)
    if target.parent != Path("."):
        target.parent.mkdir(parents=True, exist_ok=True)
    target.write_text(to_json(report, indent=2) + "\n", encoding="utf-8")
    _log.info("changes_file_written", path=str(target), entries=report.total)
    return target


def _bullet(record: ChangeRecord) -> str:
    return f"- {record.entity.type_label}/{record.entity.name} in {record.file}"


def summary_counts(report: ChangeReport) -> dict[str, Any]:
    """Counts logged with the ``analysis_complete`` event."""
    if report.mode == "working-tree":
        return {"files": len(report.files), "create": len(report.created)}
    return {
        "files": len(report.files),
        "added": len(report.added),
        "removed": len(report.removed),
        "modified": len(report.modified),
    }
