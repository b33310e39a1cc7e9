"""Tests for report serialization, summaries and the changes.json artifact."""

from __future__ import annotations

import json
from pathlib import Path

from tfchanges.models.entities import (
    ChangeAction,
    ChangeRecord,
    ChangeReport,
    Entity,
    EntityCategory,
    WorkingTreeChange,
)
from tfchanges.report import (
    render_markdown,
    render_summary,
    step_outputs,
    to_json,
    to_payload,
    write_changes_file,
)


def _record(action: ChangeAction, kind: str, name: str, path: str = "main.tf") -> ChangeRecord:
    category = EntityCategory.MODULE if kind == "module" else EntityCategory.RESOURCE
    entity = Entity(
        category=category,
        kind="" if kind == "module" else kind,
        name=name,
        source_file=path,
        declaration_line=1,
    )
    return ChangeRecord(action=action, entity=entity, file=path)


def _paired_report() -> ChangeReport:
    report = ChangeReport(mode="paired", files=["main.tf", "net.tf"])
    report.extend(
        [
            _record(ChangeAction.ADDED, "aws_instance", "web"),
            _record(ChangeAction.REMOVED, "aws_db_instance", "main"),
            _record(ChangeAction.MODIFIED, "module", "vpc", "net.tf"),
        ]
    )
    return report


def _working_tree_report() -> ChangeReport:
    return ChangeReport(
        mode="working-tree",
        files=["a.tf"],
        created=[WorkingTreeChange(name="web", type="aws_instance", path="a.tf")],
    )


class TestPayload:
    def test_paired_shape(self) -> None:
        assert to_payload(_paired_report()) == {
            "added": [{"type": "aws_instance", "name": "web", "file": "main.tf"}],
            "removed": [{"type": "aws_db_instance", "name": "main", "file": "main.tf"}],
            "modified": [{"type": "module", "name": "vpc", "file": "net.tf"}],
        }

    def test_working_tree_shape(self) -> None:
        assert to_payload(_working_tree_report()) == [
            {"name": "web", "type": "aws_instance", "action": "create", "path": "a.tf"}
        ]

    def test_empty_paired_report_keeps_all_keys(self) -> None:
        assert json.loads(to_json(ChangeReport(mode="paired"))) == {"added": [], "removed": [], "modified": []}

    def test_compact_by_default(self) -> None:
        assert " " not in to_json(ChangeReport(mode="paired"))


class TestStepOutputs:
    def test_paired(self) -> None:
        outputs = step_outputs(_paired_report())
        assert outputs["added_count"] == "1"
        assert outputs["removed_count"] == "1"
        assert outputs["modified_count"] == "1"
        assert outputs["has_changes"] == "true"
        assert json.loads(outputs["changes"])["added"][0]["name"] == "web"

    def test_working_tree_empty(self) -> None:
        outputs = step_outputs(ChangeReport(mode="working-tree"))
        assert outputs == {"changes": "[]", "has_changes": "false", "count": "0"}


class TestSummaries:
    def test_paired_text(self) -> None:
        text = render_summary(_paired_report())
        assert "Added Resources:\n- aws_instance/web in main.tf" in text
        assert "Removed Resources:\n- aws_db_instance/main in main.tf" in text
        assert "Modified Resources:\n- module/vpc in net.tf" in text

    def test_sections_without_records_are_omitted(self) -> None:
        report = ChangeReport(mode="paired")
        report.extend([_record(ChangeAction.ADDED, "aws_instance", "web")])
        text = render_summary(report)
        assert "Added Resources" in text
        assert "Removed Resources" not in text
        assert "Modified Resources" not in text

    def test_empty(self) -> None:
        assert "No resource changes detected." in render_summary(ChangeReport(mode="paired"))
        assert "No resource changes detected." in render_markdown(ChangeReport(mode="working-tree"))

    def test_working_tree_text(self) -> None:
        assert "Resources To Create:\n- aws_instance/web in a.tf" in render_summary(_working_tree_report())

    def test_markdown_counts(self) -> None:
        markdown = render_markdown(_paired_report())
        assert markdown.startswith("## Resource Changes")
        assert "### Added Resources (1)" in markdown
        assert "- `module/vpc` in `net.tf`" in markdown


class TestWriteChangesFile:
    def test_writes_indented_json(self, tmp_path: Path) -> None:
        path = write_changes_file(_working_tree_report(), tmp_path / "out" / "changes.json")

        assert path.exists()
        assert json.loads(path.read_text()) == to_payload(_working_tree_report())
        assert "\n  " in path.read_text()
