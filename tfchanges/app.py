"""Application bootstrap for tfchanges.

Runs one analysis in order: config -> logging -> revision store ->
strategy -> report -> outputs.

Retrieval failures never reach this module; they degrade to "no data"
inside the store and classifier.  Anything that does escape (bad
configuration, an unexpected bug) fails the run with the exception message
and produces no outputs.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from tfchanges import actions
from tfchanges.classifier import select_strategy
from tfchanges.config import load_config
from tfchanges.models.config import TFChangesConfig
from tfchanges.observability.logging import get_logger, setup_logging
from tfchanges.observability.metrics import export_textfile, retrieval_failure_count
from tfchanges.report import (
    render_markdown,
    render_summary,
    step_outputs,
    summary_counts,
    write_changes_file,
)
from tfchanges.store import GitRevisionStore, RevisionStore

if TYPE_CHECKING:
    import structlog

    from tfchanges.models.entities import ChangeReport


class TFChangesApp:
    """One analysis run.

    Args:
        config: Fully validated configuration.
        store:  Revision File Store.  Defaults to a GitRevisionStore rooted
                at ``config.analysis.repo_path``.
    """

    def __init__(self, config: TFChangesConfig, store: RevisionStore | None = None) -> None:
        self.config = config
        self._store: RevisionStore = store or GitRevisionStore(config.analysis.repo_path)
        self._log: structlog.stdlib.BoundLogger = get_logger("app")

    def analyze(self) -> ChangeReport:
        """Classify the configured revision range and return the report."""
        analysis = self.config.analysis
        failures_before = retrieval_failure_count()

        strategy = select_strategy(analysis, self._store)
        self._log.info(
            "analysis_started",
            mode=strategy.mode,
            source_branch=analysis.source_branch,
            target_branch=analysis.target_branch,
            directory=analysis.directory,
        )
        report = strategy.run()

        failures = int(retrieval_failure_count() - failures_before)
        if failures:
            actions.warning(f"{failures} git call(s) failed; affected files were treated as absent")
        self._log.info("analysis_complete", mode=report.mode, **summary_counts(report))
        return report

    def publish(self, report: ChangeReport) -> None:
        """Print the summary and write every configured output."""
        print(render_summary(report))
        actions.set_outputs(step_outputs(report))
        actions.append_summary(render_markdown(report))

        if report.mode == "working-tree":
            write_changes_file(report, self.config.output.changes_file)
        if self.config.output.metrics_file:
            export_textfile(self.config.output.metrics_file)
            self._log.debug("metrics_written", path=self.config.output.metrics_file)

    def run(self) -> ChangeReport:
        report = self.analyze()
        self.publish(report)
        return report


def main() -> None:
    """Load config from the environment, run once, fail the step on error."""
    try:
        config = load_config()
        setup_logging(config.log.level)
        TFChangesApp(config).run()
    except Exception as exc:
        get_logger("app").critical("fatal_error", error=str(exc), error_type=type(exc).__name__)
        actions.set_failed(str(exc))
        raise SystemExit(1) from exc
