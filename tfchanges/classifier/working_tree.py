"""Working-tree classification.

Catalogues every entity declared in the current on-disk content of files
that are untracked or differ from the target revision.  Removal and
modification are not detected: every entity found is reported ``create``.
"""

from __future__ import annotations

import structlog

from tfchanges.classifier.base import ClassificationStrategy
from tfchanges.extractor.extract import extract_entities
from tfchanges.models.entities import ChangeAction, ChangeReport, WorkingTreeChange
from tfchanges.observability.metrics import changes_total, files_analyzed_total, retrieval_failures_total
from tfchanges.store.base import WORKING_TREE, RevisionStore, RevisionStoreError

_log = structlog.get_logger(component="classifier.working_tree")


class WorkingTreeStrategy(ClassificationStrategy):
    """Mode B: catalogue entities in changed and untracked working-tree files."""

    mode = "working-tree"

    def __init__(
        self,
        store: RevisionStore,
        target_branch: str = "HEAD",
        directory: str = ".",
        include_modules: bool = True,
    ) -> None:
        super().__init__(store, directory=directory, include_modules=include_modules)
        self._target = target_branch

    def enumerate_files(self) -> list[str]:
        """Untracked files first, then files changed since the target revision."""
        try:
            untracked = self._store.list_untracked_files(self._directory)
        except RevisionStoreError as exc:
            retrieval_failures_total.labels(operation="list_untracked_files").inc()
            _log.warning("untracked_files_unavailable", directory=self._directory, error=exc.detail)
            untracked = []
        changed = self._store.list_changed_files(self._target, WORKING_TREE, self._directory)
        return list(dict.fromkeys([*untracked, *changed]))

    def classify(self, files: list[str]) -> ChangeReport:
        report = ChangeReport(mode=self.mode, files=list(files))
        for path in files:
            content = self._read(path, WORKING_TREE)
            entities = extract_entities(content, path, self._include_modules)
            for entity in entities:
                report.created.append(WorkingTreeChange(name=entity.name, type=entity.type_label, path=path))
                _log.debug(
                    "entity_found",
                    path=path,
                    type=entity.type_label,
                    name=entity.name,
                    line=entity.declaration_line,
                )

            files_analyzed_total.labels(mode=self.mode).inc()
            changes_total.labels(action=ChangeAction.CREATE.value).inc(len(entities))
        return report
