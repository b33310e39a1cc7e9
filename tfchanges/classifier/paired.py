"""Paired-revision classification.

Compares the entities of each changed file at the target revision (before)
and the source revision (after):

* file missing at source  -> every target entity is ``removed``
* file missing at target  -> every source entity is ``added``
* file present on both    -> set difference gives ``added``/``removed``;
  entities on both sides are ``modified`` only when their declaration
  header line sits on a changed line of the file's unified diff.  Body-only
  edits are not reported.
"""

from __future__ import annotations

from collections.abc import Callable

import structlog

from tfchanges.classifier.base import ClassificationStrategy
from tfchanges.classifier.diff import changed_declarations
from tfchanges.extractor.extract import extract_entities
from tfchanges.models.entities import (
    ChangeAction,
    ChangeRecord,
    ChangeReport,
    Entity,
    EntityIdentity,
    FileSnapshotPair,
)
from tfchanges.observability.metrics import changes_total, files_analyzed_total, retrieval_failures_total
from tfchanges.store.base import RevisionStore, RevisionStoreError

_log = structlog.get_logger(component="classifier.paired")

DiffProvider = Callable[[], str | None]


def classify_pair(
    pair: FileSnapshotPair,
    include_modules: bool = True,
    fetch_diff: DiffProvider | None = None,
) -> list[ChangeRecord]:
    """Classify one file's before/after snapshots.

    ``pair.diff`` is used when set; otherwise *fetch_diff* is called at most
    once, and only if some identity exists on both sides.  Each identity is
    reported at most once per action.
    """
    if pair.after is None:
        before = extract_entities(pair.before, pair.path, include_modules)
        return _records(ChangeAction.REMOVED, before, pair.path)
    if pair.before is None:
        after = extract_entities(pair.after, pair.path, include_modules)
        return _records(ChangeAction.ADDED, after, pair.path)

    source = extract_entities(pair.after, pair.path, include_modules)
    target = extract_entities(pair.before, pair.path, include_modules)
    source_ids = {e.identity for e in source}
    target_ids = {e.identity for e in target}

    records = _records(ChangeAction.ADDED, [e for e in source if e.identity not in target_ids], pair.path)
    records += _records(ChangeAction.REMOVED, [e for e in target if e.identity not in source_ids], pair.path)

    common = [e for e in source if e.identity in target_ids]
    if not common:
        return records

    diff_text = pair.diff
    if diff_text is None and fetch_diff is not None:
        diff_text = fetch_diff()
    touched = changed_declarations(diff_text)
    records += _records(ChangeAction.MODIFIED, [e for e in common if e.identity in touched], pair.path)
    return records


def _records(action: ChangeAction, entities: list[Entity], path: str) -> list[ChangeRecord]:
    seen: set[EntityIdentity] = set()
    out: list[ChangeRecord] = []
    for entity in entities:
        if entity.identity in seen:
            continue
        seen.add(entity.identity)
        out.append(ChangeRecord(action=action, entity=entity, file=path))
    return out


class PairedRevisionStrategy(ClassificationStrategy):
    """Mode A: diff two revisions of every changed file.

    Args:
        store:           Revision File Store.
        source_branch:   Revision holding the proposed state ("after").
        target_branch:   Revision being merged into ("before").
        directory:       Path prefix restricting the changed-file listing.
        include_modules: Also classify ``module`` declarations.
    """

    mode = "paired"

    def __init__(
        self,
        store: RevisionStore,
        source_branch: str,
        target_branch: str,
        directory: str = ".",
        include_modules: bool = True,
    ) -> None:
        super().__init__(store, directory=directory, include_modules=include_modules)
        self._source = source_branch
        self._target = target_branch

    def enumerate_files(self) -> list[str]:
        return list(dict.fromkeys(self._store.list_changed_files(self._target, self._source, self._directory)))

    def classify(self, files: list[str]) -> ChangeReport:
        report = ChangeReport(mode=self.mode, files=list(files))
        for path in files:
            pair = FileSnapshotPair(
                path=path,
                before=self._read(path, self._target),
                after=self._read(path, self._source),
            )
            records = classify_pair(pair, self._include_modules, fetch_diff=lambda p=path: self._diff(p))
            report.extend(records)

            files_analyzed_total.labels(mode=self.mode).inc()
            for record in records:
                changes_total.labels(action=record.action.value).inc()
            _log.debug(
                "file_classified",
                path=path,
                before_exists=pair.before is not None,
                after_exists=pair.after is not None,
                changes=len(records),
            )
        return report

    def _diff(self, path: str) -> str | None:
        try:
            return self._store.unified_diff(path, self._target, self._source)
        except RevisionStoreError as exc:
            retrieval_failures_total.labels(operation="unified_diff").inc()
            _log.warning("modification_check_failed", path=path, error=exc.detail)
            return None
