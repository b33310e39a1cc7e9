"""Classification strategy interface.

Both strategies share the Entity Extractor and the retrieval-failure policy
implemented here; they differ in which files they enumerate, which
snapshots they read and how entities are classified.
"""

from __future__ import annotations

from abc import ABC, abstractmethod

import structlog

from tfchanges.models.entities import ChangeReport
from tfchanges.observability.metrics import retrieval_failures_total
from tfchanges.store.base import RevisionStore, RevisionStoreError

_log = structlog.get_logger(component="classifier.base")


class ClassificationStrategy(ABC):
    """Turns a list of changed files into a ChangeReport.

    Subclasses set ``mode`` and implement ``enumerate_files`` and
    ``classify``.  Neither method raises on retrieval failures: the file is
    treated as absent and a warning is logged.
    """

    mode: str = ""

    def __init__(self, store: RevisionStore, directory: str = ".", include_modules: bool = True) -> None:
        self._store = store
        self._directory = directory
        self._include_modules = include_modules

    @abstractmethod
    def enumerate_files(self) -> list[str]:
        """Candidate file paths, in a stable order, without duplicates."""

    @abstractmethod
    def classify(self, files: list[str]) -> ChangeReport:
        """Classify the entities of every file in *files*."""

    def run(self) -> ChangeReport:
        """Enumerate candidate files and classify them."""
        files = self.enumerate_files()
        _log.info("changed_files", mode=self.mode, count=len(files), files=files)
        return self.classify(files)

    def _read(self, path: str, revision: str) -> str | None:
        """Read *path* at *revision*, degrading any failure to absent content."""
        try:
            return self._store.read_file_at(path, revision)
        except RevisionStoreError as exc:
            retrieval_failures_total.labels(operation="read_file_at").inc()
            _log.warning("content_read_failed", path=path, revision=revision, error=exc.detail)
            return None
