"""Declared-entity and change-record data structures."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import StrEnum


class EntityCategory(StrEnum):
    """Declaration form an entity was found in."""

    RESOURCE = "resource"
    MODULE = "module"


class ChangeAction(StrEnum):
    """Classification assigned to a declared entity."""

    ADDED = "added"
    REMOVED = "removed"
    MODIFIED = "modified"
    CREATE = "create"  # working-tree catalog only


EntityIdentity = tuple[EntityCategory, str, str]


@dataclass(frozen=True)
class Entity:
    """A declared infrastructure object found in one file snapshot.

    Two entities match across snapshots when their ``identity`` is equal;
    the source file and declaration line are not part of it.
    """

    category: EntityCategory
    kind: str  # resource type, empty for modules
    name: str
    source_file: str
    declaration_line: int  # 1-based

    @property
    def identity(self) -> EntityIdentity:
        """Return the (category, kind, name) matching key."""
        return (self.category, self.kind, self.name)

    @property
    def type_label(self) -> str:
        """Value reported in the ``type`` field of change reports."""
        if self.category == EntityCategory.MODULE:
            return "module"
        return self.kind


@dataclass(frozen=True)
class ChangeRecord:
    """One added, removed or modified entity in a paired-revision report."""

    action: ChangeAction
    entity: Entity
    file: str

    @property
    def identity(self) -> EntityIdentity:
        return self.entity.identity

    def to_dict(self) -> dict[str, str]:
        return {"type": self.entity.type_label, "name": self.entity.name, "file": self.file}


@dataclass(frozen=True)
class WorkingTreeChange:
    """One entity catalogued from a changed or untracked working-tree file."""

    name: str
    type: str
    path: str
    action: ChangeAction = ChangeAction.CREATE

    def to_dict(self) -> dict[str, str]:
        return {"name": self.name, "type": self.type, "action": self.action.value, "path": self.path}


@dataclass(frozen=True)
class FileSnapshotPair:
    """Before/after content of one changed file.

    ``None`` means the file does not exist on that side, which is distinct
    from an empty file.  ``diff`` is fetched lazily by the classifier, so it
    may be ``None`` even when both sides exist.
    """

    path: str
    before: str | None
    after: str | None
    diff: str | None = None


@dataclass
class ChangeReport:
    """Result of a classification run.

    Paired-revision runs fill ``added``/``removed``/``modified``; working-tree
    runs fill ``created``.  ``files`` is the enumerated candidate list.
    """

    mode: str
    files: list[str] = field(default_factory=list)
    added: list[ChangeRecord] = field(default_factory=list)
    removed: list[ChangeRecord] = field(default_factory=list)
    modified: list[ChangeRecord] = field(default_factory=list)
    created: list[WorkingTreeChange] = field(default_factory=list)

    def extend(self, records: list[ChangeRecord]) -> None:
        """Append records to the bucket matching each record's action."""
        buckets = {
            ChangeAction.ADDED: self.added,
            ChangeAction.REMOVED: self.removed,
            ChangeAction.MODIFIED: self.modified,
        }
        for record in records:
            buckets[record.action].append(record)

    @property
    def total(self) -> int:
        return len(self.added) + len(self.removed) + len(self.modified) + len(self.created)

    @property
    def is_empty(self) -> bool:
        return self.total == 0
