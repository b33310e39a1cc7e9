"""Core data structures for tfchanges."""

from tfchanges.models.config import AnalysisConfig, LogConfig, OutputConfig, TFChangesConfig
from tfchanges.models.entities import (
    ChangeAction,
    ChangeRecord,
    ChangeReport,
    Entity,
    EntityCategory,
    EntityIdentity,
    FileSnapshotPair,
    WorkingTreeChange,
)

__all__ = [
    "AnalysisConfig",
    "ChangeAction",
    "ChangeRecord",
    "ChangeReport",
    "Entity",
    "EntityCategory",
    "EntityIdentity",
    "FileSnapshotPair",
    "LogConfig",
    "OutputConfig",
    "TFChangesConfig",
    "WorkingTreeChange",
]
