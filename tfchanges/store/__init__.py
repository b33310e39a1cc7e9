"""Revision File Store.

Submodules:
    base       -- RevisionStore protocol, WORKING_TREE sentinel, RevisionStoreError.
    git_store  -- GitRevisionStore: subprocess-backed implementation.
"""

from tfchanges.store.base import WORKING_TREE, RevisionStore, RevisionStoreError
from tfchanges.store.git_store import GitRevisionStore

__all__ = [
    "WORKING_TREE",
    "GitRevisionStore",
    "RevisionStore",
    "RevisionStoreError",
]
