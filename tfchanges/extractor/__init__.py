"""Entity Extractor.

Submodules:
    lines    -- classify_line: one line -> NoMatch | ResourceDecl | ModuleDecl.
    extract  -- extract_entities: file content -> ordered Entity list.
"""

from tfchanges.extractor.extract import extract_entities
from tfchanges.extractor.lines import (
    NO_MATCH,
    LineClass,
    ModuleDecl,
    NoMatch,
    ResourceDecl,
    classify_line,
)

__all__ = [
    "NO_MATCH",
    "LineClass",
    "ModuleDecl",
    "NoMatch",
    "ResourceDecl",
    "classify_line",
    "extract_entities",
]
