"""Single-line declaration classifier.

Matching is line-local: a declaration header split across several lines is
not recognised, and nested blocks are not tracked.
"""

from __future__ import annotations

import re
from dataclasses import dataclass

from tfchanges.models.entities import EntityCategory, EntityIdentity

_RE_RESOURCE = re.compile(r'resource\s+"([^"]+)"\s+"([^"]+)"')
_RE_MODULE = re.compile(r'module\s+"([^"]+)"')


@dataclass(frozen=True)
class NoMatch:
    """The line declares nothing."""


@dataclass(frozen=True)
class ResourceDecl:
    """``resource "<kind>" "<name>"`` header."""

    kind: str
    name: str

    @property
    def identity(self) -> EntityIdentity:
        return (EntityCategory.RESOURCE, self.kind, self.name)


@dataclass(frozen=True)
class ModuleDecl:
    """``module "<name>"`` header."""

    name: str

    @property
    def identity(self) -> EntityIdentity:
        return (EntityCategory.MODULE, "", self.name)


LineClass = NoMatch | ResourceDecl | ModuleDecl

NO_MATCH = NoMatch()


def classify_line(line: str) -> LineClass:
    """Classify one line of HCL text.

    A line holding both shapes is reported as the resource declaration.
    """
    match = _RE_RESOURCE.search(line)
    if match:
        return ResourceDecl(kind=match.group(1), name=match.group(2))
    match = _RE_MODULE.search(line)
    if match:
        return ModuleDecl(name=match.group(1))
    return NO_MATCH
