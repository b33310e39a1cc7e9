"""Entity extraction over whole file contents."""

from __future__ import annotations

from tfchanges.extractor.lines import ModuleDecl, ResourceDecl, classify_line
from tfchanges.models.entities import Entity, EntityCategory


def extract_entities(
    content: str | None,
    file_path: str,
    include_modules: bool = True,
) -> list[Entity]:
    """Return the entities declared in *content*, in declaration order.

    ``None`` and empty content both yield an empty list.  The result is a
    pure function of the arguments.
    """
    if not content:
        return []

    entities: list[Entity] = []
    for index, line in enumerate(content.split("\n"), start=1):
        decl = classify_line(line.rstrip("\r"))
        if isinstance(decl, ResourceDecl):
            entities.append(
                Entity(
                    category=EntityCategory.RESOURCE,
                    kind=decl.kind,
                    name=decl.name,
                    source_file=file_path,
                    declaration_line=index,
                )
            )
        elif isinstance(decl, ModuleDecl) and include_modules:
            entities.append(
                Entity(
                    category=EntityCategory.MODULE,
                    kind="",
                    name=decl.name,
                    source_file=file_path,
                    declaration_line=index,
                )
            )
    return entities
