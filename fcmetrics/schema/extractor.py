"""Builds the normalized struct mapping from parsed Rust declarations."""

from __future__ import annotations

from typing import Dict, List, Optional

from ..logging import get_logger
from ..models import FieldDefinition, StructDefinition
from ..parsing.ast import PATH, FieldDecl, SourceFile, StructDecl
from ..parsing.comments import CommentStrategy, DocAttributeStrategy

_LOGGER = get_logger("schema.extractor")


class SchemaExtractor:
    """Selects named-field structs and captures their public, simple-typed fields."""

    def __init__(self, comment_strategy: CommentStrategy | None = None) -> None:
        self._comments = comment_strategy or DocAttributeStrategy()

    def extract(self, source: SourceFile) -> Dict[str, StructDefinition]:
        struct_list: Dict[str, StructDefinition] = {}
        for decl in source.structs():
            definition = self._struct_definition(decl)
            if definition is None:
                continue
            if definition.name in struct_list:
                # Later declarations win; see DESIGN.md.
                _LOGGER.warning(
                    "Struct %s declared more than once; line %d replaces the earlier definition",
                    definition.name,
                    decl.line,
                )
            struct_list[definition.name] = definition
        _LOGGER.debug("Extracted %d struct definitions", len(struct_list))
        return struct_list

    def _struct_definition(self, decl: StructDecl) -> Optional[StructDefinition]:
        if decl.style != "named" or not decl.fields:
            _LOGGER.debug("Skipping struct %s: no named fields", decl.name)
            return None
        fields: List[FieldDefinition] = []
        for field in decl.fields:
            definition = self._field_definition(decl.name, field)
            if definition is not None:
                fields.append(definition)
        return StructDefinition(
            name=decl.name,
            comments=tuple(self._comments.comments(decl.attrs)),
            fields=tuple(fields),
        )

    def _field_definition(self, struct_name: str, field: FieldDecl) -> Optional[FieldDefinition]:
        if not field.is_public:
            _LOGGER.debug("Skipping %s.%s: not public", struct_name, field.name)
            return None
        if field.ty.kind != PATH or field.ty.leading_segment is None:
            _LOGGER.debug(
                "Skipping %s.%s: unsupported %s type `%s`",
                struct_name,
                field.name,
                field.ty.kind,
                field.ty.text,
            )
            return None
        return FieldDefinition(
            var_name=field.name,
            var_type=field.ty.leading_segment,
            comments=tuple(self._comments.comments(field.attrs)),
        )


def extract(
    source: SourceFile, *, comment_strategy: CommentStrategy | None = None
) -> Dict[str, StructDefinition]:
    """Return ``struct name -> StructDefinition`` for ``source``."""
    return SchemaExtractor(comment_strategy).extract(source)


__all__ = ["SchemaExtractor", "extract"]
