"""Tree-sitter powered Rust declaration parser."""

from __future__ import annotations

from typing import Iterable, Iterator, List, Optional, Tuple

import tree_sitter_rust
from tree_sitter import Language, Node, Parser

from ..errors import ParseError
from ..logging import get_logger
from .ast import (
    ARRAY,
    GENERIC,
    OTHER,
    PATH,
    POINTER,
    REFERENCE,
    TUPLE,
    Attribute,
    Declaration,
    FieldDecl,
    OtherDecl,
    SourceFile,
    StructDecl,
    TypeRef,
)
from .comments import doc_attribute

_LOGGER = get_logger("parsing")

_TYPE_KINDS = {
    "type_identifier": PATH,
    "primitive_type": PATH,
    "scoped_type_identifier": PATH,
    "generic_type": GENERIC,
    "reference_type": REFERENCE,
    "pointer_type": POINTER,
    "tuple_type": TUPLE,
    "unit_type": TUPLE,
    "array_type": ARRAY,
}

_COMMENT_NODES = {"line_comment", "block_comment"}


class RustSourceParser:
    """Parses Rust source text into a :class:`SourceFile` of top-level declarations."""

    def __init__(self) -> None:
        self._parser: Optional[Parser] = None

    def parse(self, source: str) -> SourceFile:
        source_bytes = source.encode("utf-8")
        tree = self._get_parser().parse(source_bytes)
        root = tree.root_node
        if root.has_error:
            raise ParseError(self._describe_error(root, source_bytes))

        items: List[Declaration] = []
        for node, attrs in self._with_outer_attributes(root.children, source_bytes):
            if node.type == "struct_item":
                items.append(self._struct_decl(node, attrs, source_bytes))
            else:
                items.append(OtherDecl(kind=node.type, line=node.start_point[0] + 1))
        _LOGGER.debug("Parsed %d top-level declarations", len(items))
        return SourceFile(items=tuple(items))

    def _get_parser(self) -> Parser:
        if self._parser is None:
            self._parser = Parser(Language(tree_sitter_rust.language()))
        return self._parser

    @staticmethod
    def _node_text(node: Node, source_bytes: bytes) -> str:
        return source_bytes[node.start_byte : node.end_byte].decode("utf-8", errors="replace")

    def _with_outer_attributes(
        self, nodes: Iterable[Node], source_bytes: bytes
    ) -> Iterator[Tuple[Node, Tuple[Attribute, ...]]]:
        """Pair each named node with the attributes and doc comments written above it."""
        pending: List[Attribute] = []
        for node in nodes:
            if not node.is_named:
                continue
            if node.type == "attribute_item":
                attr = self._attribute(node, source_bytes)
                if attr is not None:
                    pending.append(attr)
                continue
            if node.type in _COMMENT_NODES:
                attr = self._doc_comment(node, source_bytes)
                if attr is not None:
                    pending.append(attr)
                continue
            if node.type == "inner_attribute_item":
                continue
            yield node, tuple(pending)
            pending = []

    def _attribute(self, node: Node, source_bytes: bytes) -> Optional[Attribute]:
        attribute = next((child for child in node.named_children if child.type == "attribute"), None)
        if attribute is None or not attribute.named_children:
            return None
        path_node = attribute.named_children[0]
        path = self._node_text(path_node, source_bytes).strip()
        tokens = source_bytes[path_node.end_byte : attribute.end_byte].decode(
            "utf-8", errors="replace"
        ).strip()
        if tokens.startswith("="):
            tokens = "= " + tokens[1:].lstrip()
        return Attribute(path=path, tokens=tokens)

    def _doc_comment(self, node: Node, source_bytes: bytes) -> Optional[Attribute]:
        text = self._node_text(node, source_bytes)
        if node.type == "line_comment":
            text = text.rstrip("\r\n")
            if text.startswith("///") and not text.startswith("////"):
                return doc_attribute(text[3:])
            return None
        if text.startswith("/**") and not text.startswith("/***") and text != "/**/":
            return doc_attribute(text[3:-2])
        return None

    def _struct_decl(
        self, node: Node, attrs: Tuple[Attribute, ...], source_bytes: bytes
    ) -> StructDecl:
        name_node = node.child_by_field_name("name")
        name = self._node_text(name_node, source_bytes) if name_node else ""
        line = node.start_point[0] + 1
        body = node.child_by_field_name("body")
        if body is None:
            return StructDecl(name=name, style="unit", attrs=attrs, line=line)
        if body.type != "field_declaration_list":
            return StructDecl(name=name, style="tuple", attrs=attrs, line=line)

        fields: List[FieldDecl] = []
        for field_node, field_attrs in self._with_outer_attributes(body.children, source_bytes):
            if field_node.type != "field_declaration":
                continue
            field = self._field_decl(field_node, field_attrs, source_bytes)
            if field is not None:
                fields.append(field)
        return StructDecl(name=name, style="named", attrs=attrs, fields=tuple(fields), line=line)

    def _field_decl(
        self, node: Node, attrs: Tuple[Attribute, ...], source_bytes: bytes
    ) -> Optional[FieldDecl]:
        name_node = node.child_by_field_name("name")
        type_node = node.child_by_field_name("type")
        if name_node is None or type_node is None:
            return None
        visibility = next(
            (
                "".join(self._node_text(child, source_bytes).split())
                for child in node.named_children
                if child.type == "visibility_modifier"
            ),
            None,
        )
        return FieldDecl(
            name=self._node_text(name_node, source_bytes),
            visibility=visibility,
            ty=self._type_ref(type_node, source_bytes),
            attrs=attrs,
        )

    def _type_ref(self, node: Node, source_bytes: bytes) -> TypeRef:
        text = self._node_text(node, source_bytes)
        kind = _TYPE_KINDS.get(node.type, OTHER)
        if kind == PATH:
            segments = tuple(part for part in "".join(text.split()).split("::") if part)
            return TypeRef(kind=PATH, segments=segments, text=text)
        if kind == GENERIC:
            inner = node.child_by_field_name("type")
            inner_text = self._node_text(inner, source_bytes) if inner else ""
            segments = tuple(part for part in "".join(inner_text.split()).split("::") if part)
            return TypeRef(kind=GENERIC, segments=segments, text=text)
        return TypeRef(kind=kind, text=text)

    def _describe_error(self, root: Node, source_bytes: bytes) -> str:
        node = self._first_error(root)
        if node is None:
            return "syntax error"
        row, column = node.start_point[0], node.start_point[1]
        location = f"line {row + 1}, column {column + 1}"
        if node.is_missing:
            return f"{location}: expected `{node.type}`"
        snippet = self._node_text(node, source_bytes).strip().splitlines()
        found = snippet[0][:40] if snippet else ""
        if found:
            return f"{location}: unexpected `{found}`"
        return f"{location}: unexpected token"

    def _first_error(self, node: Node) -> Optional[Node]:
        if node.is_error or node.is_missing:
            return node
        for child in node.children:
            if child.has_error or child.is_missing:
                found = self._first_error(child)
                if found is not None:
                    return found
        return None


def parse_source(source: str) -> SourceFile:
    """Parse ``source`` with a fresh :class:`RustSourceParser`."""
    return RustSourceParser().parse(source)


__all__ = ["RustSourceParser", "parse_source"]
