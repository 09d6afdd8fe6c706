"""Rust source parsing and documentation comment recovery."""

from .ast import Attribute, FieldDecl, OtherDecl, SourceFile, StructDecl, TypeRef
from .comments import CommentStrategy, DocAttributeStrategy, strip_doc_tokens
from .rust import RustSourceParser, parse_source

__all__ = [
    "Attribute",
    "CommentStrategy",
    "DocAttributeStrategy",
    "FieldDecl",
    "OtherDecl",
    "RustSourceParser",
    "SourceFile",
    "StructDecl",
    "TypeRef",
    "parse_source",
    "strip_doc_tokens",
]
