"""Declaration tree produced by the Rust source parser."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Optional, Tuple, Union

# Type kinds recognised by the extractor. Only ``path`` types are kept.
PATH = "path"
GENERIC = "generic"
REFERENCE = "reference"
POINTER = "pointer"
TUPLE = "tuple"
ARRAY = "array"
OTHER = "other"


@dataclass(frozen=True)
class Attribute:
    """An outer attribute such as ``#[doc = "..."]`` or ``#[derive(...)]``.

    ``tokens`` holds everything after the attribute path, so a doc comment
    ``/// text`` is represented as ``Attribute("doc", '= " text"')``.
    """

    path: str
    tokens: str


@dataclass(frozen=True)
class TypeRef:
    kind: str
    segments: Tuple[str, ...] = ()
    text: str = ""

    @property
    def leading_segment(self) -> Optional[str]:
        return self.segments[0] if self.segments else None


@dataclass(frozen=True)
class FieldDecl:
    name: str
    visibility: Optional[str]
    ty: TypeRef
    attrs: Tuple[Attribute, ...] = ()

    @property
    def is_public(self) -> bool:
        # pub(crate), pub(super) and friends are restricted, not public.
        return self.visibility == "pub"


@dataclass(frozen=True)
class StructDecl:
    name: str
    style: str
    attrs: Tuple[Attribute, ...] = ()
    fields: Tuple[FieldDecl, ...] = ()
    line: int = 0


@dataclass(frozen=True)
class OtherDecl:
    kind: str
    line: int = 0


Declaration = Union[StructDecl, OtherDecl]


@dataclass(frozen=True)
class SourceFile:
    """Top-level declarations of one Rust source file, in file order."""

    items: Tuple[Declaration, ...] = ()

    def structs(self) -> Tuple[StructDecl, ...]:
        return tuple(item for item in self.items if isinstance(item, StructDecl))


__all__ = [
    "ARRAY",
    "Attribute",
    "Declaration",
    "FieldDecl",
    "GENERIC",
    "OTHER",
    "OtherDecl",
    "PATH",
    "POINTER",
    "REFERENCE",
    "SourceFile",
    "StructDecl",
    "TUPLE",
    "TypeRef",
]
