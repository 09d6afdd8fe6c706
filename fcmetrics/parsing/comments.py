"""Documentation comment recovery.

Rust desugars ``/// text`` into ``#[doc = " text"]``. The parser keeps that
shape, so every documentation line reaches the extractor as a ``doc``
attribute whose token form is ``= "<text>"``. Recovering the text is a
matter of dropping the three-character ``= "`` prefix and the closing quote.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Iterable, List, Optional

from .ast import Attribute

DOC_ATTRIBUTE = "doc"
_DOC_PREFIX = '= "'
_DOC_SUFFIX = '"'


def strip_doc_tokens(tokens: str) -> Optional[str]:
    """Return the inner text of ``= "<text>"``, or None when the shape differs."""
    if len(tokens) < len(_DOC_PREFIX) + len(_DOC_SUFFIX):
        return None
    if not tokens.startswith(_DOC_PREFIX) or not tokens.endswith(_DOC_SUFFIX):
        return None
    return tokens[len(_DOC_PREFIX) : -len(_DOC_SUFFIX)]


def escape_rust_str(value: str) -> str:
    """Escape ``value`` the way a Rust string literal token prints it."""
    out: List[str] = []
    for char in value:
        if char == "\\":
            out.append("\\\\")
        elif char == '"':
            out.append('\\"')
        elif char == "\t":
            out.append("\\t")
        elif char == "\r":
            out.append("\\r")
        elif char == "\n":
            out.append("\\n")
        else:
            out.append(char)
    return "".join(out)


def doc_attribute(text: str) -> Attribute:
    """Build the ``doc`` attribute a doc comment with body ``text`` desugars to."""
    return Attribute(path=DOC_ATTRIBUTE, tokens=f'{_DOC_PREFIX}{escape_rust_str(text)}{_DOC_SUFFIX}')


class CommentStrategy(ABC):
    """Contract for recovering free-text comment lines from declaration attributes."""

    @abstractmethod
    def comments(self, attrs: Iterable[Attribute]) -> List[str]:
        """Return comment lines in source order."""


class DocAttributeStrategy(CommentStrategy):
    """Reads ``#[doc = "..."]`` attributes and ignores everything else."""

    def comments(self, attrs: Iterable[Attribute]) -> List[str]:
        result: List[str] = []
        for attr in attrs:
            if attr.path != DOC_ATTRIBUTE:
                continue
            text = strip_doc_tokens(attr.tokens)
            if text is not None:
                result.append(text)
        return result


__all__ = [
    "CommentStrategy",
    "DOC_ATTRIBUTE",
    "DocAttributeStrategy",
    "doc_attribute",
    "escape_rust_str",
    "strip_doc_tokens",
]
