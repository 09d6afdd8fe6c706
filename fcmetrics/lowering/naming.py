"""Rust-to-Go identifier and type naming rules."""

from __future__ import annotations

from typing import Mapping

from ..config import DEFAULT_TYPE_RENAMES


def upper_first(value: str) -> str:
    return value[:1].upper() + value[1:]


def lower_first(value: str) -> str:
    return value[:1].lower() + value[1:]


def to_upper_camel(name: str) -> str:
    """Convert a snake_case Rust field name into an exported Go identifier.

    ``foo_bar_baz`` becomes ``FooBarBaz`` and ``foo`` becomes ``Foo``.
    """
    return "".join(upper_first(segment) for segment in name.split("_"))


def go_type(rust_type: str, renames: Mapping[str, str] = DEFAULT_TYPE_RENAMES) -> str:
    """Map a Rust type name to its Go spelling; unknown names pass through."""
    return renames.get(rust_type, rust_type)


def json_tag(name: str) -> str:
    return f'`json:"{name}"`'


__all__ = ["go_type", "json_tag", "lower_first", "to_upper_camel", "upper_first"]
