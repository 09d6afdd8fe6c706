"""Core data models shared across fcmetrics components."""

from dataclasses import dataclass
from typing import Tuple


@dataclass(frozen=True)
class FieldDefinition:
    """A public, simple-path-typed field of an extracted struct."""

    var_name: str
    var_type: str
    comments: Tuple[str, ...] = ()


@dataclass(frozen=True)
class StructDefinition:
    """Normalized view of a struct declaration with named fields."""

    name: str
    comments: Tuple[str, ...] = ()
    fields: Tuple[FieldDefinition, ...] = ()


@dataclass(frozen=True)
class MetricGroup:
    """A root field whose type names another extracted struct."""

    field: FieldDefinition
    struct: StructDefinition


@dataclass(frozen=True)
class Context:
    """Statement sequences handed to the template renderer."""

    metrics_var_declare_stmt: Tuple[str, ...] = ()
    metrics_register_stmt: Tuple[str, ...] = ()
    metrics_set_stmt: Tuple[str, ...] = ()
    metrics_struct_declare_stmt: Tuple[str, ...] = ()

    def is_empty(self) -> bool:
        return not (
            self.metrics_var_declare_stmt
            or self.metrics_register_stmt
            or self.metrics_set_stmt
            or self.metrics_struct_declare_stmt
        )
