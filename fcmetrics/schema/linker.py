"""Resolves root struct fields into metric groups."""

from __future__ import annotations

from typing import List, Mapping

from ..logging import get_logger
from ..models import MetricGroup, StructDefinition

_LOGGER = get_logger("schema.linker")

# Only root -> sub-struct is resolved; sub-struct fields are never linked.
LINK_DEPTH = 1


def link(
    struct_list: Mapping[str, StructDefinition],
    root_name: str,
    depth: int = LINK_DEPTH,
) -> List[MetricGroup]:
    """Return the metric groups reachable from ``root_name``, in root field order.

    A missing root is not an error: there is simply nothing to generate.
    """
    if depth < 0 or depth > LINK_DEPTH:
        raise ValueError(f"link depth must be between 0 and {LINK_DEPTH}, got {depth}")
    root = struct_list.get(root_name)
    if root is None:
        _LOGGER.debug("Root struct %s not found; no metrics will be generated", root_name)
        return []
    if depth == 0:
        return []

    groups: List[MetricGroup] = []
    for field in root.fields:
        metric_struct = struct_list.get(field.var_type)
        if metric_struct is None:
            _LOGGER.debug("Root field %s has unresolved type %s", field.var_name, field.var_type)
            continue
        groups.append(MetricGroup(field=field, struct=metric_struct))
    return groups


__all__ = ["LINK_DEPTH", "link"]
