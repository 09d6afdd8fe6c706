"""Lowers the linked struct schema into Go statements for the Prometheus client."""

from __future__ import annotations

from typing import List, Mapping, Optional, Sequence

from ..config import LoweringConfig
from ..logging import get_logger
from ..models import Context, MetricGroup, StructDefinition
from .naming import go_type, json_tag, lower_first, to_upper_camel

_LOGGER = get_logger("lowering")

NAMESPACE_CONST = "fcMetricsNS"
RECEIVER = "fm"

_GAUGE_VEC = """{var} = prometheus.NewGaugeVec(prometheus.GaugeOpts{{
            Namespace: {namespace},
            Name:      "{name}",
            Help:      "{help}",
        }},
            []string{{"{label}"}},
        )"""


def metric_var_name(struct: StructDefinition) -> str:
    return lower_first(struct.name)


def help_text(struct: StructDefinition) -> str:
    return " ".join(struct.comments).strip()


class GoLowering:
    """Appends Go statements for each metric group to four parallel sequences."""

    def __init__(self, config: LoweringConfig | None = None) -> None:
        self.config = config or LoweringConfig()

    def lower(
        self,
        root: Optional[StructDefinition],
        groups: Sequence[MetricGroup],
    ) -> Context:
        declare: List[str] = []
        register: List[str] = []
        set_values: List[str] = []
        structs: List[str] = []

        if root is None:
            return Context()

        structs.extend(self.struct_definition(root, root.comments))
        for group in groups:
            metric_struct = group.struct
            structs.extend(self.struct_definition(metric_struct, group.field.comments))
            declare.extend(self.declare_metric(metric_struct, group.field.var_name))
            register.append(self.register_metric(metric_struct))
            set_values.extend(self.set_values(metric_struct, to_upper_camel(group.field.var_name)))
            _LOGGER.debug(
                "Lowered %s (%d fields) as %s",
                metric_struct.name,
                len(metric_struct.fields),
                group.field.var_name,
            )

        return Context(
            metrics_var_declare_stmt=tuple(declare),
            metrics_register_stmt=tuple(register),
            metrics_set_stmt=tuple(set_values),
            metrics_struct_declare_stmt=tuple(structs),
        )

    def struct_definition(self, struct: StructDefinition, comments: Sequence[str]) -> List[str]:
        lines = [f"// {comment}" for comment in comments]
        lines.append(f"type {struct.name} struct {{")
        for field in struct.fields:
            lines.extend(f"    //{comment}" for comment in field.comments)
            lines.append(
                "    {} {} {}".format(
                    to_upper_camel(field.var_name),
                    go_type(field.var_type, self.config.type_renames),
                    json_tag(field.var_name),
                )
            )
        lines.append("}")
        lines.append("")
        return lines

    def declare_metric(self, struct: StructDefinition, name: str) -> List[str]:
        statement = _GAUGE_VEC.format(
            var=metric_var_name(struct),
            namespace=NAMESPACE_CONST,
            name=name,
            help=help_text(struct),
            label=self.config.label_name,
        )
        return [statement, ""]

    def register_metric(self, struct: StructDefinition) -> str:
        return f"    prometheus.MustRegister({metric_var_name(struct)})"

    def set_values(self, struct: StructDefinition, field_name: str) -> List[str]:
        var = metric_var_name(struct)
        lines = [f"    // set metrics for {struct.name}"]
        for field in struct.fields:
            lines.append(
                f'    {var}.WithLabelValues("{field.var_name}")'
                f".Set(float64({RECEIVER}.{field_name}.{to_upper_camel(field.var_name)}))"
            )
        lines.append("")
        return lines


def lower(
    struct_list: Mapping[str, StructDefinition],
    groups: Sequence[MetricGroup],
    root_name: str,
    config: LoweringConfig | None = None,
) -> Context:
    """Build the four statement sequences for ``groups`` under ``root_name``."""
    return GoLowering(config).lower(struct_list.get(root_name), groups)


__all__ = ["GoLowering", "NAMESPACE_CONST", "help_text", "lower", "metric_var_name"]
