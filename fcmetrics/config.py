"""Configuration loading for fcmetrics (.fcmetrics.yml)."""

from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Dict, Mapping, Optional

import yaml

from .errors import ConfigError

CONFIG_FILENAME = ".fcmetrics.yml"

DEFAULT_ROOT_STRUCT = "FirecrackerMetrics"
DEFAULT_LABEL_NAME = "item"
DEFAULT_TYPE_RENAMES: Mapping[str, str] = {"SharedMetric": "uint64"}


def _default_type_renames() -> Dict[str, str]:
    return dict(DEFAULT_TYPE_RENAMES)


@dataclass(frozen=True)
class LoweringConfig:
    """Type rename table and label name used when lowering structs to Go."""

    type_renames: Mapping[str, str] = field(default_factory=_default_type_renames)
    label_name: str = DEFAULT_LABEL_NAME


@dataclass(frozen=True)
class TemplateSettings:
    """Values substituted into the fixed Go file preamble."""

    package: str = "virtcontainers"
    namespace: str = "kata_firecracker"
    copyright: str = "Copyright (c) 2020 xxx.yyy"


@dataclass(frozen=True)
class GeneratorConfig:
    """Represents the settings defined in .fcmetrics.yml."""

    root_struct: str = DEFAULT_ROOT_STRUCT
    lowering: LoweringConfig = field(default_factory=LoweringConfig)
    template: TemplateSettings = field(default_factory=TemplateSettings)
    source: Optional[Path] = None


def load_config(config_path: Path, *, required: bool = False) -> GeneratorConfig:
    """Load configuration from disk.

    ``config_path`` may name the file itself or a directory containing
    ``.fcmetrics.yml``. A missing file yields the defaults unless ``required``
    is set.
    """
    config_file = _resolve_config_path(config_path)

    if not config_file.exists():
        if required:
            raise ConfigError(f"{config_file} does not exist")
        return GeneratorConfig()

    data = _read_config(config_file)
    if not isinstance(data, dict):
        raise ConfigError(f"{config_file.name} must contain a mapping at the root")

    defaults = GeneratorConfig()

    root_struct = _as_identifier(data.get("root_struct"), "root_struct") or defaults.root_struct

    label_name = _as_identifier(data.get("label_name"), "label_name")
    renames = defaults.lowering.type_renames
    if "type_renames" in data:
        renames = _as_rename_table(data.get("type_renames"))
    lowering = LoweringConfig(
        type_renames=dict(renames),
        label_name=label_name or defaults.lowering.label_name,
    )

    template_data = _as_dict(data.get("template"))
    template = defaults.template
    if template_data:
        template = TemplateSettings(
            package=_as_str(template_data.get("package")) or template.package,
            namespace=_as_str(template_data.get("namespace")) or template.namespace,
            copyright=_as_str(template_data.get("copyright")) or template.copyright,
        )

    return GeneratorConfig(
        root_struct=root_struct,
        lowering=lowering,
        template=template,
        source=config_file,
    )


def _resolve_config_path(config_path: Path) -> Path:
    config_path = config_path.expanduser()
    if config_path.is_dir():
        return (config_path / CONFIG_FILENAME).resolve()
    return config_path.resolve()


def _read_config(path: Path) -> Any:
    try:
        text = path.read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as exc:
        raise ConfigError(f"Failed to read {path.name}: {exc}") from exc
    if not text.strip():
        return {}
    try:
        loaded = yaml.safe_load(text)
    except yaml.YAMLError as exc:
        raise ConfigError(f"Failed to parse {path.name}: {exc}") from exc
    return {} if loaded is None else loaded


def _as_dict(value: Any) -> Dict[str, Any]:
    return value if isinstance(value, dict) else {}


def _as_str(value: Any) -> Optional[str]:
    return str(value) if isinstance(value, (str, int, float)) and not isinstance(value, bool) else None


def _as_identifier(value: Any, key: str) -> Optional[str]:
    if value is None:
        return None
    if not isinstance(value, str) or not value.strip():
        raise ConfigError(f"{key} must be a non-empty string")
    return value.strip()


def _as_rename_table(value: Any) -> Dict[str, str]:
    if value is None:
        return {}
    if not isinstance(value, dict):
        raise ConfigError("type_renames must be a mapping of Rust type to Go type")
    table: Dict[str, str] = {}
    for source, target in value.items():
        if not isinstance(source, str) or not isinstance(target, str) or not target:
            raise ConfigError(f"Invalid type_renames entry: {source!r}: {target!r}")
        table[source] = target
    return table


__all__ = [
    "CONFIG_FILENAME",
    "DEFAULT_LABEL_NAME",
    "DEFAULT_ROOT_STRUCT",
    "DEFAULT_TYPE_RENAMES",
    "GeneratorConfig",
    "LoweringConfig",
    "TemplateSettings",
    "load_config",
]
