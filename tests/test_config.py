"""Tests for fcmetrics.config."""

from __future__ import annotations

from pathlib import Path

import pytest

from fcmetrics.config import (
    CONFIG_FILENAME,
    DEFAULT_TYPE_RENAMES,
    GeneratorConfig,
    LoweringConfig,
    TemplateSettings,
    load_config,
)
from fcmetrics.errors import ConfigError


def test_load_config_returns_defaults_when_missing(tmp_path: Path) -> None:
    config = load_config(tmp_path)

    assert isinstance(config, GeneratorConfig)
    assert config.root_struct == "FirecrackerMetrics"
    assert config.lowering.label_name == "item"
    assert dict(config.lowering.type_renames) == {"SharedMetric": "uint64"}
    assert config.template == TemplateSettings()
    assert config.source is None


def test_default_rename_table_is_not_shared() -> None:
    first = LoweringConfig()
    assert first.type_renames == DEFAULT_TYPE_RENAMES
    assert first.type_renames is not DEFAULT_TYPE_RENAMES


def test_load_config_parses_expected_fields(tmp_path: Path) -> None:
    config_file = tmp_path / CONFIG_FILENAME
    config_file.write_text(
        """
root_struct: Metrics
label_name: kind
type_renames:
  SharedIncMetric: uint64
  SharedStoreMetric: uint64
template:
  package: kata
  namespace: kata_fc
  copyright: "Copyright (c) 2024 Example"
""",
        encoding="utf-8",
    )

    config = load_config(tmp_path)

    assert config.root_struct == "Metrics"
    assert config.lowering.label_name == "kind"
    assert dict(config.lowering.type_renames) == {
        "SharedIncMetric": "uint64",
        "SharedStoreMetric": "uint64",
    }
    assert config.template == TemplateSettings(
        package="kata", namespace="kata_fc", copyright="Copyright (c) 2024 Example"
    )
    assert config.source == config_file.resolve()


def test_load_config_accepts_explicit_file_and_partial_template(tmp_path: Path) -> None:
    config_file = tmp_path / "custom.yml"
    config_file.write_text("template:\n  package: other\n", encoding="utf-8")

    config = load_config(config_file, required=True)

    assert config.template.package == "other"
    assert config.template.namespace == "kata_firecracker"
    assert config.root_struct == "FirecrackerMetrics"


def test_load_config_empty_rename_table_disables_renames(tmp_path: Path) -> None:
    config_file = tmp_path / CONFIG_FILENAME
    config_file.write_text("type_renames: {}\n", encoding="utf-8")
    assert dict(load_config(config_file).lowering.type_renames) == {}


def test_load_config_empty_file_returns_defaults(tmp_path: Path) -> None:
    config_file = tmp_path / CONFIG_FILENAME
    config_file.write_text("\n", encoding="utf-8")
    assert load_config(config_file).root_struct == "FirecrackerMetrics"


def test_load_config_required_missing_file(tmp_path: Path) -> None:
    with pytest.raises(ConfigError, match="does not exist"):
        load_config(tmp_path / "absent.yml", required=True)


@pytest.mark.parametrize(
    "content",
    [
        "- just\n- a list\n",
        "root_struct: [not, a, string]\n",
        "label_name: ''\n",
        "type_renames: [SharedMetric]\n",
        "type_renames:\n  SharedMetric: 5\n",
        "root_struct: {unclosed\n",
    ],
)
def test_load_config_rejects_invalid_content(tmp_path: Path, content: str) -> None:
    config_file = tmp_path / CONFIG_FILENAME
    config_file.write_text(content, encoding="utf-8")
    with pytest.raises(ConfigError):
        load_config(config_file)
