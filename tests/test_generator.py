"""End-to-end tests for the generation pipeline."""

from __future__ import annotations

from pathlib import Path

import pytest

from fcmetrics.config import GeneratorConfig, load_config
from fcmetrics.errors import ParseError, ReadFileError
from fcmetrics.generator import Generator
from fcmetrics.postproc.gofmt import GoFormatter
from tests._fixtures.rust_sources import CPU_METRICS, FIRECRACKER_METRICS, write_source


def test_cpu_usage_scenario(cpu_config: GeneratorConfig) -> None:
    result = Generator(cpu_config).run(CPU_METRICS)
    context = result.context

    assert [group.field.var_name for group in result.groups] == ["cpu_usage"]
    declaration = context.metrics_var_declare_stmt[0]
    assert declaration.startswith("cpuStat = prometheus.NewGaugeVec(")
    assert 'Name:      "cpu_usage",' in declaration
    assert 'Help:      "busy percent",' in declaration
    assert context.metrics_register_stmt == ("    prometheus.MustRegister(cpuStat)",)
    assert context.metrics_set_stmt == (
        "    // set metrics for CpuStat",
        '    cpuStat.WithLabelValues("percent").Set(float64(fm.CpuUsage.Percent))',
        "",
    )
    structs = context.metrics_struct_declare_stmt
    assert "type Metrics struct {" in structs
    assert "type CpuStat struct {" in structs
    assert '    Percent uint64 `json:"percent"`' in structs


def test_filtered_fields_never_reach_output(cpu_config: GeneratorConfig) -> None:
    output = Generator(cpu_config).generate(CPU_METRICS)

    for name in ("hidden", "label", "history", "counter"):
        assert f'json:"{name}"' not in output
        assert f'WithLabelValues("{name}")' not in output
    # Unresolved root field stays in the root struct but yields no metric.
    assert '    Unknown Missing `json:"unknown"`' in output
    assert "fm.Unknown" not in output
    assert "MustRegister(missing)" not in output


def test_missing_root_produces_empty_sequences_and_skeleton() -> None:
    result = Generator().run(CPU_METRICS)

    assert result.groups == []
    assert result.context.is_empty()
    assert "func registerFirecrackerMetrics() {\n}\n" in result.source
    assert "package virtcontainers" in result.source


def test_firecracker_layout() -> None:
    result = Generator().run(FIRECRACKER_METRICS)

    assert [group.struct.name for group in result.groups] == [
        "ApiServerMetrics",
        "GetRequestsMetrics",
    ]
    assert "SharedMetric" not in result.struct_list
    assert result.context.metrics_register_stmt == (
        "    prometheus.MustRegister(apiServerMetrics)",
        "    prometheus.MustRegister(getRequestsMetrics)",
    )
    assert (
        '    apiServerMetrics.WithLabelValues("process_startup_time_us")'
        ".Set(float64(fm.ApiServer.ProcessStartupTimeUs))"
    ) in result.context.metrics_set_stmt
    assert (
        'Help:      "Metrics specific to GET API Requests for counting user triggered actions and/or failures.",'
        in result.context.metrics_var_declare_stmt[2]
    )
    structs = result.context.metrics_struct_declare_stmt
    assert "//  API Server related metrics." in structs
    assert "    UtcTimestampMs SerializeToUtcTimestampMs `json:\"utc_timestamp_ms\"`" not in structs
    assert '    LatenciesUs PerformanceMetrics `json:"latencies_us"`' in structs


def test_generation_is_deterministic(cpu_config: GeneratorConfig) -> None:
    assert Generator(cpu_config).generate(CPU_METRICS) == Generator(cpu_config).generate(CPU_METRICS)


def test_generate_file_reads_source(cpu_metrics_file: Path, cpu_config: GeneratorConfig) -> None:
    output = Generator(cpu_config).generate_file(cpu_metrics_file)
    assert "func updateFirecrackerMetrics(fm *Metrics) {" in output


def test_generate_file_missing(tmp_path: Path) -> None:
    with pytest.raises(ReadFileError) as excinfo:
        Generator().generate_file(tmp_path / "absent.rs")
    assert str(excinfo.value).startswith("Failed to read file: ")


def test_generate_file_rejects_non_utf8(tmp_path: Path) -> None:
    path = tmp_path / "binary.rs"
    path.write_bytes(b"\xff\xfe\x00struct")
    with pytest.raises(ReadFileError):
        Generator().generate_file(path)


def test_generate_propagates_parse_errors(tmp_path: Path) -> None:
    path = write_source(tmp_path, "pub struct Broken {\n")
    with pytest.raises(ParseError):
        Generator().generate_file(path)


def test_generator_applies_formatter(cpu_config: GeneratorConfig) -> None:
    seen: list[str] = []

    def runner(args, source):  # type: ignore[no-untyped-def]
        seen.append(source)
        return "formatted\n"

    generator = Generator(cpu_config, formatter=GoFormatter(runner=runner))

    assert generator.generate(CPU_METRICS) == "formatted\n"
    assert "type CpuStat struct {" in seen[0]


def test_missing_root_is_logged(fcmetrics_caplog: pytest.LogCaptureFixture) -> None:
    Generator().run(CPU_METRICS)
    messages = [record.getMessage() for record in fcmetrics_caplog.records]
    assert "Root struct FirecrackerMetrics not found; emitting the Go skeleton without metrics" in messages


def test_resolved_root_does_not_log_empty_skeleton(
    cpu_config: GeneratorConfig, fcmetrics_caplog: pytest.LogCaptureFixture
) -> None:
    Generator(cpu_config).run(CPU_METRICS)
    assert not any("emitting the Go skeleton" in record.getMessage() for record in fcmetrics_caplog.records)


def test_generator_logs_loaded_config(tmp_path: Path, fcmetrics_caplog: pytest.LogCaptureFixture) -> None:
    config_file = tmp_path / ".fcmetrics.yml"
    config_file.write_text("root_struct: Metrics\n", encoding="utf-8")

    Generator(load_config(config_file))

    messages = [record.getMessage() for record in fcmetrics_caplog.records]
    assert f"Using config from {config_file.resolve()}" in messages
