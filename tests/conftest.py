from __future__ import annotations

import logging
from pathlib import Path
from typing import Iterator

import pytest

from fcmetrics.config import GeneratorConfig
from tests._fixtures.rust_sources import CPU_METRICS, write_source


@pytest.fixture
def cpu_metrics_file(tmp_path: Path) -> Path:
    """Write the small Metrics/CpuStat schema to a temporary metrics.rs."""
    return write_source(tmp_path, CPU_METRICS)


@pytest.fixture
def cpu_config() -> GeneratorConfig:
    """Configuration rooted at the ``Metrics`` struct of CPU_METRICS."""
    return GeneratorConfig(root_struct="Metrics")


@pytest.fixture
def fcmetrics_caplog(caplog: pytest.LogCaptureFixture) -> Iterator[pytest.LogCaptureFixture]:
    """Capture fcmetrics records even after configure_logging disabled propagation."""
    logger = logging.getLogger("fcmetrics")
    previous = logger.propagate
    logger.propagate = True
    caplog.set_level(logging.DEBUG, logger="fcmetrics")
    try:
        yield caplog
    finally:
        logger.propagate = previous


@pytest.fixture(autouse=True)
def _reset_fcmetrics_logger() -> Iterator[None]:
    """Drop handlers the CLI installs so they never outlive the captured streams."""
    yield
    logger = logging.getLogger("fcmetrics")
    for handler in list(logger.handlers):
        logger.removeHandler(handler)
        handler.close()
    logger.propagate = True
    logger.setLevel(logging.NOTSET)
