"""Logging for fc-metrics-generator runs.

Standard output carries the generated Go source, so diagnostics only ever go
to stderr or to the optional ``--log-file`` sink.
"""

from __future__ import annotations

import logging
from pathlib import Path

_LOGGER_NAME = "fcmetrics"
_CONSOLE_FORMAT = "[fcmetrics] %(levelname)s %(message)s"
_FILE_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"


def get_logger(name: str | None = None) -> logging.Logger:
    """Return a module-scoped logger under the fcmetrics hierarchy."""
    full_name = f"{_LOGGER_NAME}.{name}" if name else _LOGGER_NAME
    return logging.getLogger(full_name)


def configure_logging(
    *, verbose: bool = False, log_file: Path | None = None
) -> logging.Logger:
    """Install a stderr handler and, when ``log_file`` is given, a debug-level file sink.

    The console shows warnings only unless ``verbose`` is set; the log file
    always records the full extraction and lowering trace. Opening the log
    file may raise ``OSError``.
    """
    console_level = logging.DEBUG if verbose else logging.WARNING
    logger = logging.getLogger(_LOGGER_NAME)
    logger.setLevel(logging.DEBUG if log_file is not None else console_level)
    logger.propagate = False

    for handler in list(logger.handlers):
        logger.removeHandler(handler)
        handler.close()

    if log_file is not None:
        file_handler = logging.FileHandler(log_file, mode="w", encoding="utf-8")
        file_handler.setLevel(logging.DEBUG)
        file_handler.setFormatter(logging.Formatter(_FILE_FORMAT))
        logger.addHandler(file_handler)

    stream_handler = logging.StreamHandler()
    stream_handler.setLevel(console_level)
    stream_handler.setFormatter(logging.Formatter(_CONSOLE_FORMAT))
    logger.addHandler(stream_handler)

    return logger


__all__ = ["configure_logging", "get_logger"]
