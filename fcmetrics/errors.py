"""Fatal error taxonomy for metrics generation runs."""

from __future__ import annotations


class GenerateError(RuntimeError):
    """Base class for errors that abort a generation run."""

    prefix = "Generation failed"

    def __init__(self, detail: object | None = None) -> None:
        self.detail = detail
        super().__init__(self._format())

    def _format(self) -> str:
        if self.detail is None:
            return self.prefix
        return f"{self.prefix}: {self.detail}"


class IncorrectUsage(GenerateError):
    """Raised when the CLI receives the wrong number of positional arguments."""

    prefix = "Usage: fc-metrics-generator path/to/filename.rs"

    def _format(self) -> str:
        return self.prefix


class ReadFileError(GenerateError):
    """Raised when the input file cannot be read."""

    prefix = "Failed to read file"


class WriteFileError(GenerateError):
    """Raised when the generated source cannot be written to the output path."""

    prefix = "Failed to write file"


class ParseError(GenerateError):
    """Raised when the input is not syntactically valid Rust."""

    prefix = "Failed to parse source file"


class RenderError(GenerateError):
    """Raised when the Go template cannot be compiled or rendered."""

    prefix = "Failed to render source file"


class ConfigError(GenerateError):
    """Raised when the configuration file cannot be parsed."""

    prefix = "Failed to load config"


class FormatError(GenerateError):
    """Raised when gofmt is unavailable or rejects the generated source."""

    prefix = "Failed to format generated source"


__all__ = [
    "ConfigError",
    "FormatError",
    "GenerateError",
    "IncorrectUsage",
    "ParseError",
    "ReadFileError",
    "RenderError",
    "WriteFileError",
]
