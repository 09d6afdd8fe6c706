"""CLI entrypoint for fc-metrics-generator."""

from __future__ import annotations

import argparse
import sys
from pathlib import Path
from typing import NoReturn

from .config import CONFIG_FILENAME, GeneratorConfig, load_config
from .errors import GenerateError, IncorrectUsage, WriteFileError
from .generator import Generator
from .logging import configure_logging, get_logger
from .postproc.gofmt import GoFormatter

PROG = "fc-metrics-generator"


class _UsageParser(argparse.ArgumentParser):
    def error(self, message: str) -> NoReturn:
        raise IncorrectUsage(message)


def _build_parser() -> argparse.ArgumentParser:
    parser = _UsageParser(
        prog=PROG,
        description="Generate Go Prometheus boilerplate from Firecracker's metrics.rs.",
    )
    parser.add_argument(
        "paths",
        nargs="*",
        metavar="path",
        help="Path to the Rust source file declaring the metrics structs.",
    )
    parser.add_argument(
        "-o",
        "--output",
        type=Path,
        default=None,
        help="Write the generated Go source to this file instead of stdout.",
    )
    parser.add_argument(
        "-c",
        "--config",
        type=Path,
        default=None,
        help=f"Path to a {CONFIG_FILENAME} file overriding the root struct, label and type renames.",
    )
    parser.add_argument(
        "--gofmt",
        action="store_true",
        help="Run the generated source through gofmt before writing it.",
    )
    parser.add_argument(
        "-v",
        "--verbose",
        action="store_true",
        default=False,
        help="Increase log verbosity for troubleshooting.",
    )
    parser.add_argument(
        "--log-file",
        type=Path,
        default=None,
        help="Also write a debug-level trace of the run to this file.",
    )
    return parser


def main(argv: list[str] | None = None) -> None:
    """CLI entrypoint for fc-metrics-generator."""
    parser = _build_parser()
    raw_args = list(sys.argv[1:] if argv is None else argv)
    try:
        args = parser.parse_args(raw_args)
        if len(args.paths) != 1:
            raise IncorrectUsage(f"expected exactly one path, got {len(args.paths)}")
    except IncorrectUsage as exc:
        # Options were not parsed, so honour a literal verbose flag for the detail.
        configure_logging(verbose=any(arg in ("-v", "--verbose") for arg in raw_args))
        get_logger("cli").debug("Rejected arguments %s: %s", raw_args, exc.detail)
        parser.exit(1, f"{exc}\n")

    try:
        configure_logging(verbose=bool(args.verbose), log_file=args.log_file)
    except OSError as exc:
        parser.exit(1, f"{WriteFileError(exc)}\n")
    logger = get_logger("cli")

    try:
        config = load_config(args.config, required=True) if args.config else GeneratorConfig()
        formatter = GoFormatter() if args.gofmt else None
        generator = Generator(config, formatter=formatter)
        source = generator.generate_file(args.paths[0])
        if args.output is not None:
            _write_output(args.output, source)
            logger.info("Generated source written to %s", args.output)
        else:
            sys.stdout.write(source)
    except GenerateError as exc:
        parser.exit(1, f"{exc}\n")


def _write_output(path: Path, source: str) -> None:
    try:
        path.write_text(source, encoding="utf-8")
    except OSError as exc:
        raise WriteFileError(exc) from exc


if __name__ == "__main__":
    main(sys.argv[1:])
