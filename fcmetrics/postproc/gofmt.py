"""Optional gofmt pass over generated Go source."""

from __future__ import annotations

import shutil
import subprocess
from typing import Callable, Sequence

from ..errors import FormatError
from ..logging import get_logger

_LOGGER = get_logger("postproc.gofmt")


class GoFormatter:
    """Pipes Go source through ``gofmt`` and returns the formatted text."""

    def __init__(
        self,
        binary: str = "gofmt",
        runner: Callable[[Sequence[str], str], str] | None = None,
    ) -> None:
        self.binary = binary
        self._runner = runner or self._default_runner

    def format(self, source: str) -> str:
        _LOGGER.debug("Formatting generated source with %s", self.binary)
        return self._runner([self.binary], source)

    @staticmethod
    def _default_runner(args: Sequence[str], source: str) -> str:
        if shutil.which(args[0]) is None:
            raise FormatError(f"{args[0]} not found on PATH")
        try:
            completed = subprocess.run(
                list(args),
                input=source,
                check=True,
                text=True,
                capture_output=True,
            )
        except subprocess.CalledProcessError as exc:
            message = (exc.stderr or "").strip() or f"exit status {exc.returncode}"
            raise FormatError(message) from exc
        except OSError as exc:
            raise FormatError(exc) from exc
        return completed.stdout


__all__ = ["GoFormatter"]
