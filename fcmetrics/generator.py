"""Pipeline orchestration: Rust source text to rendered Go metrics file."""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path
from typing import Dict, List

from .config import GeneratorConfig
from .errors import ReadFileError
from .logging import get_logger
from .lowering.golang import GoLowering
from .models import Context, MetricGroup, StructDefinition
from .parsing.rust import RustSourceParser
from .postproc.gofmt import GoFormatter
from .render import TemplateRenderer
from .schema.extractor import SchemaExtractor
from .schema.linker import link


@dataclass(frozen=True)
class GenerationResult:
    """Intermediate values of one pipeline run, kept for inspection."""

    struct_list: Dict[str, StructDefinition]
    groups: List[MetricGroup]
    context: Context
    source: str


class Generator:
    """Runs parse, extract, link, lower and render in strict sequence."""

    def __init__(
        self,
        config: GeneratorConfig | None = None,
        *,
        parser: RustSourceParser | None = None,
        extractor: SchemaExtractor | None = None,
        renderer: TemplateRenderer | None = None,
        formatter: GoFormatter | None = None,
    ) -> None:
        self.config = config or GeneratorConfig()
        self._parser = parser or RustSourceParser()
        self._extractor = extractor or SchemaExtractor()
        self._lowering = GoLowering(self.config.lowering)
        self._renderer = renderer or TemplateRenderer(self.config.template)
        self._formatter = formatter
        self._logger = get_logger("generator")
        if self.config.source is not None:
            self._logger.debug("Using config from %s", self.config.source)

    def run(self, code: str) -> GenerationResult:
        syntax = self._parser.parse(code)
        struct_list = self._extractor.extract(syntax)
        root_name = self.config.root_struct
        groups = link(struct_list, root_name)
        context = self._lowering.lower(struct_list.get(root_name), groups)
        self._logger.debug(
            "Generated %d metric groups from %d structs", len(groups), len(struct_list)
        )
        if context.is_empty():
            self._logger.info(
                "Root struct %s not found; emitting the Go skeleton without metrics", root_name
            )
        rendered = self._renderer.render(context, root_struct=root_name)
        if self._formatter is not None:
            rendered = self._formatter.format(rendered)
        return GenerationResult(
            struct_list=struct_list, groups=groups, context=context, source=rendered
        )

    def generate(self, code: str) -> str:
        return self.run(code).source

    def generate_file(self, path: Path | str) -> str:
        return self.generate(read_source(Path(path)))


def read_source(path: Path) -> str:
    try:
        return path.read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as exc:
        raise ReadFileError(exc) from exc


__all__ = ["GenerationResult", "Generator", "read_source"]
