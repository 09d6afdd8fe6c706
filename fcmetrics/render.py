"""Renders lowered statements into the Go metrics source file."""

from __future__ import annotations

from dataclasses import asdict
from pathlib import Path

from jinja2 import Environment, FileSystemLoader, StrictUndefined, TemplateError

from .config import DEFAULT_ROOT_STRUCT, TemplateSettings
from .errors import RenderError
from .lowering.golang import NAMESPACE_CONST
from .models import Context

TEMPLATE_NAME = "fc_metrics.go.j2"


class TemplateRenderer:
    """Substitutes the four statement sequences into the fixed Go skeleton."""

    def __init__(
        self,
        settings: TemplateSettings | None = None,
        *,
        templates_dir: Path | None = None,
        template_name: str = TEMPLATE_NAME,
    ) -> None:
        self.settings = settings or TemplateSettings()
        self.templates_dir = templates_dir or Path(__file__).with_name("templates")
        self.template_name = template_name
        # Statements are already valid Go; they must not be escaped.
        self._env = Environment(
            loader=FileSystemLoader(str(self.templates_dir)),
            autoescape=False,
            trim_blocks=True,
            lstrip_blocks=True,
            keep_trailing_newline=True,
            undefined=StrictUndefined,
        )

    def render(self, context: Context, *, root_struct: str = DEFAULT_ROOT_STRUCT) -> str:
        try:
            template = self._env.get_template(self.template_name)
            return template.render(
                **asdict(context),
                **asdict(self.settings),
                namespace_const=NAMESPACE_CONST,
                root_struct=root_struct,
            )
        except TemplateError as exc:
            raise RenderError(exc) from exc


def render(
    context: Context,
    *,
    settings: TemplateSettings | None = None,
    root_struct: str = DEFAULT_ROOT_STRUCT,
) -> str:
    """Render ``context`` with the packaged template."""
    return TemplateRenderer(settings).render(context, root_struct=root_struct)


__all__ = ["TEMPLATE_NAME", "TemplateRenderer", "render"]
