"""Template pipeline - interpolation, control flow, select markers, property
bindings, then minification."""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Optional

from atflow.compiler import ControlFlowTransformer
from atflow.config import EnvironmentConfig
from atflow.template.bindings import kebab_input_bindings
from atflow.template.interpolation import interpolate
from atflow.template.minifier import TemplateMinifier
from atflow.template.select import mark_select_loops

log = logging.getLogger(__name__)


class TemplatePipeline:
    """Compiles template text through every enabled stage."""

    def __init__(
        self,
        minify: bool = False,
        select_markers: bool = True,
        interpolation: bool = True,
        input_bindings: bool = True,
        transformer: Optional[ControlFlowTransformer] = None,
    ):
        self.minify = minify
        self.select_markers = select_markers
        self.interpolation = interpolation
        self.input_bindings = input_bindings
        self.transformer = transformer or ControlFlowTransformer()
        self.minifier = TemplateMinifier()

    @classmethod
    def from_environment(cls, environment: EnvironmentConfig) -> "TemplatePipeline":
        return cls(
            minify=environment.minify_template,
            select_markers=environment.select_markers,
            interpolation=environment.interpolation,
            input_bindings=environment.input_bindings,
        )

    def compile(self, text: str) -> str:
        result = text

        # Runs first: control flow bodies must not carry {{ }} braces
        if self.interpolation:
            result = interpolate(result)

        result = self.transformer.transform(result)

        if self.select_markers:
            result = mark_select_loops(result)

        if self.input_bindings:
            result = kebab_input_bindings(result)

        if self.minify:
            result = self.minifier.minify(result)

        return result

    def compile_file(self, path: Path) -> str:
        """Read a UTF-8 template file and compile it."""
        path = Path(path)
        if not path.exists():
            raise FileNotFoundError(f"Template not found: {path}")

        log.info("Compiling template %s", path)
        return self.compile(path.read_text(encoding="utf-8"))


def compile_template(
    text: str,
    minify: bool = False,
    select_markers: bool = True,
    interpolation: bool = True,
    input_bindings: bool = True,
) -> str:
    """Compile template text with a one-off pipeline."""
    pipeline = TemplatePipeline(
        minify=minify,
        select_markers=select_markers,
        interpolation=interpolation,
        input_bindings=input_bindings,
    )
    return pipeline.compile(text)
