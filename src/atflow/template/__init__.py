"""Template stages that run around the control-flow compiler."""

from atflow.template.bindings import kebab_input_bindings
from atflow.template.diagnostics import Unresolved, find_unresolved
from atflow.template.interpolation import (
    interpolate,
    interpolate_attributes,
    interpolate_content,
)
from atflow.template.minifier import TemplateMinifier
from atflow.template.pipeline import TemplatePipeline, compile_template
from atflow.template.select import mark_select_loops

__all__ = [
    "TemplateMinifier",
    "TemplatePipeline",
    "Unresolved",
    "compile_template",
    "find_unresolved",
    "interpolate",
    "interpolate_attributes",
    "interpolate_content",
    "kebab_input_bindings",
    "mark_select_loops",
]
