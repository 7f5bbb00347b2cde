"""atflow - compiles @if / @for template control flow to directive containers."""

from atflow._version import __version__
from atflow.compiler import ControlFlowTransformer, transform
from atflow.template import TemplatePipeline, compile_template

__all__ = [
    "__version__",
    "ControlFlowTransformer",
    "TemplatePipeline",
    "compile_template",
    "transform",
]
