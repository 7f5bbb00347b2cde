"""atflow compiler - rewrites @if / @for control flow to directive containers."""

from atflow.compiler.compiler import ControlFlowTransformer, transform
from atflow.compiler.renderer import Renderer, build_guards
from atflow.compiler.spec import Branch, ForBlock

__all__ = [
    "ControlFlowTransformer",
    "transform",
    "Renderer",
    "build_guards",
    "Branch",
    "ForBlock",
]
