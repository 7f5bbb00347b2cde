"""Compiler - rewrites @for and @if blocks into directive containers."""

from __future__ import annotations

import logging
from dataclasses import replace
from typing import Callable, List, Optional, Tuple

from atflow.compiler.parser import parse_for_block, parse_if_chain
from atflow.compiler.renderer import Renderer
from atflow.compiler.scanner import locate
from atflow.compiler.spec import BlockMatch
from atflow.exceptions import MalformedHeader, UnbalancedDelimiter

log = logging.getLogger(__name__)

BlockCompiler = Callable[[str, BlockMatch], Tuple[str, int]]


class ControlFlowTransformer:
    """Compiles @for / @if / @else control flow to container markup.

    Every pass reads the immutable input and writes to an output buffer
    behind a cursor that only moves forward, so a pass never rescans its own
    output. Constructs that cannot be parsed are copied through unchanged.
    """

    def __init__(self, renderer: Optional[Renderer] = None):
        self.renderer = renderer or Renderer()

    def transform(self, text: str) -> str:
        """Run the @for pass, then the @if pass, over the whole text.

        Input nested deeper than the interpreter's recursion limit is
        returned unchanged.
        """
        try:
            compiled = self.transform_for_blocks(text)
            return self.transform_if_blocks(compiled)
        except RecursionError:
            log.debug("Nesting too deep to compile, leaving template unchanged")
            return text

    def transform_for_blocks(self, text: str) -> str:
        return self._run_pass(text, "for", self._compile_for)

    def transform_if_blocks(self, text: str) -> str:
        return self._run_pass(text, "if", self._compile_if)

    def _run_pass(self, text: str, keyword: str, compile_block: BlockCompiler) -> str:
        """Locate, parse and replace every `@keyword` block in `text`.

        Args:
            text: Source text for this pass.
            keyword: `for` or `if`.
            compile_block: Returns (replacement, end offset) for a match, or
                raises MalformedHeader to leave the block as literal text.

        Returns:
            The rewritten text.
        """
        output: List[str] = []
        cursor = 0

        while cursor < len(text):
            try:
                match = locate(text, keyword, cursor)
            except UnbalancedDelimiter as exc:
                log.debug("Stopping @%s pass: %s", keyword, exc)
                break
            except MalformedHeader as exc:
                log.debug("Skipping @%s: %s", keyword, exc)
                resume = exc.position + len(keyword) + 1
                output.append(text[cursor:resume])
                cursor = resume
                continue

            if match is None:
                break

            try:
                replacement, end = compile_block(text, match)
            except MalformedHeader as exc:
                log.debug("Leaving @%s block as text: %s", keyword, exc)
                output.append(text[cursor : match.end])
                cursor = match.end
                continue

            output.append(text[cursor : match.start])
            output.append(replacement)
            cursor = end

        output.append(text[cursor:])
        return "".join(output)

    def _compile_for(self, text: str, match: BlockMatch) -> Tuple[str, int]:
        block = parse_for_block(text, match)
        # Nested loops only; @if blocks in the body are left for the @if pass
        block = replace(block, content=self.transform_for_blocks(block.content))
        return self.renderer.render_for_block(block), match.end

    def _compile_if(self, text: str, match: BlockMatch) -> Tuple[str, int]:
        chain, end = parse_if_chain(text, match)
        chain = [
            replace(branch, content=self.transform_if_blocks(branch.content))
            for branch in chain
        ]
        return self.renderer.render_if_chain(chain), end


_default_transformer = ControlFlowTransformer()


def transform(text: str) -> str:
    """Compile control-flow blocks in `text`. Never raises on bad markup."""
    return _default_transformer.transform(text)
