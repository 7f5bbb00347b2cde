"""Renderer - converts parsed blocks to directive-container markup."""

from typing import List, Optional

from atflow.compiler.spec import (
    CONTAINER_TAG,
    FOR_ATTRIBUTE,
    IF_ATTRIBUTE,
    Branch,
    ForBlock,
    IfChain,
)


def _conjoin(left: str, right: str) -> str:
    return f"{left} && {right}" if left else right


def _guard(negated: str, condition: Optional[str]) -> str:
    if condition is None:
        return negated
    return _conjoin(negated, condition)


def build_guards(chain: IfChain) -> List[str]:
    """Compute the effective guard of every branch in a chain.

    Branch i is guarded by `!(C0) && ... && !(Ci-1) && Ci`; an else branch
    keeps only the negations. The negated-so-far expression is threaded
    through the fold as a plain string.
    """
    guards: List[str] = []
    negated = ""

    for branch in chain:
        guards.append(_guard(negated, branch.condition))
        if branch.condition is not None:
            negated = _conjoin(negated, f"!({branch.condition})")

    return guards


class Renderer:
    """Renders Branch chains and ForBlocks to container markup."""

    def __init__(self, tag: str = CONTAINER_TAG):
        self.tag = tag

    def render_if_chain(self, chain: IfChain) -> str:
        """Render one independent container per branch, newline separated.

        Args:
            chain: Branches in source order; content is emitted as-is.

        Returns:
            The container markup replacing the whole chain.
        """
        guards = build_guards(chain)
        return "\n".join(
            self._render_branch(branch, guard) for branch, guard in zip(chain, guards)
        )

    def _render_branch(self, branch: Branch, guard: str) -> str:
        binding = guard
        if branch.alias_variable:
            binding = f"{guard}; let {branch.alias_variable}"
        return self._container(IF_ATTRIBUTE, binding, branch.content)

    def render_for_block(self, block: ForBlock) -> str:
        expression = f"let {block.variable} of {block.iterable}"
        if block.track_by:
            expression += f"; trackBy: {block.track_by}"
        return self._container(FOR_ATTRIBUTE, expression, block.content)

    def _container(self, attribute: str, expression: str, content: str) -> str:
        return f'<{self.tag} {attribute}="{expression}">{content}</{self.tag}>'
