"""Parser - turns located blocks into Branch chains and ForBlocks."""

from __future__ import annotations

import logging
import re
from typing import Optional, Tuple

from atflow.compiler.scanner import expect_group
from atflow.compiler.spec import BlockMatch, Branch, ForBlock, IfChain, TextSpan
from atflow.exceptions import (
    BrokenContinuation,
    ControlFlowError,
    MalformedHeader,
)

log = logging.getLogger(__name__)

ELSE_IF_PATTERN = re.compile(r"\s*@else\s+if\s*(?=\()")
ELSE_PATTERN = re.compile(r"\s*@else\s*(?=\{)")
ALIAS_PATTERN = re.compile(r"^(.+);\s*as\s+([a-zA-Z_$][a-zA-Z0-9_$]*)\s*$", re.DOTALL)
LOOP_PATTERN = re.compile(r"^([a-zA-Z_$][a-zA-Z0-9_$]*)\s+of\s+(.+)$", re.DOTALL)
TRACK_PATTERN = re.compile(r"^track\s+(.+)$", re.DOTALL)


def parse_condition(raw: str) -> Tuple[str, Optional[str]]:
    """Split `expr; as name` into (expr, name). Plain conditions get no alias."""
    condition = raw.strip()
    alias = ALIAS_PATTERN.match(condition)
    if alias:
        return alias.group(1).strip(), alias.group(2)
    return condition, None


def _branch_content(text: str, body: TextSpan) -> str:
    return body.inner.slice(text).lstrip()


def parse_if_chain(text: str, match: BlockMatch) -> Tuple[IfChain, int]:
    """Parse an @if block and every @else if / @else that directly follows it.

    The chain ends at the first text that is not a well-formed continuation,
    and always after an @else.

    Args:
        text: Full source text.
        match: The located leading @if block.

    Returns:
        The branches in source order and the offset just past the last one.
    """
    condition, alias = parse_condition(match.header.inner.slice(text))
    chain: IfChain = [Branch(condition, _branch_content(text, match.body), alias)]
    end = match.end

    while not chain[-1].is_else:
        try:
            continuation = _parse_continuation(text, end)
        except BrokenContinuation as exc:
            log.debug("@if chain ends early: %s", exc)
            break
        if continuation is None:
            break
        branch, end = continuation
        chain.append(branch)

    return chain, end


def _parse_continuation(text: str, index: int) -> Optional[Tuple[Branch, int]]:
    else_if = ELSE_IF_PATTERN.match(text, index)
    if else_if:
        try:
            header = expect_group(text, else_if.end(), "(")
            body = expect_group(text, header.end, "{")
        except ControlFlowError as exc:
            raise BrokenContinuation(else_if.start()) from exc

        condition, alias = parse_condition(header.inner.slice(text))
        return Branch(condition, _branch_content(text, body), alias), body.end

    else_ = ELSE_PATTERN.match(text, index)
    if else_:
        try:
            body = expect_group(text, else_.end(), "{")
        except ControlFlowError as exc:
            raise BrokenContinuation(else_.start()) from exc

        return Branch(None, _branch_content(text, body)), body.end

    return None


def parse_for_block(text: str, match: BlockMatch) -> ForBlock:
    """Parse `@for (item of items; track expr) { body }`.

    The header is split on its first ';'. A track clause that does not read
    `track <expr>` is ignored.

    Raises:
        MalformedHeader: If the loop clause is not `<identifier> of <expr>`.
    """
    header = match.header.inner.slice(text).strip()
    loop_clause, _, track_clause = header.partition(";")

    loop = LOOP_PATTERN.match(loop_clause.strip())
    if loop is None:
        raise MalformedHeader(match.start, header)

    track_by = None
    track_clause = track_clause.strip()
    if track_clause:
        track = TRACK_PATTERN.match(track_clause)
        if track:
            track_by = track.group(1).strip()
        else:
            log.debug("Ignoring unrecognised track clause %r", track_clause)

    return ForBlock(
        variable=loop.group(1),
        iterable=loop.group(2).strip(),
        content=match.body.inner.slice(text),
        track_by=track_by,
    )
