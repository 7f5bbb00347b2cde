"""Find control-flow tokens the compiler left as literal text."""

from __future__ import annotations

import re
from dataclasses import dataclass
from typing import List

TOKEN_PATTERN = re.compile(r"@(if|for|else)(?![\w$])")
SNIPPET_LENGTH = 40


@dataclass(frozen=True)
class Unresolved:
    """A leftover @if / @for / @else token with its 1-based position."""

    keyword: str
    line: int
    column: int
    snippet: str


def find_unresolved(text: str) -> List[Unresolved]:
    """List every @if, @for and @else token remaining in compiled text."""
    found: List[Unresolved] = []

    for match in TOKEN_PATTERN.finditer(text):
        offset = match.start()
        line_start = text.rfind("\n", 0, offset) + 1
        line_end = text.find("\n", offset)
        if line_end == -1:
            line_end = len(text)

        found.append(
            Unresolved(
                keyword=match.group(1),
                line=text.count("\n", 0, offset) + 1,
                column=offset - line_start + 1,
                snippet=text[offset : min(line_end, offset + SNIPPET_LENGTH)],
            )
        )

    return found
