"""Compiler IR - parsed control-flow blocks."""

from dataclasses import dataclass
from typing import List, Optional


CONTAINER_TAG = "ng-container"
IF_ATTRIBUTE = "*ngIf"
FOR_ATTRIBUTE = "*ngFor"


@dataclass(frozen=True)
class TextSpan:
    """Half-open [start, end) offsets into the source text."""

    start: int
    end: int

    @property
    def inner(self) -> "TextSpan":
        """The span without its wrapping delimiters."""
        return TextSpan(self.start + 1, self.end - 1)

    def slice(self, text: str) -> str:
        return text[self.start : self.end]


@dataclass(frozen=True)
class BlockMatch:
    """A located `@keyword (header) { body }` construct."""

    keyword: str
    start: int  # offset of the '@'
    header: TextSpan  # includes the parentheses
    body: TextSpan  # includes the braces

    @property
    def end(self) -> int:
        return self.body.end


@dataclass
class Branch:
    """One arm of an @if chain. `condition` is None for @else."""

    condition: Optional[str]
    content: str
    alias_variable: Optional[str] = None

    @property
    def is_else(self) -> bool:
        return self.condition is None


# An IfChain is a non-empty list of branches; only the last may be an else.
IfChain = List[Branch]


@dataclass
class ForBlock:
    """A parsed `@for (variable of iterable; track expr) { content }`."""

    variable: str
    iterable: str
    content: str
    track_by: Optional[str] = None
