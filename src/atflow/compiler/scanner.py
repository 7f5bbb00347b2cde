"""Scanner - locates @if / @for blocks by delimiter depth."""

import re
from functools import lru_cache
from typing import Optional

from atflow.compiler.spec import BlockMatch, TextSpan
from atflow.exceptions import MalformedHeader, UnbalancedDelimiter


CLOSERS = {"(": ")", "{": "}"}


@lru_cache(maxsize=None)
def keyword_pattern(keyword: str) -> "re.Pattern[str]":
    """Pattern for `@keyword` not followed by more identifier characters."""
    return re.compile(rf"@{re.escape(keyword)}(?![\w$])")


def find_closing(text: str, open_index: int) -> int:
    """Return the index of the delimiter closing the group at `open_index`.

    The depth counter follows the delimiter kind that opened the group, so
    a stray ')' in a brace body or '}' in a condition does not end it.

    Raises:
        UnbalancedDelimiter: If depth never returns to zero.
    """
    opener = text[open_index]
    closer = CLOSERS[opener]
    depth = 0

    for index in range(open_index, len(text)):
        char = text[index]
        if char == opener:
            depth += 1
        elif char == closer:
            depth -= 1
            if depth == 0:
                return index

    raise UnbalancedDelimiter(open_index)


def expect_group(text: str, index: int, opener: str) -> TextSpan:
    """Match a delimited group starting at `index`, after optional whitespace.

    Returns:
        Span covering the group including both delimiters.

    Raises:
        MalformedHeader: If the next non-space character is not `opener`.
        UnbalancedDelimiter: If the group never closes.
    """
    while index < len(text) and text[index].isspace():
        index += 1

    if index >= len(text) or text[index] != opener:
        raise MalformedHeader(index)

    return TextSpan(index, find_closing(text, index) + 1)


def locate(text: str, keyword: str, start: int = 0) -> Optional[BlockMatch]:
    """Find the first `@keyword (header) { body }` at or after `start`.

    Only the leading block is matched; @else continuations are handled by
    the chain parser.

    Returns:
        The located block, or None when the keyword no longer occurs.

    Raises:
        MalformedHeader: The keyword is not followed by `(...)` and `{...}`.
            `position` is the offset of the '@'.
        UnbalancedDelimiter: A group never closes. The caller should stop
            scanning for this keyword.
    """
    found = keyword_pattern(keyword).search(text, start)
    if found is None:
        return None

    try:
        header = expect_group(text, found.end(), "(")
        body = expect_group(text, header.end, "{")
    except MalformedHeader as exc:
        raise MalformedHeader(
            found.start(), text[found.start() : exc.position]
        ) from exc

    return BlockMatch(keyword=keyword, start=found.start(), header=header, body=body)
