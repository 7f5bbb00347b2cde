"""Template minifier - strips comments and collapses whitespace."""

import re
from typing import List, Tuple

# Select loop markers (<!--F:...--> and <!--/F-->) are runtime instructions
COMMENT_PATTERN = re.compile(r"<!--(?!F:|/F-->)[\s\S]*?-->")
TAG_PATTERN = re.compile(r"</?[a-zA-Z][a-zA-Z0-9-]*(?:\s+[^>]*?)?/?>")
WHITESPACE = re.compile(r"\s+")


class TemplateMinifier:
    """Removes comments and insignificant whitespace from template markup."""

    def minify(self, template: str) -> str:
        result = self.remove_comments(template)
        return self.minify_whitespace(result)

    def remove_comments(self, template: str) -> str:
        return COMMENT_PATTERN.sub("", template)

    def minify_whitespace(self, template: str) -> str:
        """Collapse whitespace in text runs around tags.

        Whitespace-only text next to a tag is dropped. Other text next to
        tags is trimmed with inner runs collapsed to one space; text after
        the last tag keeps one leading space and text before the first tag
        keeps one trailing space when the original had them.
        """
        parts = self._split(template)
        result: List[str] = []

        for i, (is_tag, chunk) in enumerate(parts):
            if is_tag:
                result.append(chunk)
                continue

            prev_tag = i > 0 and parts[i - 1][0]
            next_tag = i < len(parts) - 1 and parts[i + 1][0]
            between_tags = prev_tag and next_tag
            after_tag = prev_tag and i == len(parts) - 1
            before_tag = i == 0 and next_tag

            if not (between_tags or after_tag or before_tag):
                result.append(WHITESPACE.sub(" ", chunk))
                continue

            trimmed = chunk.strip()
            if not trimmed:
                continue

            minified = WHITESPACE.sub(" ", trimmed)
            if between_tags:
                result.append(minified)
            elif after_tag:
                result.append((" " if chunk[0].isspace() else "") + minified)
            else:
                result.append(minified + (" " if chunk[-1].isspace() else ""))

        return "".join(result)

    def minify_attribute_value(self, value: str) -> str:
        return WHITESPACE.sub(" ", value.strip())

    def _split(self, template: str) -> List[Tuple[bool, str]]:
        """Split into (is_tag, text) parts in source order."""
        parts: List[Tuple[bool, str]] = []
        last_index = 0

        for match in TAG_PATTERN.finditer(template):
            if match.start() > last_index:
                parts.append((False, template[last_index : match.start()]))
            parts.append((True, match.group(0)))
            last_index = match.end()

        if last_index < len(template):
            parts.append((False, template[last_index:]))

        return parts
