"""Text and attribute interpolation.

`{{ expr }}` in element content becomes a span bound through [innerText].
Interpolated attribute values are removed from the tag and collected into a
single JSON attribute that the runtime evaluates:

    <a title="Hi {{ name }}">  ->  <a data-quarc-attr-bindings="[...]">
"""

import json
import re
from typing import Dict, List

ATTR_BINDINGS_ATTRIBUTE = "data-quarc-attr-bindings"

TAG_PATTERN = re.compile(r"<([a-zA-Z][a-zA-Z0-9-]*)((?:\s+[^>]*?)?)>")
INTERPOLATED_ATTRIBUTE_PATTERN = re.compile(
    r'([a-zA-Z][a-zA-Z0-9-]*)\s*=\s*"([^"]*\{\{[^"]*\}\}[^"]*)"'
)
EXPRESSION_PATTERN = re.compile(r"\{\{\s*([^}]+?)\s*\}\}")


def attribute_expression(value: str) -> str:
    """Turn `a {{ b }} c` into the concatenation `'a ' + (b) + ' c'`."""
    parts: List[str] = []
    last = 0

    for match in EXPRESSION_PATTERN.finditer(value):
        if match.start() > last:
            parts.append(f"'{value[last:match.start()]}'")
        parts.append(f"({match.group(1).strip()})")
        last = match.end()

    if last < len(value):
        parts.append(f"'{value[last:]}'")

    return " + ".join(parts)


def _encode_bindings(bindings: List[Dict[str, str]]) -> str:
    encoded = json.dumps(bindings, separators=(",", ":"), ensure_ascii=False)
    return encoded.replace('"', "'").replace("'", "&apos;")


def interpolate_attributes(template: str) -> str:
    """Move interpolated attributes of every tag into the bindings attribute."""

    def replace(match: "re.Match[str]") -> str:
        tag, attributes = match.groups()
        if "{{" not in attributes:
            return match.group(0)

        bindings: List[Dict[str, str]] = []

        def collect(attribute: "re.Match[str]") -> str:
            name, value = attribute.groups()
            if not EXPRESSION_PATTERN.search(value):
                return attribute.group(0)
            bindings.append({"attr": name, "expr": attribute_expression(value)})
            return ""

        remaining = INTERPOLATED_ATTRIBUTE_PATTERN.sub(collect, attributes).strip()
        if not bindings:
            return match.group(0)

        if remaining:
            remaining = " " + remaining
        return f'<{tag}{remaining} {ATTR_BINDINGS_ATTRIBUTE}="{_encode_bindings(bindings)}">'

    return TAG_PATTERN.sub(replace, template)


def interpolate_content(template: str) -> str:
    """Replace `{{ expr }}` with `<span [innerText]="expr"></span>`."""
    return EXPRESSION_PATTERN.sub(
        lambda match: f'<span [innerText]="{match.group(1).strip()}"></span>', template
    )


def interpolate(template: str) -> str:
    """Attribute interpolation first, so attribute values are not turned into spans."""
    return interpolate_content(interpolate_attributes(template))
