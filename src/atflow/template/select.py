"""Loop markers for <select> and <optgroup>.

Browsers drop unknown elements such as ng-container from inside <select>
while parsing, so loop containers there are rewritten into comment markers
the runtime expands instead:

    <!--F:option:options-->...<!--/F-->
"""

import re

SELECT_PATTERN = re.compile(r"<(select|optgroup)([^>]*)>([\s\S]*?)</\1>", re.IGNORECASE)
LOOP_CONTAINER_PATTERN = re.compile(
    r'<ng-container\s+\*ngFor\s*=\s*"let\s+(\w+)\s+of\s+([^"]+)"[^>]*>([\s\S]*?)</ng-container>',
    re.IGNORECASE,
)


def _loop_marker(match: "re.Match[str]") -> str:
    variable, iterable, body = match.groups()
    return f"<!--F:{variable}:{iterable}-->{body.strip()}<!--/F-->"


def mark_select_loops(template: str) -> str:
    """Replace loop containers inside <select>/<optgroup> with comment markers."""

    def replace(match: "re.Match[str]") -> str:
        tag, attrs, inner = match.groups()
        inner = LOOP_CONTAINER_PATTERN.sub(_loop_marker, inner)
        return f"<{tag}{attrs}>{inner}</{tag}>"

    return SELECT_PATTERN.sub(replace, template)
