"""Property bindings - `[camelProp]="..."` is written as `[camel-prop]="..."`.

The runtime reads bound properties from attribute names, and the HTML parser
lowercases those, so camel case is spelled out in kebab case at build time.
"""

import re

INPUT_BINDING_PATTERN = re.compile(r'\[([a-zA-Z][a-zA-Z0-9]*)\]="')
CAMEL_BOUNDARY_PATTERN = re.compile(r"([a-z])([A-Z])")


def camel_to_kebab(name: str) -> str:
    return CAMEL_BOUNDARY_PATTERN.sub(r"\1-\2", name).lower()


def kebab_input_bindings(template: str) -> str:
    return INPUT_BINDING_PATTERN.sub(
        lambda match: f'[{camel_to_kebab(match.group(1))}]="', template
    )
