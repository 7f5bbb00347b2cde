"""Configuration management for atflow.

Schema of atflow.yaml:
- environment: name of the active environment (default "development")
- environments: dict of per-environment template options
  - minifyTemplate: strip comments and collapse whitespace
  - selectMarkers: rewrite loops inside <select>/<optgroup> to comment markers
  - interpolation: compile {{ }} interpolation in text and attributes
  - inputBindings: rewrite [camelProp] bindings to [camel-prop]
"""

from __future__ import annotations

from pathlib import Path
from typing import Optional

import yaml
from pydantic import BaseModel, Field, ValidationError

from atflow.exceptions import ConfigError

CONFIG_FILENAME = "atflow.yaml"
DEFAULT_ENVIRONMENT = "development"


class EnvironmentConfig(BaseModel):
    """Template options for one environment."""

    model_config = {"populate_by_name": True}

    minify_template: bool = Field(
        default=False,
        alias="minifyTemplate",
        description="Remove comments and collapse whitespace",
    )
    select_markers: bool = Field(
        default=True,
        alias="selectMarkers",
        description="Rewrite loop containers inside <select> to comment markers",
    )
    interpolation: bool = Field(
        default=True,
        description="Compile {{ }} in text and attributes to bindings",
    )
    input_bindings: bool = Field(
        default=True,
        alias="inputBindings",
        description="Write [camelCase] property bindings in kebab case",
    )


class AtflowConfig(BaseModel):
    """Main atflow.yaml configuration."""

    environment: str = Field(
        default=DEFAULT_ENVIRONMENT, description="Active environment name"
    )
    environments: dict[str, EnvironmentConfig] = Field(
        default_factory=dict, description="Per-environment template options"
    )

    def active(self, name: Optional[str] = None) -> EnvironmentConfig:
        """Return the options for `name`, or for the configured environment.

        The default environment falls back to default options when it is not
        declared; any other undeclared name is an error.
        """
        name = name or self.environment
        if name in self.environments:
            return self.environments[name]
        if name == DEFAULT_ENVIRONMENT:
            return EnvironmentConfig()

        known = ", ".join(sorted(self.environments)) or "none"
        raise ConfigError(f"Unknown environment '{name}' (defined: {known})")


def find_config_file(start: Optional[Path] = None) -> Optional[Path]:
    """Find atflow.yaml in `start` (default: cwd) or its parents."""
    cwd = (start or Path.cwd()).resolve()
    for parent in [cwd] + list(cwd.parents):
        candidate = parent / CONFIG_FILENAME
        if candidate.exists():
            return candidate
    return None


def load_config(path: Path) -> AtflowConfig:
    """Load atflow.yaml from path."""
    if not path.exists():
        raise FileNotFoundError(f"Config file not found: {path}")

    try:
        with open(path, encoding="utf-8") as f:
            data = yaml.safe_load(f) or {}
    except yaml.YAMLError as exc:
        raise ConfigError(f"Failed to parse {path}: {exc}") from exc

    if not isinstance(data, dict):
        raise ConfigError(f"{path} must contain a mapping at the top level")

    try:
        return AtflowConfig(**data)
    except ValidationError as exc:
        raise ConfigError(f"Invalid config in {path}: {exc}") from exc


def resolve_config(path: Optional[Path] = None) -> AtflowConfig:
    """Load the given config, the nearest atflow.yaml, or defaults."""
    if path is not None:
        return load_config(path)

    found = find_config_file()
    if found is None:
        return AtflowConfig()
    return load_config(found)
