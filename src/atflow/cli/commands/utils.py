"""Shared utilities for CLI commands"""

from __future__ import annotations

import logging
import os
from pathlib import Path
from typing import Optional

from rich.console import Console
from rich.logging import RichHandler

from atflow.config import EnvironmentConfig, resolve_config
from atflow.template import TemplatePipeline

console = Console()
err_console = Console(stderr=True)


def setup_logging(verbose: bool = False) -> None:
    """Configure logging for the atflow CLI.

    Log levels:
    - Normal: Only warnings/errors shown
    - Verbose (-v): INFO level - shows which templates are compiled
    - Debug (ATFLOW_DEBUG=1): DEBUG level - shows skipped and malformed blocks
    """
    debug = bool(os.environ.get("ATFLOW_DEBUG"))

    if debug:
        level = logging.DEBUG
    elif verbose:
        level = logging.INFO
    else:
        level = logging.WARNING

    # Logs go to stderr so compiled output on stdout stays clean
    handler = RichHandler(
        console=err_console,
        show_time=verbose,
        show_path=debug,
        rich_tracebacks=True,
    )
    handler.setFormatter(logging.Formatter("%(message)s"))

    logger = logging.getLogger("atflow")
    logger.setLevel(level)
    logger.handlers = [handler]
    logger.propagate = False


def build_pipeline(
    config_path: Optional[Path] = None,
    env: Optional[str] = None,
    minify: Optional[bool] = None,
) -> TemplatePipeline:
    """Build a pipeline from atflow.yaml, with CLI flags taking precedence."""
    environment: EnvironmentConfig = resolve_config(config_path).active(env)
    if minify is not None:
        environment = environment.model_copy(update={"minify_template": minify})
    return TemplatePipeline.from_environment(environment)
