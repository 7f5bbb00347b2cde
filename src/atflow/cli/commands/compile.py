"""Compile command - compile one template file"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Optional

import typer

from atflow.cli.errors import handle_error

from .utils import build_pipeline, setup_logging

log = logging.getLogger(__name__)


def compile_command(
    input_path: Path,
    output: Optional[Path] = None,
    env: Optional[str] = None,
    minify: Optional[bool] = None,
    config_path: Optional[Path] = None,
    verbose: bool = False,
) -> None:
    """Compile a template and write it to `output` or stdout."""
    setup_logging(verbose)

    try:
        pipeline = build_pipeline(config_path, env, minify)
        compiled = pipeline.compile_file(input_path)
    except Exception as e:
        handle_error(e)

    if output is None:
        typer.echo(compiled, nl=False)
        return

    output.parent.mkdir(parents=True, exist_ok=True)
    output.write_text(compiled, encoding="utf-8")
    log.info("Wrote compiled template to %s", output)
