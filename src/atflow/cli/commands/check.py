"""Check command - report control flow left uncompiled"""

from __future__ import annotations

from pathlib import Path
from typing import Optional

import typer
from rich.markup import escape
from rich.table import Table

from atflow.cli.errors import handle_error
from atflow.template import find_unresolved

from .utils import build_pipeline, console, setup_logging


def check_command(
    input_path: Path,
    config_path: Optional[Path] = None,
    verbose: bool = False,
) -> None:
    """Compile a template and list @if/@for/@else tokens that remain."""
    setup_logging(verbose)

    try:
        compiled = build_pipeline(config_path).compile_file(input_path)
    except Exception as e:
        handle_error(e)

    unresolved = find_unresolved(compiled)
    if not unresolved:
        console.print(f"[green]OK[/green] {input_path}: all control flow compiled")
        return

    table = Table(title=str(input_path))
    table.add_column("Line", justify="right", style="cyan")
    table.add_column("Col", justify="right", style="cyan")
    table.add_column("Block", style="yellow")
    table.add_column("Text")

    for item in unresolved:
        table.add_row(
            str(item.line),
            str(item.column),
            f"@{item.keyword}",
            escape(item.snippet),
        )

    console.print(table)
    console.print(f"[red]{len(unresolved)} unresolved block(s)[/red]")
    raise typer.Exit(code=1)
