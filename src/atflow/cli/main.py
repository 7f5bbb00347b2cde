"""atflow CLI Main Entry Point

Compiles @if / @else if / @else and @for blocks in template files into
directive-container markup.

Usage:
    atflow compile page.html                  # Print compiled template
    atflow compile page.html -o out.html      # Write to file
    atflow compile page.html --env production # Use an atflow.yaml environment
    atflow check page.html                    # List blocks left uncompiled
    atflow --version                          # Show version
"""

from __future__ import annotations

from pathlib import Path
from typing import List, Optional

import typer

from atflow._version import __version__
from atflow.cli.commands import check_command, compile_command

typer_app = typer.Typer(no_args_is_help=True, add_completion=False)


@typer_app.callback(invoke_without_command=True)
def cli(
    version: bool = typer.Option(False, "--version", help="Show version and exit."),
) -> None:
    """Template control-flow compiler."""
    if version:
        typer.echo(f"atflow {__version__}")
        raise typer.Exit()


@typer_app.command("compile")
def compile_(
    input_path: Path = typer.Argument(..., help="Template file to compile."),
    output: Optional[Path] = typer.Option(
        None, "-o", "--output", help="Write the compiled template to this file."
    ),
    env: Optional[str] = typer.Option(
        None, "-e", "--env", help="Environment from atflow.yaml to use."
    ),
    minify: Optional[bool] = typer.Option(
        None,
        "--minify/--no-minify",
        help="Override the environment's minifyTemplate setting.",
        show_default=False,
    ),
    config_path: Optional[Path] = typer.Option(
        None, "-c", "--config", help="Path to atflow.yaml."
    ),
    verbose: bool = typer.Option(False, "-v", "--verbose", help="Verbose logging."),
) -> None:
    """Compile control flow in a template file.

    \b
    Examples:
        atflow compile page.html
        atflow compile page.html -o dist/page.html --minify
    """
    compile_command(input_path, output, env, minify, config_path, verbose)


@typer_app.command("check")
def check(
    input_path: Path = typer.Argument(..., help="Template file to check."),
    config_path: Optional[Path] = typer.Option(
        None, "-c", "--config", help="Path to atflow.yaml."
    ),
    verbose: bool = typer.Option(False, "-v", "--verbose", help="Verbose logging."),
) -> None:
    """Report @if/@for/@else blocks the compiler leaves as literal text."""
    check_command(input_path, config_path, verbose)


def app(argv: Optional[List[str]] = None) -> None:
    """Entry point for the CLI.

    `argv` defaults to sys.argv; tests may pass an explicit list.
    """
    typer_app(args=argv)


if __name__ == "__main__":
    app()
