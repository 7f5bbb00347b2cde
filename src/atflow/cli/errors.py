"""Shared error handling for the atflow CLI."""

import sys
from typing import NoReturn

import typer

from atflow.exceptions import AtflowError


def exit_with_error(message: str, exit_code: int = 1) -> NoReturn:
    """Exit the program with an error message."""
    typer.secho(f"Error: {message}", err=True, fg=typer.colors.RED)
    sys.exit(exit_code)


def handle_error(error: Exception) -> NoReturn:
    """Handle and exit on atflow errors."""
    if isinstance(error, (AtflowError, FileNotFoundError)):
        exit_with_error(str(error))
    else:
        # Unexpected error
        typer.secho(f"Unexpected error: {error}", err=True, fg=typer.colors.RED)
        sys.exit(1)
