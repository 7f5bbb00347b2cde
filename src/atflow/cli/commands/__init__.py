"""CLI commands"""

from .check import check_command
from .compile import compile_command

__all__ = ["check_command", "compile_command"]
