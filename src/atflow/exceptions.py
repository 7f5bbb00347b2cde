"""atflow Exceptions

Custom exceptions for the atflow template compiler.

The `ControlFlowError` family is raised while scanning and parsing blocks
and is always caught by the driver; callers of `transform()` never see it.
"""

from __future__ import annotations


class AtflowError(Exception):
    """Base exception for all atflow errors."""

    pass


class ConfigError(AtflowError):
    """Raised when atflow.yaml is invalid or names an unknown environment."""

    pass


class ControlFlowError(AtflowError):
    """Base for degrade conditions detected at a text offset."""

    def __init__(self, message: str, position: int):
        self.position = position
        super().__init__(f"{message} at offset {position}")


class UnbalancedDelimiter(ControlFlowError):
    """Raised when a ( or { group never closes before end of text."""

    def __init__(self, position: int):
        super().__init__("Unbalanced delimiter", position)


class MalformedHeader(ControlFlowError):
    """Raised when a block header does not have the expected shape."""

    def __init__(self, position: int, header: str = ""):
        self.header = header
        super().__init__(f"Malformed block header {header!r}", position)


class BrokenContinuation(ControlFlowError):
    """Raised when an @else / @else if segment cannot be parsed."""

    def __init__(self, position: int):
        super().__init__("Broken @else continuation", position)
