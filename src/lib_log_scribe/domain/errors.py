"""Exceptions raised by the facade.

Argument validation failures carry the offending parameter name and a readable
reason so callers can tell a bad namespace from a bad pattern without parsing
messages.
"""

from __future__ import annotations


class ArgumentError(ValueError):
    """Invalid argument passed to a public operation."""

    def __init__(self, parameter: str, reason: str) -> None:
        super().__init__(f"{parameter}: {reason}")
        self.parameter = parameter
        self.reason = reason


class InvalidNamespaceError(ArgumentError):
    """Namespace is empty or does not follow ``module[:feature[/method...]]``."""


class InvalidPatternError(ArgumentError):
    """Namespace pattern is empty or contains disallowed characters."""


class IllegalStateError(RuntimeError):
    """Internal invariant broken; indicates a bug rather than bad input."""


__all__ = [
    "ArgumentError",
    "IllegalStateError",
    "InvalidNamespaceError",
    "InvalidPatternError",
]
