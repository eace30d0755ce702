"""Domain values and rules used by the logging facade."""

from __future__ import annotations

from .errors import ArgumentError, IllegalStateError, InvalidNamespaceError, InvalidPatternError
from .level_rules import DEFAULT_ROOT_LEVEL, LevelRegistry, LevelRule
from .levels import LOG_METHODS, LogLevel, coerce_level
from .namespaces import ROOT_PATTERN, compile_pattern, validate_namespace, validate_pattern
from .record import LogParameter, LogRecord

__all__ = [
    "ArgumentError",
    "DEFAULT_ROOT_LEVEL",
    "IllegalStateError",
    "InvalidNamespaceError",
    "InvalidPatternError",
    "LOG_METHODS",
    "LevelRegistry",
    "LevelRule",
    "LogLevel",
    "LogParameter",
    "LogRecord",
    "ROOT_PATTERN",
    "coerce_level",
    "compile_pattern",
    "validate_namespace",
    "validate_pattern",
]
