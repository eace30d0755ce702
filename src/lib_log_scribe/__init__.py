"""Namespaced logging facade with glob level rules and pluggable writers.

Callers obtain a handle per namespace (``module[:feature[/method...]]``) and
call ``trace``..``error`` on it. Each handle's threshold comes from an ordered
list of wildcard rules where the most recently registered matching rule wins.
Accepted calls pass through an optional transform and reach the writer.

>>> from lib_log_scribe import Scribe, RecordingWriter, PrefixTransform
>>> scribe = Scribe(writer_factory=RecordingWriter)
>>> scribe.set_level("module:*", "warn")
>>> scribe.transform = PrefixTransform("[%M] %n - ")
>>> scribe.get_log("module:feature").warn("a message")
>>> scribe.writer.messages
['[WARN] module:feature - a message']
"""

from __future__ import annotations

from .__init__conf__ import version as __version__
from .adapters import (
    ColorTransform,
    CompositeWriter,
    ConsoleWriter,
    HSLColor,
    LevelColoringStrategy,
    NamespaceColoringStrategy,
    NullWriter,
    PrefixTransform,
    RecordingWriter,
    RGBColor,
    chain_transforms,
    identity_transform,
)
from .domain import (
    ArgumentError,
    IllegalStateError,
    InvalidNamespaceError,
    InvalidPatternError,
    LogLevel,
    LogParameter,
    LogRecord,
    validate_namespace,
    validate_pattern,
)
from .runtime import (
    LoggerHandle,
    Scribe,
    current_scribe,
    get_log,
    get_root_log,
    reset,
    set_level,
    set_scribe,
    set_transform,
    set_writer,
)

__all__ = [
    "ArgumentError",
    "ColorTransform",
    "CompositeWriter",
    "ConsoleWriter",
    "HSLColor",
    "IllegalStateError",
    "InvalidNamespaceError",
    "InvalidPatternError",
    "LevelColoringStrategy",
    "LogLevel",
    "LogParameter",
    "LogRecord",
    "LoggerHandle",
    "NamespaceColoringStrategy",
    "NullWriter",
    "PrefixTransform",
    "RGBColor",
    "RecordingWriter",
    "Scribe",
    "__version__",
    "chain_transforms",
    "current_scribe",
    "get_log",
    "get_root_log",
    "identity_transform",
    "reset",
    "set_level",
    "set_scribe",
    "set_transform",
    "set_writer",
    "validate_namespace",
    "validate_pattern",
]
