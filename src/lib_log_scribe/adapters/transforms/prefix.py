"""Transform prepending a formatted prefix to every message.

Format specifiers
-----------------
==========  ==============================================================
``%m``      method being invoked (``debug``, ``warn``, ...)
``%M``      method in uppercase (``DEBUG``, ``WARN``, ...)
``%n``      namespace of the handle; ``*`` for the root handle
``%%``      a literal ``%``
==========  ==============================================================

Any other ``%`` sequence is copied unchanged.
"""

from __future__ import annotations

import re

from lib_log_scribe.application.ports import TransformPort
from lib_log_scribe.domain import LogRecord

_SPECIFIER_RE = re.compile(r"%[%mMn]")


class PrefixTransform(TransformPort):
    """Prefix ``record.message`` with ``fmt`` after expanding specifiers.

    Examples
    --------
    >>> from types import SimpleNamespace
    >>> from lib_log_scribe.domain import LogLevel
    >>> handle = SimpleNamespace(namespace="module:feature")
    >>> transform = PrefixTransform("[%M] %n - ")
    >>> transform(LogRecord(handle, LogLevel.WARN, "a message")).message
    '[WARN] module:feature - a message'
    """

    def __init__(self, fmt: str) -> None:
        self._format = fmt

    @property
    def format(self) -> str:
        return self._format

    def prefix_for(self, record: LogRecord) -> str:
        """Return the expanded prefix for ``record``."""

        def expand(match: re.Match[str]) -> str:
            token = match.group(0)
            if token == "%%":
                return "%"
            if token == "%m":
                return record.method.severity
            if token == "%M":
                return record.method.severity.upper()
            return record.namespace or "*"

        return _SPECIFIER_RE.sub(expand, self._format)

    def __call__(self, record: LogRecord) -> LogRecord:
        return record.replace(message=f"{self.prefix_for(record)}{record.message}")


__all__ = ["PrefixTransform"]
