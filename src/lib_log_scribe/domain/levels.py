"""Severity levels ordered for threshold gating.

Purpose
-------
Give the facade a single ordered enumeration used both as rule thresholds and as
the method names exposed by logger handles.

Contents
--------
* :class:`LogLevel` enum ordered ``TRACE < DEBUG < INFO < WARN < ERROR < SILENT``.
* :data:`LOG_METHODS` - the five levels that may be called as methods.

System Role
-----------
Every comparison in the system (handle gate, dispatcher re-check, CLI output)
goes through the ordinal value of :class:`LogLevel`, never the name.
"""

from __future__ import annotations

from enum import Enum


class LogLevel(Enum):
    """Enumerated thresholds; ``SILENT`` is only valid as a rule level."""

    TRACE = 0
    DEBUG = 1
    INFO = 2
    WARN = 3
    ERROR = 4
    SILENT = 5

    @property
    def severity(self) -> str:
        """Return the lowercase name, which doubles as the handle method name."""

        return self.name.lower()

    @property
    def is_method(self) -> bool:
        """Return ``True`` when handles expose a method for this level."""

        return self is not LogLevel.SILENT

    def allows(self, method: "LogLevel") -> bool:
        """Return ``True`` when a call at ``method`` passes this threshold.

        Examples
        --------
        >>> LogLevel.WARN.allows(LogLevel.ERROR)
        True
        >>> LogLevel.WARN.allows(LogLevel.INFO)
        False
        """

        return method.value >= self.value

    def __lt__(self, other: object) -> bool:
        if not isinstance(other, LogLevel):
            return NotImplemented
        return self.value < other.value

    def __le__(self, other: object) -> bool:
        if not isinstance(other, LogLevel):
            return NotImplemented
        return self.value <= other.value

    def __gt__(self, other: object) -> bool:
        if not isinstance(other, LogLevel):
            return NotImplemented
        return self.value > other.value

    def __ge__(self, other: object) -> bool:
        if not isinstance(other, LogLevel):
            return NotImplemented
        return self.value >= other.value

    @classmethod
    def from_name(cls, name: str) -> "LogLevel":
        """Return the level named ``name`` (case-insensitive).

        ``"warning"`` is accepted as an alias of ``WARN`` so values copied from
        stdlib logging configuration keep working.

        Examples
        --------
        >>> LogLevel.from_name(" Debug ") is LogLevel.DEBUG
        True
        >>> LogLevel.from_name("warning") is LogLevel.WARN
        True
        """
        normalized = name.strip().upper()
        normalized = _ALIASES.get(normalized, normalized)
        try:
            return cls[normalized]
        except KeyError as exc:
            raise ValueError(f"Unknown log level: {name!r}") from exc


_ALIASES = {"WARNING": "WARN"}

LOG_METHODS: tuple[LogLevel, ...] = tuple(level for level in LogLevel if level.is_method)
#: Levels that handles expose as ``trace``/``debug``/``info``/``warn``/``error``.


def coerce_level(level: str | LogLevel) -> LogLevel:
    """Normalise level inputs (string or enum) into :class:`LogLevel`.

    Examples
    --------
    >>> coerce_level("info") is LogLevel.INFO
    True
    >>> coerce_level(LogLevel.SILENT) is LogLevel.SILENT
    True
    """
    if isinstance(level, LogLevel):
        return level
    return LogLevel.from_name(level)


__all__ = ["LOG_METHODS", "LogLevel", "coerce_level"]
