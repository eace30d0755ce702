"""Runtime façade over the process-wide default :class:`Scribe`.

Purpose
-------
Give host code one well-documented default instance with module-level helpers
(`get_log`, `set_level`, `reset`, `get_root_log`) while keeping the state
object injectable: tests and embedders may build their own :class:`Scribe` or
install one with :func:`set_scribe`.

Contents
--------
* :class:`Scribe` / :class:`LoggerHandle` - re-exported runtime types.
* Module-level helpers delegating to :func:`current_scribe`.
* :func:`set_writer` / :func:`set_transform` - swap sinks on the default.

System Role
-----------
Outer shell of the facade. Everything here is a thin delegation; policy lives
in the domain (:mod:`lib_log_scribe.domain`) and the dispatch use case.
"""

from __future__ import annotations

from lib_log_scribe.application.ports import TransformPort, WriterPort
from lib_log_scribe.domain import LogLevel

from ._handle import LoggerHandle
from ._scribe import LevelSpec, Scribe
from ._state import clear_scribe, current_scribe, has_scribe, set_scribe


def get_log(namespace: str) -> LoggerHandle:
    """Return the cached handle for ``namespace`` from the default scribe.

    Raises
    ------
    InvalidNamespaceError
        When ``namespace`` is empty or malformed.
    """

    return current_scribe().get_log(namespace)


def get_root_log() -> LoggerHandle:
    """Return the root handle of the default scribe."""

    return current_scribe().log


def set_level(pattern: str, level: str | LogLevel) -> None:
    """Register a level rule on the default scribe.

    Examples
    --------
    >>> reset()
    >>> set_level("billing:*", "info")
    >>> get_log("billing:invoice/send").level.severity
    'info'
    >>> reset()
    """

    current_scribe().set_level(pattern, level)


def set_writer(writer: WriterPort) -> None:
    """Replace the writer of the default scribe."""

    current_scribe().writer = writer


def set_transform(transform: TransformPort | None) -> None:
    """Replace (or clear with ``None``) the transform of the default scribe."""

    current_scribe().transform = transform


def reset() -> None:
    """Restore the default scribe to its pristine state."""

    current_scribe().reset()


__all__ = [
    "LevelSpec",
    "LoggerHandle",
    "Scribe",
    "clear_scribe",
    "current_scribe",
    "get_log",
    "get_root_log",
    "has_scribe",
    "reset",
    "set_level",
    "set_scribe",
    "set_transform",
    "set_writer",
]
