"""Dispatcher owning handles, level rules, writer and transform.

Purpose
-------
Compose the namespace validator, the level registry, the handle cache and the
dispatch use case into one explicit state object. The process-wide default
lives in :mod:`lib_log_scribe.runtime`; tests build their own instances.

Contents
--------
* :class:`Scribe` - ``get_log``/``set_level``/``reset`` plus the mutable
  ``writer`` and ``transform`` attributes.
"""

from __future__ import annotations

import logging
from threading import RLock
from typing import Callable, Iterable, Mapping

from lib_log_scribe.adapters.writers import ConsoleWriter
from lib_log_scribe.application.ports import TransformPort, WriterPort
from lib_log_scribe.application.use_cases import create_dispatch
from lib_log_scribe.domain import (
    LevelRegistry,
    LevelRule,
    LogLevel,
    coerce_level,
    validate_namespace,
    validate_pattern,
)

from ._handle import LoggerHandle

logger = logging.getLogger(__name__)

LevelSpec = Mapping[str, "str | LogLevel"] | Iterable[tuple[str, "str | LogLevel"]]


class Scribe:
    """Registry of namespaced handles bound to one set of level rules.

    Parameters
    ----------
    writer_factory:
        Builds the writer installed at construction and on every
        :meth:`reset`. Defaults to :class:`ConsoleWriter`.

    Examples
    --------
    >>> from lib_log_scribe.adapters.writers import RecordingWriter
    >>> scribe = Scribe(writer_factory=RecordingWriter)
    >>> log = scribe.get_log("app:db")
    >>> log is scribe.get_log("app:db")
    True
    >>> log.level.severity
    'error'
    >>> scribe.set_level("app:*", "debug")
    >>> log.level.severity
    'debug'
    >>> log.debug("connected", 3)
    >>> scribe.writer.messages
    ['connected']
    """

    def __init__(self, *, writer_factory: Callable[[], WriterPort] = ConsoleWriter) -> None:
        self._lock = RLock()
        self._writer_factory = writer_factory
        self._levels = LevelRegistry()
        self._dispatch = create_dispatch(get_writer=lambda: self.writer, get_transform=lambda: self.transform)
        self.writer: WriterPort = writer_factory()
        self.transform: TransformPort | None = None
        self._root = self._create_root()
        self._logs: dict[str, LoggerHandle] = {}

    @property
    def log(self) -> LoggerHandle:
        """The root handle, governed by the ``"*"`` rule."""

        return self._root

    def get_log(self, namespace: str) -> LoggerHandle:
        """Return the handle for ``namespace``, creating and caching it on first use.

        Raises
        ------
        InvalidNamespaceError
            When ``namespace`` is empty or malformed; nothing is cached.
        """
        validate_namespace(namespace)
        with self._lock:
            handle = self._logs.get(namespace)
            if handle is None:
                handle = LoggerHandle(namespace, self._levels.resolve_level(namespace), self._dispatch)
                self._logs[namespace] = handle
            return handle

    def set_level(self, pattern: str, level: str | LogLevel) -> None:
        """Register ``pattern`` at ``level`` and refresh every issued handle.

        Raises
        ------
        InvalidPatternError
            When ``pattern`` is empty or contains disallowed characters.
        ValueError
            When ``level`` is not a known level name.
        """
        with self._lock:
            rule = self._levels.set_level(pattern, level)
            for handle in (self._root, *self._logs.values()):
                handle._set_level(self._levels.resolve_level(handle.namespace))
        logger.debug("level rule %r set to %s", rule.pattern, rule.level.severity)

    def resolve_level(self, namespace: str | None) -> LogLevel:
        """Return the level a handle for ``namespace`` would receive now."""

        with self._lock:
            return self._levels.resolve_level(namespace)

    def rules(self) -> tuple[LevelRule, ...]:
        """Snapshot of the level rules in match order (newest first)."""

        with self._lock:
            return self._levels.rules

    def levels(self) -> list[tuple[str, LogLevel]]:
        """Return ``(pattern, level)`` pairs in match order."""

        return [(rule.pattern, rule.level) for rule in self.rules()]

    def configure(
        self,
        *,
        levels: LevelSpec | None = None,
        writer: WriterPort | None = None,
        transform: TransformPort | None = None,
    ) -> None:
        """Apply several settings at once.

        ``levels`` entries are registered in iteration order, so later entries
        win where patterns overlap. Every entry is validated before the first
        one is applied.
        """
        items = list(levels.items()) if isinstance(levels, Mapping) else list(levels or ())
        resolved = [(validate_pattern(pattern), coerce_level(level)) for pattern, level in items]
        with self._lock:
            for pattern, level in resolved:
                self.set_level(pattern, level)
            if writer is not None:
                self.writer = writer
            if transform is not None:
                self.transform = transform

    def reset(self) -> None:
        """Restore the pristine state: root rule only, no cached handles,
        no transform, default writer."""

        with self._lock:
            self.transform = None
            self.writer = self._writer_factory()
            self._levels.reset()
            self._logs.clear()
            self._root = self._create_root()
        logger.debug("scribe reset")

    def _create_root(self) -> LoggerHandle:
        return LoggerHandle(None, self._levels.resolve_level(None), self._dispatch)

    def __repr__(self) -> str:
        return f"Scribe(logs={len(self._logs)}, rules={len(self._levels)})"


__all__ = ["LevelSpec", "Scribe"]
