"""Per-namespace logger handle."""

from __future__ import annotations

from typing import Any, Callable

from lib_log_scribe.domain import LogLevel, LogParameter


class LoggerHandle:
    """Leveled logging methods gated on the handle's current threshold.

    Handles are created and cached by :class:`~lib_log_scribe.runtime.Scribe`;
    callers never construct them. ``level`` is read-only from the outside and
    is refreshed by the scribe whenever level rules change.

    Each method returns ``None``, or the :class:`asyncio.Task` writing the record
    when an asynchronous transform is active inside an event loop.
    """

    __slots__ = ("_namespace", "_level", "_dispatch")

    def __init__(self, namespace: str | None, level: LogLevel, dispatch: Callable[..., Any]) -> None:
        self._namespace = namespace
        self._level = level
        self._dispatch = dispatch

    @property
    def namespace(self) -> str | None:
        """Namespace string, or ``None`` for the root handle."""

        return self._namespace

    @property
    def level(self) -> LogLevel:
        """Current threshold; refreshed by the owning scribe when rules change."""

        return self._level

    def _set_level(self, level: LogLevel) -> None:
        self._level = level

    def is_enabled_for(self, method: LogLevel) -> bool:
        """Return ``True`` when a call at ``method`` would reach the writer."""

        return self._level.allows(method)

    def trace(self, message: LogParameter, *args: LogParameter) -> Any:
        return self._log(LogLevel.TRACE, message, args)

    def debug(self, message: LogParameter, *args: LogParameter) -> Any:
        return self._log(LogLevel.DEBUG, message, args)

    def info(self, message: LogParameter, *args: LogParameter) -> Any:
        return self._log(LogLevel.INFO, message, args)

    def warn(self, message: LogParameter, *args: LogParameter) -> Any:
        return self._log(LogLevel.WARN, message, args)

    def error(self, message: LogParameter, *args: LogParameter) -> Any:
        return self._log(LogLevel.ERROR, message, args)

    def _log(self, method: LogLevel, message: LogParameter, args: tuple[LogParameter, ...]) -> Any:
        if not self._level.allows(method):
            return None
        return self._dispatch(self, method, message, args)

    def __repr__(self) -> str:
        namespace = "*" if self._namespace is None else self._namespace
        return f"LoggerHandle({namespace!r}, level={self._level.severity})"


__all__ = ["LoggerHandle"]
