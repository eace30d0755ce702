"""Value passed from the dispatcher to transforms and writers.

Purpose
-------
Describe an accepted log call as an immutable record so transforms return
modified copies instead of mutating shared state.

Contents
--------
* :data:`LogParameter` - closed union of values accepted as message/args.
* :class:`LogRecord` - ``(log, method, message, args)`` dataclass.
"""

from __future__ import annotations

from collections.abc import Mapping, Sequence
from dataclasses import dataclass, replace
from typing import TYPE_CHECKING, Any, Union

from .levels import LogLevel

if TYPE_CHECKING:  # pragma: no cover - typing only
    from lib_log_scribe.runtime._handle import LoggerHandle

LogParameter = Union[str, int, float, bool, Sequence[Any], Mapping[str, Any], BaseException, None]
"""Values a caller may pass as message or extra argument."""


@dataclass(slots=True, frozen=True)
class LogRecord:
    """An accepted log call.

    Attributes
    ----------
    log:
        Handle that produced the call; ``log.namespace`` is ``None`` for root.
    method:
        Level of the invoked method (never ``SILENT``).
    message:
        First positional argument, untouched unless a transform replaced it.
    args:
        Remaining positional arguments in call order.
    """

    log: "LoggerHandle"
    method: LogLevel
    message: LogParameter
    args: tuple[LogParameter, ...] = ()

    def __post_init__(self) -> None:
        if not self.method.is_method:
            raise ValueError(f"{self.method.name} cannot be used as a log method")
        object.__setattr__(self, "args", tuple(self.args))

    @property
    def namespace(self) -> str | None:
        """Namespace of the emitting handle."""

        return self.log.namespace

    def replace(self, **changes: Any) -> "LogRecord":
        """Return a copied record with ``changes`` applied."""

        return replace(self, **changes)


__all__ = ["LogParameter", "LogRecord"]
