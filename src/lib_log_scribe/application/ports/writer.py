"""Ports describing the sink and rewrite stages of the dispatch path.

Purpose
-------
Define the two callables the dispatcher composes so adapters (console, composite,
prefix, color) plug in without the runtime knowing their types.

Contents
--------
* :class:`WriterPort` - terminal sink, ``writer(record) -> None``.
* :class:`TransformPort` - rewrite step returning a record or an awaitable of one.
"""

from __future__ import annotations

from typing import Awaitable, Protocol, Union, runtime_checkable

from lib_log_scribe.domain.record import LogRecord

TransformResult = Union[LogRecord, Awaitable[LogRecord]]


@runtime_checkable
class WriterPort(Protocol):
    """Render an accepted record."""

    def __call__(self, record: LogRecord) -> None:
        """Write ``record``; called exactly once per accepted log call."""


@runtime_checkable
class TransformPort(Protocol):
    """Rewrite a record before it reaches the writer."""

    def __call__(self, record: LogRecord) -> TransformResult:
        """Return the record to write, synchronously or as an awaitable."""


__all__ = ["TransformPort", "TransformResult", "WriterPort"]
