"""Helpers for building a single transform out of several."""

from __future__ import annotations

import inspect
from typing import Awaitable

from lib_log_scribe.application.ports import TransformPort, TransformResult
from lib_log_scribe.domain import LogRecord


def identity_transform(record: LogRecord) -> LogRecord:
    """Return ``record`` unchanged."""

    return record


def chain_transforms(*transforms: TransformPort) -> TransformPort:
    """Compose ``transforms`` left to right into one transform.

    The composite stays synchronous while every stage is. Once a stage returns
    an awaitable, the remaining stages run inside a single coroutine, which the
    composite returns.

    Examples
    --------
    >>> from types import SimpleNamespace
    >>> from lib_log_scribe.domain import LogLevel
    >>> shout = lambda record: record.replace(message=str(record.message).upper())
    >>> bang = lambda record: record.replace(message=f"{record.message}!")
    >>> combined = chain_transforms(shout, bang)
    >>> combined(LogRecord(SimpleNamespace(namespace=None), LogLevel.INFO, "hi")).message
    'HI!'
    """
    stages = tuple(transforms)

    async def finish(pending: Awaitable[LogRecord], remaining: tuple[TransformPort, ...]) -> LogRecord:
        record = await pending
        for stage in remaining:
            result = stage(record)
            record = await result if inspect.isawaitable(result) else result
        return record

    def chained(record: LogRecord) -> TransformResult:
        for index, stage in enumerate(stages):
            result = stage(record)
            if inspect.isawaitable(result):
                return finish(result, stages[index + 1 :])
            record = result
        return record

    return chained


__all__ = ["chain_transforms", "identity_transform"]
