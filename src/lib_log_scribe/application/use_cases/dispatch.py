"""Use case turning an accepted handle call into a written record.

Purpose
-------
Build the single callback every :class:`~lib_log_scribe.runtime.LoggerHandle`
shares. Handles only hold a reference to it, so swapping the writer or the
transform on the scribe applies to handles created earlier.

Contents
--------
* :func:`create_dispatch` - factory returning the shared callback.

System Role
-----------
The only place where asynchrony appears: a transform may return an awaitable,
in which case the writer runs once it resolves. Gating and writing stay
synchronous. Exceptions from the transform or writer are not caught.
"""

from __future__ import annotations

import asyncio
import inspect
import logging
from typing import Any, Awaitable, Callable, Optional, Sequence

from lib_log_scribe.application.ports import TransformPort, WriterPort
from lib_log_scribe.domain import LogLevel, LogParameter, LogRecord

logger = logging.getLogger(__name__)

DispatchCallable = Callable[[Any, LogLevel, LogParameter, Sequence[LogParameter]], Optional["asyncio.Task[None]"]]


def create_dispatch(
    *,
    get_writer: Callable[[], WriterPort],
    get_transform: Callable[[], TransformPort | None],
) -> DispatchCallable:
    """Return the callback shared by all handles of one scribe.

    Parameters
    ----------
    get_writer:
        Returns the writer active at call time.
    get_transform:
        Returns the active transform or ``None``.

    Returns
    -------
    Callable
        ``dispatch(log, method, message, args)`` returning ``None`` once the
        record is written, or the :class:`asyncio.Task` that will write it when
        an asynchronous transform runs inside an event loop.

    Examples
    --------
    >>> from types import SimpleNamespace
    >>> written = []
    >>> dispatch = create_dispatch(get_writer=lambda: written.append, get_transform=lambda: None)
    >>> handle = SimpleNamespace(namespace="app", level=LogLevel.INFO)
    >>> dispatch(handle, LogLevel.DEBUG, "hidden", ())
    >>> dispatch(handle, LogLevel.WARN, "shown", (1,))
    >>> [(record.message, record.args) for record in written]
    [('shown', (1,))]
    """

    pending: set[asyncio.Task[None]] = set()

    async def finish(deferred: Awaitable[LogRecord]) -> None:
        record = await deferred
        get_writer()(record)

    def write_deferred(deferred: Awaitable[LogRecord]) -> Optional["asyncio.Task[None]"]:
        try:
            loop = asyncio.get_running_loop()
        except RuntimeError:
            asyncio.run(finish(deferred))
            return None
        task = loop.create_task(finish(deferred))
        pending.add(task)
        task.add_done_callback(pending.discard)
        logger.debug("deferred write scheduled for %s", getattr(deferred, "__qualname__", deferred))
        return task

    def dispatch(
        log: Any,
        method: LogLevel,
        message: LogParameter,
        args: Sequence[LogParameter],
    ) -> Optional["asyncio.Task[None]"]:
        if not log.level.allows(method):
            return None

        record = LogRecord(log=log, method=method, message=message, args=tuple(args))
        transform = get_transform()
        if transform is not None:
            result = transform(record)
            if inspect.isawaitable(result):
                return write_deferred(result)
            record = result

        get_writer()(record)
        return None

    return dispatch


__all__ = ["DispatchCallable", "create_dispatch"]
