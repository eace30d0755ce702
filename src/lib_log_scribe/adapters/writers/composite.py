"""Fan-out writer broadcasting one record to several sinks."""

from __future__ import annotations

from lib_log_scribe.application.ports import WriterPort
from lib_log_scribe.domain import LogRecord


class CompositeWriter(WriterPort):
    """Forward every record to ``writers`` in the order given.

    A failing writer stops the broadcast and the exception reaches the caller,
    matching the dispatcher's no-swallow policy.

    Examples
    --------
    >>> first, second = [], []
    >>> writer = CompositeWriter(first.append, second.append)
    >>> len(writer.writers)
    2
    """

    def __init__(self, *writers: WriterPort) -> None:
        self._writers: tuple[WriterPort, ...] = tuple(writers)

    @property
    def writers(self) -> tuple[WriterPort, ...]:
        return self._writers

    def __call__(self, record: LogRecord) -> None:
        for writer in self._writers:
            writer(record)


__all__ = ["CompositeWriter"]
