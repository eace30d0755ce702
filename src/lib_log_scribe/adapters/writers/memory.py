"""In-process writers used for silencing and capturing output."""

from __future__ import annotations

from lib_log_scribe.application.ports import WriterPort
from lib_log_scribe.domain import LogRecord


class NullWriter(WriterPort):
    """Discard every record."""

    def __call__(self, record: LogRecord) -> None:
        return None


class RecordingWriter(WriterPort):
    """Keep written records in memory, oldest first.

    Examples
    --------
    >>> writer = RecordingWriter()
    >>> writer.records
    []
    """

    def __init__(self) -> None:
        self._records: list[LogRecord] = []

    @property
    def records(self) -> list[LogRecord]:
        """Copy of the captured records."""

        return list(self._records)

    @property
    def messages(self) -> list[object]:
        """Captured ``message`` values, handy for assertions."""

        return [record.message for record in self._records]

    def __call__(self, record: LogRecord) -> None:
        self._records.append(record)

    def __len__(self) -> int:
        return len(self._records)

    def clear(self) -> None:
        self._records.clear()


__all__ = ["NullWriter", "RecordingWriter"]
