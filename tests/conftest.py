from __future__ import annotations

from io import StringIO
from typing import Iterator

import pytest
from rich.console import Console

from lib_log_scribe import runtime
from lib_log_scribe.adapters.writers import RecordingWriter
from lib_log_scribe.runtime import Scribe


@pytest.fixture
def record_console() -> Console:
    """Rich console writing to memory with recording enabled."""

    return Console(file=StringIO(), record=True, width=120, color_system=None)


@pytest.fixture
def scribe() -> Scribe:
    """Fresh scribe whose writer records every accepted call."""

    return Scribe(writer_factory=RecordingWriter)


@pytest.fixture
def recorder(scribe: Scribe) -> RecordingWriter:
    writer = scribe.writer
    assert isinstance(writer, RecordingWriter)
    return writer


@pytest.fixture(autouse=True)
def _isolate_default_scribe() -> Iterator[None]:
    """Give every test its own process-default scribe."""

    runtime.clear_scribe()
    try:
        yield
    finally:
        runtime.clear_scribe()
