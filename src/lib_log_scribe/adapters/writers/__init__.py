"""Writers: terminal sinks for accepted records."""

from __future__ import annotations

from .composite import CompositeWriter
from .console import ConsoleWriter
from .memory import NullWriter, RecordingWriter

__all__ = ["CompositeWriter", "ConsoleWriter", "NullWriter", "RecordingWriter"]
