"""Protocols consumed by the dispatch use case."""

from __future__ import annotations

from .writer import TransformPort, TransformResult, WriterPort

__all__ = ["TransformPort", "TransformResult", "WriterPort"]
