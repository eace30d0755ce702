"""Concrete writers and transforms plugged into the dispatcher."""

from __future__ import annotations

from .transforms import (
    ColorTransform,
    HSLColor,
    LevelColoringStrategy,
    NamespaceColoringStrategy,
    PrefixTransform,
    RGBColor,
    chain_transforms,
    identity_transform,
)
from .writers import CompositeWriter, ConsoleWriter, NullWriter, RecordingWriter

__all__ = [
    "ColorTransform",
    "CompositeWriter",
    "ConsoleWriter",
    "HSLColor",
    "LevelColoringStrategy",
    "NamespaceColoringStrategy",
    "NullWriter",
    "PrefixTransform",
    "RGBColor",
    "RecordingWriter",
    "chain_transforms",
    "identity_transform",
]
