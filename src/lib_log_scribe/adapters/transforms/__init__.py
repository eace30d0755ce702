"""Transforms: record-rewriting steps applied before the writer."""

from __future__ import annotations

from .chain import chain_transforms, identity_transform
from .color import (
    ColorOutOfRangeError,
    ColorTransform,
    ColoringStrategy,
    HSLColor,
    LevelColoringStrategy,
    LogColor,
    NamespaceColoringStrategy,
    RGBColor,
    UnsupportedColorError,
    validate_color,
)
from .prefix import PrefixTransform

__all__ = [
    "ColorOutOfRangeError",
    "ColorTransform",
    "ColoringStrategy",
    "HSLColor",
    "LevelColoringStrategy",
    "LogColor",
    "NamespaceColoringStrategy",
    "PrefixTransform",
    "RGBColor",
    "UnsupportedColorError",
    "chain_transforms",
    "identity_transform",
    "validate_color",
]
