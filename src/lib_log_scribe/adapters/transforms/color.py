"""Transform wrapping messages in terminal colours.

Purpose
-------
Colour each message according to a pluggable strategy: by method (one colour per
level) or by namespace (a random colour assigned on first use and kept for the
lifetime of the strategy).

Contents
--------
* :class:`RGBColor` / :class:`HSLColor` - colour values with range validation.
* :class:`ColoringStrategy` and the two bundled strategies.
* :class:`ColorTransform` - transform applying the chosen colour via Rich.

System Role
-----------
Optional presentation step installed as ``scribe.transform`` (alone or through
:func:`~lib_log_scribe.adapters.transforms.chain_transforms`).
"""

from __future__ import annotations

import colorsys
import random
from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import Mapping, Union

from rich.color import Color, ColorSystem
from rich.style import Style

from lib_log_scribe.application.ports import TransformPort
from lib_log_scribe.domain import LogLevel, LogRecord, coerce_level


class ColorOutOfRangeError(ValueError):
    """A colour component lies outside its valid range."""


class UnsupportedColorError(TypeError):
    """The strategy returned something that is neither RGB nor HSL."""


@dataclass(slots=True, frozen=True)
class RGBColor:
    """Colour with ``red``/``green``/``blue`` components in ``0..255``."""

    red: float
    green: float
    blue: float

    def validate(self) -> None:
        for name in ("red", "green", "blue"):
            value = getattr(self, name)
            if not 0 <= value <= 255:
                raise ColorOutOfRangeError(f"value of {name} should be between 0 and 255, got {value}")

    def to_rich(self) -> Color:
        return Color.from_rgb(self.red, self.green, self.blue)


@dataclass(slots=True, frozen=True)
class HSLColor:
    """Colour with ``hue`` in ``0..360`` and ``saturation``/``lightness`` in ``0..1``."""

    hue: float
    saturation: float
    lightness: float

    def validate(self) -> None:
        if not 0 <= self.hue <= 360:
            raise ColorOutOfRangeError(f"value of hue should be between 0 and 360, got {self.hue}")
        for name in ("saturation", "lightness"):
            value = getattr(self, name)
            if not 0 <= value <= 1:
                raise ColorOutOfRangeError(f"value of {name} should be between 0 and 1, got {value}")

    def to_rich(self) -> Color:
        red, green, blue = colorsys.hls_to_rgb(self.hue / 360.0, self.lightness, self.saturation)
        return Color.from_rgb(red * 255, green * 255, blue * 255)


LogColor = Union[RGBColor, HSLColor]


def validate_color(color: object) -> LogColor:
    """Return ``color`` when it is a valid :data:`LogColor`, else raise."""

    if not isinstance(color, (RGBColor, HSLColor)):
        raise UnsupportedColorError(f"colour must be RGBColor or HSLColor, got {type(color).__name__}")
    color.validate()
    return color


class ColoringStrategy(ABC):
    """Choose the colour of a record."""

    @abstractmethod
    def get_color(self, record: LogRecord) -> LogColor:
        """Return the colour for ``record``."""


class LevelColoringStrategy(ColoringStrategy):
    """Colour by method using a fixed mapping.

    Methods missing from the mapping raise :class:`KeyError` so gaps show up on
    the first call instead of printing uncoloured output.
    """

    def __init__(self, colors: Mapping[LogLevel | str, LogColor]) -> None:
        self._colors: dict[LogLevel, LogColor] = {
            coerce_level(key): validate_color(value) for key, value in colors.items()
        }

    def get_color(self, record: LogRecord) -> LogColor:
        return self._colors[record.method]


class NamespaceColoringStrategy(ColoringStrategy):
    """Assign a random colour per namespace and reuse it on later calls.

    Examples
    --------
    >>> from types import SimpleNamespace
    >>> strategy = NamespaceColoringStrategy(rng=random.Random(7))
    >>> handle = SimpleNamespace(namespace="app:db")
    >>> first = strategy.get_color(LogRecord(handle, LogLevel.INFO, "a"))
    >>> strategy.get_color(LogRecord(handle, LogLevel.ERROR, "b")) == first
    True
    """

    def __init__(self, *, rng: random.Random | None = None) -> None:
        self._rng = rng if rng is not None else random.Random()
        self._namespace_colors: dict[str | None, RGBColor] = {}

    @property
    def assigned(self) -> Mapping[str | None, RGBColor]:
        """Colours handed out so far, keyed by namespace (``None`` for root)."""

        return dict(self._namespace_colors)

    def get_color(self, record: LogRecord) -> LogColor:
        namespace = record.namespace
        color = self._namespace_colors.get(namespace)
        if color is None:
            color = RGBColor(
                red=255 * self._rng.random(),
                green=255 * self._rng.random(),
                blue=255 * self._rng.random(),
            )
            self._namespace_colors[namespace] = color
        return color


class ColorTransform(TransformPort):
    """Render ``record.message`` inside the colour chosen by ``strategy``.

    ``color_system`` selects the ANSI encoding; ``None`` leaves messages
    uncoloured (useful when output is not a terminal).

    Examples
    --------
    >>> from types import SimpleNamespace
    >>> strategy = LevelColoringStrategy({"info": RGBColor(255, 0, 0)})
    >>> transform = ColorTransform(strategy)
    >>> record = LogRecord(SimpleNamespace(namespace="app"), LogLevel.INFO, "hot")
    >>> transform(record).message
    '\\x1b[38;2;255;0;0mhot\\x1b[0m'
    """

    def __init__(self, strategy: ColoringStrategy, *, color_system: ColorSystem | None = ColorSystem.TRUECOLOR) -> None:
        self._strategy = strategy
        self._color_system = color_system

    @property
    def strategy(self) -> ColoringStrategy:
        return self._strategy

    def __call__(self, record: LogRecord) -> LogRecord:
        color = validate_color(self._strategy.get_color(record))
        style = Style(color=color.to_rich())
        message = style.render(str(record.message), color_system=self._color_system)
        return record.replace(message=message)


__all__ = [
    "ColorOutOfRangeError",
    "ColorTransform",
    "ColoringStrategy",
    "HSLColor",
    "LevelColoringStrategy",
    "LogColor",
    "NamespaceColoringStrategy",
    "RGBColor",
    "UnsupportedColorError",
    "validate_color",
]
