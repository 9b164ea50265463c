"""Typed renderer models."""

from __future__ import annotations

import math
from dataclasses import dataclass
from typing import Any, Mapping, Sequence

from .errors import ConfigurationError

DEFAULT_BACKGROUND: tuple[float, float, float, float] = (240, 240, 240, 255)
DEFAULT_MARGIN = 0.08
DEFAULT_SIZE = 64
DEFAULT_FORMAT = "png"
OPAQUE = 255


@dataclass(frozen=True)
class Color:
    """RGBA color with channels on the 0-255 scale.

    Channels may be fractional until a surface quantizes them.
    """

    red: float
    green: float
    blue: float
    alpha: float = OPAQUE

    @classmethod
    def from_channels(cls, channels: Sequence[float]) -> Color:
        if len(channels) == 3:
            return cls(channels[0], channels[1], channels[2])
        return cls(channels[0], channels[1], channels[2], channels[3])

    def as_tuple(self) -> tuple[float, float, float, float]:
        return (self.red, self.green, self.blue, self.alpha)


@dataclass(frozen=True)
class DrawCommand:
    x: int
    y: int
    width: int
    height: int
    color: Color


@dataclass(frozen=True)
class Geometry:
    size: int
    base_margin: int
    cell: int
    margin: int


def _is_number(value: Any) -> bool:
    return isinstance(value, (int, float)) and not isinstance(value, bool) and math.isfinite(value)


def _channels(name: str, value: Any) -> tuple[float, ...]:
    if isinstance(value, (str, bytes)) or not isinstance(value, Sequence):
        raise ConfigurationError(f"{name} must be a sequence of 3 or 4 channels")
    if len(value) not in (3, 4):
        raise ConfigurationError(f"{name} must have 3 or 4 channels, got {len(value)}")
    for channel in value:
        if not _is_number(channel) or not 0 <= channel <= 255:
            raise ConfigurationError(f"{name} channels must be numbers in [0, 255], got {channel!r}")
    return tuple(value)


@dataclass(frozen=True)
class IdenticonOptions:
    """Validated render options.

    ``format`` selects the vector surface when it contains ``svg`` in any
    case; every other value renders a PNG.
    """

    background: tuple[float, ...] = DEFAULT_BACKGROUND
    foreground: tuple[float, ...] | None = None
    margin: float = DEFAULT_MARGIN
    size: int = DEFAULT_SIZE
    format: str = DEFAULT_FORMAT

    def __post_init__(self) -> None:
        object.__setattr__(self, "background", _channels("background", self.background))
        if self.foreground is not None:
            object.__setattr__(self, "foreground", _channels("foreground", self.foreground))

        if not isinstance(self.size, int) or isinstance(self.size, bool) or self.size <= 0:
            raise ConfigurationError(f"size must be a positive integer, got {self.size!r}")
        if not _is_number(self.margin) or not 0 <= self.margin <= 0.5:
            raise ConfigurationError(f"margin must be a number in [0, 0.5], got {self.margin!r}")
        if not isinstance(self.format, str):
            raise ConfigurationError(f"format must be a string, got {self.format!r}")

    @classmethod
    def from_mapping(cls, raw: Mapping[str, Any]) -> IdenticonOptions:
        """Build options from loose config, treating missing or ``None`` keys as defaults."""
        if not isinstance(raw, Mapping):
            raise ConfigurationError("options must be a mapping")
        kwargs = {}
        for key in ("background", "foreground", "margin", "size", "format"):
            value = raw.get(key)
            if value is not None:
                kwargs[key] = value
        return cls(**kwargs)

    @property
    def is_svg(self) -> bool:
        return "svg" in self.format.lower()
