"""Foreground color derivation from the hash suffix."""

from __future__ import annotations

import math
import re
from typing import Sequence

from .models import Color

HUE_DIGITS = 7
# Seven F's, not eight: a full 7-digit suffix maps to hue 1.0.
HUE_SCALE = 0xFFFFFFF
SATURATION = 0.5
LIGHTNESS = 0.7

_HEX_PREFIX = re.compile(r"[0-9a-fA-F]*")


def parse_hex_prefix(text: str) -> int:
    """Parse the leading run of hex digits; no digits parses as 0."""
    digits = _HEX_PREFIX.match(text).group()
    return int(digits, 16) if digits else 0


def hue_from_hash(image_hash: str) -> float:
    return parse_hex_prefix(image_hash[-HUE_DIGITS:]) / HUE_SCALE


def hsl_to_rgb(h: float, s: float, b: float) -> tuple[float, float, float]:
    """Convert HSL to RGB with every channel in [0, 1].

    Builds the six piecewise channel ramps once and picks red, green and
    blue from them by rotating the index with the hue sextant.
    """
    h *= 6
    s *= b if b < 0.5 else 1 - b
    b += s
    frac = h % 1
    ramps = [b, b - frac * s * 2]
    s *= 2
    b -= s
    ramps += [b, b, b + frac * s, b + s]

    sextant = math.floor(h)
    return (
        ramps[sextant % 6],
        ramps[(sextant + 4) % 6],
        ramps[(sextant + 2) % 6],
    )


def derive_foreground(image_hash: str, explicit: Sequence[float] | None = None) -> Color:
    if explicit is not None:
        return Color.from_channels(explicit)

    red, green, blue = hsl_to_rgb(hue_from_hash(image_hash), SATURATION, LIGHTNESS)
    return Color(red * 255, green * 255, blue * 255)
