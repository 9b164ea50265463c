"""Raster and vector sinks for identicon draw commands."""

from __future__ import annotations

import math
from io import BytesIO

from PIL import Image

from .models import Color, DrawCommand

SVG_NAMESPACE = "http://www.w3.org/2000/svg"


def _clamp(value: int) -> int:
    return max(0, min(255, value))


class Surface:
    """Draw target owned by a single render call.

    Subclasses quantize engine colors with their own rules, so the same
    :class:`Color` can land on slightly different channel values per format.
    """

    mime_type = "application/octet-stream"

    def __init__(self, size: int, background: Color) -> None:
        self.size = size
        self.background = background

    def plot(self, x: int, y: int, width: int, height: int, color: Color) -> None:
        raise NotImplementedError

    def encode(self) -> bytes | str:
        raise NotImplementedError


class RasterSurface(Surface):
    """Palette image backed by Pillow, encoded as PNG."""

    mime_type = "image/png"
    max_colors = 256

    def __init__(self, size: int, background: Color) -> None:
        super().__init__(size, background)
        self.image = Image.new("P", (size, size), 0)
        self._palette: dict[tuple[int, int, int, int], int] = {}
        # Background must own index 0, the fill of a fresh palette image.
        self.color(background)

    @staticmethod
    def quantize(color: Color) -> tuple[int, int, int, int]:
        return tuple(_clamp(int(channel)) for channel in color.as_tuple())  # type: ignore[return-value]

    def color(self, color: Color) -> int:
        key = self.quantize(color)
        index = self._palette.get(key)
        if index is None:
            if len(self._palette) >= self.max_colors:
                raise ValueError(f"palette is full ({self.max_colors} colors)")
            index = len(self._palette)
            self._palette[key] = index
        return index

    @property
    def palette(self) -> list[tuple[int, int, int, int]]:
        return sorted(self._palette, key=self._palette.__getitem__)

    def plot(self, x: int, y: int, width: int, height: int, color: Color) -> None:
        index = self.color(color)
        px = self.image.load()
        for i in range(max(x, 0), min(x + width, self.size)):
            for j in range(max(y, 0), min(y + height, self.size)):
                px[i, j] = index

    def pixel(self, x: int, y: int) -> tuple[int, int, int, int]:
        return self.palette[self.image.getpixel((x, y))]

    def encode(self) -> bytes:
        flat = [channel for entry in self.palette for channel in entry]
        self.image.putpalette(flat, rawmode="RGBA")
        buf = BytesIO()
        self.image.save(buf, format="PNG")
        return buf.getvalue()


def _fmt_alpha(alpha: float) -> str:
    return format(round(alpha, 3), "g")


class VectorSurface(Surface):
    """Rectangle list serialized as SVG markup."""

    mime_type = "image/svg+xml"

    def __init__(self, size: int, background: Color) -> None:
        super().__init__(size, background)
        self.rectangles: list[DrawCommand] = []

    @staticmethod
    def quantize(color: Color) -> tuple[int, int, int, float]:
        red, green, blue = (_clamp(math.floor(c + 0.5)) for c in (color.red, color.green, color.blue))
        return (red, green, blue, round(_clamp(math.floor(color.alpha + 0.5)) / 255, 3))

    @classmethod
    def rgba(cls, color: Color) -> str:
        red, green, blue, alpha = cls.quantize(color)
        return f"rgba({red},{green},{blue},{_fmt_alpha(alpha)})"

    def plot(self, x: int, y: int, width: int, height: int, color: Color) -> None:
        self.rectangles.append(DrawCommand(x, y, width, height, color))

    def visible_rectangles(self) -> list[DrawCommand]:
        background = self.quantize(self.background)
        return [rect for rect in self.rectangles if self.quantize(rect.color) != background]

    def encode(self) -> str:
        parts = [
            f'<svg xmlns="{SVG_NAMESPACE}" width="{self.size}" height="{self.size}"'
            f' style="background-color: {self.rgba(self.background)};">'
        ]
        for rect in self.visible_rectangles():
            parts.append(
                f'<rect x="{rect.x}" y="{rect.y}" width="{rect.width}" height="{rect.height}"'
                f' style="fill: {self.rgba(rect.color)};"/>'
            )
        parts.append("</svg>")
        return "".join(parts)


def surface_class(output_format: str) -> type[Surface]:
    if "svg" in output_format.lower():
        return VectorSurface
    return RasterSurface


def select_surface(output_format: str, size: int, background: Color) -> Surface:
    return surface_class(output_format)(size, background)
