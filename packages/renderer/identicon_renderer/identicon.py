"""Identicon render entry point."""

from __future__ import annotations

import base64
import logging
from typing import Any, Mapping

from .color import derive_foreground
from .errors import ConfigurationError
from .layout import compute_cells, compute_geometry, validate_hash
from .models import Color, Geometry, IdenticonOptions
from .surfaces import Surface, select_surface, surface_class

_log = logging.getLogger("identicon.renderer")


class Identicon:
    """Renders one hash with one set of options.

    Construction validates everything; rendering never fails on input.
    Each :meth:`render` call builds a fresh surface.
    """

    def __init__(
        self,
        image_hash: str,
        options: IdenticonOptions | Mapping[str, Any] | None = None,
    ) -> None:
        self.hash = validate_hash(image_hash)
        if options is None:
            options = IdenticonOptions()
        elif isinstance(options, Mapping):
            options = IdenticonOptions.from_mapping(options)
        elif not isinstance(options, IdenticonOptions):
            raise ConfigurationError(
                f"options must be IdenticonOptions or a mapping, got {type(options).__name__}"
            )
        self.options = options

    @property
    def is_svg(self) -> bool:
        return self.options.is_svg

    @property
    def mime_type(self) -> str:
        return surface_class(self.options.format).mime_type

    @property
    def geometry(self) -> Geometry:
        return compute_geometry(self.options.size, self.options.margin)

    @property
    def background(self) -> Color:
        return Color.from_channels(self.options.background)

    @property
    def foreground(self) -> Color:
        return derive_foreground(self.hash, self.options.foreground)

    def render(self) -> Surface:
        geometry = self.geometry
        surface = select_surface(self.options.format, geometry.size, self.background)
        commands = compute_cells(self.hash, geometry.cell, geometry.margin, surface.background, self.foreground)
        for cmd in commands:
            surface.plot(cmd.x, cmd.y, cmd.width, cmd.height, cmd.color)

        _log.debug(
            f"rendered {type(surface).__name__} size={geometry.size} cell={geometry.cell}",
            extra={"event": "identicon_rendered"},
        )
        return surface

    def encode(self) -> bytes | str:
        return self.render().encode()

    def to_base64(self) -> str:
        payload = self.encode()
        if isinstance(payload, str):
            payload = payload.encode("utf-8")
        return base64.b64encode(payload).decode("ascii")

    def data_url(self) -> str:
        return f"data:{self.mime_type};base64,{self.to_base64()}"

    def __str__(self) -> str:
        return self.to_base64()
