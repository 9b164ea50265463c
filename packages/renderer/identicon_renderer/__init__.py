"""Renderer package for deterministic identicon images."""

from .color import derive_foreground, hsl_to_rgb
from .errors import ConfigurationError, IdenticonError, InvalidInputError
from .hashing import clock_seed_hash, create_hash_from_string, hash_value
from .identicon import Identicon
from .layout import cell_grid, compute_cells, compute_geometry
from .models import Color, DrawCommand, Geometry, IdenticonOptions
from .surfaces import RasterSurface, Surface, VectorSurface, select_surface, surface_class

__all__ = [
    "Color",
    "ConfigurationError",
    "DrawCommand",
    "Geometry",
    "Identicon",
    "IdenticonError",
    "IdenticonOptions",
    "InvalidInputError",
    "RasterSurface",
    "Surface",
    "VectorSurface",
    "cell_grid",
    "clock_seed_hash",
    "compute_cells",
    "compute_geometry",
    "create_hash_from_string",
    "derive_foreground",
    "hash_value",
    "hsl_to_rgb",
    "select_surface",
    "surface_class",
]
