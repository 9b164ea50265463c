"""Mirrored 5x5 grid layout driven by the first 15 hash digits."""

from __future__ import annotations

import math
import string

from .errors import InvalidInputError
from .models import Color, DrawCommand, Geometry

GRID = 5
PATTERN_DIGITS = 15

# Digits 0-4 fill the center column, 5-9 the inner pair, 10-14 the outer pair.
_COLUMN_GROUPS: tuple[tuple[int, ...], ...] = ((2,), (1, 3), (0, 4))


def validate_hash(image_hash: object) -> str:
    if not isinstance(image_hash, str):
        raise InvalidInputError(f"hash must be a string, got {type(image_hash).__name__}")
    if len(image_hash) < PATTERN_DIGITS:
        raise InvalidInputError(
            f"hash must have at least {PATTERN_DIGITS} characters, got {len(image_hash)}"
        )
    return image_hash


def compute_geometry(size: int, margin: float) -> Geometry:
    base_margin = math.floor(size * margin)
    cell = math.floor((size - base_margin * 2) / GRID)
    return Geometry(
        size=size,
        base_margin=base_margin,
        cell=cell,
        margin=math.floor((size - cell * GRID) / 2),
    )


def uses_background(digit: str) -> bool:
    """Odd hex digits select the background; anything else the foreground."""
    return digit in string.hexdigits and int(digit, 16) % 2 == 1


def _cells():
    for i in range(PATTERN_DIGITS):
        row = i % GRID
        for col in _COLUMN_GROUPS[i // GRID]:
            yield i, col, row


def compute_cells(
    image_hash: str,
    cell: int,
    margin: int,
    background: Color,
    foreground: Color,
) -> list[DrawCommand]:
    validate_hash(image_hash)
    commands = []
    for i, col, row in _cells():
        color = background if uses_background(image_hash[i]) else foreground
        commands.append(DrawCommand(col * cell + margin, row * cell + margin, cell, cell, color))
    return commands


def cell_grid(image_hash: str) -> list[list[bool]]:
    """Return ``grid[row][col]``, ``True`` where the foreground is drawn."""
    validate_hash(image_hash)
    grid = [[False] * GRID for _ in range(GRID)]
    for i, col, row in _cells():
        grid[row][col] = not uses_background(image_hash[i])
    return grid
