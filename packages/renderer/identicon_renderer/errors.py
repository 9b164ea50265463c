"""Exceptions raised by the identicon renderer."""

from __future__ import annotations


class IdenticonError(Exception):
    """Base class for all identicon failures."""


class InvalidInputError(IdenticonError, ValueError):
    """The hash cannot drive a full pattern."""


class ConfigurationError(IdenticonError, ValueError):
    """Render options are out of range or of the wrong type."""
