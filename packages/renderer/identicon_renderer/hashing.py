"""Helpers that turn arbitrary values into identicon hashes.

Only :func:`hash_value` yields a stable hex hash suitable for rendering.
:func:`create_hash_from_string` keeps the old 32-bit string hash for
callers that still store it, and :func:`clock_seed_hash` is the explicit
opt-in for a time-based, non-deterministic seed.
"""

from __future__ import annotations

import hashlib
from datetime import datetime, timezone

from .errors import InvalidInputError

LEGACY_SALT = "identicon"


def _code_units(text: str):
    data = text.encode("utf-16-le", "surrogatepass")
    for i in range(0, len(data), 2):
        yield data[i] | (data[i + 1] << 8)


def create_hash_from_string(text: str) -> str:
    """Signed 32-bit ``h*31 + c`` hash of ``text + salt + text``, in decimal."""
    if not text:
        return "0"

    value = 0
    for unit in _code_units(text + LEGACY_SALT + text):
        value = (value * 31 + unit) & 0xFFFFFFFF
    if value >= 0x80000000:
        value -= 0x100000000
    return str(value)


def hash_value(value: str, algorithm: str = "md5") -> str:
    name = algorithm.lower()
    # shake_* digests have no fixed length.
    if name not in hashlib.algorithms_available or name.startswith("shake_"):
        raise InvalidInputError(f"unsupported hash algorithm: {algorithm}")
    return hashlib.new(name, value.encode("utf-8")).hexdigest()


def clock_seed_hash(now: datetime | None = None) -> str:
    now = now or datetime.now(timezone.utc)
    return hash_value(create_hash_from_string(now.isoformat()))
