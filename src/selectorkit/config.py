"""Configuration types."""
from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class SerializationConfig:
    """Options passed through to the JSON encoder.

    The defaults produce compact standard JSON: no whitespace after
    separators, insertion key order, and no ``NaN``/``Infinity`` literals.

    Non-finite floats are never written as ``null`` (as JavaScript's
    ``JSON.stringify`` does). With ``allow_nan`` off they raise
    EncodingError; with it on they are written as the non-standard
    ``NaN``/``Infinity``/``-Infinity`` literals.
    """

    separators: tuple[str, str] = (",", ":")
    sort_keys: bool = False
    ensure_ascii: bool = False
    allow_nan: bool = False
    indent: int | None = None


DEFAULT_CONFIG = SerializationConfig()
