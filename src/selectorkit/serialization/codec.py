"""JSON encoding of values and positional reconstruction of shapes."""

from __future__ import annotations

import dataclasses
import json
import logging
from typing import Any, Callable

from selectorkit.config import DEFAULT_CONFIG, SerializationConfig
from selectorkit.errors import DecodingError, EncodingError
from selectorkit.serialization.shapes import ShapeDescriptor

__all__ = ["serialize", "reconstruct", "decode"]

logger = logging.getLogger("selectorkit.serialization")


def _encode_default(value: Any) -> Any:
    # Dataclasses encode as their fields; json walks the result itself.
    if dataclasses.is_dataclass(value) and not isinstance(value, type):
        return {f.name: getattr(value, f.name) for f in dataclasses.fields(value)}
    raise TypeError(f"Object of type {type(value).__name__} is not JSON serializable")


def serialize(value: Any, config: SerializationConfig | None = None) -> str:
    """Return the JSON text for *value*.

    ``serialize([1, 2, 3]) == "[1,2,3]"``. Mappings keep their insertion
    order unless ``config.sort_keys`` is set.

    Raises:
        EncodingError: *value* holds a cycle, an unsupported type, or a
            non-finite float while ``allow_nan`` is off.
    """
    config = config or DEFAULT_CONFIG
    try:
        return json.dumps(
            value,
            separators=config.separators,
            sort_keys=config.sort_keys,
            ensure_ascii=config.ensure_ascii,
            allow_nan=config.allow_nan,
            indent=config.indent,
            default=_encode_default,
        )
    except (TypeError, ValueError, RecursionError) as exc:
        logger.debug("Failed to encode %s: %s", type(value).__name__, exc)
        raise EncodingError(f"Cannot encode value: {exc}", cause=exc) from exc


def decode(text: str | bytes) -> Any:
    """Parse *text* as JSON, raising DecodingError on malformed input.

    Bytes that are not valid UTF-8/16/32 and nesting deeper than the
    interpreter's recursion limit are reported as DecodingError too.
    """
    try:
        return json.loads(text)
    except json.JSONDecodeError as exc:
        logger.debug("Failed to decode JSON at %d:%d: %s", exc.lineno, exc.colno, exc.msg)
        raise DecodingError(
            f"Invalid JSON: {exc.msg} (line {exc.lineno}, column {exc.colno})",
            line=exc.lineno,
            column=exc.colno,
            cause=exc,
        ) from exc
    except (UnicodeDecodeError, RecursionError) as exc:
        logger.debug("Failed to decode JSON: %s", exc)
        raise DecodingError(f"Invalid JSON: {exc}", cause=exc) from exc


def reconstruct(
    shape: ShapeDescriptor | Callable[..., Any], text: str | bytes
) -> Any:
    """Decode *text* and call *shape* positionally with the decoded values.

    *shape* is a class (or any callable) or a ShapeDescriptor. A bare
    callable receives the object's values in document key order, so its
    parameter order must match the encoded field order. Arity mismatches
    surface as the constructor's own TypeError.

        reconstruct(Rectangle, '{"width":10,"height":20}')
        # => Rectangle(width=10, height=20)
    """
    descriptor = shape if isinstance(shape, ShapeDescriptor) else ShapeDescriptor(shape)
    return descriptor.build(decode(text))
