"""Shape descriptors: how decoded JSON values map onto a constructor."""

from __future__ import annotations

import dataclasses
from dataclasses import dataclass
from typing import Any, Callable

from selectorkit.errors import DecodingError

__all__ = ["ShapeDescriptor"]


@dataclass(frozen=True)
class ShapeDescriptor:
    """A target shape for reconstruction.

    Attributes:
        factory: Callable invoked positionally with the decoded values.
        fields: Keys to read from the decoded object, in parameter order.
            When None, values are passed in the order the JSON object lists
            them (or the array order for a JSON array), and matching that
            order to the factory's parameters is the caller's job.
    """

    factory: Callable[..., Any]
    fields: tuple[str, ...] | None = None

    @classmethod
    def of(cls, shape: type) -> ShapeDescriptor:
        """Build a descriptor whose field order is a dataclass's init order."""
        if not dataclasses.is_dataclass(shape):
            raise TypeError(f"{shape!r} is not a dataclass")
        names = tuple(f.name for f in dataclasses.fields(shape) if f.init)
        return cls(factory=shape, fields=names)

    @property
    def name(self) -> str:
        return getattr(self.factory, "__name__", repr(self.factory))

    def arguments(self, decoded: Any) -> list[Any]:
        """Return the positional arguments for *decoded* JSON data."""
        if self.fields is not None:
            if not isinstance(decoded, dict):
                raise DecodingError(
                    f"Expected a JSON object for {self.name}, "
                    f"got {type(decoded).__name__}"
                )
            missing = [key for key in self.fields if key not in decoded]
            if missing:
                raise DecodingError(
                    f"Missing field(s) for {self.name}: {', '.join(missing)}"
                )
            return [decoded[key] for key in self.fields]

        if isinstance(decoded, dict):
            return list(decoded.values())
        if isinstance(decoded, list):
            return list(decoded)
        raise DecodingError(
            f"Expected a JSON object or array for {self.name}, "
            f"got {type(decoded).__name__}"
        )

    def build(self, decoded: Any) -> Any:
        return self.factory(*self.arguments(decoded))
