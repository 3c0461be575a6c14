"""ShapeRegistry: named shape descriptors for reconstruction."""

from __future__ import annotations

import dataclasses
from typing import Any, Callable

from selectorkit.serialization.codec import reconstruct
from selectorkit.serialization.shapes import ShapeDescriptor

__all__ = ["ShapeRegistry"]


class ShapeRegistry:
    """Maps shape names to descriptors.

    Registering a dataclass derives its field order from the class, so
    encoded objects need not list their keys in parameter order. Any other
    callable receives values positionally in document key order.
    """

    def __init__(self) -> None:
        self._shapes: dict[str, ShapeDescriptor] = {}

    def register(
        self, name: str, shape: ShapeDescriptor | Callable[..., Any]
    ) -> ShapeDescriptor:
        """Register *shape* under *name* and return its descriptor."""
        if isinstance(shape, ShapeDescriptor):
            descriptor = shape
        elif isinstance(shape, type) and dataclasses.is_dataclass(shape):
            descriptor = ShapeDescriptor.of(shape)
        else:
            descriptor = ShapeDescriptor(shape)
        self._shapes[name] = descriptor
        return descriptor

    def get(self, name: str) -> ShapeDescriptor:
        try:
            return self._shapes[name]
        except KeyError:
            raise KeyError(f"Unknown shape: {name!r}") from None

    def names(self) -> list[str]:
        return sorted(self._shapes)

    def reconstruct(self, name: str, text: str | bytes) -> Any:
        return reconstruct(self.get(name), text)

    def __contains__(self, name: object) -> bool:
        return name in self._shapes

    def __len__(self) -> int:
        return len(self._shapes)
