from selectorkit.serialization.codec import decode, reconstruct, serialize
from selectorkit.serialization.registry import ShapeRegistry
from selectorkit.serialization.shapes import ShapeDescriptor

__all__ = [
    "serialize",
    "reconstruct",
    "decode",
    "ShapeDescriptor",
    "ShapeRegistry",
]
