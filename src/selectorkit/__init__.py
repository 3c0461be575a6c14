"""selectorkit - CSS selector builder with a rectangle model and JSON helpers."""

from selectorkit.config import DEFAULT_CONFIG, SerializationConfig
from selectorkit.errors import (
    DecodingError,
    DuplicateSelectorError,
    EncodingError,
    OrderViolationError,
    SelectorError,
    SelectorKitError,
    SerializationError,
)
from selectorkit.model import Rectangle
from selectorkit.selector import (
    SelectorBuilder,
    SelectorCategory,
    SelectorFragment,
    css_selector_builder,
)
from selectorkit.serialization import (
    ShapeDescriptor,
    ShapeRegistry,
    reconstruct,
    serialize,
)

__version__ = "0.1.0"

__all__ = [
    # selector
    "SelectorBuilder",
    "SelectorCategory",
    "SelectorFragment",
    "css_selector_builder",
    # model
    "Rectangle",
    # serialization
    "serialize",
    "reconstruct",
    "ShapeDescriptor",
    "ShapeRegistry",
    # config
    "SerializationConfig",
    "DEFAULT_CONFIG",
    # errors
    "SelectorKitError",
    "SelectorError",
    "DuplicateSelectorError",
    "OrderViolationError",
    "SerializationError",
    "EncodingError",
    "DecodingError",
]
