"""Error hierarchy for selectorkit."""
from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from selectorkit.selector.category import SelectorCategory


class SelectorKitError(Exception):
    """Base error for all selectorkit errors."""

    def __init__(self, message: str, *, cause: Exception | None = None) -> None:
        super().__init__(message)
        self.message = message
        self.cause = cause


# ---------------------------------------------------------------------------
# Selector builder errors
# ---------------------------------------------------------------------------


class SelectorError(SelectorKitError):
    """A selector fragment was built in a way CSS does not allow."""

    def __init__(self, message: str, *, category: SelectorCategory) -> None:
        super().__init__(message)
        self.category = category


class DuplicateSelectorError(SelectorError):
    """Element, id or pseudo-element applied twice to one fragment."""


class OrderViolationError(SelectorError):
    """A category was appended after one that must follow it."""

    def __init__(
        self, message: str, *, category: SelectorCategory, max_rank: int
    ) -> None:
        super().__init__(message, category=category)
        self.rank = category.rank
        self.max_rank = max_rank


# ---------------------------------------------------------------------------
# Serialization errors
# ---------------------------------------------------------------------------


class SerializationError(SelectorKitError):
    """Base for JSON encoding and decoding failures."""


class EncodingError(SerializationError):
    """The value contains members that cannot be encoded."""


class DecodingError(SerializationError):
    """The text is not valid JSON or does not fit the requested shape."""

    def __init__(
        self,
        message: str,
        *,
        line: int | None = None,
        column: int | None = None,
        cause: Exception | None = None,
    ) -> None:
        super().__init__(message, cause=cause)
        self.line = line
        self.column = column
