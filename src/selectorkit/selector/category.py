"""Selector categories: the six kinds of simple selector and their ordering."""

from __future__ import annotations

from enum import Enum


class SelectorCategory(Enum):
    """A kind of simple selector inside a compound CSS selector.

    Categories must appear in rank order within one compound selector:
        element#id.class[attr]:pseudo-class::pseudo-element
    Element, id and pseudo-element may occur at most once.
    """

    ELEMENT = "element"
    ID = "id"
    CLASS = "class"
    ATTRIBUTE = "attribute"
    PSEUDO_CLASS = "pseudo_class"
    PSEUDO_ELEMENT = "pseudo_element"

    @property
    def rank(self) -> int:
        return _RANKS[self]

    @property
    def is_singleton(self) -> bool:
        return self in _SINGLETONS

    def render(self, value: str) -> str:
        """Return the CSS text for *value* in this category."""
        prefix, suffix = _AFFIXES[self]
        return f"{prefix}{value}{suffix}"


_RANKS: dict[SelectorCategory, int] = {
    SelectorCategory.ELEMENT: 1,
    SelectorCategory.ID: 2,
    SelectorCategory.CLASS: 3,
    SelectorCategory.ATTRIBUTE: 4,
    SelectorCategory.PSEUDO_CLASS: 5,
    SelectorCategory.PSEUDO_ELEMENT: 6,
}

_SINGLETONS = frozenset(
    {SelectorCategory.ELEMENT, SelectorCategory.ID, SelectorCategory.PSEUDO_ELEMENT}
)

_AFFIXES: dict[SelectorCategory, tuple[str, str]] = {
    SelectorCategory.ELEMENT: ("", ""),
    SelectorCategory.ID: ("#", ""),
    SelectorCategory.CLASS: (".", ""),
    SelectorCategory.ATTRIBUTE: ("[", "]"),
    SelectorCategory.PSEUDO_CLASS: (":", ""),
    SelectorCategory.PSEUDO_ELEMENT: ("::", ""),
}
