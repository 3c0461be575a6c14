"""SelectorFragment: a compound CSS selector under construction."""

from __future__ import annotations

import logging

from selectorkit.errors import DuplicateSelectorError, OrderViolationError
from selectorkit.selector.category import SelectorCategory

__all__ = ["SelectorFragment"]

logger = logging.getLogger("selectorkit.selector")

_DUPLICATE_MESSAGE = (
    "Element, id and pseudo-element should not occur more than one time "
    "inside the selector"
)
_ORDER_MESSAGE = (
    "Selector parts should be arranged in the following order: element, id, "
    "class, attribute, pseudo-class, pseudo-element"
)


class SelectorFragment:
    """An in-progress selector built by chaining category calls.

    Each chaining method validates before appending, so a rejected call
    leaves the fragment exactly as it was.

    Attributes:
        parts: Rendered text chunks in call order.
        used_singletons: Singleton categories already applied.
        max_order_seen: Highest category rank applied so far (0 if none).
    """

    def __init__(self) -> None:
        self.parts: list[str] = []
        self.used_singletons: set[SelectorCategory] = set()
        self.max_order_seen: int = 0

    # --- chaining operations -------------------------------------------------

    def element(self, name: str) -> SelectorFragment:
        return self._append(SelectorCategory.ELEMENT, name)

    def id(self, name: str) -> SelectorFragment:
        return self._append(SelectorCategory.ID, name)

    def class_(self, name: str) -> SelectorFragment:
        return self._append(SelectorCategory.CLASS, name)

    def attr(self, name: str) -> SelectorFragment:
        """Append ``[name]``; *name* is the raw attribute expression."""
        return self._append(SelectorCategory.ATTRIBUTE, name)

    def pseudo_class(self, name: str) -> SelectorFragment:
        return self._append(SelectorCategory.PSEUDO_CLASS, name)

    def pseudo_element(self, name: str) -> SelectorFragment:
        return self._append(SelectorCategory.PSEUDO_ELEMENT, name)

    def combine(
        self, first: SelectorFragment, combinator: str, second: SelectorFragment
    ) -> SelectorFragment:
        """Append ``first``, the padded *combinator* and ``second`` as text.

        The combinator is inserted verbatim: ``" "``, ``">"``, ``"+"`` and
        ``"~"`` are the CSS combinators, but nothing else is rejected.
        """
        self.parts.append(first.stringify())
        self.parts.append(f" {combinator} ")
        self.parts.append(second.stringify())
        logger.debug("Combined selector: %s", self)
        return self

    # --- rendering ------------------------------------------------------------

    def stringify(self) -> str:
        return "".join(self.parts)

    def __str__(self) -> str:
        return self.stringify()

    def __repr__(self) -> str:
        return f"SelectorFragment({self.stringify()!r})"

    # --- validation -----------------------------------------------------------

    def _append(self, category: SelectorCategory, value: str) -> SelectorFragment:
        self._check_duplicate(category)
        self._check_order(category)
        self.parts.append(category.render(value))
        if category.is_singleton:
            self.used_singletons.add(category)
        self.max_order_seen = max(self.max_order_seen, category.rank)
        return self

    def _check_duplicate(self, category: SelectorCategory) -> None:
        if category in self.used_singletons:
            logger.debug(
                "Rejected duplicate %s in %r",
                category.value,
                self,
            )
            raise DuplicateSelectorError(_DUPLICATE_MESSAGE, category=category)

    def _check_order(self, category: SelectorCategory) -> None:
        # Compared against the running maximum, not just the previous call.
        if category.rank < self.max_order_seen:
            logger.debug(
                "Rejected %s (rank %d) after rank %d in %r",
                category.value,
                category.rank,
                self.max_order_seen,
                self,
            )
            raise OrderViolationError(
                _ORDER_MESSAGE, category=category, max_rank=self.max_order_seen
            )
