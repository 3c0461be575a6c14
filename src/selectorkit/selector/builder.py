"""SelectorBuilder: stateless facade that starts new selector fragments."""

from __future__ import annotations

from selectorkit.selector.fragment import SelectorFragment

__all__ = ["SelectorBuilder", "css_selector_builder"]


class SelectorBuilder:
    """Entry points for building CSS selectors.

    Every method returns a brand-new SelectorFragment, so no state is
    shared between calls:

        builder = css_selector_builder
        builder.id("main").class_("container").class_("editable").stringify()
        # => '#main.container.editable'
    """

    def element(self, value: str) -> SelectorFragment:
        return SelectorFragment().element(value)

    def id(self, value: str) -> SelectorFragment:
        return SelectorFragment().id(value)

    def class_(self, value: str) -> SelectorFragment:
        return SelectorFragment().class_(value)

    def attr(self, value: str) -> SelectorFragment:
        return SelectorFragment().attr(value)

    def pseudo_class(self, value: str) -> SelectorFragment:
        return SelectorFragment().pseudo_class(value)

    def pseudo_element(self, value: str) -> SelectorFragment:
        return SelectorFragment().pseudo_element(value)

    def combine(
        self, first: SelectorFragment, combinator: str, second: SelectorFragment
    ) -> SelectorFragment:
        return SelectorFragment().combine(first, combinator, second)


css_selector_builder = SelectorBuilder()
