from selectorkit.selector.builder import SelectorBuilder, css_selector_builder
from selectorkit.selector.category import SelectorCategory
from selectorkit.selector.fragment import SelectorFragment

__all__ = [
    "SelectorBuilder",
    "SelectorCategory",
    "SelectorFragment",
    "css_selector_builder",
]
