from cssbuilder.selector.builder import SelectorBuilder, css_selector_builder
from cssbuilder.selector.errors import (
    CombinatorError,
    OrderError,
    SelectorError,
    UniquenessError,
)
from cssbuilder.selector.model import (
    Category,
    Combinator,
    CompoundSelector,
    Selector,
    SimpleSelector,
    stringify,
)

__all__ = [
    "SelectorBuilder",
    "css_selector_builder",
    "Category",
    "Combinator",
    "CompoundSelector",
    "Selector",
    "SimpleSelector",
    "stringify",
    "SelectorError",
    "OrderError",
    "UniquenessError",
    "CombinatorError",
]
