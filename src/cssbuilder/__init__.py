"""cssbuilder: fluent CSS selector construction and small object helpers."""

from cssbuilder.config import BuilderConfig
from cssbuilder.objects import Rectangle, from_json, to_json
from cssbuilder.selector import (
    CombinatorError,
    OrderError,
    SelectorBuilder,
    SelectorError,
    UniquenessError,
    css_selector_builder,
    stringify,
)

__version__ = "0.1.0"

__all__ = [
    "__version__",
    "BuilderConfig",
    "SelectorBuilder",
    "css_selector_builder",
    "stringify",
    "SelectorError",
    "OrderError",
    "UniquenessError",
    "CombinatorError",
    "Rectangle",
    "to_json",
    "from_json",
]
