"""Selector builder error types."""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from cssbuilder.selector.model import Category

UNIQUENESS_MESSAGE = (
    "Element, id and pseudo-element should not occur more then one time "
    "inside the selector"
)
ORDER_MESSAGE = (
    "Selector parts should be arranged in the following order: element, id, "
    "class, attribute, pseudo-class, pseudo-element"
)


class SelectorError(Exception):
    """Base error for all selector building failures."""


class UniquenessError(SelectorError):
    """Raised when element, id or pseudo-element is given a second fragment."""

    def __init__(self, category: Category) -> None:
        self.category = category
        super().__init__(UNIQUENESS_MESSAGE)


class OrderError(SelectorError):
    """Raised when a part is added after a later-ordered part."""

    def __init__(self, category: Category, after: Category) -> None:
        self.category = category
        self.after = after
        super().__init__(ORDER_MESSAGE)


class CombinatorError(SelectorError):
    """Raised when combine() receives a token that is not a CSS combinator."""

    def __init__(self, token: str) -> None:
        self.token = token
        super().__init__(f"Unknown combinator: {token!r}")
