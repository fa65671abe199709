"""Selector model: Category, Combinator, SimpleSelector and CompoundSelector.

A selector is one of two variants:

    SimpleSelector    element#id.class[attr]:pseudo-class::pseudo-element
    CompoundSelector  <left> <combinator> <right>

Simple selectors are filled in through fluent calls that must follow the
category order below. Compound selectors hold already-stringified children.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from enum import IntEnum, StrEnum

from cssbuilder.config import BuilderConfig
from cssbuilder.selector.errors import OrderError, UniquenessError

__all__ = [
    "Category",
    "Combinator",
    "SimpleSelector",
    "CompoundSelector",
    "Selector",
    "stringify",
]

logger = logging.getLogger("cssbuilder.selector")


class Category(IntEnum):
    """Selector part kinds, in the order they must appear."""

    ELEMENT = 0
    ID = 1
    CLASS = 2
    ATTRIBUTE = 3
    PSEUDO_CLASS = 4
    PSEUDO_ELEMENT = 5

    @property
    def unique(self) -> bool:
        return self in (Category.ELEMENT, Category.ID, Category.PSEUDO_ELEMENT)

    @property
    def label(self) -> str:
        return self.name.lower().replace("_", "-")


# category -> (prefix, glue, suffix)
_FORMATS: dict[Category, tuple[str, str, str]] = {
    Category.ELEMENT: ("", "", ""),
    Category.ID: ("#", "", ""),
    Category.CLASS: (".", ".", ""),
    Category.ATTRIBUTE: ("[", "", "]"),
    Category.PSEUDO_CLASS: (":", ":", ""),
    Category.PSEUDO_ELEMENT: ("::", "", ""),
}


class Combinator(StrEnum):
    """CSS combinators joining two selectors."""

    DESCENDANT = " "
    ADJACENT = "+"
    SIBLING = "~"
    CHILD = ">"


@dataclass(eq=False)
class SimpleSelector:
    """A selector built from category fragments, with no combinator.

    Attributes:
        config: Rendering options shared with the builder that created it.
        parts: Fragments per category, in the order they were added. Only
            filled through the fluent calls so order and uniqueness hold.
    """

    config: BuilderConfig = field(default_factory=BuilderConfig)
    parts: dict[Category, list[str]] = field(default_factory=dict, init=False)
    _highest: Category | None = field(default=None, init=False, repr=False)

    # --- fluent entry points ------------------------------------------------

    def element(self, value: str) -> SimpleSelector:
        return self._append(Category.ELEMENT, value)

    def id(self, value: str) -> SimpleSelector:
        return self._append(Category.ID, value)

    def class_(self, value: str) -> SimpleSelector:
        return self._append(Category.CLASS, value)

    def attr(self, value: str) -> SimpleSelector:
        return self._append(Category.ATTRIBUTE, value)

    def pseudo_class(self, value: str) -> SimpleSelector:
        return self._append(Category.PSEUDO_CLASS, value)

    def pseudo_element(self, value: str) -> SimpleSelector:
        return self._append(Category.PSEUDO_ELEMENT, value)

    # --- internals ------------------------------------------------------------

    def _append(self, category: Category, value: str) -> SimpleSelector:
        """Record *value* under *category*, enforcing uniqueness then order."""
        if category.unique and self.parts.get(category):
            logger.debug("Rejected second %s fragment %r", category.label, value)
            raise UniquenessError(category)
        if self._highest is not None and category < self._highest:
            logger.debug(
                "Rejected %s fragment %r after %s",
                category.label,
                value,
                self._highest.label,
            )
            raise OrderError(category, after=self._highest)

        self.parts.setdefault(category, []).append(value)
        self._highest = category
        return self

    def _render(self, category: Category) -> str:
        fragments = self.parts[category]
        if category is Category.ATTRIBUTE and self.config.bracket_each_attribute:
            return "".join(f"[{fragment}]" for fragment in fragments)
        prefix, glue, suffix = _FORMATS[category]
        return prefix + glue.join(fragments) + suffix

    def stringify(self) -> str:
        """Return the CSS text for this selector.

        With ``consume_on_stringify`` enabled the fragments are cleared
        afterwards, so a second call returns an empty string.
        """
        text = "".join(self._render(c) for c in Category if self.parts.get(c))
        if self.config.consume_on_stringify:
            logger.debug("Consumed simple selector %r", text)
            self.parts = {}
            self._highest = None
        return text


@dataclass(frozen=True)
class CompoundSelector:
    """Two selectors joined by a combinator."""

    left: str
    combinator: Combinator
    right: str

    def stringify(self) -> str:
        # The combinator is always padded by single spaces, so the
        # descendant combinator renders as three spaces.
        return f"{self.left} {self.combinator} {self.right}"


Selector = SimpleSelector | CompoundSelector


def stringify(selector: Selector | str) -> str:
    """Return the CSS text of *selector*; raw strings pass through unchanged."""
    if isinstance(selector, str):
        return selector
    if isinstance(selector, (SimpleSelector, CompoundSelector)):
        return selector.stringify()
    raise TypeError(f"Cannot stringify {type(selector).__name__!r}")
