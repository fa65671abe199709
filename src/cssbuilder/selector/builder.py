"""Fluent CSS selector builder.

Example:
    builder = SelectorBuilder()
    builder.id("main").class_("container").class_("editable").stringify()
        => '#main.container.editable'

    builder.combine(
        builder.element("div").id("main"),
        "+",
        builder.element("table").id("data"),
    ).stringify()
        => 'div#main + table#data'
"""

from __future__ import annotations

from cssbuilder.config import BuilderConfig
from cssbuilder.selector.errors import CombinatorError
from cssbuilder.selector.model import (
    Combinator,
    CompoundSelector,
    Selector,
    SimpleSelector,
    stringify,
)

__all__ = ["SelectorBuilder", "css_selector_builder"]


class SelectorBuilder:
    """Facade whose methods each start a new selector.

    The builder itself holds only its config; every call returns a fresh
    :class:`SimpleSelector` or :class:`CompoundSelector`.
    """

    def __init__(self, config: BuilderConfig | None = None) -> None:
        self.config = config or BuilderConfig()

    def _new(self) -> SimpleSelector:
        return SimpleSelector(config=self.config)

    def element(self, value: str) -> SimpleSelector:
        return self._new().element(value)

    def id(self, value: str) -> SimpleSelector:
        return self._new().id(value)

    def class_(self, value: str) -> SimpleSelector:
        return self._new().class_(value)

    def attr(self, value: str) -> SimpleSelector:
        return self._new().attr(value)

    def pseudo_class(self, value: str) -> SimpleSelector:
        return self._new().pseudo_class(value)

    def pseudo_element(self, value: str) -> SimpleSelector:
        return self._new().pseudo_element(value)

    def combine(
        self, left: Selector | str, combinator: str, right: Selector | str
    ) -> CompoundSelector:
        """Join two selectors (or raw selector strings) with *combinator*.

        Selector arguments are stringified immediately.
        """
        try:
            token = Combinator(combinator)
        except ValueError:
            raise CombinatorError(combinator) from None
        return CompoundSelector(
            left=stringify(left), combinator=token, right=stringify(right)
        )

    def stringify(self, selector: Selector | str) -> str:
        return stringify(selector)


css_selector_builder = SelectorBuilder()
