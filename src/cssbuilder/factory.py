"""SelectorFactory: the facade every selector builder is created through."""

from __future__ import annotations

import logging

from cssbuilder.builder import SelectorBuilder

__all__ = ["SelectorFactory", "css_selector_builder"]

logger = logging.getLogger(__name__)


class SelectorFactory:
    """Stateless facade: one entry point per fragment kind, plus combine.

    Each entry point returns a fresh builder seeded with a single fragment::

        css_selector_builder.id("main").class_("container").render()
        # => "#main.container"
    """

    def element(self, name: str) -> SelectorBuilder:
        return SelectorBuilder.empty().element(name)

    def id(self, name: str) -> SelectorBuilder:
        return SelectorBuilder.empty().id(name)

    def class_(self, name: str) -> SelectorBuilder:
        return SelectorBuilder.empty().class_(name)

    def attr(self, name: str) -> SelectorBuilder:
        return SelectorBuilder.empty().attr(name)

    def pseudo_class(self, name: str) -> SelectorBuilder:
        return SelectorBuilder.empty().pseudo_class(name)

    def pseudo_element(self, name: str) -> SelectorBuilder:
        return SelectorBuilder.empty().pseudo_element(name)

    def combine(
        self, left: SelectorBuilder, combinator: str, right: SelectorBuilder
    ) -> SelectorBuilder:
        """Join two selectors with *combinator*, consuming both operands.

        The combinator is inserted verbatim with one space on each side.
        """
        logger.debug("Combining %r %r %r", left, combinator, right)
        return SelectorBuilder.empty().combine(left, combinator, right)


css_selector_builder = SelectorFactory()
