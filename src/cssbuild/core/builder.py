"""Facade for building CSS selectors.

The facade is the public entry point of the builder. Every call allocates a
fresh SelectorBuilder (or a CombinedSelector), so calls never share state:

    from cssbuild.core.builder import css_selector_builder as css

    css.id("main").class_("container").class_("editable").stringify()
    # '#main.container.editable'

    css.combine(css.element("ul"), ">", css.element("li")).stringify()
    # 'ul > li'
"""

from __future__ import annotations

from dataclasses import dataclass

from cssbuild.core.selectors import CombinedSelector, Selector, SelectorBuilder


@dataclass(frozen=True)
class CssSelectorBuilder:
    """Stateless factory for selector builders."""

    def element(self, value: str) -> SelectorBuilder:
        return SelectorBuilder().set_element(value)

    def id(self, value: str) -> SelectorBuilder:
        return SelectorBuilder().set_id(value)

    def class_(self, value: str) -> SelectorBuilder:
        return SelectorBuilder().add_class(value)

    def attr(self, value: str) -> SelectorBuilder:
        return SelectorBuilder().add_attribute(value)

    def pseudo_class(self, value: str) -> SelectorBuilder:
        return SelectorBuilder().add_pseudo_class(value)

    def pseudo_element(self, value: str) -> SelectorBuilder:
        return SelectorBuilder().set_pseudo_element(value)

    def combine(
        self, selector1: Selector, combinator: str, selector2: Selector
    ) -> CombinedSelector:
        """
        Join two selectors with a combinator.

        The combinator is used as given. Both selectors become part of the
        returned tree and should not be mutated afterwards.

        Args:
            selector1: Left-hand selector.
            combinator: Combinator token, e.g. ' ', '>', '+' or '~'.
            selector2: Right-hand selector.

        Returns:
            A CombinedSelector rendering as '<left> <combinator> <right>'.
        """
        return CombinedSelector(selector1, combinator, selector2)


setattr(CssSelectorBuilder, "class", CssSelectorBuilder.class_)

css_selector_builder = CssSelectorBuilder()
