"""Selector construction utilities.

This module translates user intent (CLI options, positional arguments or
interactive answers) into concrete Selector instances. It centralizes
validation and composition so commands only deal with a finished selector.
"""

from typing import Iterable, Sequence

from cssbuild.core.builder import CssSelectorBuilder, css_selector_builder
from cssbuild.core.selectors import (
    LiteralSelector,
    Selector,
    SelectorBuilder,
    Stage,
)


def build_selector(
    *,
    element: str | None = None,
    id: str | None = None,
    classes: Iterable[str] = (),
    attrs: Iterable[str] = (),
    pseudo_classes: Iterable[str] = (),
    pseudo_element: str | None = None,
) -> SelectorBuilder:
    """
    Build a compound selector from user-provided fragments.

    Fragments are applied in canonical order, so callers may collect them in
    any order (e.g. CLI options).

    Args:
        element: Optional tag name.
        id: Optional id.
        classes: Class names, in output order.
        attrs: Attribute selector bodies, in output order.
        pseudo_classes: Pseudo-class names, in output order.
        pseudo_element: Optional pseudo-element name.

    Returns:
        A SelectorBuilder holding all given fragments.

    Raises:
        ValueError: If no fragment is given or a fragment is empty.
    """
    steps: list[tuple[Stage, str]] = []
    if element is not None:
        steps.append((Stage.ELEMENT, element))
    if id is not None:
        steps.append((Stage.ID, id))
    steps.extend((Stage.CLASS, name) for name in classes)
    steps.extend((Stage.ATTRIBUTE, body) for body in attrs)
    steps.extend((Stage.PSEUDO_CLASS, name) for name in pseudo_classes)
    if pseudo_element is not None:
        steps.append((Stage.PSEUDO_ELEMENT, pseudo_element))

    if not steps:
        raise ValueError(
            "At least one fragment is required "
            "(--element, --id, --class, --attr, --pseudo-class or --pseudo-element)"
        )

    builder = SelectorBuilder()
    for stage, value in steps:
        if not value.strip():
            raise ValueError(f"Empty {stage.label} selector is not allowed")
        _apply(builder, stage, value.strip())
    return builder


def _apply(builder: SelectorBuilder, stage: Stage, value: str) -> None:
    """Dispatch one fragment to the matching builder mutator."""
    mutators = {
        Stage.ELEMENT: builder.set_element,
        Stage.ID: builder.set_id,
        Stage.CLASS: builder.add_class,
        Stage.ATTRIBUTE: builder.add_attribute,
        Stage.PSEUDO_CLASS: builder.add_pseudo_class,
        Stage.PSEUDO_ELEMENT: builder.set_pseudo_element,
    }
    mutators[stage](value)


def fragment_rows(selector: SelectorBuilder) -> list[tuple[str, str]]:
    """Return (stage label, rendered fragment) rows for display."""
    rows: list[tuple[str, str]] = []
    if selector.element_name is not None:
        rows.append((Stage.ELEMENT.label, selector.element_name))
    if selector.id_name is not None:
        rows.append((Stage.ID.label, f"#{selector.id_name}"))
    rows.extend((Stage.CLASS.label, f".{name}") for name in selector.classes)
    rows.extend((Stage.ATTRIBUTE.label, f"[{body}]") for body in selector.attributes)
    rows.extend(
        (Stage.PSEUDO_CLASS.label, f":{name}") for name in selector.pseudo_classes
    )
    if selector.pseudo_element_name is not None:
        rows.append((Stage.PSEUDO_ELEMENT.label, f"::{selector.pseudo_element_name}"))
    return rows


def combine_selectors(
    parts: Sequence[str],
    builder: CssSelectorBuilder = css_selector_builder,
) -> Selector:
    """
    Combine rendered selectors into one complex selector.

    `parts` alternates operands and combinators: operand, combinator,
    operand, ... Nesting is right-associative, so
    ['a', '+', 'b', '~', 'c'] becomes combine(a, '+', combine(b, '~', c)).

    Raises:
        ValueError: If the argument count is not odd and at least three, or
            an operand is empty.
    """
    if len(parts) < 3 or len(parts) % 2 == 0:
        raise ValueError(
            "Expected OPERAND COMBINATOR OPERAND [COMBINATOR OPERAND]... "
            f"(got {len(parts)} argument(s))"
        )

    operands = parts[0::2]
    combinators = parts[1::2]
    for operand in operands:
        if not operand.strip():
            raise ValueError("Empty selector operand is not allowed")

    result: Selector = LiteralSelector(operands[-1].strip())
    for operand, combinator in zip(reversed(operands[:-1]), reversed(combinators)):
        result = builder.combine(LiteralSelector(operand.strip()), combinator, result)
    return result
