"""Terminal UI utilities for building selectors interactively."""

from __future__ import annotations

from cssbuild.cli.common.output import out
from cssbuild.core.selectors import SelectorBuilder

_EXAMPLES = {
    "element": "e.g. div",
    "id": "e.g. main",
    "class": "e.g. container",
    "attribute": 'e.g. href$=".png"',
    "pseudo-class": "e.g. nth-of-type(even)",
    "pseudo-element": "e.g. before",
}


def _ask_one(label: str) -> str | None:
    return out.ask_text(
        f"{label.capitalize()}?",
        instruction=f"({_EXAMPLES[label]}, empty to skip)",
    )


def prompt_selector() -> SelectorBuilder:
    """Ask for each fragment in canonical order and build the selector.

    Asking stage by stage means the answers can never violate the fragment
    order, so the builder only rejects empty input (handled by skipping).

    Returns:
        The SelectorBuilder holding every answered fragment. It may be empty
        if every question was skipped.
    """
    builder = SelectorBuilder()

    element = _ask_one("element")
    if element:
        builder.set_element(element)

    id_name = _ask_one("id")
    if id_name:
        builder.set_id(id_name)

    for name in out.ask_many(f"Class? ({_EXAMPLES['class']})"):
        builder.add_class(name)

    for body in out.ask_many(f"Attribute? ({_EXAMPLES['attribute']})"):
        builder.add_attribute(body)

    for name in out.ask_many(f"Pseudo-class? ({_EXAMPLES['pseudo-class']})"):
        builder.add_pseudo_class(name)

    pseudo_element = _ask_one("pseudo-element")
    if pseudo_element:
        builder.set_pseudo_element(pseudo_element)

    return builder
