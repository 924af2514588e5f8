"""CSS selector abstractions and implementations.

This module defines the selector system used to build CSS selector strings.
A compound selector is accumulated fragment by fragment in a SelectorBuilder,
which enforces the canonical order of simple selectors:

    element#id.class[attr]:pseudoClass::pseudoElement

Built selectors can be composed with a combinator (' ', '>', '+', '~') into a
CombinedSelector. Combined selectors nest, forming a binary tree whose leaves
are compound selectors.

Selectors are plain in-memory objects with no I/O and are intended to be
reusable across different frontends such as the CLI, scripts and tests.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass
from enum import IntEnum


class Stage(IntEnum):
    """
    Canonical position of a fragment inside a compound selector.

    Values are ordered: a fragment may only be added while the builder has
    not yet recorded a later stage.
    """

    ELEMENT = 1
    ID = 2
    CLASS = 3
    ATTRIBUTE = 4
    PSEUDO_CLASS = 5
    PSEUDO_ELEMENT = 6

    @property
    def label(self) -> str:
        """Human-readable name of the stage (e.g. 'pseudo-class')."""
        return self.name.lower().replace("_", "-")


class SelectorError(ValueError):
    """Raised when a selector fragment cannot be added."""


class DuplicateFragment(SelectorError):
    """Raised when element, id or pseudo-element is set a second time."""

    def __init__(self, stage: Stage):
        self.stage = stage
        super().__init__(
            f"Element, id and pseudo-element should not occur more then one "
            f"time inside the selector ({stage.label} already set)"
        )


class OrderViolation(SelectorError):
    """Raised when a fragment is added after a later-stage fragment."""

    def __init__(self, stage: Stage, after: Stage):
        self.stage = stage
        self.after = after
        super().__init__(
            "Selector parts should be arranged in the following order: "
            "element, id, class, attribute, pseudo-class, pseudo-element "
            f"({stage.label} after {after.label})"
        )


class Selector(ABC):
    """
    Abstract base class for everything that renders to a CSS selector.

    Subclasses implement stringify(); serialize() and str() are aliases.
    """

    @abstractmethod
    def stringify(self) -> str:
        """
        Render this selector as CSS selector text.

        Returns:
            The selector string. Never raises.
        """
        ...

    def serialize(self) -> str:
        """Alias for stringify()."""
        return self.stringify()

    def __str__(self) -> str:
        return self.stringify()


class SelectorBuilder(Selector):
    """
    Mutable accumulator for a single compound selector.

    Every mutator validates first and appends second, so a rejected call
    leaves the builder untouched. Mutators return the builder itself to allow
    chaining:

        SelectorBuilder().element("a").attr('href$=".png"').pseudo_class("focus")
    """

    def __init__(self):
        self._element: str | None = None
        self._id: str | None = None
        self.classes: list[str] = []
        self.attributes: list[str] = []
        self.pseudo_classes: list[str] = []
        self._pseudo_element: str | None = None
        self.stage: Stage | None = None

    @property
    def element_name(self) -> str | None:
        return self._element

    @property
    def id_name(self) -> str | None:
        return self._id

    @property
    def pseudo_element_name(self) -> str | None:
        return self._pseudo_element

    def _check(self, stage: Stage, *, taken: bool = False) -> None:
        """
        Validate that a fragment of the given stage may be recorded now.

        Args:
            stage: Stage of the fragment about to be added.
            taken: True if the single-valued slot for this stage is already set.

        Raises:
            DuplicateFragment: If a single-valued slot is set twice.
            OrderViolation: If a later stage has already been recorded.
        """
        if taken:
            raise DuplicateFragment(stage)
        if self.stage is not None and self.stage > stage:
            raise OrderViolation(stage, self.stage)

    def set_element(self, name: str) -> SelectorBuilder:
        """Set the type selector (tag name)."""
        self._check(Stage.ELEMENT, taken=self._element is not None)
        self._element = name
        self.stage = Stage.ELEMENT
        return self

    def set_id(self, name: str) -> SelectorBuilder:
        """Set the id selector."""
        self._check(Stage.ID, taken=self._id is not None)
        self._id = name
        self.stage = Stage.ID
        return self

    def add_class(self, name: str) -> SelectorBuilder:
        """Append a class selector. May be repeated."""
        self._check(Stage.CLASS)
        self.classes.append(name)
        self.stage = Stage.CLASS
        return self

    def add_attribute(self, body: str) -> SelectorBuilder:
        """
        Append an attribute selector.

        Args:
            body: Raw text between the brackets, e.g. 'href$=".png"'.
        """
        self._check(Stage.ATTRIBUTE)
        self.attributes.append(body)
        self.stage = Stage.ATTRIBUTE
        return self

    def add_pseudo_class(self, name: str) -> SelectorBuilder:
        """Append a pseudo-class such as 'focus' or 'nth-of-type(even)'."""
        self._check(Stage.PSEUDO_CLASS)
        self.pseudo_classes.append(name)
        self.stage = Stage.PSEUDO_CLASS
        return self

    def set_pseudo_element(self, name: str) -> SelectorBuilder:
        """Set the pseudo-element. Nothing may follow it."""
        self._check(Stage.PSEUDO_ELEMENT, taken=self._pseudo_element is not None)
        self._pseudo_element = name
        self.stage = Stage.PSEUDO_ELEMENT
        return self

    # Chainable names, matching the facade.
    element = set_element
    id = set_id
    class_ = add_class
    attr = add_attribute
    pseudo_class = add_pseudo_class
    pseudo_element = set_pseudo_element

    def stringify(self) -> str:
        parts = [self._element or ""]
        if self._id is not None:
            parts.append(f"#{self._id}")
        parts.extend(f".{name}" for name in self.classes)
        parts.extend(f"[{body}]" for body in self.attributes)
        parts.extend(f":{name}" for name in self.pseudo_classes)
        if self._pseudo_element is not None:
            parts.append(f"::{self._pseudo_element}")
        return "".join(parts)

    def __repr__(self) -> str:
        return f"SelectorBuilder({self.stringify()!r})"


# `class` is a keyword, so it can only be reached through getattr.
setattr(SelectorBuilder, "class", SelectorBuilder.add_class)


@dataclass(frozen=True)
class CombinedSelector(Selector):
    """
    Two selectors joined by a combinator token.

    The combinator is free text and is not validated. Either side may itself
    be a CombinedSelector.
    """

    left: Selector
    combinator: str
    right: Selector

    def stringify(self) -> str:
        return f"{self.left.stringify()} {self.combinator} {self.right.stringify()}"


@dataclass(frozen=True)
class LiteralSelector(Selector):
    """
    Selector wrapping text that was already rendered elsewhere.

    Used to feed selector strings (for example from the command line) into
    a CombinedSelector without parsing them.
    """

    text: str

    def stringify(self) -> str:
        return self.text
