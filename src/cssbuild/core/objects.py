"""Small object helpers: a rectangle value and JSON conversion.

These helpers are independent of the selector builder. The JSON functions
are thin wrappers around the standard json codec.
"""

from __future__ import annotations

import json
from dataclasses import asdict, dataclass, is_dataclass
from typing import Any, TypeVar

T = TypeVar("T")


@dataclass(frozen=True)
class Rectangle:
    """
    Axis-aligned rectangle.

    Attributes:
        width: Horizontal size.
        height: Vertical size.
    """

    width: float
    height: float

    def get_area(self) -> float:
        """Return width * height."""
        return self.width * self.height


def get_json(obj: Any) -> str:
    """
    Return the JSON representation of an object.

    Dataclass instances are converted to dictionaries first. Output uses
    compact separators, e.g. [1, 2, 3] becomes '[1,2,3]'.
    """
    if is_dataclass(obj) and not isinstance(obj, type):
        obj = asdict(obj)
    return json.dumps(obj, separators=(",", ":"))


def from_json(cls: type[T], text: str) -> T:
    """
    Build an object of the given type from its JSON representation.

    The decoded keys become instance attributes; __init__ is not called, so
    methods of `cls` operate on whatever state the JSON carried.

    Args:
        cls: Target type.
        text: JSON text of an object.

    Returns:
        An instance of `cls`.

    Raises:
        ValueError: If the text is not valid JSON or not a JSON object.
    """
    try:
        payload = json.loads(text)
    except json.JSONDecodeError as exc:
        raise ValueError(f"Invalid JSON: {exc}") from exc
    if not isinstance(payload, dict):
        raise ValueError(f"Expected a JSON object, got {type(payload).__name__}")

    instance = cls.__new__(cls)
    for key, value in payload.items():
        # object.__setattr__ also works for frozen dataclasses.
        object.__setattr__(instance, key, value)
    return instance
