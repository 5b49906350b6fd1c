"""Selector categories: the closed, ordered set of compound selector parts."""

from __future__ import annotations

from enum import Enum


class Category(Enum):
    """One part of a compound selector, declared in rendering order.

    element#id.class[attr]:pseudo-class::pseudo-element

    Each member carries its position, the text wrapped around a value when
    rendered, and whether the category accepts a single value only.
    """

    ELEMENT = (0, "element", "", "", True)
    ID = (1, "id", "#", "", True)
    CLASS = (2, "class", ".", "", False)
    ATTRIBUTE = (3, "attribute", "[", "]", False)
    PSEUDO_CLASS = (4, "pseudo-class", ":", "", False)
    PSEUDO_ELEMENT = (5, "pseudo-element", "::", "", True)

    def __init__(
        self, position: int, label: str, prefix: str, suffix: str, singleton: bool
    ) -> None:
        self.position = position
        self.label = label
        self.prefix = prefix
        self.suffix = suffix
        self.singleton = singleton

    def format(self, value: str) -> str:
        """Render a raw value with this category's prefix and suffix."""
        return f"{self.prefix}{value}{self.suffix}"

    def later(self) -> tuple[Category, ...]:
        """Return the categories strictly after this one."""
        return ORDER[self.position + 1 :]

    def __str__(self) -> str:
        return self.label


ORDER: tuple[Category, ...] = tuple(Category)
