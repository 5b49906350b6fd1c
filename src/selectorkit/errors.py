"""Error hierarchy for selector construction."""
from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from selectorkit.model.category import Category


class SelectorError(Exception):
    """Base error for all selectorkit errors."""


class DuplicateCategoryError(SelectorError):
    """A singleton category (element, id, pseudo-element) was set twice."""

    def __init__(self, category: Category) -> None:
        self.category = category
        super().__init__(
            "Element, id and pseudo-element should not occur more than one time "
            "inside the selector"
        )


class OrderViolationError(SelectorError):
    """A category was targeted after a later category already has content."""

    def __init__(self, category: Category, conflict: Category) -> None:
        self.category = category
        self.conflict = conflict
        super().__init__(
            "Selector parts should be arranged in the following order: "
            "element, id, class, attribute, pseudo-class, pseudo-element"
        )


class InvalidCombinatorError(SelectorError):
    """Raised in strict mode when a combinator symbol is not a CSS combinator."""

    def __init__(self, symbol: str) -> None:
        self.symbol = symbol
        super().__init__(
            f"Unsupported combinator {symbol!r}; expected one of ' ', '>', '+', '~'"
        )
