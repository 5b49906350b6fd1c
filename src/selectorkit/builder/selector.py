"""Fluent builder for compound CSS selectors.

A compound selector is rendered as::

    element#id.class1.class2[attr1][attr2]:pseudo1:pseudo2::pseudo-element

Element, id and pseudo-element may appear at most once. Parts must be
added in the order above; repeating a multi-value part (class, attribute,
pseudo-class) is allowed as long as nothing later has been added yet.
"""

from __future__ import annotations

import logging

from selectorkit.errors import DuplicateCategoryError, OrderViolationError
from selectorkit.model.category import ORDER, Category

__all__ = ["SelectorBuilder"]

logger = logging.getLogger(__name__)


class SelectorBuilder:
    """Accumulates selector parts in fixed category order.

    Every mutator validates before touching state, so a rejected call leaves
    the builder exactly as it was. Mutators return ``self`` for chaining.
    """

    def __init__(self) -> None:
        # One slot per category, indexed by Category.position.
        self._slots: list[list[str]] = [[] for _ in ORDER]

    # --- singleton parts ------------------------------------------------------

    def set_element(self, value: str) -> SelectorBuilder:
        """Set the type selector, e.g. ``div``."""
        return self._apply(Category.ELEMENT, value)

    def set_id(self, value: str) -> SelectorBuilder:
        """Set the id selector, rendered as ``#value``."""
        return self._apply(Category.ID, value)

    def set_pseudo_element(self, value: str) -> SelectorBuilder:
        """Set the pseudo-element, rendered as ``::value``."""
        return self._apply(Category.PSEUDO_ELEMENT, value)

    # --- repeatable parts -----------------------------------------------------

    def add_class(self, value: str) -> SelectorBuilder:
        """Append a class selector, rendered as ``.value``."""
        return self._apply(Category.CLASS, value)

    def add_attribute(self, value: str) -> SelectorBuilder:
        """Append an attribute selector, rendered as ``[value]``."""
        return self._apply(Category.ATTRIBUTE, value)

    def add_pseudo_class(self, value: str) -> SelectorBuilder:
        """Append a pseudo-class, rendered as ``:value``."""
        return self._apply(Category.PSEUDO_CLASS, value)

    # --- fluent aliases -------------------------------------------------------

    element = set_element
    id = set_id
    class_ = add_class
    attr = add_attribute
    pseudo_class = add_pseudo_class
    pseudo_element = set_pseudo_element

    # --- rendering ------------------------------------------------------------

    def stringify(self) -> str:
        """Render all parts in category order."""
        return "".join(
            category.format(value)
            for category in ORDER
            for value in self._slots[category.position]
        )

    def categories(self) -> dict[Category, tuple[str, ...]]:
        """Return the raw values of every populated category."""
        return {
            category: tuple(self._slots[category.position])
            for category in ORDER
            if self._slots[category.position]
        }

    def __str__(self) -> str:
        return self.stringify()

    def __repr__(self) -> str:
        return f"SelectorBuilder({self.stringify()!r})"

    # --- internals ------------------------------------------------------------

    def _apply(self, category: Category, value: str) -> SelectorBuilder:
        self._check_duplicate(category)
        self._check_order(category)
        # An empty element renders nothing, so its slot stays unset.
        if not category.format(value):
            logger.debug("Ignored empty %s", category)
            return self
        self._slots[category.position].append(value)
        logger.debug("Added %s %r to selector", category, value)
        return self

    def _check_duplicate(self, category: Category) -> None:
        if category.singleton and self._slots[category.position]:
            logger.debug("Rejected second %s on %r", category, self.stringify())
            raise DuplicateCategoryError(category)

    def _check_order(self, category: Category) -> None:
        # Scan from the last category back towards the target.
        for later in reversed(category.later()):
            if self._slots[later.position]:
                logger.debug(
                    "Rejected %s after %s on %r", category, later, self.stringify()
                )
                raise OrderViolationError(category, later)
